"""Progression tracker — picks the next plan day and owns history writes.

The cursor is a plain round-robin over the plan: the next day is
``len(history) % len(plan)``. It counts every recorded session, freestyle
and manually chosen days included, and ignores which day was actually
played.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Sequence

from workout_engine.exceptions import HistoryReadError, HistoryStoreError, HistoryWriteError
from workout_engine.models.enums import FREESTYLE_DAY_INDEX, Rating
from workout_engine.models.plan import Plan
from workout_engine.models.session import CompletedSession
from workout_engine.progression.store import HistoryStore
from workout_engine.runtime.freestyle import FREESTYLE_FOCUS

logger = logging.getLogger(__name__)


def next_day_index(plan: Plan, history: Sequence[CompletedSession]) -> int:
    """0-based index of the plan day offered next.

    Raises:
        ValueError: If the plan has no days.
    """
    if len(plan) == 0:
        raise ValueError("Cannot pick a day from an empty plan")
    return len(history) % len(plan)


class ProgressionTracker:
    """Cursor and history bookkeeping on top of a :class:`HistoryStore`.

    Every store call makes exactly one attempt. A failing write surfaces as
    :class:`HistoryWriteError` and a failing read as :class:`HistoryReadError`;
    the caller decides whether to retry the same call.
    """

    def __init__(self, store: HistoryStore) -> None:
        self._store = store

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def next_day_index(self, plan: Plan) -> int:
        return next_day_index(plan, self.history())

    def resolve_day_index(
        self,
        plan: Plan,
        history: Sequence[CompletedSession] | None = None,
        override: int | None = None,
    ) -> int:
        """Day index to run now.

        Args:
            plan: The active plan.
            history: Recorded sessions; read from the store when omitted.
            override: A day index chosen by the user, or FREESTYLE_DAY_INDEX.
                Applies to this one session; the cursor itself is unchanged.

        Raises:
            IndexError: If *override* is outside the plan.
        """
        if override is not None:
            if override != FREESTYLE_DAY_INDEX and not 0 <= override < len(plan):
                raise IndexError(f"Day index {override} outside plan of {len(plan)} days")
            return override
        if history is None:
            history = self.history()
        return next_day_index(plan, history)

    # ------------------------------------------------------------------
    # History writes
    # ------------------------------------------------------------------

    def record(self, session: CompletedSession) -> None:
        """Append a finished session. Re-recording the same id is a no-op."""
        self._attempt("record", session.id, self._store.append, session)
        logger.info(
            "Recorded session %s day_index=%d rating=%s",
            session.id, session.day_index, session.rating.name,
        )

    def update_rating(self, record_id: str, rating: Rating) -> bool:
        """Change the rating of one record. False when the id is unknown."""
        updated = self._attempt(
            "update_rating", record_id, self._store.update_rating, record_id, Rating(rating)
        )
        if updated:
            logger.info("Updated rating of %s to %s", record_id, Rating(rating).name)
        else:
            logger.info("No record %s to update", record_id)
        return bool(updated)

    def delete_record(self, record_id: str) -> bool:
        """Remove one record. False (history unchanged) when the id is unknown."""
        deleted = self._attempt("delete", record_id, self._store.delete, record_id)
        if deleted:
            logger.info("Deleted record %s", record_id)
        return bool(deleted)

    # ------------------------------------------------------------------
    # History reads
    # ------------------------------------------------------------------

    def history(self) -> list[CompletedSession]:
        """Records in insertion order (oldest first)."""
        return self._attempt(
            "list_records", None, self._store.list_records, error=HistoryReadError,
        )

    def sorted_history(self) -> list[CompletedSession]:
        """Records newest first; same-day records keep reverse insertion order."""
        return list(reversed(sorted(self.history(), key=lambda r: r.date)))

    @staticmethod
    def focus_label(plan: Plan, record: CompletedSession) -> str:
        """Display label for a history entry."""
        if record.is_freestyle:
            return FREESTYLE_FOCUS
        if 0 <= record.day_index < len(plan):
            return plan[record.day_index].focus
        return f"Workout Day {record.day_index + 1}"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _attempt(
        self,
        operation: str,
        record_id: str | None,
        fn: Callable,
        *args: Any,
        error: type[HistoryStoreError] = HistoryWriteError,
    ) -> Any:
        try:
            return fn(*args)
        except Exception as exc:
            logger.warning("History %s failed for %s: %s", operation, record_id, exc)
            raise error(operation, record_id=record_id) from exc
