"""WorkoutEngine — the facade that wires plan generation, sessions and history."""

from __future__ import annotations

import logging
import random
from datetime import date
from typing import Sequence

from workout_engine.exceptions import HistoryWriteError
from workout_engine.math.consistency import current_streak, rating_distribution, sessions_per_week
from workout_engine.models.enums import FREESTYLE_DAY_INDEX, Rating
from workout_engine.models.plan import Plan
from workout_engine.models.questionnaire import QuestionnaireAnswers
from workout_engine.models.session import CompletedSession
from workout_engine.plan_builder.generator import PlanGenerator
from workout_engine.progression.store import HistoryStore, InMemoryHistoryStore
from workout_engine.progression.tracker import ProgressionTracker
from workout_engine.runtime.session import SnapshotListener, WorkoutSession

logger = logging.getLogger(__name__)


class WorkoutEngine:
    """Single entry point for a host application.

    Usage:
        engine = WorkoutEngine(store=my_store)
        plan = engine.generate_plan(answers)
        session = engine.start_session(plan)
        session.toggle_set("d1-e1", 0)
        record, first = engine.complete_session(session, Rating.JUST_RIGHT)
    """

    def __init__(
        self,
        store: HistoryStore | None = None,
        generator: PlanGenerator | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.tracker = ProgressionTracker(store or InMemoryHistoryStore())
        self.generator = generator or PlanGenerator(rng=rng)

    # ------------------------------------------------------------------
    # Plans
    # ------------------------------------------------------------------

    def generate_plan(
        self,
        answers: QuestionnaireAnswers,
        recent_ratings: Sequence[Rating] | None = None,
    ) -> Plan:
        """Generate a plan, adjusting volume from feedback.

        Args:
            answers: Validated questionnaire answers.
            recent_ratings: Ratings to adapt to, oldest first. Defaults to
                the ratings in the recorded history.
        """
        if recent_ratings is None:
            recent_ratings = [r.rating for r in self.tracker.history()]
        return self.generator.generate(answers, recent_ratings)

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def next_day_index(self, plan: Plan) -> int:
        return self.tracker.next_day_index(plan)

    def start_session(
        self,
        plan: Plan | None,
        override: int | None = None,
        listener: SnapshotListener | None = None,
    ) -> WorkoutSession:
        """Open a session on the day picked by the cursor (or *override*).

        With no plan, or ``override=FREESTYLE_DAY_INDEX``, the freestyle
        template is used.
        """
        session = WorkoutSession(listener=listener)
        if plan is None or len(plan) == 0 or override == FREESTYLE_DAY_INDEX:
            session.open()
            return session

        index = self.tracker.resolve_day_index(plan, override=override)
        session.open(plan[index], day_index=index)
        return session

    def complete_session(
        self,
        session: WorkoutSession,
        rating: Rating,
        on_date: date | None = None,
    ) -> tuple[CompletedSession, bool]:
        """Finish *session* and record it.

        Returns:
            The stored record and whether it is the user's first workout.

        Raises:
            SessionPreconditionError: If no set was completed.
            HistoryReadError: If the store could not list the history. The
                session is left open.
            HistoryWriteError: If the store rejected the write. The record
                is attached as ``error.record`` so the caller can retry
                ``tracker.record`` with the same id.
        """
        is_first = len(self.tracker.history()) == 0
        record = session.finish(rating, on_date=on_date)
        try:
            self.tracker.record(record)
        except HistoryWriteError as exc:
            exc.record = record
            raise
        if is_first:
            logger.info("First workout recorded (%s)", record.id)
        return record, is_first

    # ------------------------------------------------------------------
    # History
    # ------------------------------------------------------------------

    def update_rating(self, record_id: str, rating: Rating) -> bool:
        return self.tracker.update_rating(record_id, rating)

    def delete_record(self, record_id: str) -> bool:
        return self.tracker.delete_record(record_id)

    def history(self) -> list[CompletedSession]:
        """Records newest first, as shown in the history view."""
        return self.tracker.sorted_history()

    def consistency_summary(self, today: date | None = None) -> dict:
        """Streak, weekly counts and rating shares for the progress screen."""
        history = self.tracker.history()
        return {
            "total_sessions": len(history),
            "current_streak": current_streak(history, today),
            "sessions_per_week": sessions_per_week(history),
            "rating_distribution": rating_distribution(history),
        }
