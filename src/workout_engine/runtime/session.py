"""WorkoutSession — the live, editable state machine for one training day.

Lifecycle::

    IDLE --open()--> ACTIVE --finish(rating)--> CLOSED
                       |
                       +----cancel()-------> IDLE

While ACTIVE the session tracks per-set completion, owns one rest
countdown, and accepts structural edits in edit mode. Edits operate on a
deep copy of the day, never on the stored plan. Every mutation returns a
fresh SessionSnapshot and notifies the optional listener.
"""

from __future__ import annotations

import copy
import dataclasses
import logging
import uuid
from datetime import date
from typing import Callable

from workout_engine import config
from workout_engine.exceptions import (
    SessionEditError,
    SessionPreconditionError,
    SessionStateError,
)
from workout_engine.models.enums import FREESTYLE_DAY_INDEX, Rating, SessionStatus
from workout_engine.models.exercise import PlannedExercise
from workout_engine.models.plan import TrainingDay
from workout_engine.models.session import CompletedSession, SessionSnapshot
from workout_engine.runtime.freestyle import FREESTYLE_DAY
from workout_engine.runtime.rest_timer import RestTimer

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[SessionSnapshot], None]


class WorkoutSession:
    """Controller for one active training day.

    Usage::

        session = WorkoutSession(listener=ui.render)
        session.open(plan[index], day_index=index)
        session.toggle_set("d1-e1", 0)
        session.tick()
        record = session.finish(Rating.JUST_RIGHT)
    """

    def __init__(
        self,
        listener: SnapshotListener | None = None,
        rest_extension_s: int | None = None,
    ) -> None:
        self.status = SessionStatus.IDLE
        self.edit_mode = False
        self.day_index = FREESTYLE_DAY_INDEX
        self.focus = ""
        self._exercises: list[PlannedExercise] = []
        self._completed: dict[str, list[bool]] = {}
        self._timer = RestTimer()
        self._listener = listener
        self._rest_extension_s = rest_extension_s or config.REST_EXTENSION_S
        self._custom_count = 0

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def open(
        self,
        day: TrainingDay | None = None,
        day_index: int = FREESTYLE_DAY_INDEX,
    ) -> SessionSnapshot:
        """Start a session for *day*, or the freestyle template when None.

        Placeholder days with no exercises also fall back to the freestyle
        exercise list but keep their own focus and index.
        """
        if self.status == SessionStatus.ACTIVE:
            raise SessionStateError("session_already_active")

        if day is None:
            source = FREESTYLE_DAY
            day_index = FREESTYLE_DAY_INDEX
        elif not day.exercises:
            source = dataclasses.replace(FREESTYLE_DAY, focus=day.focus)
        else:
            source = day

        self._exercises = list(copy.deepcopy(source.exercises))
        self._completed = {ex.uid: [False] * _set_count(ex) for ex in self._exercises}
        self._timer.cancel()
        self._custom_count = 0
        self.edit_mode = False
        self.day_index = day_index
        self.focus = source.focus
        self.status = SessionStatus.ACTIVE
        logger.info(
            "Opened session day_index=%d focus=%s (%d exercises)",
            day_index, self.focus, len(self._exercises),
        )
        return self._emit()

    def finish(self, rating: Rating, on_date: date | None = None) -> CompletedSession:
        """Close the session and emit its history record.

        Raises:
            SessionStateError: If no session is active.
            SessionPreconditionError: If no set has been completed.
        """
        self._require_active()
        if self.completed_set_count == 0:
            raise SessionPreconditionError()

        record = CompletedSession(
            id=uuid.uuid4().hex,
            date=on_date or date.today(),
            day_index=self.day_index,
            rating=Rating(rating),
        )
        logger.info(
            "Finished session day_index=%d rating=%s (%d%% complete)",
            self.day_index, record.rating.name, self.progress_percent,
        )
        self._discard(SessionStatus.CLOSED)
        self._emit()
        return record

    def cancel(self) -> SessionSnapshot:
        """Discard the session without emitting a record."""
        self._require_active()
        logger.info("Cancelled session day_index=%d", self.day_index)
        self._discard(SessionStatus.IDLE)
        return self._emit()

    # ------------------------------------------------------------------
    # Set tracking and rest countdown
    # ------------------------------------------------------------------

    def toggle_set(self, uid: str, set_index: int) -> SessionSnapshot:
        """Flip one set's completion.

        Completing a set that is not the exercise's last starts the rest
        countdown; un-completing a set or completing the last one stops it.
        """
        self._require_active()
        if self.edit_mode:
            raise SessionStateError("edit_mode_active")
        exercise = self._find(uid)
        flags = self._completed[uid]
        if not 0 <= set_index < len(flags):
            raise SessionEditError("set_out_of_range", set_index=set_index, name=exercise.name)

        flags[set_index] = not flags[set_index]
        is_last_set = set_index == len(flags) - 1
        if flags[set_index] and not is_last_set:
            self._timer.start(_rest_seconds(exercise))
        else:
            self._timer.cancel()
        return self._emit()

    def tick(self, seconds: int = 1) -> SessionSnapshot:
        """Advance the rest countdown by *seconds*."""
        self._require_active()
        self._timer.tick(seconds)
        return self._emit()

    def extend_rest(self, seconds: int | None = None) -> SessionSnapshot:
        """Add time to the running countdown (default +10 s)."""
        self._require_active()
        self._timer.extend(seconds or self._rest_extension_s)
        return self._emit()

    def cancel_rest(self) -> SessionSnapshot:
        """Stop the countdown. Completion state is untouched."""
        self._require_active()
        self._timer.cancel()
        return self._emit()

    # ------------------------------------------------------------------
    # Edit mode
    # ------------------------------------------------------------------

    def enter_edit_mode(self) -> SessionSnapshot:
        self._require_active()
        self.edit_mode = True
        return self._emit()

    def exit_edit_mode(self) -> SessionSnapshot:
        self._require_active()
        self.edit_mode = False
        return self._emit()

    def toggle_edit_mode(self) -> SessionSnapshot:
        self._require_active()
        self.edit_mode = not self.edit_mode
        return self._emit()

    def modify_exercise(
        self,
        uid: str,
        name: str | None = None,
        sets: str | int | None = None,
        reps: str | None = None,
        rest_seconds: str | int | None = None,
    ) -> SessionSnapshot:
        """Change an exercise's fields. A new set count resets its completion."""
        self._require_editing()
        current = self._find(uid)
        changes: dict[str, str] = {}
        if name is not None:
            changes["name"] = name
        if sets is not None:
            changes["sets"] = _validate_sets(sets)
        if reps is not None:
            changes["reps"] = str(reps)
        if rest_seconds is not None:
            changes["rest_seconds"] = _validate_rest(rest_seconds)

        updated = dataclasses.replace(current, **changes)
        position = self._exercises.index(current)
        self._exercises[position] = updated
        new_count = _set_count(updated)
        if new_count != len(self._completed[uid]):
            self._completed[uid] = [False] * new_count
        return self._emit()

    def remove_exercise(self, uid: str) -> SessionSnapshot:
        self._require_editing()
        exercise = self._find(uid)
        self._exercises.remove(exercise)
        del self._completed[uid]
        return self._emit()

    def add_exercise(
        self,
        name: str,
        sets: str | int = "3",
        reps: str = "10-12",
        rest_seconds: str | int = "60",
        exercise_id: int | None = None,
    ) -> str:
        """Append an ad-hoc exercise as the last entry and return its uid."""
        self._require_editing()
        self._custom_count += 1
        uid = f"custom-{self._custom_count}"
        while uid in self._completed:
            self._custom_count += 1
            uid = f"custom-{self._custom_count}"

        exercise = PlannedExercise(
            uid=uid,
            exercise_id=exercise_id,
            name=name,
            sets=_validate_sets(sets),
            reps=str(reps),
            rest_seconds=_validate_rest(rest_seconds),
        )
        self._exercises.append(exercise)
        self._completed[uid] = [False] * exercise.set_count
        self._emit()
        return uid

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def exercises(self) -> tuple[PlannedExercise, ...]:
        return tuple(self._exercises)

    @property
    def active_rest_seconds(self) -> int | None:
        return self._timer.remaining

    @property
    def total_set_count(self) -> int:
        return sum(len(flags) for flags in self._completed.values())

    @property
    def completed_set_count(self) -> int:
        return sum(sum(flags) for flags in self._completed.values())

    @property
    def progress_percent(self) -> int:
        """round(100 * completed / total); 0 for an empty session."""
        total = self.total_set_count
        if total == 0:
            return 0
        return round(100 * self.completed_set_count / total)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            status=self.status,
            day_index=self.day_index,
            focus=self.focus,
            edit_mode=self.edit_mode,
            exercises=tuple(self._exercises),
            completed_sets={uid: tuple(flags) for uid, flags in self._completed.items()},
            progress_percent=self.progress_percent,
            active_rest_seconds=self._timer.remaining,
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _emit(self) -> SessionSnapshot:
        snap = self.snapshot()
        if self._listener is not None:
            self._listener(snap)
        return snap

    def _discard(self, status: SessionStatus) -> None:
        self._exercises = []
        self._completed = {}
        self._timer.cancel()
        self.edit_mode = False
        self.status = status

    def _find(self, uid: str) -> PlannedExercise:
        for exercise in self._exercises:
            if exercise.uid == uid:
                return exercise
        raise SessionEditError("unknown_exercise", uid=uid)

    def _require_active(self) -> None:
        if self.status != SessionStatus.ACTIVE:
            raise SessionStateError("session_not_active")

    def _require_editing(self) -> None:
        self._require_active()
        if not self.edit_mode:
            raise SessionStateError("edit_mode_required")


def _set_count(exercise: PlannedExercise) -> int:
    try:
        return max(0, exercise.set_count)
    except ValueError:
        logger.warning("Exercise %s has non-numeric sets %r; tracking 0 sets", exercise.uid, exercise.sets)
        return 0


def _rest_seconds(exercise: PlannedExercise) -> int:
    try:
        return exercise.rest_seconds_value
    except ValueError:
        logger.warning("Exercise %s has non-numeric rest %r; no countdown", exercise.uid, exercise.rest_seconds)
        return 0


def _validate_sets(value: str | int) -> str:
    try:
        count = int(str(value).strip())
    except ValueError:
        raise SessionEditError("invalid_sets", value=value) from None
    if count <= 0:
        raise SessionEditError("invalid_sets", value=value)
    return str(count)


def _validate_rest(value: str | int) -> str:
    try:
        seconds = int(str(value).strip())
    except ValueError:
        raise SessionEditError("invalid_rest", value=value) from None
    if seconds < 0:
        raise SessionEditError("invalid_rest", value=value)
    return str(seconds)
