"""Session records: the completed-session history entry and live snapshots."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from workout_engine.models.enums import FREESTYLE_DAY_INDEX, Rating, SessionStatus
from workout_engine.models.exercise import PlannedExercise


@dataclass(frozen=True)
class CompletedSession:
    """A finished session as stored in the user's history.

    ``day_index`` is the 0-based plan position that was played, or
    FREESTYLE_DAY_INDEX for sessions not tied to a plan day.
    """

    id: str
    date: date
    day_index: int
    rating: Rating

    @property
    def is_freestyle(self) -> bool:
        return self.day_index == FREESTYLE_DAY_INDEX


@dataclass(frozen=True)
class SessionSnapshot:
    """Immutable view of a session after a mutation, for the host UI."""

    status: SessionStatus
    day_index: int
    focus: str = ""
    edit_mode: bool = False
    exercises: tuple[PlannedExercise, ...] = field(default_factory=tuple)
    completed_sets: dict[str, tuple[bool, ...]] = field(default_factory=dict)
    progress_percent: int = 0
    active_rest_seconds: int | None = None

    @property
    def completed_set_count(self) -> int:
        return sum(sum(flags) for flags in self.completed_sets.values())

    def is_exercise_complete(self, uid: str) -> bool:
        flags = self.completed_sets.get(uid, ())
        return bool(flags) and all(flags)
