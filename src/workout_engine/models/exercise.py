"""Catalog exercise and the per-plan exercise prescription."""

from __future__ import annotations

import re
from dataclasses import dataclass

from workout_engine.models.enums import Equipment, ExperienceLevel, Venue

_LEADING_INT = re.compile(r"\s*(\d+)")


@dataclass(frozen=True)
class Exercise:
    """A catalog exercise. Owned by the catalog and never mutated."""

    id: int
    name: str
    muscle_groups: frozenset[str]
    equipment: Equipment
    level: ExperienceLevel
    venue: Venue

    def targets(self, muscle_group: str) -> bool:
        return muscle_group in self.muscle_groups


@dataclass(frozen=True)
class PlannedExercise:
    """An exercise as prescribed inside a training day.

    Volume fields are strings because reps may be a range ("8-10") and the
    host stores them verbatim. ``uid`` is stable for the lifetime of the
    plan, so session edits never depend on list positions.
    """

    uid: str
    exercise_id: int | None   # None for exercises added ad hoc in a session
    name: str
    sets: str
    reps: str
    rest_seconds: str

    @property
    def set_count(self) -> int:
        """Leading integer of ``sets``, so a legacy range like "3-4" counts as 3.

        Raises:
            ValueError: If ``sets`` does not start with a number.
        """
        match = _LEADING_INT.match(self.sets)
        if match is None:
            raise ValueError(f"Non-numeric set count: {self.sets!r}")
        return int(match.group(1))

    @property
    def rest_seconds_value(self) -> int:
        return int(self.rest_seconds)
