"""Exercise catalog — the fixed reference table and its lookups."""

from __future__ import annotations

from workout_engine.catalog.exercises import EXERCISES
from workout_engine.catalog.filters import candidates_for, filter_eligible, is_eligible
from workout_engine.models.exercise import Exercise

CATALOG: tuple[Exercise, ...] = EXERCISES

_BY_ID: dict[int, Exercise] = {ex.id: ex for ex in CATALOG}


def get_exercise(exercise_id: int) -> Exercise:
    """Look up a catalog exercise by id.

    Raises:
        KeyError: If the id is not in the catalog.
    """
    return _BY_ID[exercise_id]


__all__ = [
    "CATALOG",
    "candidates_for",
    "filter_eligible",
    "get_exercise",
    "is_eligible",
]
