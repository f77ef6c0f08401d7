"""Freestyle template — the fixed day used when no plan day is chosen."""

from __future__ import annotations

from workout_engine.catalog import get_exercise
from workout_engine.models.exercise import PlannedExercise
from workout_engine.models.plan import TrainingDay
from workout_engine.plan_builder.generator import estimate_minutes

# Bodyweight-only so freestyle works at any venue
_FREESTYLE_EXERCISE_IDS = (109, 801, 804, 603, 708)
_FREESTYLE_SETS = "3"
_FREESTYLE_REPS = "10-12"
_FREESTYLE_REST_S = "60"

FREESTYLE_FOCUS = "Freestyle"


def _build_freestyle_day() -> TrainingDay:
    exercises = tuple(
        PlannedExercise(
            uid=f"fs-e{position}",
            exercise_id=exercise_id,
            name=get_exercise(exercise_id).name,
            sets=_FREESTYLE_SETS,
            reps=_FREESTYLE_REPS,
            rest_seconds=_FREESTYLE_REST_S,
        )
        for position, exercise_id in enumerate(_FREESTYLE_EXERCISE_IDS, start=1)
    )
    return TrainingDay(
        day_number=0,
        focus=FREESTYLE_FOCUS,
        estimated_minutes=estimate_minutes(exercises),
        exercises=exercises,
        is_placeholder=True,
    )


FREESTYLE_DAY: TrainingDay = _build_freestyle_day()
