"""Volume assignment — sets, reps and rest for a whole plan.

Volume is day-global: every generated exercise gets the same parameters,
derived from the primary goal and adjusted for body type.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from workout_engine.math.feedback import classify_feedback, rating_ewma
from workout_engine.models.enums import (
    AGGRESSIVE_REST_CUT_S,
    MAX_SETS,
    MIN_REST_S,
    MIN_SETS,
    BodyType,
    Goal,
    ProgressionIntensity,
    Rating,
)
from workout_engine.models.plan import VolumeParameters

logger = logging.getLogger(__name__)


def base_volume(goal: Goal, body_type: BodyType) -> VolumeParameters:
    """Default volume for a goal / body-type combination.

    FAT_LOSS: 12-15 reps, 45 s rest, 3 sets (4 for ENDO).
    MUSCLE_GAIN: 8-10 reps, 90 s rest (120 s for ECTO), 4 sets.
    MAINTAIN: 10-12 reps, 60 s rest, 3 sets.
    """
    if goal == Goal.FAT_LOSS:
        sets = 4 if body_type == BodyType.ENDO else 3
        return VolumeParameters(sets=sets, reps="12-15", rest_seconds=45)
    if goal == Goal.MUSCLE_GAIN:
        rest = 120 if body_type == BodyType.ECTO else 90
        return VolumeParameters(sets=4, reps="8-10", rest_seconds=rest)
    return VolumeParameters(sets=3, reps="10-12", rest_seconds=60)


def adjust_for_feedback(
    volume: VolumeParameters,
    recent_ratings: Sequence[Rating],
    intensity: ProgressionIntensity,
) -> VolumeParameters:
    """Nudge volume using smoothed post-session ratings.

    Sessions trending HARD lose one set; sessions trending LIGHT gain one
    set unless progression is SLOW, and AGGRESSIVE progression also shortens
    rest. Sets stay within [MIN_SETS, MAX_SETS], rest at or above MIN_REST_S.
    """
    if not recent_ratings:
        return volume

    score = rating_ewma(recent_ratings)
    verdict = classify_feedback(score)
    sets = volume.sets
    rest = volume.rest_seconds

    if verdict == "too_hard":
        sets = max(MIN_SETS, sets - 1)
    elif verdict == "too_light" and intensity != ProgressionIntensity.SLOW:
        sets = min(MAX_SETS, sets + 1)
        if intensity == ProgressionIntensity.AGGRESSIVE:
            rest = max(MIN_REST_S, rest - AGGRESSIVE_REST_CUT_S)

    if (sets, rest) != (volume.sets, volume.rest_seconds):
        logger.info(
            "Feedback score %.2f (%s): sets %d -> %d, rest %ds -> %ds",
            score, verdict, volume.sets, sets, volume.rest_seconds, rest,
        )
    return VolumeParameters(sets=sets, reps=volume.reps, rest_seconds=rest)


def exercises_per_day(session_duration_min: int, minutes_per_exercise: int) -> int:
    """Per-day exercise target: floor(duration / minutes_per_exercise), at least 1."""
    return max(1, math.floor(session_duration_min / minutes_per_exercise))
