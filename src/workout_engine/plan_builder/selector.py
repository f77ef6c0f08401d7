"""Per-day exercise selection.

Allocates a day's exercise budget across its target muscle groups. Priority
groups get one extra slot and, for non-beginners, prefer the hardest
exercises; other groups draw from a shuffled candidate list.
"""

from __future__ import annotations

import logging
import math
import random
from typing import Iterable

from workout_engine.catalog.filters import candidates_for
from workout_engine.models.enums import (
    DAY_EXERCISE_CAP_MARGIN,
    PRIORITY_EXTRA_SLOTS,
    ExperienceLevel,
)
from workout_engine.models.exercise import Exercise
from workout_engine.plan_builder.split_templates import DayTemplate

logger = logging.getLogger(__name__)


def slots_per_muscle(target: int, group_count: int) -> int:
    """ceil(target / group_count); 0 when the day has no groups."""
    if group_count <= 0:
        return 0
    return math.ceil(target / group_count)


def order_candidates(
    candidates: list[Exercise],
    is_priority: bool,
    experience_level: ExperienceLevel,
    rng: random.Random,
) -> list[Exercise]:
    """Order candidates for selection.

    Candidates are always shuffled; priority groups for non-beginners are
    then stably sorted hardest-first, so ties keep their shuffled order.
    """
    ordered = list(candidates)
    rng.shuffle(ordered)
    if is_priority and experience_level != ExperienceLevel.BEGINNER:
        ordered.sort(key=lambda ex: ex.level, reverse=True)
    return ordered


def select_day_exercises(
    day: DayTemplate,
    eligible: Iterable[Exercise],
    target: int,
    priority_groups: frozenset[str],
    experience_level: ExperienceLevel,
    rng: random.Random,
) -> list[Exercise]:
    """Choose the exercises for one day.

    Args:
        day: Day template with its ordered muscle groups.
        eligible: Exercises that already passed the eligibility filter.
        target: Exercises-per-day target.
        priority_groups: Muscle groups the user asked to prioritise.
        experience_level: User experience; beginners get no hardness bias.
        rng: Injected random source.

    Returns:
        Selected exercises in template order, at most target + 2 long. May be
        shorter (or empty) when the catalog is sparse for these groups.
    """
    eligible = tuple(eligible)
    slots = slots_per_muscle(target, len(day.muscle_groups))
    chosen: list[Exercise] = []
    chosen_ids: set[int] = set()

    for group in day.muscle_groups:
        is_priority = group in priority_groups
        group_slots = slots + PRIORITY_EXTRA_SLOTS if is_priority else slots
        ordered = order_candidates(
            candidates_for(eligible, group), is_priority, experience_level, rng,
        )

        taken = 0
        for exercise in ordered:
            if taken >= group_slots:
                break
            if exercise.id in chosen_ids:
                continue
            chosen.append(exercise)
            chosen_ids.add(exercise.id)
            taken += 1

        if taken < group_slots:
            logger.warning(
                "Day %d: only %d/%d exercises available for %s",
                day.day_number, taken, group_slots, group,
            )

    cap = target + DAY_EXERCISE_CAP_MARGIN
    if len(chosen) > cap:
        logger.debug("Day %d: truncating %d exercises to %d", day.day_number, len(chosen), cap)
        chosen = chosen[:cap]
    return chosen
