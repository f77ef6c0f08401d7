"""Eligibility filtering — which catalog exercises a user may be given."""

from __future__ import annotations

import logging
from typing import Iterable

from workout_engine.models.enums import Equipment, Venue
from workout_engine.models.exercise import Exercise
from workout_engine.models.questionnaire import QuestionnaireAnswers

logger = logging.getLogger(__name__)


def allowed_equipment(venue: Venue, has_home_equipment: bool) -> frozenset[Equipment]:
    """Equipment usable at *venue*. Gyms have everything."""
    if venue == Venue.GYM:
        return frozenset(Equipment)
    if has_home_equipment:
        return frozenset({Equipment.BODYWEIGHT, Equipment.DUMBBELLS})
    return frozenset({Equipment.BODYWEIGHT})


def is_eligible(exercise: Exercise, answers: QuestionnaireAnswers) -> bool:
    """Venue, equipment and injury check for a single exercise."""
    if exercise.venue != answers.venue:
        return False
    if exercise.equipment not in allowed_equipment(answers.venue, answers.has_home_equipment):
        return False
    return not (exercise.muscle_groups & answers.excluded_muscle_groups)


def filter_eligible(
    catalog: Iterable[Exercise], answers: QuestionnaireAnswers
) -> tuple[Exercise, ...]:
    """Keep the catalog exercises the user can safely perform.

    Args:
        catalog: Exercises to filter, in catalog order.
        answers: Validated questionnaire answers.

    Returns:
        Eligible exercises, catalog order preserved.
    """
    eligible = tuple(ex for ex in catalog if is_eligible(ex, answers))
    logger.debug(
        "Eligibility filter kept %d exercises (venue=%s, excluded=%s)",
        len(eligible),
        answers.venue.name,
        sorted(answers.excluded_muscle_groups),
    )
    return eligible


def candidates_for(
    eligible: Iterable[Exercise], muscle_group: str
) -> list[Exercise]:
    """Eligible exercises that work *muscle_group*."""
    return [ex for ex in eligible if ex.targets(muscle_group)]
