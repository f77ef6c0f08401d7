"""PlanGenerator — turns questionnaire answers into a multi-day plan.

Pure computation: no I/O. Randomness comes from an injected
``random.Random`` so tests (and QA builds via WORKOUT_ENGINE_SEED) can make
selection deterministic.
"""

from __future__ import annotations

import logging
import random
from typing import Iterable, Sequence

from workout_engine import config
from workout_engine.catalog import CATALOG
from workout_engine.catalog.filters import filter_eligible
from workout_engine.models.enums import SET_WORK_SECONDS, WARMUP_MINUTES, Rating
from workout_engine.models.exercise import Exercise, PlannedExercise
from workout_engine.models.plan import Plan, TrainingDay, VolumeParameters
from workout_engine.models.questionnaire import QuestionnaireAnswers
from workout_engine.plan_builder.selector import select_day_exercises
from workout_engine.plan_builder.split_templates import select_split
from workout_engine.plan_builder.volume import (
    adjust_for_feedback,
    base_volume,
    exercises_per_day,
)

logger = logging.getLogger(__name__)


class PlanGenerator:
    """Generates training plans from questionnaire answers.

    Usage::

        generator = PlanGenerator(rng=random.Random(42))
        plan = generator.generate(answers)
    """

    def __init__(
        self,
        catalog: Iterable[Exercise] = CATALOG,
        rng: random.Random | None = None,
        minutes_per_exercise: int | None = None,
    ) -> None:
        self.catalog = tuple(catalog)
        self.rng = rng or random.Random(config.SEED)
        self.minutes_per_exercise = minutes_per_exercise or config.MINUTES_PER_EXERCISE

    def generate(
        self,
        answers: QuestionnaireAnswers,
        recent_ratings: Sequence[Rating] | None = None,
    ) -> Plan:
        """Build a plan with exactly ``answers.days_per_week`` days.

        Algorithm:
        1. Filter the catalog by venue, equipment and injuries
        2. Derive day-global volume from goal x body type (and feedback)
        3. Exercises-per-day target = floor(duration / 7), at least 1
        4. Pick the split template for the day count and preference
        5. Fill each day's muscle groups in template order; priority groups
           get an extra slot
        6. Wrap picks as PlannedExercises with stable uids

        Args:
            answers: Validated questionnaire answers.
            recent_ratings: Optional post-session ratings, oldest first.

        Returns:
            A frozen Plan.
        """
        eligible = filter_eligible(self.catalog, answers)
        volume = base_volume(answers.primary_goal, answers.body_type)
        if recent_ratings:
            volume = adjust_for_feedback(
                volume, recent_ratings, answers.progression_intensity,
            )
        target = exercises_per_day(answers.session_duration_min, self.minutes_per_exercise)
        split = select_split(
            answers.days_per_week, answers.split_preference, answers.experience_level,
        )
        priority_groups = answers.priority_muscle_groups

        days: list[TrainingDay] = []
        for day_template in split.days:
            picks = select_day_exercises(
                day_template,
                eligible,
                target,
                priority_groups,
                answers.experience_level,
                self.rng,
            )
            days.append(self._build_day(day_template.day_number, day_template.focus, picks, volume))

        plan = Plan(
            days=tuple(days),
            split_name=split.name,
            exercises_per_day_target=target,
            volume=volume,
        )
        logger.info(
            "Generated %d-day plan '%s' (%d eligible exercises, target %d/day, %s sets x %s reps)",
            len(plan), split.name, len(eligible), target, volume.sets, volume.reps,
        )
        return plan

    def _build_day(
        self,
        day_number: int,
        focus: str,
        picks: list[Exercise],
        volume: VolumeParameters,
    ) -> TrainingDay:
        exercises = tuple(
            PlannedExercise(
                uid=f"d{day_number}-e{position}",
                exercise_id=exercise.id,
                name=exercise.name,
                sets=str(volume.sets),
                reps=volume.reps,
                rest_seconds=str(volume.rest_seconds),
            )
            for position, exercise in enumerate(picks, start=1)
        )
        if not exercises:
            # Nothing survived filtering for this day: offer it as freestyle
            logger.warning("Day %d (%s) has no eligible exercises; marking as placeholder", day_number, focus)
            return TrainingDay(
                day_number=day_number,
                focus=focus,
                estimated_minutes=0,
                is_placeholder=True,
            )
        return TrainingDay(
            day_number=day_number,
            focus=focus,
            estimated_minutes=estimate_minutes(exercises),
            exercises=exercises,
        )


def estimate_minutes(exercises: Iterable[PlannedExercise]) -> int:
    """Warm-up plus, per set, work time and the prescribed rest."""
    seconds = sum(
        ex.set_count * (SET_WORK_SECONDS + ex.rest_seconds_value) for ex in exercises
    )
    return round(WARMUP_MINUTES + seconds / 60)


def generate_plan(
    answers: QuestionnaireAnswers,
    catalog: Iterable[Exercise] = CATALOG,
    rng: random.Random | None = None,
    recent_ratings: Sequence[Rating] | None = None,
) -> Plan:
    """Functional entry point: ``PlanGenerator(catalog, rng).generate(answers)``."""
    return PlanGenerator(catalog=catalog, rng=rng).generate(answers, recent_ratings)
