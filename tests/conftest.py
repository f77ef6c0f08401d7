"""Shared test fixtures: questionnaire answers, seeded rng, plans and history."""

from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Callable

import pytest

from workout_engine.models.enums import (
    CHEST,
    BodyType,
    ExperienceLevel,
    Goal,
    Rating,
    SplitPreference,
    Venue,
)
from workout_engine.models.exercise import PlannedExercise
from workout_engine.models.plan import Plan, TrainingDay, VolumeParameters
from workout_engine.models.questionnaire import QuestionnaireAnswers
from workout_engine.models.session import CompletedSession
from workout_engine.progression.store import InMemoryHistoryStore


def _make_answers(**overrides) -> QuestionnaireAnswers:
    """Gym / 3 days / 60 min / intermediate / maintain, with overrides."""
    fields = dict(
        venue=Venue.GYM,
        days_per_week=3,
        session_duration_min=60,
        primary_goal=Goal.MAINTAIN,
        experience_level=ExperienceLevel.INTERMEDIATE,
        body_type=BodyType.MESO,
    )
    fields.update(overrides)
    return QuestionnaireAnswers(**fields)


def _make_record(day_index: int = 0, **overrides) -> CompletedSession:
    fields = dict(
        id=f"rec-{day_index}",
        date=date(2026, 3, 2),
        day_index=day_index,
        rating=Rating.JUST_RIGHT,
    )
    fields.update(overrides)
    return CompletedSession(**fields)


def _planned(uid: str, exercise_id: int, name: str, sets: str = "3", rest: str = "60") -> PlannedExercise:
    return PlannedExercise(
        uid=uid,
        exercise_id=exercise_id,
        name=name,
        sets=sets,
        reps="10-12",
        rest_seconds=rest,
    )


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def gym_answers() -> QuestionnaireAnswers:
    return _make_answers()


@pytest.fixture
def chest_priority_answers() -> QuestionnaireAnswers:
    """Advanced gym user, 3 x 60 min, Chest priority, Maintain."""
    return _make_answers(
        experience_level=ExperienceLevel.ADVANCED,
        priority_muscles=(CHEST,),
    )


@pytest.fixture
def home_beginner_answers() -> QuestionnaireAnswers:
    """Beginner training at home with no equipment, 3 x 45 min."""
    return _make_answers(
        venue=Venue.HOME,
        session_duration_min=45,
        experience_level=ExperienceLevel.BEGINNER,
        primary_goal=Goal.FAT_LOSS,
        body_type=BodyType.ENDO,
    )


@pytest.fixture
def six_day_answers() -> QuestionnaireAnswers:
    return _make_answers(
        days_per_week=6,
        session_duration_min=50,
        primary_goal=Goal.MUSCLE_GAIN,
        body_type=BodyType.ECTO,
        split_preference=SplitPreference.ABCDE,
    )


@pytest.fixture
def sample_plan() -> Plan:
    """Hand-built 3-day plan with predictable uids and volumes."""
    push = TrainingDay(
        day_number=1,
        focus="Chest, Shoulders & Triceps",
        estimated_minutes=25,
        exercises=(
            _planned("d1-e1", 101, "Barbell Bench Press"),
            _planned("d1-e2", 401, "Dumbbell Shoulder Press", rest="90"),
            _planned("d1-e3", 506, "Rope Triceps Pushdown", sets="2"),
        ),
    )
    pull = TrainingDay(
        day_number=2,
        focus="Back & Biceps",
        estimated_minutes=18,
        exercises=(
            _planned("d2-e1", 201, "Lat Pulldown"),
            _planned("d2-e2", 501, "Barbell Curl"),
        ),
    )
    legs = TrainingDay(
        day_number=3,
        focus="Legs & Glutes",
        estimated_minutes=18,
        exercises=(
            _planned("d3-e1", 302, "45-Degree Leg Press"),
            _planned("d3-e2", 355, "Barbell Hip Thrust"),
        ),
    )
    return Plan(
        days=(push, pull, legs),
        split_name="ABC (Push/Pull/Legs)",
        exercises_per_day_target=8,
        volume=VolumeParameters(sets=3, reps="10-12", rest_seconds=60),
    )


@pytest.fixture
def history() -> list[CompletedSession]:
    """Four sessions on consecutive days, oldest first."""
    start = date(2026, 3, 2)
    ratings = (Rating.JUST_RIGHT, Rating.HARD, Rating.LIGHT, Rating.JUST_RIGHT)
    return [
        _make_record(i % 3, id=f"rec-{i}", date=start + timedelta(days=i), rating=rating)
        for i, rating in enumerate(ratings)
    ]


@pytest.fixture
def store(history) -> InMemoryHistoryStore:
    return InMemoryHistoryStore(history)


@pytest.fixture
def answers_factory() -> Callable[..., QuestionnaireAnswers]:
    """Factory fixture for QuestionnaireAnswers.

    Usage:
        answers = answers_factory(days_per_week=5, venue=Venue.HOME)
    """
    return _make_answers


@pytest.fixture
def record_factory() -> Callable[..., CompletedSession]:
    """Factory fixture for CompletedSession records.

    Usage:
        record = record_factory(2, rating=Rating.HARD)
    """
    return _make_record
