"""Data models for the workout engine."""

from workout_engine.models.enums import (
    BodyType,
    Equipment,
    ExperienceLevel,
    Goal,
    ProgressionIntensity,
    Rating,
    SessionStatus,
    SplitPreference,
    Venue,
)
from workout_engine.models.exercise import Exercise, PlannedExercise
from workout_engine.models.plan import Plan, TrainingDay, VolumeParameters
from workout_engine.models.questionnaire import QuestionnaireAnswers
from workout_engine.models.session import CompletedSession, SessionSnapshot

__all__ = [
    "BodyType",
    "CompletedSession",
    "Equipment",
    "Exercise",
    "ExperienceLevel",
    "Goal",
    "Plan",
    "PlannedExercise",
    "ProgressionIntensity",
    "QuestionnaireAnswers",
    "Rating",
    "SessionSnapshot",
    "SessionStatus",
    "SplitPreference",
    "TrainingDay",
    "Venue",
    "VolumeParameters",
]
