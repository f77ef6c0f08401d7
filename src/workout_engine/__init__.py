"""Workout engine: questionnaire-driven plan generation, live sessions and progression."""

from workout_engine.engine import WorkoutEngine
from workout_engine.exceptions import (
    HistoryReadError,
    HistoryStoreError,
    HistoryWriteError,
    QuestionnaireValidationError,
    SessionEditError,
    SessionError,
    SessionPreconditionError,
    SessionStateError,
    WorkoutEngineError,
)

__all__ = [
    "HistoryReadError",
    "HistoryStoreError",
    "HistoryWriteError",
    "QuestionnaireValidationError",
    "SessionEditError",
    "SessionError",
    "SessionPreconditionError",
    "SessionStateError",
    "WorkoutEngine",
    "WorkoutEngineError",
]
