"""Session runtime — live execution of a single training day."""

from workout_engine.runtime.freestyle import FREESTYLE_DAY
from workout_engine.runtime.rest_timer import RestTimer
from workout_engine.runtime.session import WorkoutSession

__all__ = ["FREESTYLE_DAY", "RestTimer", "WorkoutSession"]
