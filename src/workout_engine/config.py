"""Environment-variable-based configuration for the workout engine."""

from __future__ import annotations

import os

LOCALE: str = os.environ.get("WORKOUT_ENGINE_LOCALE", "en")

# Seconds added by one "+10s" press on the rest countdown
REST_EXTENSION_S: int = int(os.environ.get("WORKOUT_ENGINE_REST_EXTENSION_S", "10"))

# One exercise (sets + rest + transitions) per this many minutes of session time
MINUTES_PER_EXERCISE: int = int(os.environ.get("WORKOUT_ENGINE_MINUTES_PER_EXERCISE", "7"))

# Fixed seed for reproducible plans (e.g. QA builds); unset = fresh randomness
_seed = os.environ.get("WORKOUT_ENGINE_SEED", "")
SEED: int | None = int(_seed) if _seed else None
