"""JSON wire format for plans and completed-session records.

Keys are camelCase to match what the host application stores:

    day     -> {"day", "focus", "estimatedTime", "isPlaceholder",
                "exercises": [{"exerciseId", "uid", "name", "sets", "reps", "rest"}]}
    record  -> {"id", "date", "workoutDayIndex", "rating"}

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from datetime import date
from typing import Any

from workout_engine.models.enums import RATING_WIRE_VALUES, Rating
from workout_engine.models.exercise import PlannedExercise
from workout_engine.models.plan import Plan, TrainingDay, VolumeParameters
from workout_engine.models.session import CompletedSession

_RATING_FROM_WIRE = {wire: rating for rating, wire in RATING_WIRE_VALUES.items()}

# Values written by earlier, Portuguese-only releases of the host app
_LEGACY_RATINGS = {
    "leve": Rating.LIGHT,
    "ideal": Rating.JUST_RIGHT,
    "pesado": Rating.HARD,
}


# ---------------------------------------------------------------------------
# Plans
# ---------------------------------------------------------------------------

def plan_to_dict(plan: Plan) -> dict:
    """Convert a Plan to its JSON-compatible dict."""
    volume = None
    if plan.volume is not None:
        volume = {
            "sets": plan.volume.sets,
            "reps": plan.volume.reps,
            "rest": plan.volume.rest_seconds,
        }
    return {
        "splitName": plan.split_name,
        "exercisesPerDayTarget": plan.exercises_per_day_target,
        "volume": volume,
        "days": [_day_to_dict(day) for day in plan.days],
    }


def plan_from_dict(data: dict | list) -> Plan:
    """Rebuild a Plan.

    Also accepts a bare list of day dicts, the format stored before plan
    metadata was added. Exercises without a ``uid`` get the positional one
    the generator would have assigned.

    Raises:
        ValueError: If a required key is missing or a value is malformed.
    """
    if isinstance(data, list):
        data = {"days": data}
    try:
        days = tuple(_day_from_dict(d) for d in data["days"])
        volume_data = data.get("volume")
        volume = None
        if volume_data:
            volume = VolumeParameters(
                sets=int(volume_data["sets"]),
                reps=str(volume_data["reps"]),
                rest_seconds=int(volume_data["rest"]),
            )
        return Plan(
            days=days,
            split_name=data.get("splitName", ""),
            exercises_per_day_target=int(data.get("exercisesPerDayTarget", 0)),
            volume=volume,
        )
    except (KeyError, TypeError) as exc:
        raise ValueError(f"Malformed plan data: {exc!r}") from exc


def _day_to_dict(day: TrainingDay) -> dict:
    return {
        "day": day.day_number,
        "focus": day.focus,
        "estimatedTime": day.estimated_minutes,
        "isPlaceholder": day.is_placeholder,
        "exercises": [
            {
                "exerciseId": ex.exercise_id,
                "uid": ex.uid,
                "name": ex.name,
                "sets": ex.sets,
                "reps": ex.reps,
                "rest": ex.rest_seconds,
            }
            for ex in day.exercises
        ],
    }


def _day_from_dict(data: dict) -> TrainingDay:
    day_number = int(data["day"])
    exercises = tuple(
        PlannedExercise(
            uid=ex.get("uid") or f"d{day_number}-e{position}",
            exercise_id=ex.get("exerciseId"),
            name=ex["name"],
            sets=str(ex["sets"]),
            reps=str(ex["reps"]),
            rest_seconds=str(ex["rest"]),
        )
        for position, ex in enumerate(data.get("exercises", []), start=1)
    )
    return TrainingDay(
        day_number=day_number,
        focus=data["focus"],
        estimated_minutes=int(data.get("estimatedTime", 0)),
        exercises=exercises,
        is_placeholder=bool(data.get("isPlaceholder", not exercises)),
    )


# ---------------------------------------------------------------------------
# Completed sessions
# ---------------------------------------------------------------------------

def session_to_dict(record: CompletedSession) -> dict:
    return {
        "id": record.id,
        "date": record.date.isoformat(),
        "workoutDayIndex": record.day_index,
        "rating": RATING_WIRE_VALUES[record.rating],
    }


def session_from_dict(data: dict) -> CompletedSession:
    """Rebuild a CompletedSession.

    ``date`` may be a plain ISO date or a full ISO timestamp; only the
    calendar date is kept.

    Raises:
        ValueError: If a required key is missing or a value is malformed.
    """
    try:
        raw_date = str(data["date"])
        return CompletedSession(
            id=str(data["id"]),
            date=date.fromisoformat(raw_date[:10]),
            day_index=int(data["workoutDayIndex"]),
            rating=_parse_rating(data["rating"]),
        )
    except KeyError as exc:
        raise ValueError(f"Missing session field: {exc.args[0]}") from exc


def _parse_rating(value: Any) -> Rating:
    if isinstance(value, Rating):
        return value
    key = str(value).strip().lower()
    if key in _RATING_FROM_WIRE:
        return _RATING_FROM_WIRE[key]
    if key in _LEGACY_RATINGS:
        return _LEGACY_RATINGS[key]
    raise ValueError(f"Unknown rating: {value!r}")


# ---------------------------------------------------------------------------
# String helpers
# ---------------------------------------------------------------------------

def plan_to_json_string(plan: Plan, indent: int = 2) -> str:
    return json.dumps(plan_to_dict(plan), indent=indent, ensure_ascii=False)


def plan_from_json_string(text: str) -> Plan:
    return plan_from_dict(json.loads(text))


def history_to_json_string(history: list[CompletedSession], indent: int = 2) -> str:
    return json.dumps([session_to_dict(r) for r in history], indent=indent)


def history_from_json_string(text: str) -> list[CompletedSession]:
    return [session_from_dict(d) for d in json.loads(text)]
