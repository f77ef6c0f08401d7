"""Serialization module — plans and history records to/from the host's JSON."""

from workout_engine.serialization.plan_json import (
    history_from_json_string,
    history_to_json_string,
    plan_from_dict,
    plan_from_json_string,
    plan_to_dict,
    plan_to_json_string,
    session_from_dict,
    session_to_dict,
)

__all__ = [
    "history_from_json_string",
    "history_to_json_string",
    "plan_from_dict",
    "plan_from_json_string",
    "plan_to_dict",
    "plan_to_json_string",
    "session_from_dict",
    "session_to_dict",
]
