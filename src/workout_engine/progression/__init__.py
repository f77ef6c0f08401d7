"""Progression — round-robin day cursor and completed-session history."""

from workout_engine.progression.store import HistoryStore, InMemoryHistoryStore
from workout_engine.progression.tracker import ProgressionTracker, next_day_index

__all__ = [
    "HistoryStore",
    "InMemoryHistoryStore",
    "ProgressionTracker",
    "next_day_index",
]
