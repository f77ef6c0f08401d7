"""Training consistency analytics over the completed-session history.

All functions are pure; they take records in any order.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Sequence

import numpy as np
import pandas as pd

from workout_engine.models.enums import Rating
from workout_engine.models.session import CompletedSession


def sessions_per_week(history: Sequence[CompletedSession]) -> dict[str, int]:
    """Count sessions per ISO week.

    Weeks between the first and last session with no training are
    reported as 0 so gaps stay visible.

    Args:
        history: Completed sessions.

    Returns:
        Ordered mapping of ISO week label (e.g. "2026-W07") to session count.
    """
    if not history:
        return {}
    dates = pd.to_datetime(pd.Series([r.date for r in history]))
    # Monday of each ISO week
    week_start = (dates - pd.to_timedelta(dates.dt.weekday, unit="D")).dt.normalize()
    counts = week_start.value_counts().sort_index()
    full_range = pd.date_range(counts.index.min(), counts.index.max(), freq="7D")
    counts = counts.reindex(full_range, fill_value=0)

    result: dict[str, int] = {}
    for monday, count in counts.items():
        iso = monday.isocalendar()
        result[f"{iso[0]}-W{iso[1]:02d}"] = int(count)
    return result


def current_streak(history: Sequence[CompletedSession], today: date | None = None) -> int:
    """Number of consecutive calendar days with at least one session.

    The streak ends on *today*, or on yesterday when nothing has been
    recorded yet today (the day is not over).

    Args:
        history: Completed sessions.
        today: Reference date; defaults to ``date.today()``.

    Returns:
        Streak length in days; 0 when the last session is older than yesterday.
    """
    if today is None:
        today = date.today()
    ordinals = np.unique([r.date.toordinal() for r in history if r.date <= today])
    if ordinals.size == 0:
        return 0
    last = int(ordinals[-1])
    if last < (today - timedelta(days=1)).toordinal():
        return 0

    gaps = np.diff(ordinals)
    breaks = np.flatnonzero(gaps != 1)
    run_start = int(breaks[-1]) + 1 if breaks.size else 0
    return int(ordinals.size - run_start)


def rating_distribution(history: Sequence[CompletedSession]) -> dict[Rating, float]:
    """Share of sessions per rating, every rating present (0.0 when unused)."""
    if not history:
        return {rating: 0.0 for rating in Rating}
    counts = pd.Series([r.rating for r in history]).value_counts()
    total = float(counts.sum())
    return {rating: float(counts.get(rating, 0)) / total for rating in Rating}
