"""Post-session feedback smoothing.

Ratings are mapped to scores (LIGHT = -1, JUST_RIGHT = 0, HARD = +1) and
smoothed with an exponentially weighted moving average so one outlier
session does not swing the next plan's volume.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
import pandas as pd

from workout_engine.models.enums import (
    FEEDBACK_EWMA_SPAN,
    FEEDBACK_HARD_THRESHOLD,
    FEEDBACK_LIGHT_THRESHOLD,
    RATING_SCORES,
    Rating,
)


def rating_ewma(ratings: Sequence[Rating], span: int = FEEDBACK_EWMA_SPAN) -> float:
    """Most recent EWMA of rating scores.

    Args:
        ratings: Ratings, oldest first.
        span: EWMA span in sessions.

    Returns:
        Smoothed score in [-1, 1]; 0.0 for an empty sequence.
    """
    if not ratings:
        return 0.0
    series = pd.Series([RATING_SCORES[r] for r in ratings], dtype=np.float64)
    ewma = series.ewm(span=span, adjust=False).mean()
    return float(ewma.iloc[-1])


def classify_feedback(score: float) -> str:
    """Classify a smoothed feedback score.

    Returns:
        "too_hard", "too_light" or "on_target".
    """
    if score >= FEEDBACK_HARD_THRESHOLD:
        return "too_hard"
    if score <= FEEDBACK_LIGHT_THRESHOLD:
        return "too_light"
    return "on_target"
