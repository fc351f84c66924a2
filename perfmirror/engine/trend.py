"""Score trend over the weekly series.

Fits ``score = slope · week_index + intercept`` by least squares.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

import numpy as np
from pydantic import BaseModel

from perfmirror.engine.scoring import WeeklyScore


TrendDirection = Literal["up", "down", "flat"]

# Points per week below which the series counts as flat.
FLAT_SLOPE = 0.5


class ScoreTrend(BaseModel):
    """Direction and rate of change of the weekly scores."""

    direction: TrendDirection
    slope: float = 0.0
    mean: float = 0.0
    latest: float = 0.0
    weeks: int = 0


def score_trend(series: Sequence[WeeklyScore]) -> ScoreTrend:
    """Summarise *series* (oldest first). Fewer than two points is flat."""
    if not series:
        return ScoreTrend(direction="flat")

    y = np.array([p.score for p in series], dtype=float)
    mean = float(np.mean(y))
    latest = float(y[-1])
    if len(y) < 2:
        return ScoreTrend(direction="flat", mean=mean, latest=latest, weeks=1)

    x = np.arange(len(y), dtype=float)
    slope = float(np.polyfit(x, y, 1)[0])
    if abs(slope) < FLAT_SLOPE:
        direction: TrendDirection = "flat"
    else:
        direction = "up" if slope > 0 else "down"

    return ScoreTrend(
        direction=direction,
        slope=round(slope, 4),
        mean=mean,
        latest=latest,
        weeks=len(y),
    )
