"""Weighted scoring: dimension totals × role weights.

All functions are *pure*. Scores keep float precision; rounding for
display belongs to whoever renders them.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from pydantic import BaseModel, Field

from perfmirror.engine.dimensions import (
    DimensionScores,
    calculate_dimension_scores,
    filter_weeks,
)
from perfmirror.models import DIMENSIONS, RoleWeightProfile, WeeklyLogEntry, dimension_label
from perfmirror.weeks import format_week


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class WeeklyScore(BaseModel):
    """One point of the weekly score series."""

    week: str
    label: str
    score: float


class DimensionBreakdown(BaseModel):
    """Points, share of total and configured weight for one dimension."""

    dimension: str
    label: str
    points: int
    share_pct: float = 0.0
    weight_pct: float = Field(default=0.0, ge=0.0, le=100.0)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def calculate_weighted_score(scores: DimensionScores, weights: RoleWeightProfile | None) -> float:
    """Σ dimension total × weight. Unset weights, or no profile at all, count as zero."""
    if weights is None:
        return 0.0
    return sum(getattr(scores, d) * weights.weight_for(d) for d in DIMENSIONS)


def score_dimensions(scores: DimensionScores, weights: RoleWeightProfile | None) -> float:
    """Weighted score with a profile, plain total of all dimensions without one."""
    if weights is None:
        return float(scores.total)
    return calculate_weighted_score(scores, weights)


def score_entries(entries: Iterable[WeeklyLogEntry], weights: RoleWeightProfile | None) -> float:
    return score_dimensions(calculate_dimension_scores(entries), weights)


def weekly_scores(
    entries: Sequence[WeeklyLogEntry],
    weeks: Sequence[str],
    weights: RoleWeightProfile | None,
) -> list[WeeklyScore]:
    """Score each week in *weeks* independently, keeping the given order."""
    return [
        WeeklyScore(
            week=week,
            label=format_week(week),
            score=score_entries(filter_weeks(entries, [week]), weights),
        )
        for week in weeks
    ]


def dimension_breakdown(
    scores: DimensionScores,
    weights: RoleWeightProfile | None,
) -> list[DimensionBreakdown]:
    shares = scores.shares()
    return [
        DimensionBreakdown(
            dimension=d,
            label=dimension_label(d),
            points=getattr(scores, d),
            share_pct=round(shares[d], 2),
            weight_pct=round(weights.weight_for(d) * 100, 2) if weights else 0.0,
        )
        for d in DIMENSIONS
    ]
