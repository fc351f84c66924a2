"""Dimension aggregation: weekly log entries to IOOI point totals.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from perfmirror.models import DIMENSIONS, WeeklyLogEntry


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class DimensionScores(BaseModel):
    """Summed effective points per IOOI dimension."""

    input: int = 0
    output: int = 0
    outcome: int = 0
    impact: int = 0

    @property
    def total(self) -> int:
        return self.input + self.output + self.outcome + self.impact

    def as_dict(self) -> dict[str, int]:
        return {d: getattr(self, d) for d in DIMENSIONS}

    def shares(self) -> dict[str, float]:
        """Percentage of the total per dimension (all zero when nothing logged)."""
        total = self.total
        if total == 0:
            return {d: 0.0 for d in DIMENSIONS}
        return {d: getattr(self, d) / total * 100 for d in DIMENSIONS}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def effective_score(entry: WeeklyLogEntry) -> int:
    """Override score when set, otherwise ``count × score_per_occurrence``."""
    if entry.category is None:
        return 0
    if entry.override_score is not None:
        return entry.override_score
    return entry.count * entry.category.score_per_occurrence


def calculate_dimension_scores(entries: Iterable[WeeklyLogEntry]) -> DimensionScores:
    """Sum effective scores into the four dimension buckets.

    Entries without a category or with an unrecognised dimension are skipped.
    """
    totals: dict[str, int] = dict.fromkeys(DIMENSIONS, 0)
    for entry in entries:
        if entry.category is None:
            continue
        dim = entry.category.dimension
        if dim not in totals:
            continue
        totals[dim] += effective_score(entry)
    return DimensionScores(**totals)


def raw_total(entries: Iterable[WeeklyLogEntry]) -> int:
    """Unweighted sum of the four dimension totals, used when no weight profile is active."""
    return calculate_dimension_scores(entries).total


def filter_weeks(entries: Iterable[WeeklyLogEntry], weeks: Iterable[str]) -> list[WeeklyLogEntry]:
    wanted = set(weeks)
    return [e for e in entries if e.week in wanted]
