"""Logged activity vs. the expected weekly counts of category templates.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

from pydantic import BaseModel, Field

from perfmirror.engine.dimensions import effective_score
from perfmirror.models import CategoryTemplate, WeeklyLogEntry


ActivityStatus = Literal["over", "met", "under", "none"]

ExpectedActivityBand = Literal[
    "Outstanding",
    "Strong Performance",
    "Meeting Expectations",
    "Partially Meeting Expectations",
    "Underperforming",
    "No Data",
]

# Ratio of actual to expected weekly count.
OVER_RATIO = 1.15
MET_RATIO = 0.85

# Percentage of expected points, highest first.
_PERCENT_BANDS: tuple[tuple[float, ExpectedActivityBand], ...] = (
    (150.0, "Outstanding"),
    (115.0, "Strong Performance"),
    (85.0, "Meeting Expectations"),
    (70.0, "Partially Meeting Expectations"),
)


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class CategoryComparison(BaseModel):
    """Actual vs expected activity for one template category."""

    category_name: str
    dimension: str
    actual: float = Field(ge=0.0)
    expected: float = Field(ge=0.0)
    actual_score: float
    expected_score: float
    status: ActivityStatus


class ExpectedActivitySummary(BaseModel):
    """Roll-up of all category comparisons."""

    band: ExpectedActivityBand
    percentage: float = 0.0
    total_actual: float = 0.0
    total_expected: float = 0.0
    over_count: int = 0
    met_count: int = 0
    under_count: int = 0
    no_activity_count: int = 0


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def compare_to_templates(
    entries: Sequence[WeeklyLogEntry],
    templates: Sequence[CategoryTemplate],
    weeks: int = 1,
) -> list[CategoryComparison]:
    """Compare per-week averages over *weeks* with each template's expectation.

    Entries are matched to a template by exact category name.
    """
    span = max(weeks, 1)
    comparisons: list[CategoryComparison] = []
    for tpl in templates:
        matched = [e for e in entries if e.category is not None and e.category.name == tpl.category_name]
        actual = sum(e.count for e in matched) / span
        actual_score = sum(effective_score(e) for e in matched) / span
        comparisons.append(CategoryComparison(
            category_name=tpl.category_name,
            dimension=tpl.dimension,
            actual=actual,
            expected=tpl.expected_weekly_count,
            actual_score=actual_score,
            expected_score=tpl.expected_weekly_count * tpl.score_per_occurrence,
            status=_status(actual, tpl.expected_weekly_count),
        ))
    return comparisons


def summarize_comparisons(comparisons: Sequence[CategoryComparison]) -> ExpectedActivitySummary:
    if not comparisons:
        return ExpectedActivitySummary(band="No Data")

    total_actual = sum(c.actual_score for c in comparisons)
    total_expected = sum(c.expected_score for c in comparisons)
    percentage = total_actual * 100 / total_expected if total_expected > 0 else 0.0

    return ExpectedActivitySummary(
        band=_percent_band(percentage) if total_actual != 0 else "No Data",
        percentage=percentage,
        total_actual=total_actual,
        total_expected=total_expected,
        over_count=sum(1 for c in comparisons if c.status == "over"),
        met_count=sum(1 for c in comparisons if c.status == "met"),
        under_count=sum(1 for c in comparisons if c.status == "under"),
        no_activity_count=sum(1 for c in comparisons if c.status == "none"),
    )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _status(actual: float, expected: float) -> ActivityStatus:
    if actual == 0:
        return "none"
    if actual >= expected * OVER_RATIO:
        return "over"
    if actual >= expected * MET_RATIO:
        return "met"
    return "under"


def _percent_band(percentage: float) -> ExpectedActivityBand:
    for floor, band in _PERCENT_BANDS:
        if percentage >= floor:
            return band
    return "Underperforming"
