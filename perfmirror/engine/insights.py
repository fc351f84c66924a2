"""Insight generation from IOOI distributions and expected-activity comparisons.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Sequence

from perfmirror.engine.dimensions import DimensionScores
from perfmirror.engine.expected_activity import CategoryComparison, ExpectedActivitySummary
from perfmirror.models import DIMENSIONS, RoleWeightProfile, UserProfile, dimension_label


NO_ACTIVITY = "No activity logged this week"
NO_PROFILE = "Set up your role and level to get personalized insights"


# ---------------------------------------------------------------------------
# IOOI distribution insights
# ---------------------------------------------------------------------------
def generate_insights(
    scores: DimensionScores,
    weights: RoleWeightProfile | None = None,
) -> list[str]:
    """Observations on how points are spread across the four dimensions.

    Rules fire independently and are emitted in a fixed order. The last
    line always names the dominant dimension; ties go to the first one in
    input, output, outcome, impact order.
    """
    if scores.total == 0:
        return [NO_ACTIVITY]

    pct = scores.shares()
    insights: list[str] = []

    if pct["input"] > 40 and pct["outcome"] < 15:
        insights.append(
            "High input, low outcome pattern detected - consider focusing more on deliverable results"
        )
    if pct["output"] > 50 and pct["impact"] < 10:
        insights.append("Strong output focus - consider initiatives with higher strategic impact")
    if max(pct.values()) < 40:
        insights.append("Well-balanced activity distribution across all dimensions")
    if pct["impact"] > 30:
        insights.append("Strong focus on high-impact activities - excellent for senior roles")

    # max() keeps the first maximal element, which gives the DIMENSIONS-order tie-break.
    strongest = max(DIMENSIONS, key=lambda d: pct[d])
    line = f"Primary focus area: {dimension_label(strongest)} ({pct[strongest]:.0f}% of activity"
    if weights is not None:
        line += f", weighted at {weights.weight_for(strongest) * 100:.0f}%"
    insights.append(line + ")")
    return insights


# ---------------------------------------------------------------------------
# Expected-activity insights
# ---------------------------------------------------------------------------
_BAND_MESSAGES: dict[str, str] = {
    "Outstanding": "Exceptional performance! You're achieving {pct}% of expected activity levels.",
    "Strong Performance": (
        "Strong performance at {pct}% of expected levels. "
        "You're exceeding expectations in key areas."
    ),
    "Meeting Expectations": "Good work! You're meeting expectations at {pct}% of expected activity levels.",
    "Partially Meeting Expectations": (
        "Some areas need attention. You're at {pct}% of expected levels "
        "with mixed performance across categories."
    ),
    "Underperforming": (
        "Focus needed: you're at {pct}% of expected levels. Consider prioritizing key activities."
    ),
}


def generate_expected_activity_insights(
    comparisons: Sequence[CategoryComparison],
    summary: ExpectedActivitySummary,
    user_profile: UserProfile | None = None,
) -> list[str]:
    if not comparisons:
        return [NO_PROFILE]

    insights: list[str] = []
    template = _BAND_MESSAGES.get(summary.band)
    if template:
        insights.append(template.format(pct=f"{summary.percentage:.0f}"))

    for status, prefix in (
        ("over", "Excelling in"),
        ("under", "Consider increasing"),
        ("none", "No activity logged for"),
    ):
        names = [c.category_name for c in comparisons if c.status == status]
        if names:
            insights.append(f"{prefix}: {_name_list(names)}")

    if user_profile is not None:
        if user_profile.role == "IC" and user_profile.level >= 5 and _lagging(comparisons, "impact"):
            insights.append(
                "As a senior IC, consider increasing focus on high-impact activities "
                "that drive strategic outcomes."
            )
        if user_profile.role == "Manager" and _lagging(comparisons, "input"):
            insights.append(
                "As a manager, ensure you're maintaining regular input activities "
                "like 1:1s and team development."
            )
    return insights


def _name_list(names: list[str]) -> str:
    text = ", ".join(names[:3])
    return text + " and others" if len(names) > 3 else text


def _lagging(comparisons: Sequence[CategoryComparison], dimension: str) -> bool:
    return any(c.dimension == dimension and c.status in ("under", "none") for c in comparisons)
