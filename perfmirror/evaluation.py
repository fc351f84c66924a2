"""One evaluation pass: already-fetched records in, a dashboard report out.

``evaluate`` is synchronous and holds no state; fetching the inputs and
serialising the report are left to the calling layer.
"""

from __future__ import annotations

from datetime import date
import logging

from pydantic import BaseModel, Field

from perfmirror.defaults import get_category_templates, get_level_expectations
from perfmirror.engine.bands import NO_TARGET, classify_band, target_message
from perfmirror.engine.coverage import (
    ExpectationCoverage,
    ExpectationMatcher,
    GrowthSuggestion,
    analyze_current_level,
    analyze_next_level,
)
from perfmirror.engine.dimensions import calculate_dimension_scores, filter_weeks
from perfmirror.engine.expected_activity import (
    CategoryComparison,
    ExpectedActivitySummary,
    compare_to_templates,
    summarize_comparisons,
)
from perfmirror.engine.insights import generate_expected_activity_insights, generate_insights
from perfmirror.engine.scoring import (
    DimensionBreakdown,
    WeeklyScore,
    dimension_breakdown,
    score_dimensions,
    weekly_scores,
)
from perfmirror.engine.trend import ScoreTrend, score_trend
from perfmirror.models import (
    CategoryTemplate,
    LevelExpectation,
    PerformanceTarget,
    RoleWeightProfile,
    UserProfile,
    WeeklyLogEntry,
)
from perfmirror.settings import get_trend_weeks
from perfmirror.weeks import recent_weeks


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Input / output models
# ---------------------------------------------------------------------------
class EvaluationInput(BaseModel):
    """Everything the evaluation needs, as read from storage."""

    logs: list[WeeklyLogEntry] = Field(default_factory=list)
    weights: RoleWeightProfile | None = None
    target: PerformanceTarget | None = None
    user_profile: UserProfile | None = None
    current_expectations: list[str] = Field(default_factory=list)
    next_expectations: list[str] = Field(default_factory=list)
    current_templates: list[CategoryTemplate] = Field(default_factory=list)
    next_templates: list[CategoryTemplate] = Field(default_factory=list)


class EvaluationReport(BaseModel):
    """Scores, band, insights and coverage for one evaluation period."""

    weekly_scores: list[WeeklyScore]
    trend: ScoreTrend
    period_weeks: list[str]
    period_score: float
    period_average: float
    weighted: bool
    breakdown: list[DimensionBreakdown]
    band: str
    target_message: str
    insights: list[str]
    expected_activity: list[CategoryComparison]
    expected_summary: ExpectedActivitySummary
    expected_insights: list[str]
    current_coverage: list[ExpectationCoverage]
    next_level_suggestions: list[GrowthSuggestion]

    @property
    def has_target(self) -> bool:
        return self.band != NO_TARGET


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def evaluation_period(target: PerformanceTarget | None, today: date | None = None) -> list[str]:
    """Weeks under evaluation: the target's window, or just the current week."""
    return recent_weeks(target.time_period_weeks if target else 1, today)


def load_expectations(role: str, level: int, raw_text: str | None) -> list[str]:
    """Parse stored expectation text, yielding ``[]`` when it is absent or unreadable."""
    if not raw_text:
        return []
    try:
        return LevelExpectation.from_json_text(role, level, raw_text).expectations
    except ValueError as e:
        logger.warning("Ignoring expectations for %s L%d: %s", role, level, e)
        return []


def build_evaluation_input(
    logs: list[WeeklyLogEntry],
    weights: RoleWeightProfile | None = None,
    target: PerformanceTarget | None = None,
    user_profile: UserProfile | None = None,
) -> EvaluationInput:
    """Assemble an input using the seeded expectations and templates for *user_profile*."""
    data = EvaluationInput(logs=logs, weights=weights, target=target, user_profile=user_profile)
    if user_profile is None:
        return data

    role, level = user_profile.role, user_profile.level
    updates: dict[str, object] = {
        "current_expectations": get_level_expectations(role, level),
        "current_templates": get_category_templates(role, level),
    }
    next_level = user_profile.next_level()
    if next_level is not None:
        updates["next_expectations"] = get_level_expectations(role, next_level)
        updates["next_templates"] = get_category_templates(role, next_level)
    return data.model_copy(update=updates)


def evaluate(
    data: EvaluationInput,
    today: date | None = None,
    trend_weeks: int | None = None,
    matcher: ExpectationMatcher | None = None,
) -> EvaluationReport:
    """Run every scoring step over *data* for the period ending at *today*."""
    trend_window = recent_weeks(trend_weeks or get_trend_weeks(), today)
    series = weekly_scores(data.logs, trend_window, data.weights)

    period = evaluation_period(data.target, today)
    period_logs = filter_weeks(data.logs, period)
    dims = calculate_dimension_scores(period_logs)
    period_score = score_dimensions(dims, data.weights)
    period_average = period_score / len(period)

    if data.target is None:
        band = NO_TARGET
    else:
        band = classify_band(period_average, data.target)
    logger.debug(
        "Evaluated %d weeks: score=%.2f average=%.2f band=%s weighted=%s",
        len(period), period_score, period_average, band, data.weights is not None,
    )

    comparisons = compare_to_templates(period_logs, data.current_templates, weeks=len(period))
    summary = summarize_comparisons(comparisons)

    return EvaluationReport(
        weekly_scores=series,
        trend=score_trend(series),
        period_weeks=period,
        period_score=period_score,
        period_average=period_average,
        weighted=data.weights is not None,
        breakdown=dimension_breakdown(dims, data.weights),
        band=band,
        target_message=target_message(period_average, data.target),
        insights=generate_insights(dims, data.weights),
        expected_activity=comparisons,
        expected_summary=summary,
        expected_insights=generate_expected_activity_insights(comparisons, summary, data.user_profile),
        current_coverage=analyze_current_level(
            data.current_expectations, data.current_templates, period_logs, matcher,
        ),
        next_level_suggestions=_next_level(data, period_logs, matcher),
    )


def _next_level(
    data: EvaluationInput,
    period_logs: list[WeeklyLogEntry],
    matcher: ExpectationMatcher | None,
) -> list[GrowthSuggestion]:
    if data.user_profile is None or data.user_profile.next_level() is None:
        return []
    return analyze_next_level(data.next_expectations, data.next_templates, period_logs, matcher)
