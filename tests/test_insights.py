"""Tests for perfmirror/engine/insights.py."""

from perfmirror.engine.dimensions import DimensionScores
from perfmirror.engine.expected_activity import CategoryComparison, ExpectedActivitySummary
from perfmirror.engine.insights import (
    NO_ACTIVITY,
    NO_PROFILE,
    generate_expected_activity_insights,
    generate_insights,
)
from perfmirror.models import RoleWeightProfile, UserProfile


HIGH_INPUT = "High input, low outcome pattern detected - consider focusing more on deliverable results"
OUTPUT_FOCUS = "Strong output focus - consider initiatives with higher strategic impact"
BALANCED = "Well-balanced activity distribution across all dimensions"
HIGH_IMPACT = "Strong focus on high-impact activities - excellent for senior roles"


def _cmp(name: str, status: str, dimension: str = "input") -> CategoryComparison:
    return CategoryComparison(
        category_name=name, dimension=dimension, actual=1, expected=1,
        actual_score=10, expected_score=10, status=status,
    )


class TestGenerateInsights:
    def test_no_activity(self):
        assert generate_insights(DimensionScores()) == [NO_ACTIVITY]

    def test_high_input_low_outcome(self):
        scores = DimensionScores(input=50, output=40, outcome=5, impact=5)
        assert generate_insights(scores) == [HIGH_INPUT, "Primary focus area: Input (50% of activity)"]

    def test_output_focus(self):
        scores = DimensionScores(input=20, output=60, outcome=15, impact=5)
        assert generate_insights(scores) == [OUTPUT_FOCUS, "Primary focus area: Output (60% of activity)"]

    def test_balanced(self):
        insights = generate_insights(DimensionScores(input=25, output=25, outcome=25, impact=25))
        assert insights == [BALANCED, "Primary focus area: Input (25% of activity)"]

    def test_balanced_and_high_impact_in_order(self):
        insights = generate_insights(DimensionScores(input=15, output=15, outcome=35, impact=35))
        assert insights == [BALANCED, HIGH_IMPACT, "Primary focus area: Outcome (35% of activity)"]

    def test_multiple_rules_keep_fixed_order(self):
        insights = generate_insights(DimensionScores(input=45, output=0, outcome=10, impact=45))
        assert insights[:2] == [HIGH_INPUT, HIGH_IMPACT]
        assert insights[-1].startswith("Primary focus area: Input")

    def test_primary_line_always_last(self):
        insights = generate_insights(DimensionScores(impact=1))
        assert insights[-1] == "Primary focus area: Impact (100% of activity)"

    def test_weight_reported_with_profile(self):
        weights = RoleWeightProfile(
            id="engineer", name="Engineer",
            input_weight=0.3, output_weight=0.4, outcome_weight=0.2, impact_weight=0.1,
        )
        insights = generate_insights(DimensionScores(input=15, output=15, outcome=35, impact=35), weights)
        assert insights[-1] == "Primary focus area: Outcome (35% of activity, weighted at 20%)"


class TestExpectedActivityInsights:
    def test_no_comparisons(self):
        summary = ExpectedActivitySummary(band="No Data")
        assert generate_expected_activity_insights([], summary) == [NO_PROFILE]

    def test_band_and_category_lists(self):
        comparisons = [
            _cmp("Code Reviews", "over"),
            _cmp("Bug Fixes", "under", "output"),
            _cmp("Team Meetings", "none"),
            _cmp("User Story Completion", "none", "outcome"),
        ]
        summary = ExpectedActivitySummary(band="Meeting Expectations", percentage=92.4)
        insights = generate_expected_activity_insights(comparisons, summary)
        assert insights == [
            "Good work! You're meeting expectations at 92% of expected activity levels.",
            "Excelling in: Code Reviews",
            "Consider increasing: Bug Fixes",
            "No activity logged for: Team Meetings, User Story Completion",
        ]

    def test_long_lists_truncated(self):
        comparisons = [_cmp(f"Cat {i}", "under") for i in range(5)]
        summary = ExpectedActivitySummary(band="Underperforming", percentage=20)
        insights = generate_expected_activity_insights(comparisons, summary)
        assert "Consider increasing: Cat 0, Cat 1, Cat 2 and others" in insights

    def test_no_data_band_has_no_band_message(self):
        summary = ExpectedActivitySummary(band="No Data")
        insights = generate_expected_activity_insights([_cmp("Code Reviews", "none")], summary)
        assert insights == ["No activity logged for: Code Reviews"]

    def test_senior_ic_impact_nudge(self):
        comparisons = [_cmp("Technical Innovation", "none", "impact")]
        summary = ExpectedActivitySummary(band="No Data")
        insights = generate_expected_activity_insights(comparisons, summary, UserProfile(role="IC", level=5))
        assert any(i.startswith("As a senior IC") for i in insights)

        junior = generate_expected_activity_insights(comparisons, summary, UserProfile(role="IC", level=4))
        assert not any(i.startswith("As a senior IC") for i in junior)

    def test_manager_input_nudge(self):
        comparisons = [_cmp("One-on-Ones", "under", "input")]
        summary = ExpectedActivitySummary(band="Underperforming", percentage=40)
        insights = generate_expected_activity_insights(
            comparisons, summary, UserProfile(role="Manager", level=4)
        )
        assert insights[-1].startswith("As a manager")
