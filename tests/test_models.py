"""Tests for perfmirror/models.py."""

import json

from perfmirror.models import (
    CategoryTemplate,
    LevelExpectation,
    LoggedCategory,
    PerformanceTarget,
    RoleWeightProfile,
    TemplateIndex,
    UserProfile,
    WeeklyLogEntry,
    WorkCategory,
    dimension_label,
)
from pydantic import ValidationError
import pytest


def _target(**overrides) -> PerformanceTarget:
    values = {
        "id": "t1",
        "name": "Target",
        "outstanding_threshold": 300,
        "strong_threshold": 230,
        "meeting_threshold": 170,
        "partial_threshold": 140,
        "underperforming_threshold": 120,
    }
    values.update(overrides)
    return PerformanceTarget(**values)


class TestWorkCategory:
    def test_valid_category(self):
        cat = WorkCategory(id="c1", name="Code Reviews", score_per_occurrence=5, dimension="input")
        assert cat.dimension == "input"
        assert cat.description is None

    def test_unknown_dimension_rejected(self):
        with pytest.raises(ValidationError):
            WorkCategory(id="c1", name="X", score_per_occurrence=5, dimension="strategy")

    def test_score_must_be_positive(self):
        with pytest.raises(ValidationError):
            WorkCategory(id="c1", name="X", score_per_occurrence=0, dimension="input")

    def test_logged_category_from_category(self):
        cat = WorkCategory(id="c1", name="Bug Fixes", score_per_occurrence=8, dimension="output")
        joined = LoggedCategory.from_category(cat)
        assert joined.name == "Bug Fixes"
        assert joined.score_per_occurrence == 8
        assert joined.dimension == "output"


class TestWeeklyLogEntry:
    def test_defaults(self):
        entry = WeeklyLogEntry(category_id="c1", week="2024-W05")
        assert entry.count == 0
        assert entry.override_score is None
        assert entry.category is None

    def test_negative_count_rejected(self):
        with pytest.raises(ValidationError):
            WeeklyLogEntry(category_id="c1", week="2024-W05", count=-1)

    def test_malformed_week_rejected(self):
        with pytest.raises(ValidationError):
            WeeklyLogEntry(category_id="c1", week="2024-5")

    def test_logged_category_accepts_any_dimension_string(self):
        entry = WeeklyLogEntry(
            category_id="c1",
            week="2024-W05",
            category=LoggedCategory(name="Odd", score_per_occurrence=1, dimension="legacy"),
        )
        assert entry.category is not None
        assert entry.category.dimension == "legacy"


class TestRoleWeightProfile:
    def test_valid_profile(self):
        p = RoleWeightProfile(
            id="e", name="Engineer",
            input_weight=0.3, output_weight=0.4, outcome_weight=0.2, impact_weight=0.1,
        )
        assert p.weight_for("output") == 0.4

    def test_weights_must_sum_to_one(self):
        with pytest.raises(ValidationError, match=r"Weights must sum to 1\.0"):
            RoleWeightProfile(
                id="e", name="Bad",
                input_weight=0.3, output_weight=0.3, outcome_weight=0.2, impact_weight=0.1,
            )

    def test_sum_within_tolerance_accepted(self):
        p = RoleWeightProfile(
            id="e", name="Close",
            input_weight=0.3333, output_weight=0.3333, outcome_weight=0.3334, impact_weight=0.0,
        )
        assert p.is_active is False

    def test_partial_profile_skips_sum_check(self):
        p = RoleWeightProfile(id="p", name="Partial", input_weight=0.5)
        assert p.weight_for("input") == 0.5
        assert p.weight_for("impact") == 0.0

    def test_weight_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            RoleWeightProfile(id="p", name="Big", input_weight=1.5)


class TestPerformanceTarget:
    def test_valid_target(self):
        t = _target()
        assert t.thresholds() == (300, 230, 170, 140, 120)
        assert t.time_period_weeks == 12

    def test_non_descending_rejected(self):
        with pytest.raises(ValidationError, match="strictly descending"):
            _target(strong_threshold=310)

    def test_equal_thresholds_rejected(self):
        with pytest.raises(ValidationError):
            _target(partial_threshold=170)

    def test_period_must_be_positive(self):
        with pytest.raises(ValidationError):
            _target(time_period_weeks=0)


class TestUserProfile:
    @pytest.mark.parametrize("role,level", [("IC", 1), ("IC", 8), ("Manager", 4), ("Manager", 8)])
    def test_valid_levels(self, role, level):
        assert UserProfile(role=role, level=level).level == level

    @pytest.mark.parametrize("role,level", [("IC", 0), ("IC", 9), ("Manager", 3), ("Manager", 9)])
    def test_invalid_levels(self, role, level):
        with pytest.raises(ValidationError, match="levels must be between"):
            UserProfile(role=role, level=level)

    def test_unknown_role_rejected(self):
        with pytest.raises(ValidationError):
            UserProfile(role="Director", level=5)

    def test_next_level(self):
        assert UserProfile(role="IC", level=3).next_level() == 4
        assert UserProfile(role="IC", level=8).next_level() is None
        assert UserProfile(role="Manager", level=7).next_level() == 8


class TestLevelExpectation:
    def test_from_json_text(self):
        text = json.dumps(["Should ship", "Should review"])
        exp = LevelExpectation.from_json_text("IC", 3, text)
        assert exp.expectations == ["Should ship", "Should review"]

    def test_to_json_text_keeps_order(self):
        exp = LevelExpectation(role="IC", level=3, expectations=["b", "a"])
        assert json.loads(exp.to_json_text()) == ["b", "a"]

    def test_invalid_json_raises(self):
        with pytest.raises(ValueError, match="not valid JSON"):
            LevelExpectation.from_json_text("IC", 3, "[not json")

    def test_non_list_json_raises(self):
        with pytest.raises(ValueError, match="JSON array of strings"):
            LevelExpectation.from_json_text("IC", 3, '{"a": 1}')


class TestTemplateIndex:
    def test_duplicate_templates_rejected(self):
        tpl = CategoryTemplate(
            role="IC", level=3, category_name="Bug Fixes", dimension="output", score_per_occurrence=8,
        )
        with pytest.raises(ValidationError, match="Duplicate"):
            TemplateIndex(templates=[tpl, tpl])

    def test_for_level_filters(self):
        a = CategoryTemplate(role="IC", level=3, category_name="A", dimension="input", score_per_occurrence=1)
        b = CategoryTemplate(role="IC", level=4, category_name="B", dimension="input", score_per_occurrence=1)
        index = TemplateIndex(templates=[a, b])
        assert [t.category_name for t in index.for_level("IC", 4)] == ["B"]


def test_dimension_label():
    assert dimension_label("outcome") == "Outcome"
    assert dimension_label("unknown") == "unknown"
