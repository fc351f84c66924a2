"""Tests for perfmirror/defaults.py."""

from perfmirror.defaults import (
    DEFAULT_CATEGORY_TEMPLATES,
    DEFAULT_LEVEL_EXPECTATIONS,
    create_default_target,
    create_default_weight_profiles,
    get_category_templates,
    get_level_expectations,
)
from perfmirror.models import LEVEL_BOUNDS


class TestDefaultWeightProfiles:
    def test_four_profiles(self):
        names = [p.name for p in create_default_weight_profiles()]
        assert names == ["Engineer", "Manager", "Senior Manager", "Director"]

    def test_exactly_one_active(self):
        active = [p for p in create_default_weight_profiles() if p.is_active]
        assert len(active) == 1
        assert active[0].name == "Manager"

    def test_weights_sum_to_one(self):
        for p in create_default_weight_profiles():
            total = sum(w or 0.0 for w in p.weights().values())
            assert abs(total - 1.0) < 0.001, p.name


class TestDefaultTarget:
    def test_thresholds_descending(self):
        t = create_default_target()
        values = t.thresholds()
        assert list(values) == sorted(values, reverse=True)
        assert t.is_active


class TestLevelExpectations:
    def test_every_level_on_the_ladder_covered(self):
        for role, (low, high) in LEVEL_BOUNDS.items():
            for level in range(low, high + 1):
                assert (role, level) in DEFAULT_LEVEL_EXPECTATIONS

    def test_lookup_returns_copy(self):
        items = get_level_expectations("IC", 3)
        items.append("extra")
        assert "extra" not in get_level_expectations("IC", 3)

    def test_unknown_level_empty(self):
        assert get_level_expectations("Manager", 2) == []


class TestCategoryTemplates:
    def test_ic3_templates(self):
        names = {t.category_name for t in get_category_templates("IC", 3)}
        assert names == {
            "Code Reviews",
            "Feature Development",
            "Bug Fixes",
            "Team Meetings",
            "User Story Completion",
        }

    def test_templates_have_expectations(self):
        for t in DEFAULT_CATEGORY_TEMPLATES.templates:
            assert get_level_expectations(t.role, t.level), (t.role, t.level)

    def test_missing_level_empty(self):
        assert get_category_templates("IC", 8) == []
