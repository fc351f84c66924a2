"""Record models for the IOOI performance tracker.

Categories, weekly logs, role weight profiles, performance targets, level
expectations, category templates and the user profile. Validation of
user-edited invariants (weight sum, descending thresholds, level bounds)
happens here, at the boundary, so the engine can assume well-typed input.
"""

from __future__ import annotations

import json
from typing import Literal

from pydantic import BaseModel, Field, field_validator, model_validator


# ---------------------------------------------------------------------------
# Vocabularies
# ---------------------------------------------------------------------------
Dimension = Literal["input", "output", "outcome", "impact"]
Role = Literal["IC", "Manager"]

DIMENSIONS: tuple[str, ...] = ("input", "output", "outcome", "impact")

DIMENSION_LABELS: dict[str, str] = {
    "input": "Input",
    "output": "Output",
    "outcome": "Outcome",
    "impact": "Impact",
}

LEVEL_BOUNDS: dict[str, tuple[int, int]] = {
    "IC": (1, 8),
    "Manager": (4, 8),
}

WEIGHT_SUM_TOLERANCE = 0.001


def dimension_label(dimension: str) -> str:
    return DIMENSION_LABELS.get(dimension, dimension)


class InvalidWeekError(ValueError):
    """Raised when a week identifier is not a valid ``YYYY-W##`` string."""


# ---------------------------------------------------------------------------
# Categories and logs
# ---------------------------------------------------------------------------
class WorkCategory(BaseModel):
    """A named, loggable unit of work."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    score_per_occurrence: int = Field(..., gt=0)
    dimension: Dimension
    description: str | None = None


class LoggedCategory(BaseModel):
    """Category fields joined onto a log entry.

    ``dimension`` is a plain string: rows read back from storage may carry
    values outside the IOOI set and the aggregator drops those.
    """

    id: str = ""
    name: str = ""
    score_per_occurrence: int = Field(default=0, ge=0)
    dimension: str = ""

    @classmethod
    def from_category(cls, category: WorkCategory) -> LoggedCategory:
        return cls(
            id=category.id,
            name=category.name,
            score_per_occurrence=category.score_per_occurrence,
            dimension=category.dimension,
        )


class WeeklyLogEntry(BaseModel):
    """Activity count for one category in one ISO week."""

    category_id: str = Field(..., min_length=1)
    week: str = Field(..., pattern=r"^\d{4}-W\d{2}$")
    count: int = Field(default=0, ge=0)
    override_score: int | None = None
    reference: str | None = None
    category: LoggedCategory | None = None


# ---------------------------------------------------------------------------
# Weights and targets
# ---------------------------------------------------------------------------
class RoleWeightProfile(BaseModel):
    """How a role/level values each IOOI dimension."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    role: Role | None = None
    level: int | None = Field(default=None, ge=1, le=8)
    input_weight: float | None = Field(default=None, ge=0.0, le=1.0)
    output_weight: float | None = Field(default=None, ge=0.0, le=1.0)
    outcome_weight: float | None = Field(default=None, ge=0.0, le=1.0)
    impact_weight: float | None = Field(default=None, ge=0.0, le=1.0)
    is_active: bool = False

    @model_validator(mode="after")
    def validate_weights_sum(self) -> RoleWeightProfile:
        weights = self.weights()
        if all(w is not None for w in weights.values()):
            total = sum(w for w in weights.values() if w is not None)
            if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
                raise ValueError(f"Weights must sum to 1.0, got {total:.3f}")
        return self

    def weights(self) -> dict[str, float | None]:
        """Return dimension -> weight (``None`` when unset)."""
        return {
            "input": self.input_weight,
            "output": self.output_weight,
            "outcome": self.outcome_weight,
            "impact": self.impact_weight,
        }

    def weight_for(self, dimension: str) -> float:
        return self.weights().get(dimension) or 0.0


class PerformanceTarget(BaseModel):
    """Five descending score thresholds plus an evaluation window."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=100)
    role: Role | None = None
    level: int | None = Field(default=None, ge=1, le=8)
    outstanding_threshold: int
    strong_threshold: int
    meeting_threshold: int
    partial_threshold: int
    underperforming_threshold: int
    time_period_weeks: int = Field(default=12, gt=0)
    is_active: bool = False

    @model_validator(mode="after")
    def validate_descending(self) -> PerformanceTarget:
        t = self.thresholds()
        if not all(a > b for a, b in zip(t, t[1:])):
            raise ValueError(
                "Thresholds must be strictly descending: "
                "outstanding > strong > meeting > partial > underperforming"
            )
        return self

    def thresholds(self) -> tuple[int, int, int, int, int]:
        return (
            self.outstanding_threshold,
            self.strong_threshold,
            self.meeting_threshold,
            self.partial_threshold,
            self.underperforming_threshold,
        )


# ---------------------------------------------------------------------------
# Role / level reference data
# ---------------------------------------------------------------------------
class LevelExpectation(BaseModel):
    """Ordered expectation statements for one (role, level)."""

    role: Role
    level: int = Field(..., ge=1, le=8)
    expectations: list[str] = Field(default_factory=list)

    @classmethod
    def from_json_text(cls, role: str, level: int, text: str) -> LevelExpectation:
        """Build from the single JSON-array text column used in storage."""
        try:
            items = json.loads(text)
        except (TypeError, json.JSONDecodeError) as exc:
            raise ValueError(f"Expectations for {role} L{level} are not valid JSON: {exc}") from exc
        if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
            raise ValueError(f"Expectations for {role} L{level} must be a JSON array of strings")
        return cls(role=role, level=level, expectations=items)

    def to_json_text(self) -> str:
        return json.dumps(self.expectations, ensure_ascii=False)


class CategoryTemplate(BaseModel):
    """A recommended category for a role/level."""

    role: Role
    level: int = Field(..., ge=1, le=8)
    category_name: str = Field(..., min_length=1)
    dimension: Dimension
    score_per_occurrence: int = Field(..., gt=0)
    expected_weekly_count: float = Field(default=0.0, ge=0.0)
    description: str | None = None


class UserProfile(BaseModel):
    """The (role, level) identity being evaluated."""

    id: str = "default"
    role: Role
    level: int
    is_active: bool = True

    @model_validator(mode="after")
    def validate_level(self) -> UserProfile:
        low, high = LEVEL_BOUNDS[self.role]
        if not low <= self.level <= high:
            raise ValueError(f"{self.role} levels must be between {low} and {high}")
        return self

    def next_level(self) -> int | None:
        """Level above the current one, or ``None`` at the top of the ladder."""
        _, high = LEVEL_BOUNDS[self.role]
        return self.level + 1 if self.level < high else None


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------
class TemplateIndex(BaseModel):
    """Templates grouped by (role, level), used by the defaults lookups."""

    templates: list[CategoryTemplate] = Field(default_factory=list)

    @field_validator("templates")
    @classmethod
    def validate_unique(cls, v: list[CategoryTemplate]) -> list[CategoryTemplate]:
        keys = [(t.role, t.level, t.category_name) for t in v]
        if len(keys) != len(set(keys)):
            raise ValueError("Duplicate (role, level, category_name) templates found")
        return v

    def for_level(self, role: str, level: int) -> list[CategoryTemplate]:
        return [t for t in self.templates if t.role == role and t.level == level]
