"""Expectation coverage: which level expectations the logged work evidences.

Free-text expectations are matched to category templates with a coarse
keyword heuristic, then templates are matched to logged categories by name.
The heuristic sits behind ``ExpectationMatcher`` so a better one can be
dropped in without touching the analysis.

All functions are *pure*.
"""

from __future__ import annotations

from collections.abc import Sequence
import re
from typing import Literal, Protocol

from pydantic import BaseModel, Field

from perfmirror.models import CategoryTemplate, WeeklyLogEntry


CoverageStatus = Literal["consistent", "evidenced", "not_evidenced"]
GrowthStatus = Literal["emerging", "missing"]

STOP_WORDS: frozenset[str] = frozenset({
    "should", "must", "can", "will", "the", "a", "an", "and", "or", "but",
    "in", "on", "at", "to", "for", "of", "with", "by",
})
MAX_KEYWORDS = 5
MIN_KEYWORD_LENGTH = 3
CONSISTENT_WEEKS = 3

_NON_WORD = re.compile(r"\W+")


# ---------------------------------------------------------------------------
# Result models
# ---------------------------------------------------------------------------
class ExpectationCoverage(BaseModel):
    """Evidence for one current-level expectation."""

    expectation: str
    status: CoverageStatus
    weeks_covered: int = Field(default=0, ge=0)
    matched_categories: list[str] = Field(default_factory=list)


class GrowthSuggestion(BaseModel):
    """Readiness signal and advice for one next-level expectation."""

    expectation: str
    status: GrowthStatus
    suggestion: str
    matched_categories: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Matching
# ---------------------------------------------------------------------------
def extract_keywords(text: str) -> list[str]:
    """Up to five lower-cased content words of *text*, in order of appearance."""
    keywords: list[str] = []
    for token in text.lower().split():
        word = _NON_WORD.sub("", token)
        if len(word) < MIN_KEYWORD_LENGTH or word in STOP_WORDS:
            continue
        keywords.append(word)
        if len(keywords) == MAX_KEYWORDS:
            break
    return keywords


class ExpectationMatcher(Protocol):
    """Decides whether a template is relevant to an expectation statement."""

    def matches(self, text: str, template: CategoryTemplate) -> bool: ...


class KeywordMatcher:
    """Substring match between expectation keywords and a template.

    A keyword hits when it occurs in the template's name or description,
    or when the first word of the template name occurs inside the keyword
    (``mentor`` vs ``mentoring``).
    """

    def matches(self, text: str, template: CategoryTemplate) -> bool:
        name = template.category_name.lower()
        description = (template.description or "").lower()
        name_words = name.split()
        first_word = name_words[0] if name_words else ""
        return any(
            kw in name or kw in description or (first_word != "" and first_word in kw)
            for kw in extract_keywords(text)
        )


def matching_templates(
    text: str,
    templates: Sequence[CategoryTemplate],
    matcher: ExpectationMatcher,
) -> list[CategoryTemplate]:
    return [t for t in templates if matcher.matches(text, t)]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def analyze_current_level(
    expectations: Sequence[str],
    templates: Sequence[CategoryTemplate],
    entries: Sequence[WeeklyLogEntry],
    matcher: ExpectationMatcher | None = None,
) -> list[ExpectationCoverage]:
    """Classify each expectation as consistent, evidenced or not evidenced."""
    matcher = matcher or KeywordMatcher()
    results: list[ExpectationCoverage] = []
    for expectation in expectations:
        matched = matching_templates(expectation, templates, matcher)
        weeks_covered = max((len(_active_weeks(entries, t)) for t in matched), default=0)
        results.append(ExpectationCoverage(
            expectation=expectation,
            status=_coverage_status(weeks_covered),
            weeks_covered=weeks_covered,
            matched_categories=[t.category_name for t in matched],
        ))
    return results


def analyze_next_level(
    expectations: Sequence[str],
    templates: Sequence[CategoryTemplate],
    entries: Sequence[WeeklyLogEntry],
    matcher: ExpectationMatcher | None = None,
) -> list[GrowthSuggestion]:
    """Flag next-level expectations as emerging or missing, with one suggestion each."""
    matcher = matcher or KeywordMatcher()
    results: list[GrowthSuggestion] = []
    for expectation in expectations:
        matched = matching_templates(expectation, templates, matcher)
        active = any(_active_weeks(entries, t) for t in matched)
        results.append(GrowthSuggestion(
            expectation=expectation,
            status="emerging" if active else "missing",
            suggestion=suggest_growth(expectation, matched),
            matched_categories=[t.category_name for t in matched],
        ))
    return results


# ---------------------------------------------------------------------------
# Suggestions
# ---------------------------------------------------------------------------
_CATEGORY_ADVICE: tuple[tuple[str, str], ...] = (
    ("mentor", "Set up a recurring mentoring slot and log each session under {category}."),
    ("review", "Take on more reviews and leave substantive feedback; track them as {category}."),
    ("design", "Volunteer to write the design doc for your next piece of work ({category})."),
    ("strategy", "Draft a short strategy proposal for your area and review it with your lead ({category})."),
    ("coordination", "Own the coordination for one cross-team dependency this month ({category})."),
    ("documentation", "Document a system or process your team relies on ({category})."),
)

_DIMENSION_ADVICE: dict[str, str] = {
    "input": "Invest time in {category} regularly; consistent effort here is what the next level builds on.",
    "output": "Ship concrete {category} deliverables and log each one as it lands.",
    "outcome": "Tie your {category} work to measurable results and call them out when they land.",
    "impact": "Look for {category} opportunities whose effect reaches beyond your own team.",
}

_TEXT_ADVICE: tuple[tuple[str, str], ...] = (
    ("mentor", "Find someone to mentor, even informally, and meet with them regularly."),
    ("lead", "Ask to lead a small initiative end to end, from kickoff to delivery."),
    ("design", "Pair with a senior engineer on an upcoming design and contribute a section."),
    ("strategy", "Join planning discussions and propose one strategic improvement for your team."),
)

GENERIC_ADVICE = "Discuss this expectation with your manager and agree on a first concrete step."


def suggest_growth(expectation: str, matched: Sequence[CategoryTemplate]) -> str:
    """Exactly one suggestion, most specific source first."""
    for tpl in matched:
        name = tpl.category_name.lower()
        for key, advice in _CATEGORY_ADVICE:
            if key in name:
                return advice.format(category=tpl.category_name)

    if matched:
        first = matched[0]
        advice = _DIMENSION_ADVICE.get(first.dimension)
        if advice:
            return advice.format(category=first.category_name)

    text = expectation.lower()
    for key, advice in _TEXT_ADVICE:
        if key in text:
            return advice

    return GENERIC_ADVICE


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------
def _names_overlap(a: str, b: str) -> bool:
    a, b = a.lower(), b.lower()
    if not a or not b:
        return False
    return a in b or b in a


def _active_weeks(entries: Sequence[WeeklyLogEntry], template: CategoryTemplate) -> set[str]:
    return {
        e.week
        for e in entries
        if e.category is not None
        and e.count > 0
        and _names_overlap(e.category.name, template.category_name)
    }


def _coverage_status(weeks_covered: int) -> CoverageStatus:
    if weeks_covered >= CONSISTENT_WEEKS:
        return "consistent"
    if weeks_covered > 0:
        return "evidenced"
    return "not_evidenced"
