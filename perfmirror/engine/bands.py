"""Performance band classification against a five-threshold target.

All functions are *pure*.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from perfmirror.models import PerformanceTarget


# ---------------------------------------------------------------------------
# Bands
# ---------------------------------------------------------------------------
PerformanceBand = Literal[
    "Outstanding",
    "Strong Performance",
    "Meeting Expectations",
    "Partially Meeting Expectations",
    "Underperforming",
]

# Highest first.
BANDS: tuple[PerformanceBand, ...] = (
    "Outstanding",
    "Strong Performance",
    "Meeting Expectations",
    "Partially Meeting Expectations",
    "Underperforming",
)

NO_TARGET = "No Target Set"


class BandGap(BaseModel):
    """Distance from a score to the next band up."""

    next_band: PerformanceBand
    points_needed: float


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------
def classify_band(score: float, target: PerformanceTarget) -> PerformanceBand:
    """Map *score* to a band, top-down; a score equal to a threshold takes that band."""
    if score >= target.outstanding_threshold:
        return "Outstanding"
    if score >= target.strong_threshold:
        return "Strong Performance"
    if score >= target.meeting_threshold:
        return "Meeting Expectations"
    if score >= target.partial_threshold:
        return "Partially Meeting Expectations"
    return "Underperforming"


def band_rank(band: PerformanceBand) -> int:
    """0 for Underperforming up to 4 for Outstanding."""
    return len(BANDS) - 1 - BANDS.index(band)


def next_band_gap(score: float, target: PerformanceTarget) -> BandGap | None:
    """Points still needed for the next band, ``None`` when already Outstanding."""
    band = classify_band(score, target)
    idx = BANDS.index(band)
    if idx == 0:
        return None
    # thresholds() is ordered like BANDS, so index idx-1 is the entry point of the band above.
    return BandGap(next_band=BANDS[idx - 1], points_needed=target.thresholds()[idx - 1] - score)


def target_message(score: float, target: PerformanceTarget | None) -> str:
    """One-line status against the active target."""
    if target is None:
        return "Set up performance targets to get insights"
    gap = next_band_gap(score, target)
    if gap is None:
        return f"Great work! You're exceeding expectations with {score:.0f} points."
    band = classify_band(score, target)
    if band == "Underperforming":
        return f"Focus up! You need {gap.points_needed:.0f} more points to reach minimum expectations."
    return (
        f"You're at {band}. {gap.points_needed:.0f} more points to reach {gap.next_band}."
    )
