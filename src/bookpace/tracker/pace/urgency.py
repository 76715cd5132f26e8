"""Urgency classification.

The five levels and their precedence are fixed; the pace bands that
separate them are configuration (see ``config.Config.pace_thresholds``).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from ..formats.converter import is_audio


class UrgencyLevel(str, Enum):
    """How hard the remaining pace will be to sustain."""

    GOOD = "good"
    APPROACHING = "approaching"
    URGENT = "urgent"
    OVERDUE = "overdue"
    IMPOSSIBLE = "impossible"


# Most severe first
URGENCY_PRECEDENCE = (
    UrgencyLevel.OVERDUE,
    UrgencyLevel.IMPOSSIBLE,
    UrgencyLevel.URGENT,
    UrgencyLevel.APPROACHING,
    UrgencyLevel.GOOD,
)

URGENCY_LABELS = {
    UrgencyLevel.GOOD: "On track",
    UrgencyLevel.APPROACHING: "Tight",
    UrgencyLevel.URGENT: "Tight",
    UrgencyLevel.OVERDUE: "Overdue",
    UrgencyLevel.IMPOSSIBLE: "Impossible",
}


@dataclass(frozen=True)
class UrgencyThresholds:
    """Pace bands for one unit (pages/day or minutes/day)."""

    easy_pace: float  # at or below: good
    urgent_pace: float  # above: urgent
    max_pace: float  # above: impossible


@dataclass(frozen=True)
class PaceThresholds:
    """Pace bands for both format families."""

    pages: UrgencyThresholds
    audio: UrgencyThresholds

    def for_format(self, format: Optional[str]) -> UrgencyThresholds:
        return self.audio if is_audio(format) else self.pages


def classify_urgency(
    remaining: float,
    days_left: int,
    units_per_day: Optional[float],
    thresholds: UrgencyThresholds,
) -> UrgencyLevel:
    """Classify a deadline from its remaining work and required pace.

    Args:
        remaining: Units left to read
        days_left: Whole days until the deadline
        units_per_day: Required pace (None when overdue)
        thresholds: Bands for the deadline's unit

    Returns:
        The most severe level that applies
    """
    if days_left <= 0 and remaining > 0:
        return UrgencyLevel.OVERDUE
    if remaining <= 0 or units_per_day is None:
        return UrgencyLevel.GOOD
    if units_per_day > thresholds.max_pace:
        return UrgencyLevel.IMPOSSIBLE
    if units_per_day > thresholds.urgent_pace:
        return UrgencyLevel.URGENT
    if units_per_day > thresholds.easy_pace:
        return UrgencyLevel.APPROACHING
    return UrgencyLevel.GOOD


def urgency_label(level: Optional[UrgencyLevel]) -> str:
    """User-facing label; both middle bands read as "Tight"."""
    if level is None:
        return "N/A"
    return URGENCY_LABELS[level]


def most_urgent(levels: Iterable[Optional[UrgencyLevel]]) -> Optional[UrgencyLevel]:
    """Most severe level in a collection, None if none is known."""
    present = {level for level in levels if level is not None}
    for level in URGENCY_PRECEDENCE:
        if level in present:
            return level
    return None
