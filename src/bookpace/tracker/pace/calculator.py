"""Per-deadline pace calculation.

Turns a deadline and a progress value into remaining work, days left,
required daily pace and an urgency level. Missing data produces an
``UnknownCalculation`` instead of an exception so a screen can always
render something ("N/A").
"""

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Optional, Union

from ..clock import days_until, resolve_zone
from ..config import get_config
from ..deadlines.schemas import Deadline
from ..deadlines.status import current_progress, is_archived
from ..formats.converter import canonical_quantity, unit_for_format
from .urgency import PaceThresholds, UrgencyLevel, classify_urgency, urgency_label

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KnownCalculation:
    """Pace figures for a deadline with a date and a total."""

    current_progress: float
    total_quantity: float
    remaining: float
    days_left: int
    units_per_day: Optional[float]  # None when overdue with work left
    urgency_level: UrgencyLevel
    progress_percentage: int
    unit: str
    is_archived: bool = False

    is_known = True

    @property
    def is_overdue(self) -> bool:
        return self.urgency_level == UrgencyLevel.OVERDUE

    @property
    def urgency_label(self) -> str:
        return urgency_label(self.urgency_level)


@dataclass(frozen=True)
class UnknownCalculation:
    """Pace cannot be computed; ``reason`` says which input was missing."""

    reason: str

    is_known = False
    urgency_level = None

    @property
    def urgency_label(self) -> str:
        return urgency_label(None)


DeadlineCalculationResult = Union[KnownCalculation, UnknownCalculation]


def required_pace(total: float, current: float, days_left: int) -> Optional[float]:
    """Units per day needed to finish on time.

    Args:
        total: Total units
        current: Units already read
        days_left: Whole days until the deadline

    Returns:
        0 when nothing remains, None when the deadline has passed with
        work left, otherwise remaining / days_left
    """
    remaining = max(total - current, 0)
    if remaining == 0:
        return 0
    if days_left <= 0:
        return None
    return remaining / days_left


def calculate_pace(
    deadline: Deadline,
    progress: float,
    days_left: Optional[int],
    thresholds: PaceThresholds,
    archived: bool = False,
) -> DeadlineCalculationResult:
    """Build a calculation result from already-resolved inputs.

    The entry points below differ only in which progress value and which
    reference time they feed in.
    """
    total = canonical_quantity(deadline.format, deadline.total_quantity)
    if deadline.total_quantity is None or total <= 0:
        logger.debug("Deadline %s has no total quantity", deadline.id)
        return UnknownCalculation(reason="missing total quantity")
    if days_left is None:
        logger.debug("Deadline %s has no deadline date", deadline.id)
        return UnknownCalculation(reason="missing deadline date")

    current = canonical_quantity(deadline.format, progress)
    remaining = max(total - current, 0)

    if archived:
        units_per_day: Optional[float] = 0
        urgency = UrgencyLevel.GOOD
    else:
        units_per_day = required_pace(total, current, days_left)
        urgency = classify_urgency(
            remaining, days_left, units_per_day, thresholds.for_format(deadline.format)
        )

    return KnownCalculation(
        current_progress=current,
        total_quantity=total,
        remaining=remaining,
        days_left=days_left,
        units_per_day=units_per_day,
        urgency_level=urgency,
        progress_percentage=min(100, round(current / total * 100)),
        unit=unit_for_format(deadline.format),
        is_archived=archived,
    )


def compute_deadline_calculations(
    deadline: Deadline,
    now: datetime,
    thresholds: Optional[PaceThresholds] = None,
    tz: Optional[tzinfo] = None,
) -> DeadlineCalculationResult:
    """Status-aware calculation using the latest progress.

    Archived deadlines (complete or did not finish) report a pace of 0.

    Args:
        deadline: Deadline snapshot with its logs
        now: Reference time
        thresholds: Urgency bands (default: from configuration)
        tz: Zone for naive deadline dates (default: see ``resolve_zone``)

    Returns:
        KnownCalculation or UnknownCalculation
    """
    if thresholds is None:
        thresholds = get_config().pace_thresholds

    days_left = None
    if deadline.deadline_date is not None:
        days_left = days_until(deadline.deadline_date, now, resolve_zone(now, tz))

    return calculate_pace(
        deadline,
        current_progress(deadline),
        days_left,
        thresholds,
        archived=is_archived(deadline),
    )


def units_per_day_or_zero(result: Optional[DeadlineCalculationResult]) -> float:
    """Pace for summing: unknown, missing and overdue results count as 0."""
    if result is None or not result.is_known or result.units_per_day is None:
        return 0
    return result.units_per_day
