"""Portfolio totals across a user's deadlines.

Two families share the same reducers:

- Status-aware totals sum each deadline's ordinary calculation, so
  archived deadlines contribute a pace of 0. Use them wherever the view
  should reflect only active work.
- Today's goal totals sum a pace computed from the start-of-day progress
  snapshot and ignore archive status. Completing a book, or logging more
  pages, during the day leaves the goal where it was; only the
  ``current`` side moves.

Accessors are injected as plain callables so the same reducer serves
every subset (audio only, reading only) by filtering the input first.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, tzinfo
from typing import Callable, Iterable, Optional

from ..clock import days_until, resolve_zone, start_of_day
from ..config import get_config
from ..deadlines.schemas import Deadline
from ..formats.converter import format_minutes, is_audio, round_half_up
from ..pace.calculator import (
    DeadlineCalculationResult,
    calculate_pace,
    compute_deadline_calculations,
    units_per_day_or_zero,
)
from ..pace.snapshot import progress_as_of_start_of_day, progress_for_today
from ..pace.urgency import PaceThresholds

logger = logging.getLogger(__name__)

CalculationAccessor = Callable[[Deadline], Optional[DeadlineCalculationResult]]
ProgressAccessor = Callable[[Deadline], Optional[float]]


@dataclass(frozen=True)
class DeadlineTotals:
    """Goal (``total``) and live progress (``current``) for a set of deadlines."""

    total: float = 0
    current: float = 0


@dataclass(frozen=True)
class OverdueCatchUpTotals:
    """Spare capacity available for overdue books today."""

    total: int = 0  # capacity left after active goals
    current: int = 0  # progress on overdue books today
    has_capacity: bool = False


@dataclass(frozen=True)
class DailyGoalSummary:
    """Today's goals for the dashboard, per format family."""

    reading: DeadlineTotals
    audio: DeadlineTotals
    reading_display: str
    audio_display: str


# ============================================================================
# Subsets
# ============================================================================


def audio_deadlines(deadlines: Iterable[Deadline]) -> list[Deadline]:
    return [deadline for deadline in deadlines if deadline.is_audio]


def reading_deadlines(deadlines: Iterable[Deadline]) -> list[Deadline]:
    """Physical and eBook deadlines (everything counted in pages)."""
    return [deadline for deadline in deadlines if not deadline.is_audio]


# ============================================================================
# Reducers
# ============================================================================


def calculate_total_units_for_deadlines(
    deadlines: Iterable[Deadline],
    get_calculations: CalculationAccessor,
) -> float:
    """Sum required pace; missing, unknown or overdue results count as 0."""
    return sum(units_per_day_or_zero(get_calculations(deadline)) for deadline in deadlines)


def calculate_current_progress_for_deadlines(
    deadlines: Iterable[Deadline],
    get_progress: ProgressAccessor,
) -> float:
    """Sum progress; None counts as 0."""
    total = 0
    for deadline in deadlines:
        progress = get_progress(deadline)
        total += progress or 0
    return total


def compute_status_aware_totals(
    deadlines: Iterable[Deadline],
    get_calculations: CalculationAccessor,
    get_progress: ProgressAccessor,
) -> DeadlineTotals:
    """Totals that reflect only active work.

    Args:
        deadlines: Deadlines to sum (filter by format beforehand)
        get_calculations: Calculation for a deadline, usually
            ``compute_deadline_calculations`` bound to ``now``
        get_progress: Progress to report as ``current``

    Returns:
        DeadlineTotals
    """
    deadlines = list(deadlines)
    return DeadlineTotals(
        total=calculate_total_units_for_deadlines(deadlines, get_calculations),
        current=calculate_current_progress_for_deadlines(deadlines, get_progress),
    )


calculate_deadline_totals = compute_status_aware_totals


def todays_goal_calculation(
    deadline: Deadline,
    now: datetime,
    thresholds: Optional[PaceThresholds] = None,
    tz: Optional[tzinfo] = None,
) -> DeadlineCalculationResult:
    """Calculation anchored at the start of the day, ignoring archive status.

    Both the progress value and the days-left count are taken at local
    midnight, so the result is the same at any time during the day.
    """
    if thresholds is None:
        thresholds = get_config().pace_thresholds
    zone = resolve_zone(now, tz)
    midnight = start_of_day(now, zone)

    days_left = None
    if deadline.deadline_date is not None:
        days_left = days_until(deadline.deadline_date, midnight, zone)

    return calculate_pace(
        deadline,
        progress_as_of_start_of_day(deadline, now, zone),
        days_left,
        thresholds,
    )


def calculate_todays_goal_units_for_deadlines(
    deadlines: Iterable[Deadline],
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> float:
    """Sum of start-of-day paces, whatever each deadline's status."""
    thresholds = get_config().pace_thresholds
    return calculate_total_units_for_deadlines(
        deadlines,
        lambda deadline: todays_goal_calculation(deadline, now, thresholds, tz),
    )


def compute_todays_goal_totals(
    deadlines: Iterable[Deadline],
    get_progress: ProgressAccessor,
    now: datetime,
    tz: Optional[tzinfo] = None,
    deadlines_for_progress: Optional[Iterable[Deadline]] = None,
) -> DeadlineTotals:
    """Today's goal totals that stay stable through the day.

    Args:
        deadlines: Deadlines whose pace makes up the goal
        get_progress: Progress to report as ``current``, usually
            ``progress_for_today``
        now: Reference time
        tz: User's zone
        deadlines_for_progress: Deadlines to sum progress over (default:
            ``deadlines``)

    Returns:
        DeadlineTotals
    """
    deadlines = list(deadlines)
    if deadlines_for_progress is None:
        deadlines_for_progress = deadlines

    return DeadlineTotals(
        total=calculate_todays_goal_units_for_deadlines(deadlines, now, tz),
        current=calculate_current_progress_for_deadlines(
            deadlines_for_progress, get_progress
        ),
    )


calculate_todays_goal_totals = compute_todays_goal_totals


# ============================================================================
# Dashboard helpers
# ============================================================================


def calculate_overdue_catch_up_totals(
    overdue_deadlines: Iterable[Deadline],
    user_pace: float,
    todays_active_goal: float,
    todays_active_progress: float,
    get_progress: ProgressAccessor,
) -> OverdueCatchUpTotals:
    """Capacity left for overdue books once today's active goal is met.

    Extra capacity is the user's average pace above today's goal, minus
    whatever of it was already spent reading active books past the goal.

    Args:
        overdue_deadlines: Overdue deadlines of one format family
        user_pace: User's average pace in the same units
        todays_active_goal: Today's goal for active deadlines
        todays_active_progress: Today's progress on active deadlines
        get_progress: Today's progress for an overdue deadline

    Returns:
        OverdueCatchUpTotals with rounded values
    """
    extra_capacity = max(0, user_pace - todays_active_goal)
    used_by_active = max(0, todays_active_progress - todays_active_goal)
    available = max(0, extra_capacity - used_by_active)

    overdue_progress = 0
    for deadline in overdue_deadlines:
        progress = get_progress(deadline) or 0
        if progress > 0:
            overdue_progress += progress

    return OverdueCatchUpTotals(
        total=round_half_up(available),
        current=round_half_up(overdue_progress),
        has_capacity=available > 0,
    )


def format_daily_goal_display(value: float, format: Optional[str]) -> str:
    """Render an aggregate goal.

    Audio values are minutes (``0m``, ``45m``, ``2h``, ``1h 30m``); every
    other format renders a rounded page count (``51 pages``).
    """
    if is_audio(format):
        return format_minutes(value)
    return f"{round_half_up(value)} pages"


def build_daily_goal_summary(
    deadlines: Iterable[Deadline],
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> DailyGoalSummary:
    """Goal-stable reading and listening totals for the dashboard."""
    deadlines = list(deadlines)

    def todays_progress(deadline: Deadline) -> float:
        return progress_for_today(deadline, now, tz)

    reading = compute_todays_goal_totals(
        reading_deadlines(deadlines), todays_progress, now, tz
    )
    audio = compute_todays_goal_totals(
        audio_deadlines(deadlines), todays_progress, now, tz
    )
    logger.debug("Daily goals: reading=%s audio=%s", reading, audio)

    return DailyGoalSummary(
        reading=reading,
        audio=audio,
        reading_display=format_daily_goal_display(reading.total, "physical"),
        audio_display=format_daily_goal_display(audio.total, "audio"),
    )


def status_aware_calculations(
    now: datetime,
    thresholds: Optional[PaceThresholds] = None,
    tz: Optional[tzinfo] = None,
) -> CalculationAccessor:
    """Accessor for ``compute_status_aware_totals`` bound to ``now``."""

    def get_calculations(deadline: Deadline) -> DeadlineCalculationResult:
        return compute_deadline_calculations(deadline, now, thresholds, tz)

    return get_calculations
