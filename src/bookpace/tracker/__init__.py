"""Pace, urgency and daily goal calculations for reading deadlines."""

from .pace.calculator import (
    DeadlineCalculationResult,
    KnownCalculation,
    UnknownCalculation,
    compute_deadline_calculations,
)
from .stats.activity import bucket_daily_activity
from .stats.aggregation import (
    DeadlineTotals,
    compute_status_aware_totals,
    compute_todays_goal_totals,
    format_daily_goal_display,
)

__all__ = [
    "DeadlineCalculationResult",
    "KnownCalculation",
    "UnknownCalculation",
    "compute_deadline_calculations",
    "bucket_daily_activity",
    "DeadlineTotals",
    "compute_status_aware_totals",
    "compute_todays_goal_totals",
    "format_daily_goal_display",
]
