"""Aggregate goals, daily activity and historical targets."""

from .activity import (
    ReadingDay,
    bucket_daily_activity,
    combine_reading_days,
    get_reading_days,
)
from .aggregation import (
    DailyGoalSummary,
    DeadlineTotals,
    OverdueCatchUpTotals,
    audio_deadlines,
    build_daily_goal_summary,
    calculate_overdue_catch_up_totals,
    compute_status_aware_totals,
    compute_todays_goal_totals,
    format_daily_goal_display,
    reading_deadlines,
    status_aware_calculations,
)
from .history import (
    FormatTargets,
    UserActivityDay,
    aggregate_targets_by_format,
    build_user_activity_days,
    deadlines_in_flight_on_date,
)

__all__ = [
    "ReadingDay",
    "bucket_daily_activity",
    "combine_reading_days",
    "get_reading_days",
    "DailyGoalSummary",
    "DeadlineTotals",
    "OverdueCatchUpTotals",
    "audio_deadlines",
    "build_daily_goal_summary",
    "calculate_overdue_catch_up_totals",
    "compute_status_aware_totals",
    "compute_todays_goal_totals",
    "format_daily_goal_display",
    "reading_deadlines",
    "status_aware_calculations",
    "FormatTargets",
    "UserActivityDay",
    "aggregate_targets_by_format",
    "build_user_activity_days",
    "deadlines_in_flight_on_date",
]
