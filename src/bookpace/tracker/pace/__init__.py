"""Required pace, urgency and start-of-day snapshots."""

from .urgency import (
    PaceThresholds,
    UrgencyLevel,
    UrgencyThresholds,
    classify_urgency,
    most_urgent,
    urgency_label,
)
from .calculator import (
    DeadlineCalculationResult,
    KnownCalculation,
    UnknownCalculation,
    calculate_pace,
    compute_deadline_calculations,
    required_pace,
)
from .snapshot import (
    progress_as_of_start_of_day,
    progress_for_today,
)
from .user_pace import (
    UserPaceData,
    calculate_user_pace,
)

__all__ = [
    "PaceThresholds",
    "UrgencyLevel",
    "UrgencyThresholds",
    "classify_urgency",
    "most_urgent",
    "urgency_label",
    "DeadlineCalculationResult",
    "KnownCalculation",
    "UnknownCalculation",
    "calculate_pace",
    "compute_deadline_calculations",
    "required_pace",
    "progress_as_of_start_of_day",
    "progress_for_today",
    "UserPaceData",
    "calculate_user_pace",
]
