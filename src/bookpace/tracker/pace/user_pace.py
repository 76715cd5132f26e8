"""The user's own reading and listening pace.

Derived from recent daily activity: the total read inside the window
divided by the number of days between the first and last active day.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import Iterable, Optional

from ..config import get_config
from ..deadlines.schemas import Deadline
from ..stats.activity import ReadingDay, combine_reading_days

RECENT_DATA = "recent_data"
DEFAULT_FALLBACK = "default_fallback"


@dataclass
class UserPaceData:
    """Average daily pace (pages or minutes) and how it was derived."""

    average_pace: float = 0.0
    days_count: int = 0
    is_reliable: bool = False
    method: str = DEFAULT_FALLBACK


def pace_from_activity_days(days: list[ReadingDay]) -> float:
    """Total amount over the inclusive span of the given (sorted) days."""
    if not days:
        return 0.0
    total = sum(day.amount for day in days)
    span = max(1, (days[-1].date - days[0].date).days + 1)
    return total / span


def calculate_user_pace(
    deadlines: Iterable[Deadline],
    now: datetime,
    tz: Optional[tzinfo] = None,
    audio: bool = False,
    window_days: Optional[int] = None,
) -> UserPaceData:
    """Calculate the user's average pace for one format family.

    Args:
        deadlines: All of the user's deadlines
        now: Reference time
        tz: User's zone
        audio: Listening pace (minutes) instead of reading pace (pages)
        window_days: Days of history before the latest active day
            (default: from configuration)

    Returns:
        UserPaceData; ``default_fallback`` with a pace of 0 when there is
        no activity
    """
    if window_days is None:
        window_days = get_config().pace_window_days

    active_days = [
        day for day in combine_reading_days(deadlines, now, tz, audio=audio)
        if day.amount > 0
    ]
    if not active_days:
        return UserPaceData()

    window_start = active_days[-1].date - timedelta(days=window_days)
    recent = [day for day in active_days if day.date >= window_start]

    return UserPaceData(
        average_pace=round(pace_from_activity_days(recent), 2),
        days_count=len(recent),
        is_reliable=True,
        method=RECENT_DATA,
    )
