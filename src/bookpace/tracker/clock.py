"""Time helpers shared by the calculators.

Record timestamps come from the server and are UTC when naive. Deadline
dates are calendar dates, so a naive deadline is local midnight. Every
calendar decision (start of day, bucket date) is made in the user's zone.
"""

import math
from datetime import date, datetime, time, timezone, tzinfo
from typing import Optional

from .config import get_config

SECONDS_PER_DAY = 24 * 60 * 60


def as_utc(value: datetime) -> datetime:
    """Attach UTC to a naive server timestamp."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def resolve_zone(now: datetime, tz: Optional[tzinfo] = None) -> tzinfo:
    """Pick the zone for calendar decisions.

    Args:
        now: Reference time
        tz: Explicit zone (wins when given)

    Returns:
        The explicit zone, else the zone of an aware ``now``, else the
        configured zone
    """
    if tz is not None:
        return tz
    if now.tzinfo is not None:
        return now.tzinfo
    return get_config().zone


def to_local(value: datetime, zone: tzinfo) -> datetime:
    return as_utc(value).astimezone(zone)


def local_date(value: datetime, zone: tzinfo) -> date:
    return to_local(value, zone).date()


def start_of_day(now: datetime, zone: tzinfo) -> datetime:
    """Local midnight of the day containing ``now``."""
    return start_of_date(to_local(now, zone).date(), zone)


def start_of_date(day: date, zone: tzinfo) -> datetime:
    return datetime.combine(day, time.min, tzinfo=zone)


def deadline_moment(deadline_date: datetime, zone: tzinfo) -> datetime:
    """Deadline as an aware datetime; naive values are local."""
    if deadline_date.tzinfo is None:
        return deadline_date.replace(tzinfo=zone)
    return deadline_date


def days_until(deadline_date: datetime, moment: datetime, zone: tzinfo) -> int:
    """Whole days from ``moment`` to the deadline, rounded up.

    Zero or negative once the deadline has passed.
    """
    delta = deadline_moment(deadline_date, zone) - as_utc(moment)
    return math.ceil(delta.total_seconds() / SECONDS_PER_DAY)
