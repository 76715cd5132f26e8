"""Historical daily targets.

Reconstructs, for a past calendar day, which deadlines were being read
and what pace they required that morning. Used by the calendar and the
activity history next to the amounts actually read.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from typing import Iterable, Optional

from ..clock import as_utc, deadline_moment, local_date, resolve_zone, start_of_date
from ..deadlines.schemas import Deadline, ReadingStatus
from ..deadlines.status import sorted_progress, sorted_statuses
from ..formats.converter import canonical_quantity
from ..pace.calculator import required_pace
from .activity import combine_reading_days


@dataclass(frozen=True)
class FormatTargets:
    """Required pace summed per format family."""

    pages: float = 0
    minutes: float = 0


@dataclass(frozen=True)
class UserActivityDay:
    """One day of reading and listening, with that day's targets."""

    date: date
    pages_read: float = 0
    minutes_listened: float = 0
    target_pages: float = 0
    target_minutes: float = 0


def progress_as_of_date(
    deadline: Deadline,
    target_date: date,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> float:
    """Latest non-baseline progress recorded on or before ``target_date``.

    Returns 0 for days after today: no progress has been made on a future
    date yet.
    """
    zone = resolve_zone(now, tz)
    if target_date > local_date(now, zone):
        return 0

    relevant = [
        record for record in sorted_progress(deadline)
        if not record.ignore_in_calcs and local_date(record.created_at, zone) <= target_date
    ]
    if not relevant:
        return 0
    return canonical_quantity(deadline.format, relevant[-1].current_progress)


def status_as_of(deadline: Deadline, moment: datetime) -> ReadingStatus:
    """Latest status recorded at or before ``moment``, else ``pending``."""
    statuses = [
        record for record in sorted_statuses(deadline)
        if as_utc(record.created_at) <= as_utc(moment)
    ]
    if not statuses:
        return ReadingStatus.PENDING
    return statuses[-1].status


def deadlines_in_flight_on_date(
    deadlines: Iterable[Deadline],
    target_date: date,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> list[Deadline]:
    """Deadlines that counted towards the target on ``target_date``.

    A deadline is in flight when it:
    - existed by the end of that day,
    - was ``reading`` at the end of that day,
    - was not already finished at the start of that day,
    - was not yet past its due date.
    """
    zone = resolve_zone(now, tz)
    end_of_day = start_of_date(target_date + timedelta(days=1), zone)
    previous_day = target_date - timedelta(days=1)

    in_flight = []
    for deadline in deadlines:
        if deadline.deadline_date is None or deadline.total_quantity is None:
            continue
        if deadline.created_at is not None and local_date(deadline.created_at, zone) > target_date:
            continue
        if status_as_of(deadline, end_of_day - timedelta(microseconds=1)) != ReadingStatus.READING:
            continue

        total = canonical_quantity(deadline.format, deadline.total_quantity)
        if progress_as_of_date(deadline, previous_day, now, zone) >= total:
            continue

        due = deadline_moment(deadline.deadline_date, zone).astimezone(zone).date()
        if due < target_date:
            continue

        in_flight.append(deadline)
    return in_flight


def historical_required_pace(
    deadline: Deadline,
    target_date: date,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> float:
    """Pace the deadline required on the morning of ``target_date``.

    On the day a book is finished this is still the pace needed that
    morning, not 0. A deadline due that very day needs all of its
    remaining work.
    """
    if deadline.deadline_date is None or deadline.total_quantity is None:
        return 0

    zone = resolve_zone(now, tz)
    total = canonical_quantity(deadline.format, deadline.total_quantity)
    progress = progress_as_of_date(deadline, target_date - timedelta(days=1), now, zone)

    due = deadline_moment(deadline.deadline_date, zone).astimezone(zone).date()
    days_left = (due - target_date).days

    pace = required_pace(total, progress, days_left)
    if pace is None:
        return max(total - progress, 0)
    return pace


def aggregate_targets_by_format(
    deadlines: Iterable[Deadline],
    target_date: date,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> FormatTargets:
    """Pages/day and minutes/day required across in-flight deadlines."""
    pages = 0.0
    minutes = 0.0
    for deadline in deadlines_in_flight_on_date(deadlines, target_date, now, tz):
        pace = historical_required_pace(deadline, target_date, now, tz)
        if deadline.is_audio:
            minutes += pace
        else:
            pages += pace
    return FormatTargets(pages=round(pages, 2), minutes=round(minutes, 2))


def build_user_activity_days(
    deadlines: Iterable[Deadline],
    start: date,
    end: date,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> list[UserActivityDay]:
    """Reading, listening and targets for each day from ``start`` to ``end``."""
    deadlines = list(deadlines)
    pages_by_day = {
        day.date: day.amount for day in combine_reading_days(deadlines, now, tz, audio=False)
    }
    minutes_by_day = {
        day.date: day.amount for day in combine_reading_days(deadlines, now, tz, audio=True)
    }

    days = []
    current = start
    while current <= end:
        targets = aggregate_targets_by_format(deadlines, current, now, tz)
        days.append(UserActivityDay(
            date=current,
            pages_read=pages_by_day.get(current, 0),
            minutes_listened=minutes_by_day.get(current, 0),
            target_pages=targets.pages,
            target_minutes=targets.minutes,
        ))
        current += timedelta(days=1)
    return days
