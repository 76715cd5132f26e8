"""Daily reading activity for charts.

Converts a cumulative progress log into the amount read on each calendar
day. A baseline entry (``ignore_in_calcs``) marks the start of the
trackable window so pre-existing progress never shows up as one huge
day of reading.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime, tzinfo
from typing import Iterable, Optional

from ..clock import as_utc, local_date, resolve_zone
from ..deadlines.schemas import BookFormat, Deadline, ProgressRecord
from ..deadlines.status import sorted_progress


@dataclass(frozen=True)
class ReadingDay:
    """Amount read (pages) or listened (minutes) on one day."""

    date: date
    amount: float
    format: BookFormat


def _trackable_records(
    deadline: Deadline,
    records: list[ProgressRecord],
) -> tuple[float, list[ProgressRecord]]:
    """Split a sorted log into the starting value and the records to walk.

    The most recent baseline record wins when there are several. Without
    one, a first record logged together with the deadline is the initial
    progress and seeds the walk.
    """
    for index in range(len(records) - 1, -1, -1):
        if records[index].ignore_in_calcs:
            return records[index].current_progress, records[index + 1:]

    first = records[0]
    if deadline.created_at is not None and as_utc(first.created_at) == as_utc(deadline.created_at):
        return first.current_progress, records[1:]
    return 0, records


def bucket_daily_activity(
    deadline: Deadline,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> dict[date, float]:
    """Amount read per local calendar day, oldest day first.

    Corrections (a lower cumulative value than the previous record) count
    as 0 rather than negative reading. A first record with nothing read
    opens no day. Records created after ``now`` are ignored.

    Args:
        deadline: Deadline snapshot with its progress log
        now: Reference time
        tz: User's zone (default: see ``resolve_zone``)

    Returns:
        Ordered mapping of date to amount, rounded to 2 decimals. Empty
        when the log has fewer than two records.
    """
    zone = resolve_zone(now, tz)
    cutoff = as_utc(now)
    records = [
        record for record in sorted_progress(deadline)
        if as_utc(record.created_at) <= cutoff
    ]
    if len(records) < 2:
        return {}

    previous, walk = _trackable_records(deadline, records)

    buckets: dict[date, float] = defaultdict(float)
    for index, record in enumerate(walk):
        delta = max(record.current_progress - previous, 0)
        previous = record.current_progress
        # the first record only opens a day when something was read
        if index == 0 and delta == 0:
            continue
        buckets[local_date(record.created_at, zone)] += delta

    return {day: round(buckets[day], 2) for day in sorted(buckets)}


def get_reading_days(
    deadline: Deadline,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> list[ReadingDay]:
    """Daily activity for one deadline, tagged with its format."""
    return [
        ReadingDay(date=day, amount=amount, format=deadline.format)
        for day, amount in bucket_daily_activity(deadline, now, tz).items()
    ]


def combine_reading_days(
    deadlines: Iterable[Deadline],
    now: datetime,
    tz: Optional[tzinfo] = None,
    audio: bool = False,
) -> list[ReadingDay]:
    """Daily activity summed across deadlines of one format family.

    Pages and minutes never mix: ``audio=False`` covers physical and
    eBook deadlines, ``audio=True`` covers audio deadlines.
    """
    totals: dict[date, float] = defaultdict(float)
    for deadline in deadlines:
        if deadline.is_audio != audio:
            continue
        for day, amount in bucket_daily_activity(deadline, now, tz).items():
            totals[day] += amount

    label = BookFormat.AUDIO if audio else BookFormat.PHYSICAL
    return [
        ReadingDay(date=day, amount=round(totals[day], 2), format=label)
        for day in sorted(totals)
    ]
