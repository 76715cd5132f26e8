"""Progress as of the start of the day.

Daily goals are computed from this value rather than the live progress
so the target does not shrink while the user reads.
"""

from datetime import datetime, tzinfo
from typing import Optional

from ..clock import as_utc, resolve_zone, start_of_day
from ..deadlines.schemas import Deadline
from ..deadlines.status import current_progress
from ..formats.converter import canonical_quantity


def progress_as_of_start_of_day(
    deadline: Deadline,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> float:
    """Highest progress recorded before local midnight of ``now``.

    Baseline records (``ignore_in_calcs``) always count, whatever their
    timestamp, because they stand for reading done before tracking began.
    The maximum is taken rather than the latest qualifying record so
    out-of-order timestamps cannot lower the snapshot.

    Args:
        deadline: Deadline snapshot
        now: Reference time
        tz: User's zone (default: see ``resolve_zone``)

    Returns:
        Snapshot progress, 0 when no record qualifies
    """
    midnight = start_of_day(now, resolve_zone(now, tz))

    values = [
        record.current_progress
        for record in deadline.progress
        if record.ignore_in_calcs or as_utc(record.created_at) < midnight
    ]
    if not values:
        return 0
    return canonical_quantity(deadline.format, max(values))


def progress_for_today(
    deadline: Deadline,
    now: datetime,
    tz: Optional[tzinfo] = None,
) -> float:
    """Progress made since local midnight, never negative."""
    snapshot = progress_as_of_start_of_day(deadline, now, tz)
    return max(0, current_progress(deadline) - snapshot)
