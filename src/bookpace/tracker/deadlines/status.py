"""Status and progress resolution for a single deadline.

The logs are append-only and may arrive in any order, so everything here
sorts by ``created_at`` before reading.
"""

from typing import Optional

from ..clock import as_utc
from ..formats.converter import canonical_quantity
from .schemas import (
    ARCHIVED_STATUSES,
    Deadline,
    ProgressRecord,
    ReadingStatus,
    StatusRecord,
)


def sorted_progress(deadline: Deadline) -> list[ProgressRecord]:
    """Progress records oldest first. Ties keep their input order."""
    return sorted(deadline.progress, key=lambda record: as_utc(record.created_at))


def sorted_statuses(deadline: Deadline) -> list[StatusRecord]:
    return sorted(deadline.status, key=lambda record: as_utc(record.created_at))


def latest_progress_record(deadline: Deadline) -> Optional[ProgressRecord]:
    records = sorted_progress(deadline)
    return records[-1] if records else None


def current_progress(deadline: Deadline) -> float:
    """Cumulative progress of the most recent record, 0 without records."""
    record = latest_progress_record(deadline)
    if record is None:
        return 0
    return canonical_quantity(deadline.format, record.current_progress)


def latest_status(deadline: Deadline) -> ReadingStatus:
    """Most recent status, ``pending`` when none has been recorded."""
    statuses = sorted_statuses(deadline)
    if not statuses:
        return ReadingStatus.PENDING
    return statuses[-1].status


def is_archived(deadline: Deadline) -> bool:
    """Completed and abandoned deadlines no longer need a pace."""
    return latest_status(deadline) in ARCHIVED_STATUSES


def progress_percentage(deadline: Deadline) -> Optional[int]:
    """Percent complete, capped at 100. None without a total."""
    total = canonical_quantity(deadline.format, deadline.total_quantity)
    if total <= 0:
        return None
    return min(100, round(current_progress(deadline) / total * 100))
