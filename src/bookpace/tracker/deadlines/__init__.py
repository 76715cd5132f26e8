"""Deadline snapshots and their progress/status logs."""

from .schemas import (
    ARCHIVED_STATUSES,
    BookFormat,
    Deadline,
    DeadlineSnapshot,
    Flexibility,
    ProgressRecord,
    ReadingStatus,
    StatusRecord,
)
from .status import (
    current_progress,
    is_archived,
    latest_status,
    progress_percentage,
    sorted_progress,
)
from .loader import (
    SnapshotLoadError,
    find_deadline,
    load_snapshot,
    parse_snapshot,
)

__all__ = [
    "ARCHIVED_STATUSES",
    "BookFormat",
    "Deadline",
    "DeadlineSnapshot",
    "Flexibility",
    "ProgressRecord",
    "ReadingStatus",
    "StatusRecord",
    "current_progress",
    "is_archived",
    "latest_status",
    "progress_percentage",
    "sorted_progress",
    "SnapshotLoadError",
    "find_deadline",
    "load_snapshot",
    "parse_snapshot",
]
