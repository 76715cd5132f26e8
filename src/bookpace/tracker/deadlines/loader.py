"""Snapshot file loading.

The calculators never do I/O; this is how the CLI gets deadlines into
them. A snapshot is a JSON document of the form ``{"deadlines": [...]}``
as exported by the surrounding application.
"""

import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from .schemas import Deadline, DeadlineSnapshot

logger = logging.getLogger(__name__)


class SnapshotLoadError(Exception):
    """Snapshot file could not be read or validated."""

    pass


def parse_snapshot(data: object) -> DeadlineSnapshot:
    """Validate already-decoded snapshot data.

    A bare list is accepted as the list of deadlines.

    Raises:
        SnapshotLoadError: If the data does not match the schema
    """
    if isinstance(data, list):
        data = {"deadlines": data}

    try:
        snapshot = DeadlineSnapshot.model_validate(data)
    except ValidationError as e:
        raise SnapshotLoadError(f"Invalid snapshot: {e}") from e

    logger.debug("Loaded %d deadlines", len(snapshot.deadlines))
    return snapshot


def load_snapshot(path: Path) -> DeadlineSnapshot:
    """Load and validate a snapshot file.

    Args:
        path: JSON file to read

    Returns:
        DeadlineSnapshot

    Raises:
        SnapshotLoadError: If the file is missing, not JSON, or invalid
    """
    if not path.exists():
        raise SnapshotLoadError(f"Snapshot not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise SnapshotLoadError(f"Invalid JSON in {path}: {e}") from e

    return parse_snapshot(data)


def find_deadline(snapshot: DeadlineSnapshot, deadline_id: str) -> Optional[Deadline]:
    """Look up a deadline by ID."""
    for deadline in snapshot.deadlines:
        if deadline.id == deadline_id:
            return deadline
    return None
