"""Pytest configuration and shared fixtures.

This module provides fixtures for testing bookpace: a fixed reference
time, a deadline factory with progress and status logs, and isolation
from the developer's environment.
"""

import os
from datetime import datetime, timezone
from itertools import count
from typing import Callable, Optional

import pytest

from bookpace.tracker.config import reset_config
from bookpace.tracker.deadlines.schemas import (
    Deadline,
    ProgressRecord,
    ReadingStatus,
    StatusRecord,
)

UTC = timezone.utc


# ============================================================================
# Environment Fixtures
# ============================================================================


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Run every test with default configuration."""
    for key in list(os.environ):
        if key.startswith("BOOKPACE_"):
            monkeypatch.delenv(key)
    reset_config()
    yield
    reset_config()


# ============================================================================
# Sample Data Fixtures
# ============================================================================


@pytest.fixture
def now() -> datetime:
    """Mid-morning reference time, ten days and a bit before ``due_date``."""
    return datetime(2025, 1, 10, 9, 0, tzinfo=UTC)


@pytest.fixture
def due_date() -> datetime:
    """Midnight deadline ten days after the start of ``now``'s day."""
    return datetime(2025, 1, 20, 0, 0, tzinfo=UTC)


@pytest.fixture
def make_deadline(due_date: datetime) -> Callable[..., Deadline]:
    """Factory for deadlines with progress and status logs.

    ``progress`` entries are ``(value, created_at)`` or
    ``(value, created_at, ignore_in_calcs)``; ``statuses`` entries are
    ``(status, created_at)``.
    """
    ids = count(1)

    def _make(
        total: Optional[float] = 300,
        deadline_date: Optional[datetime] = due_date,
        format: str = "physical",
        progress: Optional[list] = None,
        statuses: Optional[list] = None,
        created_at: Optional[datetime] = None,
        title: str = "Test Book",
    ) -> Deadline:
        deadline_id = f"deadline-{next(ids)}"

        progress_records = []
        for index, entry in enumerate(progress or []):
            value, created = entry[0], entry[1]
            ignore = entry[2] if len(entry) > 2 else False
            progress_records.append(ProgressRecord(
                id=f"{deadline_id}-p{index}",
                deadline_id=deadline_id,
                current_progress=value,
                created_at=created,
                ignore_in_calcs=ignore,
            ))

        status_records = [
            StatusRecord(
                id=f"{deadline_id}-s{index}",
                deadline_id=deadline_id,
                status=ReadingStatus(status),
                created_at=created,
            )
            for index, (status, created) in enumerate(statuses or [])
        ]

        return Deadline(
            id=deadline_id,
            title=title,
            format=format,
            total_quantity=total,
            deadline_date=deadline_date,
            created_at=created_at,
            progress=progress_records,
            status=status_records,
        )

    return _make
