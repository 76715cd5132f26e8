"""Pydantic schemas for deadline snapshots.

These are read-only views of the records the surrounding application
stores. The calculators never mutate them, so every model is frozen.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class BookFormat(str, Enum):
    """How the book is consumed."""

    PHYSICAL = "physical"
    EBOOK = "eBook"
    AUDIO = "audio"


class Flexibility(str, Enum):
    """Whether the due date can move."""

    FLEXIBLE = "flexible"
    STRICT = "strict"


class ReadingStatus(str, Enum):
    """Lifecycle status of a deadline."""

    PENDING = "pending"
    READING = "reading"
    TO_REVIEW = "to_review"
    COMPLETE = "complete"
    DID_NOT_FINISH = "did_not_finish"


ARCHIVED_STATUSES = frozenset({ReadingStatus.COMPLETE, ReadingStatus.DID_NOT_FINISH})


# ============================================================================
# Log Records
# ============================================================================


class ProgressRecord(BaseModel):
    """One logged reading update.

    ``current_progress`` is cumulative (pages, or minutes for audio), not a
    delta. ``ignore_in_calcs`` marks a baseline entry for progress made
    before tracking started.
    """

    id: str
    deadline_id: Optional[str] = None
    current_progress: float = Field(default=0, ge=0)
    created_at: datetime
    ignore_in_calcs: bool = False
    time_spent_reading: Optional[float] = Field(None, ge=0, description="Minutes")

    model_config = {"frozen": True}


class StatusRecord(BaseModel):
    """One status transition."""

    id: str
    deadline_id: Optional[str] = None
    status: ReadingStatus
    created_at: datetime

    model_config = {"frozen": True}


# ============================================================================
# Deadline
# ============================================================================


class Deadline(BaseModel):
    """A tracked book with a target quantity and due date.

    Carries its own progress and status logs so a single object is
    enough for every calculation.
    """

    id: str
    title: Optional[str] = None
    author: Optional[str] = None
    format: BookFormat = BookFormat.PHYSICAL
    total_quantity: Optional[float] = Field(None, description="Pages or minutes")
    deadline_date: Optional[datetime] = None
    flexibility: Flexibility = Flexibility.FLEXIBLE
    created_at: Optional[datetime] = None
    progress: list[ProgressRecord] = Field(default_factory=list)
    status: list[StatusRecord] = Field(default_factory=list)

    model_config = {"frozen": True}

    @field_validator("format", mode="before")
    @classmethod
    def default_unknown_format(cls, v: Any) -> Any:
        """Treat missing or unknown formats as pages."""
        if isinstance(v, BookFormat):
            return v
        try:
            return BookFormat(v)
        except ValueError:
            return BookFormat.PHYSICAL

    @property
    def is_audio(self) -> bool:
        return self.format == BookFormat.AUDIO


class DeadlineSnapshot(BaseModel):
    """Everything the CLI reads from a snapshot file."""

    deadlines: list[Deadline] = Field(default_factory=list)
    exported_at: Optional[datetime] = None
