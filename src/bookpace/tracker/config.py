"""Configuration management for bookpace.

Loads configuration from environment variables and provides defaults.
Urgency thresholds live here rather than in the calculators so product
tuning never requires touching calculation logic.
"""

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv

if TYPE_CHECKING:
    from .pace.urgency import PaceThresholds

# Load .env file if present
load_dotenv()


@dataclass
class Config:
    """Application configuration."""

    # Calendar
    timezone: str

    # Urgency bands, pages per day
    pages_easy_pace: float
    pages_urgent_pace: float
    pages_max_pace: float

    # Urgency bands, minutes per day
    audio_easy_pace: float
    audio_urgent_pace: float
    audio_max_pace: float

    # User pace
    pace_window_days: int

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        return cls(
            timezone=os.environ.get("BOOKPACE_TIMEZONE", "UTC"),
            pages_easy_pace=float(os.environ.get("BOOKPACE_PAGES_EASY_PACE", "30")),
            pages_urgent_pace=float(os.environ.get("BOOKPACE_PAGES_URGENT_PACE", "60")),
            pages_max_pace=float(os.environ.get("BOOKPACE_PAGES_MAX_PACE", "150")),
            audio_easy_pace=float(os.environ.get("BOOKPACE_AUDIO_EASY_PACE", "45")),
            audio_urgent_pace=float(os.environ.get("BOOKPACE_AUDIO_URGENT_PACE", "120")),
            audio_max_pace=float(os.environ.get("BOOKPACE_AUDIO_MAX_PACE", "480")),
            pace_window_days=int(os.environ.get("BOOKPACE_PACE_WINDOW_DAYS", "21")),
        )

    def validate(self) -> list[str]:
        """Validate configuration, return list of errors."""
        errors = []

        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            errors.append(f"Unknown timezone: {self.timezone}")

        bands = {
            "pages": (self.pages_easy_pace, self.pages_urgent_pace, self.pages_max_pace),
            "audio": (self.audio_easy_pace, self.audio_urgent_pace, self.audio_max_pace),
        }
        for name, (easy, urgent, maximum) in bands.items():
            if easy <= 0:
                errors.append(f"{name} easy pace must be positive")
            if not easy <= urgent <= maximum:
                errors.append(
                    f"{name} paces must be ascending (easy <= urgent <= max), "
                    f"got {easy}, {urgent}, {maximum}"
                )

        if self.pace_window_days <= 0:
            errors.append("Pace window must be at least one day")

        return errors

    @property
    def zone(self) -> ZoneInfo:
        """The configured zone, falling back to UTC when the name is unknown."""
        try:
            return ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            return ZoneInfo("UTC")

    @property
    def pace_thresholds(self) -> "PaceThresholds":
        """Urgency thresholds for both format families."""
        from .pace.urgency import PaceThresholds, UrgencyThresholds

        return PaceThresholds(
            pages=UrgencyThresholds(
                easy_pace=self.pages_easy_pace,
                urgent_pace=self.pages_urgent_pace,
                max_pace=self.pages_max_pace,
            ),
            audio=UrgencyThresholds(
                easy_pace=self.audio_easy_pace,
                urgent_pace=self.audio_urgent_pace,
                max_pace=self.audio_max_pace,
            ),
        )


# Global config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the global config instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def reset_config() -> None:
    """Reset the global config instance. Used for testing."""
    global _config
    _config = None
