"""Format-specific units and display."""

from .converter import (
    canonical_quantity,
    format_minutes,
    format_quantity,
    is_audio,
    quantity_from_form,
    reading_estimate,
    round_half_up,
    unit_for_format,
)

__all__ = [
    "canonical_quantity",
    "format_minutes",
    "format_quantity",
    "is_audio",
    "quantity_from_form",
    "reading_estimate",
    "round_half_up",
    "unit_for_format",
]
