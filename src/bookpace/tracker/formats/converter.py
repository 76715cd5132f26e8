"""Unit handling for the three book formats.

Physical and eBook deadlines count pages; audio deadlines count minutes.
Calculations use the canonical numbers returned here and only format
for display at the boundary. Anything that is not audio gets page
semantics, so none of these functions raise on odd input.
"""

import math
from typing import Optional, Union

AUDIO = "audio"
PAGES_PER_HOUR = 40

Number = Union[int, float]


def round_half_up(value: Number) -> int:
    """Round to the nearest integer with halves going up (22.5 -> 23)."""
    return math.floor(value + 0.5)


def is_audio(format: Optional[str]) -> bool:
    """Check whether a format counts minutes."""
    return format == AUDIO


def unit_for_format(format: Optional[str]) -> str:
    """Unit label for a format: ``minutes`` for audio, else ``pages``."""
    return "minutes" if is_audio(format) else "pages"


def canonical_quantity(format: Optional[str], value: Optional[Number]) -> Number:
    """Normalize a raw quantity for arithmetic.

    Args:
        format: Book format
        value: Raw pages or minutes (None counts as 0)

    Returns:
        Minutes as given for audio (fractional minutes are allowed),
        a whole page count otherwise
    """
    if value is None:
        return 0
    if is_audio(format):
        return float(value)
    return round_half_up(value)


def format_minutes(minutes: Number) -> str:
    """Render minutes as ``Xh Ym``, ``Xh`` or ``Ym``.

    Minutes are rounded to the nearest whole minute first, so 119.6
    renders as ``2h`` rather than ``1h 60m``.

    Example:
        >>> format_minutes(90)
        '1h 30m'
        >>> format_minutes(45)
        '45m'
    """
    total = round_half_up(minutes)
    hours, mins = divmod(total, 60)
    if hours > 0 and mins > 0:
        return f"{hours}h {mins}m"
    if hours > 0:
        return f"{hours}h"
    return f"{mins}m"


def format_quantity(format: Optional[str], value: Optional[Number]) -> str:
    """Display a quantity in its format's units."""
    if is_audio(format):
        return format_minutes(value or 0)
    return f"{round_half_up(value or 0)} pages"


def _to_int(value: Union[Number, str, None]) -> int:
    """Whole units from form input; blank or unparseable input is 0."""
    if value is None:
        return 0
    try:
        return int(float(value))
    except (ValueError, OverflowError):
        return 0


def quantity_from_form(
    format: Optional[str],
    quantity: Union[Number, str, None],
    extra_minutes: Union[Number, str, None] = None,
) -> int:
    """Convert form input to a canonical quantity.

    Forms ask for hours plus minutes on audio books and plain pages
    otherwise.

    Args:
        format: Book format
        quantity: Hours for audio, pages for everything else
        extra_minutes: Additional minutes (audio only)

    Returns:
        Total minutes for audio, pages otherwise
    """
    if is_audio(format):
        return _to_int(quantity) * 60 + _to_int(extra_minutes)
    return _to_int(quantity)


def reading_estimate(format: Optional[str], remaining: Number) -> str:
    """Human estimate of the time left, empty when nothing remains."""
    if remaining <= 0:
        return ""

    if not is_audio(format):
        hours = math.ceil(remaining / PAGES_PER_HOUR)
        return f"About {hours} hour{'s' if hours != 1 else ''} of reading time"

    hours, minutes = divmod(round_half_up(remaining), 60)
    if hours > 0:
        text = f"About {hours} hour{'s' if hours > 1 else ''}"
        if minutes > 0:
            text += f" and {minutes} minutes"
        return f"{text} of listening time"
    return f"About {minutes} minutes of listening time"
