"""Fixed en-US number and timestamp formatting.

Output does not depend on the host locale.
"""

from typing import Optional, Union

import pytz

from price_solver.core.numbers import quantize_half_up
from price_solver.core.timezone import from_millis


def format_number(
    value: Union[int, float],
    min_fraction_digits: int = 0,
    max_fraction_digits: int = 2,
) -> str:
    """
    Format a number with thousands grouping, e.g. 62431.6 -> "62,431.6".

    Rounds to ``max_fraction_digits`` then drops trailing zeros down to
    ``min_fraction_digits``.
    """
    max_fraction_digits = max(max_fraction_digits, min_fraction_digits)
    rounded = quantize_half_up(value, max_fraction_digits)
    if rounded.is_zero():
        rounded = abs(rounded)

    text = f"{rounded:,f}"
    if "." not in text:
        return text

    whole, fraction = text.split(".")
    fraction = fraction.rstrip("0").ljust(min_fraction_digits, "0")
    return f"{whole}.{fraction}" if fraction else whole


def format_optional(
    value: Optional[float],
    min_fraction_digits: int = 0,
    max_fraction_digits: int = 2,
) -> Optional[str]:
    """format_number that passes None through."""
    if value is None:
        return None
    return format_number(value, min_fraction_digits, max_fraction_digits)


def format_timestamp(millis: int, tz: Union[str, pytz.BaseTzInfo]) -> str:
    """Short date with medium time, e.g. "6/15/24, 2:30:00 PM"."""
    dt = from_millis(millis, tz)
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt.month}/{dt.day}/{dt:%y}, {hour}:{dt:%M:%S} {meridiem}"
