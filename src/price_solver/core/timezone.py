"""Timezone utilities for history timestamps."""

import time
from datetime import datetime
from typing import Optional, Union

import pytz

UTC = pytz.utc


def now_millis() -> int:
    """Return the current time as integer epoch milliseconds."""
    return int(time.time() * 1000)


def get_timezone(name: str) -> pytz.BaseTzInfo:
    """Resolve a timezone name, falling back to UTC for unknown names."""
    try:
        return pytz.timezone(name)
    except pytz.UnknownTimeZoneError:
        return UTC


def from_millis(
    millis: int,
    tz: Optional[Union[str, pytz.BaseTzInfo]] = None,
) -> datetime:
    """Convert epoch milliseconds to an aware datetime in the given timezone."""
    if isinstance(tz, str):
        tz = get_timezone(tz)
    dt = datetime.fromtimestamp(millis / 1000, tz=UTC)
    return dt.astimezone(tz or UTC)

