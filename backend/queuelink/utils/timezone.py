"""
Timezone utilities.

All queue timestamps are kept as timezone-aware UTC datetimes and cross
the API boundary as ISO-8601 strings.
"""

from datetime import datetime
from typing import Optional

import pytz

UTC_TZ = pytz.UTC


def utc_now() -> datetime:
    """Get current time in UTC (timezone-aware)."""
    return datetime.now(UTC_TZ)


def ensure_utc(dt: datetime) -> datetime:
    """
    Normalize a datetime to timezone-aware UTC.

    Naive datetimes are assumed to already be in UTC.
    """
    if dt.tzinfo is None:
        return UTC_TZ.localize(dt)
    return dt.astimezone(UTC_TZ)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """Render a datetime as an ISO-8601 string in UTC."""
    if dt is None:
        return None
    return ensure_utc(dt).isoformat()


def format_local_time(
    dt: datetime,
    timezone: str = "UTC",
    fmt: str = "%Y-%m-%d %H:%M",
) -> str:
    """
    Format a UTC datetime as a local time string.

    Args:
        dt: Datetime in UTC (naive or aware)
        timezone: Target timezone name
        fmt: strftime format string
    """
    tz = pytz.timezone(timezone)
    return ensure_utc(dt).astimezone(tz).strftime(fmt)
