"""
GPS time conversion.

GPS records carry the week number since the GPS epoch and the milliseconds
into that week. These are converted to UTC using a fixed leap second offset.
"""

from datetime import datetime, timedelta
from typing import Optional

GPS_EPOCH = datetime(1980, 1, 6)
GPS_LEAP_SECONDS = 18
SECONDS_PER_WEEK = 86400 * 7

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def gps_time_to_datetime(week: int, msec: float,
                         leap_seconds: int = GPS_LEAP_SECONDS) -> datetime:
    """
    Convert GPS week and time of week to a UTC datetime.

    Args:
        week: GPS week number
        msec: Milliseconds since the start of the week
        leap_seconds: GPS to UTC offset in seconds

    Returns:
        Naive datetime in UTC
    """
    if week < 0 or msec < 0:
        raise ValueError(f"Invalid GPS time: week={week}, msec={msec}")

    return GPS_EPOCH + timedelta(weeks=week, milliseconds=msec, seconds=-leap_seconds)


def format_timestamp(value: Optional[datetime]) -> str:
    """Format as ``yyyy-MM-dd HH:mm:ss.fff``, or blank for None."""
    if value is None:
        return ""
    return f"{value.strftime(TIMESTAMP_FORMAT)}.{value.microsecond // 1000:03d}"
