"""Formatting of the interval between two instants."""
from datetime import datetime

from models import TimeSpan
from utils.time_utils import elapsed_milliseconds


def format_time_span(start: datetime, end: datetime) -> str:
    """
    Format the time between two instants as "HH:mm:ss.sss".

    Hours are not wrapped, so a span of 100 hours or more widens the hours
    field. Sub-millisecond differences are dropped.

    Args:
        start: Beginning of the span
        end: End of the span, not earlier than start

    Returns:
        Zero-padded span string, e.g. "05:20:10.453"

    Raises:
        ValueError: If end is earlier than start
        TypeError: If one instant is naive and the other aware
    """
    elapsed = elapsed_milliseconds(start, end)
    if elapsed < 0:
        raise ValueError(f"End {end.isoformat()} is before start {start.isoformat()}")
    return str(TimeSpan.from_milliseconds(elapsed))
