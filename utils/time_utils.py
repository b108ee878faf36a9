"""Instant conversion utilities for the date helpers."""

from datetime import datetime, timedelta, timezone
from typing import Union

_ONE_MILLISECOND = timedelta(milliseconds=1)
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def from_epoch_milliseconds(value: Union[int, float]) -> datetime:
    """
    Convert milliseconds since the Unix epoch into an aware UTC datetime.

    Fractions of a millisecond are truncated.

    Args:
        value: Milliseconds since 1970-01-01T00:00:00Z, may be negative

    Returns:
        Timezone-aware datetime in UTC

    Raises:
        ValueError: If value is NaN, infinite or outside years 1 to 9999
    """
    try:
        return _EPOCH + timedelta(milliseconds=int(value))
    except (OverflowError, ValueError) as exc:
        raise ValueError(f"Epoch milliseconds out of range: {value!r}") from exc


def to_utc(instant: datetime) -> datetime:
    """
    Express an instant in UTC.

    Naive datetimes are assumed to already hold UTC fields and only get the
    UTC zone attached. Aware datetimes are converted.

    Args:
        instant: Naive or aware datetime

    Returns:
        Timezone-aware datetime in UTC
    """
    if instant.tzinfo is None or instant.utcoffset() is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def elapsed_milliseconds(start: datetime, end: datetime) -> int:
    """
    Whole milliseconds from start to end.

    Sub-millisecond remainders are floored away, so the result is negative
    when end is before start.

    Args:
        start: Beginning of the span
        end: End of the span

    Returns:
        Signed number of milliseconds
    """
    return (end - start) // _ONE_MILLISECOND
