"""Gregorian leap-year check."""
from datetime import date
from typing import Union


def is_leap_year(value: Union[date, int]) -> bool:
    """
    Check whether a year is a Gregorian leap year.

    Only the year component of a date or datetime is used. Any integer year
    is evaluated by the same rule, including zero and negative years.

    Args:
        value: date, datetime or integer year

    Returns:
        True if the year is divisible by 4 but not 100, or divisible by 400

    Raises:
        TypeError: If value is neither a date nor an integer
    """
    if isinstance(value, date):
        year = value.year
    elif isinstance(value, int) and not isinstance(value, bool):
        year = value
    else:
        raise TypeError(f"Expected date or int year, got {type(value).__name__}")

    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0
