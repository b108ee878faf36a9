"""Angle between the hands of an analog clock."""
import math
from datetime import datetime
from typing import Union

from utils.time_utils import from_epoch_milliseconds, to_utc

# Degrees each hand moves per minute
MINUTE_HAND_DEGREES = 6.0
HOUR_HAND_DEGREES = 0.5


def angle_between_hands(instant: Union[datetime, int, float]) -> float:
    """
    Angle in radians between the hour and minute hands at a UTC time.

    The hour hand advances continuously through the hour. Of the two arcs
    between the hands the smaller one is returned, so the result lies in
    [0, pi]. Seconds are ignored.

    Args:
        instant: datetime (naive values are read as UTC) or epoch milliseconds

    Returns:
        Angle in radians

    Raises:
        TypeError: If instant is neither a datetime nor a number
        ValueError: If epoch milliseconds are NaN, infinite or outside years 1 to 9999
    """
    if isinstance(instant, datetime):
        moment = to_utc(instant)
    elif isinstance(instant, (int, float)) and not isinstance(instant, bool):
        moment = from_epoch_milliseconds(instant)
    else:
        raise TypeError(f"Expected datetime or epoch milliseconds, got {type(instant).__name__}")

    hours = moment.hour % 12
    minutes = moment.minute

    hour_hand = HOUR_HAND_DEGREES * (60 * hours + minutes)
    minute_hand = MINUTE_HAND_DEGREES * minutes
    difference = abs(hour_hand - minute_hand)
    if 360 - difference < difference:
        difference = 360 - difference

    return math.radians(difference)
