"""Date and time helpers exported under flat names."""
from business_logic import (
    angle_between_hands,
    format_time_span,
    is_leap_year,
    parse_iso8601,
    parse_rfc2822,
)

__all__ = [
    "parse_rfc2822",
    "parse_iso8601",
    "is_leap_year",
    "format_time_span",
    "angle_between_hands",
]
