"""Date and time operations.

Modules:
    date_parser: RFC 2822 and ISO 8601 text parsing
    leap_year: Gregorian leap-year check
    time_span: "HH:mm:ss.sss" formatting of elapsed time
    clock_angle: Angle between analog clock hands
"""
from business_logic.clock_angle import angle_between_hands
from business_logic.date_parser import (
    DateParseError,
    DateTextParser,
    parse_flexible_datetime,
    parse_iso8601,
    parse_rfc2822,
)
from business_logic.leap_year import is_leap_year
from business_logic.time_span import format_time_span

__all__ = [
    "DateParseError",
    "DateTextParser",
    "angle_between_hands",
    "format_time_span",
    "is_leap_year",
    "parse_flexible_datetime",
    "parse_iso8601",
    "parse_rfc2822",
]
