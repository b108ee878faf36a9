"""Textual date parsing for RFC 2822 and ISO 8601 strings."""
import logging
import re
from datetime import datetime
from typing import Callable, Optional

from dateutil import parser as date_parser

from config import config

logger = logging.getLogger(__name__)

ParserBackend = Callable[[str], datetime]

# "GMT+01", "UTC-0530", "GMT+05:30" at the end of the text
_GMT_OFFSET = re.compile(r'\b(?:GMT|UTC)\s*([+-])(\d{1,2})(?::?(\d{2}))?\s*$', re.IGNORECASE)


class DateParseError(ValueError):
    """Raised when text is not a date/time the parser backend recognises."""

    def __init__(self, text, reason: str = "unrecognised date/time"):
        super().__init__(f"Cannot parse {text!r}: {reason}")
        self.text = text


def _gmt_offset_to_numeric(match: re.Match) -> str:
    sign, hours, minutes = match.groups()
    return f"{sign}{int(hours):02d}{minutes or '00'}"


def flexible_backend(text: str) -> datetime:
    """
    Free-form backend: RFC 2822 dates and looser human-readable variants.

    A trailing "GMT+hh[mm]" is rewritten to a plain "+hhmm" offset first, so
    "GMT+01" means one hour east of Greenwich rather than dateutil's POSIX
    reading of it as one hour west.
    """
    text = _GMT_OFFSET.sub(_gmt_offset_to_numeric, text)
    return date_parser.parse(text, dayfirst=config.dayfirst)


def iso_backend(text: str) -> datetime:
    """Strict ISO 8601 backend."""
    return date_parser.isoparse(text)


def parse_flexible_datetime(text: str, backend: ParserBackend = flexible_backend) -> datetime:
    """
    Convert text into a datetime using a general-purpose parser backend.

    The backend does all the grammar work. This function only rejects blank
    or non-string input, translates backend failures into DateParseError and
    attaches config.default_timezone to naive results when one is configured.

    Args:
        text: Date/time string
        backend: Callable turning a string into a datetime, raising ValueError on failure

    Returns:
        Parsed datetime, aware when the text carried a zone or offset

    Raises:
        DateParseError: If the backend does not recognise the text
    """
    if not isinstance(text, str):
        logger.debug("Rejected non-string date input of type %s", type(text).__name__)
        raise DateParseError(text, f"expected str, got {type(text).__name__}")

    stripped = text.strip()
    if not stripped:
        logger.debug("Rejected blank date input")
        raise DateParseError(text, "empty input")

    try:
        parsed = backend(stripped)
    except (ValueError, OverflowError, TypeError) as exc:
        logger.debug("Backend %s failed on %r: %s", getattr(backend, "__name__", backend), text, exc)
        raise DateParseError(text, str(exc)) from exc

    if parsed.tzinfo is None and config.default_timezone is not None:
        parsed = parsed.replace(tzinfo=config.default_timezone)
    return parsed


class DateTextParser:
    """Parse RFC 2822 and ISO 8601 date strings through swappable backends."""

    def __init__(
        self,
        rfc2822_backend: ParserBackend = flexible_backend,
        iso8601_backend: ParserBackend = iso_backend,
    ):
        """
        Initialize DateTextParser.

        Args:
            rfc2822_backend: Parser used for RFC 2822 and free-form text
            iso8601_backend: Parser used for ISO 8601 text
        """
        self.rfc2822_backend = rfc2822_backend
        self.iso8601_backend = iso8601_backend

    def parse_rfc2822(self, text: str) -> datetime:
        """
        Parse an RFC 2822 date-time such as "Tue, 26 Jan 2016 13:48:02 GMT".

        Looser forms like "December 17, 1995 03:24:00" are accepted too; text
        without a zone yields a naive datetime.

        Raises:
            DateParseError: If the text is not a recognisable date
        """
        return parse_flexible_datetime(text, self.rfc2822_backend)

    def parse_iso8601(self, text: str) -> datetime:
        """
        Parse an ISO 8601 date-time such as "2016-01-19T08:07:37Z".

        A "Z" or numeric offset suffix yields an aware datetime.

        Raises:
            DateParseError: If the text is not valid ISO 8601
        """
        return parse_flexible_datetime(text, self.iso8601_backend)

    def try_parse_rfc2822(self, text: str) -> Optional[datetime]:
        """Like parse_rfc2822, but return None if parsing fails."""
        try:
            return self.parse_rfc2822(text)
        except DateParseError:
            return None

    def try_parse_iso8601(self, text: str) -> Optional[datetime]:
        """Like parse_iso8601, but return None if parsing fails."""
        try:
            return self.parse_iso8601(text)
        except DateParseError:
            return None


default_parser = DateTextParser()


def parse_rfc2822(text: str) -> datetime:
    """Parse RFC 2822 (or free-form) text with the default parser."""
    return default_parser.parse_rfc2822(text)


def parse_iso8601(text: str) -> datetime:
    """Parse ISO 8601 text with the default parser."""
    return default_parser.parse_iso8601(text)
