"""Value types for the date utilities."""
from dataclasses import dataclass

MILLISECONDS_PER_HOUR = 3_600_000
MILLISECONDS_PER_MINUTE = 60_000
MILLISECONDS_PER_SECOND = 1_000


@dataclass(frozen=True)
class TimeSpan:
    """Represents an elapsed interval split into clock fields.

    Hours are not wrapped at 24, so long spans keep every elapsed hour.
    """
    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    @classmethod
    def from_milliseconds(cls, total: int) -> 'TimeSpan':
        """
        Split a millisecond count into hours, minutes, seconds and milliseconds.

        Args:
            total: Non-negative number of milliseconds

        Returns:
            TimeSpan with each field carried into the next larger unit

        Raises:
            ValueError: If total is negative
        """
        if total < 0:
            raise ValueError(f"Time span cannot be negative: {total}ms")

        hours = total // MILLISECONDS_PER_HOUR
        minutes = total % MILLISECONDS_PER_HOUR // MILLISECONDS_PER_MINUTE
        seconds = total % MILLISECONDS_PER_MINUTE // MILLISECONDS_PER_SECOND
        milliseconds = total % MILLISECONDS_PER_SECOND
        return cls(hours, minutes, seconds, milliseconds)

    def __str__(self) -> str:
        """Format as HH:mm:ss.sss. Hours past 99 widen the field."""
        return f"{self.hours:02d}:{self.minutes:02d}:{self.seconds:02d}.{self.milliseconds:03d}"
