"""Configuration settings for the date utilities."""
import os
from dataclasses import dataclass
from datetime import tzinfo
from typing import Optional

from dateutil import tz


@dataclass
class Config:
    """Parser configuration settings.

    Centralized configuration to avoid hardcoded parser options throughout the codebase.
    """
    # Zone attached to naive parse results (None keeps them naive)
    default_timezone: Optional[tzinfo] = None

    # Read "01/02/2016" as 1 February rather than 2 January
    dayfirst: bool = False

    @classmethod
    def load(cls) -> 'Config':
        """
        Load configuration.

        Reads DATE_TASKS_TIMEZONE (an IANA zone name) and DATE_TASKS_DAYFIRST
        from the environment. Missing variables keep the defaults.

        Returns:
            Config instance with default or loaded values
        """
        loaded = cls()

        zone_name = os.environ.get("DATE_TASKS_TIMEZONE", "").strip()
        if zone_name:
            zone = tz.gettz(zone_name)
            if zone is None:
                raise ValueError(f"Unknown timezone: {zone_name!r}")
            loaded.default_timezone = zone

        dayfirst = os.environ.get("DATE_TASKS_DAYFIRST", "").strip().lower()
        if dayfirst:
            if dayfirst in ("1", "true", "yes", "on"):
                loaded.dayfirst = True
            elif dayfirst in ("0", "false", "no", "off"):
                loaded.dayfirst = False
            else:
                raise ValueError(f"Invalid DATE_TASKS_DAYFIRST value: {dayfirst!r}")

        return loaded


# Global config instance
config = Config.load()
