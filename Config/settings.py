'''
Runtime configuration for the hotel domain.

Values are read from the process environment, optionally seeded from a
.env file. Supported variables:
- HOTEL_LOG_LEVEL: logging level name used by the demo driver (default INFO).
- HOTEL_TIMEZONE: IANA timezone used to decide what "today" is. When unset
  the local date of the machine is used.
'''
import logging
import os
from functools import lru_cache
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

LOG_LEVEL_ENV = "HOTEL_LOG_LEVEL"
TIMEZONE_ENV = "HOTEL_TIMEZONE"


class Settings(BaseModel):
    """Validated runtime settings for the hotel domain."""

    log_level: str = "INFO"
    timezone: Optional[str] = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """
        Normalize the log level to an upper-case standard level name.

        Raises:
            ValueError: If the name is not a level known to ``logging``.
        """
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level {value!r}.")
        return level

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: Optional[str]) -> Optional[str]:
        if value is None or not value.strip():
            return None
        try:
            ZoneInfo(value.strip())
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone {value!r}.") from e
        return value.strip()

    def zone(self) -> Optional[ZoneInfo]:
        '''Return the configured timezone, if any.'''
        return ZoneInfo(self.timezone) if self.timezone else None


def load_settings() -> Settings:
    """Build settings from the environment after loading any .env file."""

    load_dotenv()
    return Settings(
        log_level=os.environ.get(LOG_LEVEL_ENV, "INFO"),
        timezone=os.environ.get(TIMEZONE_ENV),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    '''Return the process-wide settings, loading them on first use.'''
    return load_settings()
