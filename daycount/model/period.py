"""Named durations expressed in seconds."""

from enum import Enum

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400


class Period(int, Enum):
    """Fixed durations, each valued in seconds."""
    MINUTE = SECONDS_PER_MINUTE
    HOUR = SECONDS_PER_HOUR
    DAY = SECONDS_PER_DAY
    WEEK = 7 * SECONDS_PER_DAY
    YEAR = 365 * SECONDS_PER_DAY
    LEAP_YEAR = 366 * SECONDS_PER_DAY

    @property
    def seconds(self) -> int:
        """Count of seconds in this period."""
        return int(self.value)


def seconds_of(period: Period) -> int:
    """Return the number of seconds in ``period``."""
    return period.seconds
