"""
Calendar month table.

Each member carries its calendar number and its length in common and leap
years. Only February differs between the two.
"""

from enum import Enum
from typing import Any, Optional

import structlog

from ..errors import DateValidationError, InvalidMonthIndexError
from ..logging import log_rejected_input
from .parsing import parse_integer_field
from .period import Period

logger = structlog.get_logger(__name__)


class Month(Enum):
    """Months in calendar order: (number, min_days, max_days)."""
    JANUARY = (1, 31, 31)
    FEBRUARY = (2, 28, 29)
    MARCH = (3, 31, 31)
    APRIL = (4, 30, 30)
    MAY = (5, 31, 31)
    JUNE = (6, 30, 30)
    JULY = (7, 31, 31)
    AUGUST = (8, 31, 31)
    SEPTEMBER = (9, 30, 30)
    OCTOBER = (10, 31, 31)
    NOVEMBER = (11, 30, 30)
    DECEMBER = (12, 31, 31)

    def __init__(self, number: int, min_days: int, max_days: int):
        self.number = number
        self.min_days = min_days
        self.max_days = max_days

    @classmethod
    def from_number(cls, number: Any) -> "Month":
        """
        Look up a month by its calendar number, e.g. 12 -> DECEMBER.

        Raises:
            InvalidMonthIndexError: If number is not an integer in 1..12
        """
        if isinstance(number, int) and not isinstance(number, bool):
            for month in cls:
                if month.number == number:
                    return month
        raise InvalidMonthIndexError(number)

    @classmethod
    def parse(cls, text: Optional[str]) -> "Month":
        """
        Look up a month from numeric text, e.g. "01" or "+1" -> JANUARY.

        Text follows the same integer rule as the year and day fields.

        Raises:
            InvalidMonthIndexError: If text is blank, non-numeric or out of range
        """
        try:
            number = parse_integer_field(text, "month")
        except DateValidationError as parse_error:
            error = InvalidMonthIndexError(text)
            log_rejected_input(logger, "month", text, error)
            raise error from parse_error
        return cls.from_number(number)

    def days_in_month(self, is_leap_year: bool) -> int:
        """Length of this month, counting Feb 29 when is_leap_year."""
        if is_leap_year:
            return self.max_days
        return self.min_days

    def is_valid_day(self, day: int, is_leap_year: bool) -> bool:
        """
        True if ``day`` can be a day of this month.

        e.g. FEBRUARY.is_valid_day(29, True) is True,
             FEBRUARY.is_valid_day(29, False) is False
        """
        return 0 < day <= self.days_in_month(is_leap_year)

    def seconds_in_month(self, is_leap_year: bool) -> int:
        return self.days_in_month(is_leap_year) * Period.DAY.seconds

    def seconds_before_month(self, is_leap_year: bool) -> int:
        """Seconds in the year before the first day of this month."""
        return sum(
            month.seconds_in_month(is_leap_year)
            for month in Month
            if month.number < self.number
        )

    @property
    def previous_month(self) -> "Month":
        """The preceding month; JANUARY wraps to DECEMBER."""
        months = list(Month)
        return months[(self.number - 2) % len(months)]
