"""
Day within a month, validated against that month and year.

The month and year are kept so equality and diagnostics see the full
context the day was checked in, e.g. 29 is valid for February 2000 only.
"""

from dataclasses import dataclass
from typing import Optional

from ..errors import DayOutOfRangeForMonthError, NonPositiveDayError
from .month import Month
from .parsing import parse_integer_field, require_integer
from .period import Period
from .year import Year


@dataclass(frozen=True)
class DayOfMonth:
    """A validated 1-based day of ``month`` in ``year``."""

    value: int
    month: Month
    year: Year

    def __post_init__(self) -> None:
        require_integer(self.value, "day")
        if self.value <= 0:
            raise NonPositiveDayError(self.value)
        if not self.month.is_valid_day(self.value, self.year.is_leap_year):
            raise DayOutOfRangeForMonthError(self.value, self.month, self.year)

    @classmethod
    def parse(cls, text: Optional[str], month: Month, year: Year) -> "DayOfMonth":
        """
        Parse a numeric day string, e.g. "31".

        Raises:
            BlankInputError: If text is blank
            NotANumberError: If text is not an integer
            NonPositiveDayError: If the day is 0 or less
            DayOutOfRangeForMonthError: If the month is shorter than the day
        """
        return cls(parse_integer_field(text, "day"), month, year)

    @property
    def seconds_since_start_of_month(self) -> int:
        """e.g. 29 Feb 2000 -> 29 * 86400 = 2505600"""
        return self.value * Period.DAY.seconds
