"""
Calendar date composed of a Year, Month and DayOfMonth.

A Date is represented by the seconds elapsed since the epoch (the start of
year 0), so the day count between two dates is an integer subtraction.
Dates are built either from the textual "DD MM YYYY" format or from
validated parts; there is no partially valid Date.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional

import structlog

from ..config.defaults import YearRangeParams
from ..errors import (
    DateValidationError,
    EndDateBeforeStartDateError,
    MalformedDateStringError,
    MissingEndDateError,
)
from ..logging import log_rejected_input
from .day_of_month import DayOfMonth
from .month import Month
from .period import Period
from .year import Year

logger = structlog.get_logger(__name__)

DATE_FORMAT_FIELDS = 3


class Ordering(IntEnum):
    """Result of Date.compare."""
    LESS = -1
    EQUAL = 0
    GREATER = 1


@dataclass(frozen=True)
class Date:
    """An immutable, fully validated calendar date."""

    year: Year
    month: Month
    day_of_month: DayOfMonth

    @classmethod
    def parse(cls, text: Any, year_range: Optional[YearRangeParams] = None) -> "Date":
        """
        Parse a date string in the format "DD MM YYYY".

        Unpadded fields ("5 1 1990") are accepted. The year is parsed first
        since the day can only be checked against a known month and year.

        Args:
            text: Date string, three whitespace separated integers
            year_range: Acceptable year bounds, defaults to YearRangeParams()

        Raises:
            MalformedDateStringError: If text is not three fields
            DateValidationError: Whatever the year, month or day parse raised
        """
        year_range = year_range or YearRangeParams()

        try:
            if not isinstance(text, str):
                raise MalformedDateStringError(text)

            fields = text.split()
            if len(fields) != DATE_FORMAT_FIELDS:
                raise MalformedDateStringError(text)

            day_text, month_text, year_text = fields
            year = Year.parse(year_text, year_range.min_year, year_range.max_year)
            month = Month.parse(month_text)
            day_of_month = DayOfMonth.parse(day_text, month, year)
        except DateValidationError as error:
            log_rejected_input(logger, "date", text, error)
            raise

        return cls(year, month, day_of_month)

    @classmethod
    def of(cls, day: int, month: int, year: int,
           year_range: Optional[YearRangeParams] = None) -> "Date":
        """Build a Date from integer day, month and year."""
        year_range = year_range or YearRangeParams()

        validated_year = Year.from_range(year, year_range)
        validated_month = Month.from_number(month)
        return cls(validated_year, validated_month,
                   DayOfMonth(day, validated_month, validated_year))

    @property
    def day(self) -> int:
        return self.day_of_month.value

    @property
    def month_number(self) -> int:
        return self.month.number

    @property
    def year_number(self) -> int:
        return self.year.value

    @property
    def total_seconds_since_epoch(self) -> int:
        """This date, as seconds since the start of year 0."""
        is_leap_year = self.year.is_leap_year
        return (self.year.seconds_since_epoch
                + self.month.seconds_before_month(is_leap_year)
                + self.day_of_month.seconds_since_start_of_month)

    def days_between(self, end_date: Optional["Date"]) -> int:
        """
        Count the whole days from this date to ``end_date``.

        Raises:
            MissingEndDateError: If end_date is None
            EndDateBeforeStartDateError: If end_date is earlier than this date
        """
        if self == end_date:
            return 0

        if end_date is None:
            raise MissingEndDateError()
        if self.compare(end_date) is Ordering.GREATER:
            raise EndDateBeforeStartDateError(start=self, end=end_date)

        seconds_between = end_date.total_seconds_since_epoch - self.total_seconds_since_epoch
        return seconds_between // Period.DAY.seconds

    def compare(self, other: "Date") -> Ordering:
        """Order two dates by their position on the timeline."""
        this_total = self.total_seconds_since_epoch
        that_total = other.total_seconds_since_epoch

        if this_total < that_total:
            return Ordering.LESS
        if this_total == that_total:
            return Ordering.EQUAL
        return Ordering.GREATER

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self.compare(other) is not Ordering.LESS

    def __str__(self) -> str:
        return f"{self.day:02d} {self.month_number:02d} {self.year_number:04d}"
