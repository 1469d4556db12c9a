"""
Year value with configurable acceptable bounds.

Seconds are counted from the epoch, the start of year 0 in the proleptic
Gregorian calendar, so year 0 itself is a leap year and contributes
LEAP_YEAR seconds to every later year's offset.
"""

from dataclasses import dataclass
from typing import Optional

from ..config.defaults import DEFAULT_MAX_YEAR, DEFAULT_MIN_YEAR, YearRangeParams
from ..errors import (
    NonPositiveYearError,
    RangeBoundsInvalidError,
    RangeBoundsInvertedError,
    YearOutOfRangeError,
)
from .parsing import parse_integer_field, require_integer
from .period import Period


def is_leap_year(year: int) -> bool:
    """
    Check if a year is a leap year.

    A year is a leap year if it is evenly divisible by 4 but not by 100
    (2012, but not 1900), or if it is evenly divisible by 400 (2000).
    """
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def seconds_in_year(year: int) -> int:
    """Return LEAP_YEAR or YEAR seconds depending on the year's leap status."""
    if is_leap_year(year):
        return Period.LEAP_YEAR.seconds
    return Period.YEAR.seconds


def leap_years_before(year: int) -> int:
    """Count the leap years in [0, year)."""
    if year <= 0:
        return 0
    last = year - 1
    # +1 for year 0, which is divisible by 400
    return last // 4 - last // 100 + last // 400 + 1


@dataclass(frozen=True)
class Year:
    """A validated year within inclusive [min_year, max_year] bounds."""

    value: int
    min_year: int = DEFAULT_MIN_YEAR
    max_year: int = DEFAULT_MAX_YEAR

    def __post_init__(self) -> None:
        require_integer(self.min_year, "min_year")
        require_integer(self.max_year, "max_year")
        require_integer(self.value, "year")
        self._validate_range(self.min_year, self.max_year)
        self._validate_value(self.value)

    @classmethod
    def parse(cls, text: Optional[str], min_year: int = DEFAULT_MIN_YEAR,
              max_year: int = DEFAULT_MAX_YEAR) -> "Year":
        """
        Parse a numeric year string, e.g. "1999".

        Raises:
            BlankInputError: If text is blank
            NotANumberError: If text is not an integer
            DateValidationError: Any construction failure, see __post_init__
        """
        return cls(parse_integer_field(text, "year"), min_year, max_year)

    @classmethod
    def from_range(cls, value: int, year_range: YearRangeParams) -> "Year":
        """Create a Year bounded by a YearRangeParams configuration."""
        return cls(value, year_range.min_year, year_range.max_year)

    @staticmethod
    def _validate_range(min_year: int, max_year: int) -> None:
        non_positive = min_year <= 0 or max_year <= 0
        inverted = min_year > max_year

        if non_positive:
            raise RangeBoundsInvalidError(min_year, max_year, inverted=inverted)
        if inverted:
            raise RangeBoundsInvertedError(min_year, max_year)

    def _validate_value(self, value: int) -> None:
        if value <= 0:
            raise NonPositiveYearError(value)
        if value < self.min_year or value > self.max_year:
            raise YearOutOfRangeError(value, self.min_year, self.max_year)

    @property
    def is_leap_year(self) -> bool:
        return is_leap_year(self.value)

    @property
    def seconds_since_epoch(self) -> int:
        """Seconds from the start of year 0 to the start of this year."""
        leap_years = leap_years_before(self.value)
        common_years = self.value - leap_years
        return leap_years * Period.LEAP_YEAR.seconds + common_years * Period.YEAR.seconds

    def seconds_since_epoch_by_summation(self) -> int:
        """Year-by-year equivalent of seconds_since_epoch."""
        total_seconds = 0
        for year in range(self.value):
            total_seconds += seconds_in_year(year)
        return total_seconds

    def __str__(self) -> str:
        return f"{self.value:04d}"
