"""Pytest configuration and shared fixtures."""

import datetime

import pytest

from daycount.config.defaults import YearRangeParams
from daycount.model import Date, Month, Year


@pytest.fixture
def wide_year_range() -> YearRangeParams:
    """Year bounds covering every year datetime.date supports."""
    return YearRangeParams(min_year=1, max_year=9999)


@pytest.fixture
def leap_year() -> Year:
    """A leap year divisible by 400."""
    return Year(2000)


@pytest.fixture
def common_year() -> Year:
    """A common (non-leap) year."""
    return Year(2001)


@pytest.fixture
def christmas_2000() -> Date:
    """25 December 2000."""
    return Date.parse("25 12 2000")


@pytest.fixture
def oracle_days_between():
    """Independent proleptic Gregorian day count, via datetime.date ordinals."""

    def days_between(start: Date, end: Date) -> int:
        start_ordinal = datetime.date(start.year_number, start.month_number, start.day).toordinal()
        end_ordinal = datetime.date(end.year_number, end.month_number, end.day).toordinal()
        return end_ordinal - start_ordinal

    return days_between


@pytest.fixture
def all_months() -> list[Month]:
    """Every month in calendar order."""
    return list(Month)
