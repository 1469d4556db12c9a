"""
Calendar value objects: Period, Year, Month, DayOfMonth and Date.
"""
from .date import Date, Ordering
from .day_of_month import DayOfMonth
from .month import Month
from .period import SECONDS_PER_DAY, SECONDS_PER_HOUR, SECONDS_PER_MINUTE, Period, seconds_of
from .year import Year, is_leap_year, leap_years_before, seconds_in_year

__all__ = [
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "Date",
    "DayOfMonth",
    "Month",
    "Ordering",
    "Period",
    "Year",
    "is_leap_year",
    "leap_years_before",
    "seconds_in_year",
    "seconds_of",
]
