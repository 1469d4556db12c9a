"""
daycount - Calendar Dates and Day Counting

Strictly validated day/month/year values mapped onto seconds elapsed
since the start of year 0, so that the number of whole days between two
dates reduces to integer subtraction.
"""

from .model import Date, DayOfMonth, Month, Ordering, Period, Year, is_leap_year

__version__ = "0.1.0"
__author__ = "daycount Team"

__all__ = [
    "Date",
    "DayOfMonth",
    "Month",
    "Ordering",
    "Period",
    "Year",
    "is_leap_year",
]
