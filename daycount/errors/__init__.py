"""
Error classification for date validation and configuration.

Validation errors describe rejected caller input and all derive from
DateValidationError (itself a ValueError). ConfigurationError covers
settings that fail to validate when loaded.
"""

from .validation import (
    DateValidationError,
    MalformedDateStringError,
    BlankInputError,
    NotANumberError,
    NonPositiveYearError,
    NonPositiveDayError,
    YearOutOfRangeError,
    InvalidMonthIndexError,
    DayOutOfRangeForMonthError,
    RangeBoundsError,
    RangeBoundsInvalidError,
    RangeBoundsInvertedError,
    MissingEndDateError,
    EndDateBeforeStartDateError,
)
from .configuration import ConfigurationError

__all__ = [
    # Input validation
    "DateValidationError",
    "MalformedDateStringError",
    "BlankInputError",
    "NotANumberError",
    "NonPositiveYearError",
    "NonPositiveDayError",
    "YearOutOfRangeError",
    "InvalidMonthIndexError",
    "DayOutOfRangeForMonthError",
    # Year range bounds
    "RangeBoundsError",
    "RangeBoundsInvalidError",
    "RangeBoundsInvertedError",
    # Day count
    "MissingEndDateError",
    "EndDateBeforeStartDateError",
    # Configuration
    "ConfigurationError",
]
