"""
Validation error classifications for calendar date input.

Every failure raised while parsing or constructing a date value is a
subclass of DateValidationError. Callers treat these as rejected input,
never as system faults.
"""

from typing import Any, Dict, Optional


class DateValidationError(ValueError):
    """Base class for rejected date input."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}


class MalformedDateStringError(DateValidationError):
    """Date text does not split into exactly DD MM YYYY."""

    MESSAGE = "[%s] is not a valid date format, it must be in the format DD MM YYYY"

    def __init__(self, raw_text: Any, **kwargs):
        super().__init__(self.MESSAGE % (raw_text,), **kwargs)
        self.raw_text = raw_text


class BlankInputError(DateValidationError):
    """A mandatory numeric field was empty or whitespace only."""

    MESSAGES = {
        "year": "Year cannot be blank",
        "day": "The day of the month is a mandatory parameter",
    }

    def __init__(self, field_name: str, **kwargs):
        message = self.MESSAGES.get(field_name, f"The {field_name} cannot be blank")
        super().__init__(message, **kwargs)
        self.field_name = field_name


class NotANumberError(DateValidationError):
    """A numeric field could not be read as an integer."""

    MESSAGES = {
        "year": "[%s] is not a valid year",
        "day": "The day of the month parameter, [%s] is not a number",
    }

    def __init__(self, field_name: str, raw_value: str, **kwargs):
        template = self.MESSAGES.get(field_name, "[%s] is not a number")
        super().__init__(template % (raw_value,), **kwargs)
        self.field_name = field_name
        self.raw_value = raw_value


class NonPositiveYearError(DateValidationError):
    """Year was zero or negative."""

    MESSAGE = "The year provided cannot be 0 or less."

    def __init__(self, value: int, **kwargs):
        super().__init__(self.MESSAGE, **kwargs)
        self.value = value


class NonPositiveDayError(DateValidationError):
    """Day of month was zero or negative."""

    MESSAGE = "The day of the month provided cannot be 0 or less."

    def __init__(self, value: int, **kwargs):
        super().__init__(self.MESSAGE, **kwargs)
        self.value = value


class YearOutOfRangeError(DateValidationError):
    """Year falls outside the configured inclusive bounds."""

    MESSAGE = "The year provided, [%s], was not in the range %04d .. %04d."

    def __init__(self, year: int, min_year: int, max_year: int, **kwargs):
        super().__init__(self.MESSAGE % (year, min_year, max_year), **kwargs)
        self.year = year
        self.min_year = min_year
        self.max_year = max_year


class InvalidMonthIndexError(DateValidationError):
    """Month is not a number in 1..12."""

    MESSAGE = "Invalid Month value, [%s], provided"

    def __init__(self, raw_value: Any, **kwargs):
        super().__init__(self.MESSAGE % (raw_value,), **kwargs)
        self.raw_value = raw_value


class DayOutOfRangeForMonthError(DateValidationError):
    """Day exceeds the length of the month for the year's leap status."""

    MESSAGE = "Day [%s] is not a valid month day in %s, %s"

    def __init__(self, day: int, month: Any, year: Any, **kwargs):
        month_name = getattr(month, "name", month)
        super().__init__(self.MESSAGE % (day, month_name, year), **kwargs)
        self.day = day
        self.month = month
        self.year = year


class RangeBoundsError(DateValidationError):
    """Base class for a bad min/max year configuration."""

    def __init__(self, message: str, min_year: int, max_year: int, **kwargs):
        super().__init__(message, **kwargs)
        self.min_year = min_year
        self.max_year = max_year


class RangeBoundsInvalidError(RangeBoundsError):
    """A year bound is zero or negative."""

    MESSAGE = "The year range provided cannot contain a value of 0 or less."

    def __init__(self, min_year: int, max_year: int, inverted: bool = False, **kwargs):
        message = self.MESSAGE
        if inverted:
            message = f"{message} {RangeBoundsInvertedError.MESSAGE % (min_year, max_year)}"
        super().__init__(message, min_year, max_year, **kwargs)
        self.inverted = inverted


class RangeBoundsInvertedError(RangeBoundsError):
    """Minimum year is greater than maximum year."""

    MESSAGE = ("The minimum year parameter, %s, must be lower than "
               "the maximum year parameter, %s")

    def __init__(self, min_year: int, max_year: int, **kwargs):
        super().__init__(self.MESSAGE % (min_year, max_year), min_year, max_year, **kwargs)


class MissingEndDateError(DateValidationError):
    """days_between was called without an end date."""

    MESSAGE = "The End Date cannot be null"

    def __init__(self, **kwargs):
        super().__init__(self.MESSAGE, **kwargs)


class EndDateBeforeStartDateError(DateValidationError):
    """End date sorts before the start date."""

    MESSAGE = "The End Date cannot be before the Start Date"

    def __init__(self, start: Any = None, end: Any = None, **kwargs):
        super().__init__(self.MESSAGE, **kwargs)
        self.start = start
        self.end = end
