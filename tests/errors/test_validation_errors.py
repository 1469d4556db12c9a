"""
Error classification tests.

Covers the validation error hierarchy, its context attributes and the
messages rendered from offending input.
"""

import pytest

from daycount.errors import (
    BlankInputError,
    ConfigurationError,
    DateValidationError,
    DayOutOfRangeForMonthError,
    EndDateBeforeStartDateError,
    InvalidMonthIndexError,
    MalformedDateStringError,
    MissingEndDateError,
    NonPositiveDayError,
    NonPositiveYearError,
    NotANumberError,
    RangeBoundsError,
    RangeBoundsInvalidError,
    RangeBoundsInvertedError,
    YearOutOfRangeError,
)
from daycount.model.month import Month


class TestErrorClassification:
    """Test error classification system."""

    @pytest.mark.parametrize("error", [
        MalformedDateStringError("x"),
        BlankInputError("year"),
        NotANumberError("day", "x"),
        NonPositiveYearError(0),
        NonPositiveDayError(0),
        YearOutOfRangeError(1800, 1900, 2010),
        InvalidMonthIndexError("13"),
        DayOutOfRangeForMonthError(30, Month.FEBRUARY, 2000),
        RangeBoundsInvalidError(0, 2010),
        RangeBoundsInvertedError(2010, 1900),
        MissingEndDateError(),
        EndDateBeforeStartDateError(),
    ])
    def test_validation_error_hierarchy(self, error):
        """Every validation error is a DateValidationError and a ValueError."""
        assert isinstance(error, DateValidationError)
        assert isinstance(error, ValueError)
        assert error.context == {}
        assert error.message == str(error)

    def test_context_is_kept(self):
        error = NonPositiveDayError(-1, context={"source": "form"})
        assert error.context == {"source": "form"}
        assert error.value == -1

    def test_range_bounds_errors_share_base(self):
        assert isinstance(RangeBoundsInvalidError(0, 1), RangeBoundsError)
        assert isinstance(RangeBoundsInvertedError(2, 1), RangeBoundsError)
        assert not isinstance(RangeBoundsInvertedError(2, 1), RangeBoundsInvalidError)

    def test_configuration_error_is_not_validation_error(self):
        error = ConfigurationError("bad", issues=["issue"])
        assert isinstance(error, RuntimeError)
        assert not isinstance(error, DateValidationError)
        assert error.issues == ["issue"]


class TestErrorMessages:
    """Test messages interpolate the offending input."""

    def test_malformed_date_string(self):
        error = MalformedDateStringError("Hello World")
        assert str(error) == (
            "[Hello World] is not a valid date format, it must be in the format DD MM YYYY"
        )

    def test_blank_input_messages(self):
        assert str(BlankInputError("year")) == "Year cannot be blank"
        assert str(BlankInputError("day")) == "The day of the month is a mandatory parameter"
        assert str(BlankInputError("month")) == "The month cannot be blank"

    def test_not_a_number_messages(self):
        assert str(NotANumberError("year", "abc")) == "[abc] is not a valid year"
        assert str(NotANumberError("day", "abc")) == (
            "The day of the month parameter, [abc] is not a number"
        )

    def test_day_out_of_range_uses_month_name(self):
        error = DayOutOfRangeForMonthError(31, Month.APRIL, "1990")
        assert str(error) == "Day [31] is not a valid month day in APRIL, 1990"

    def test_year_out_of_range(self):
        error = YearOutOfRangeError(2011, 1900, 2010)
        assert str(error) == "The year provided, [2011], was not in the range 1900 .. 2010."

    def test_range_bounds_invalid_alone(self):
        error = RangeBoundsInvalidError(0, 2010)
        assert error.inverted is False
        assert str(error) == "The year range provided cannot contain a value of 0 or less."

    def test_range_bounds_invalid_and_inverted(self):
        error = RangeBoundsInvalidError(5, 0, inverted=True)
        assert str(error) == (
            "The year range provided cannot contain a value of 0 or less. "
            "The minimum year parameter, 5, must be lower than the maximum year parameter, 0"
        )
