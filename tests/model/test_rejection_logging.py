"""Tests for structured logging of rejected input and logging configuration."""

import pytest
import structlog
from structlog.testing import capture_logs

from daycount.errors import DayOutOfRangeForMonthError, InvalidMonthIndexError
from daycount.logging.config import configure_logging, get_logger, log_rejected_input
from daycount.model.date import Date
from daycount.model.month import Month


@pytest.fixture(autouse=True)
def reset_structlog():
    """Leave structlog unconfigured for the next test."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


class TestRejectionLogging:
    """Rejected input is logged at debug level and still raised."""

    def test_rejected_date_is_logged_and_raised(self):
        with capture_logs() as cap_logs:
            with pytest.raises(DayOutOfRangeForMonthError):
                Date.parse("29 02 2001")

        assert len(cap_logs) == 1
        entry = cap_logs[0]
        assert entry["event"] == "Input rejected"
        assert entry["log_level"] == "debug"
        assert entry["field"] == "date"
        assert entry["raw_value"] == "29 02 2001"
        assert entry["error_type"] == "DayOutOfRangeForMonthError"
        assert "FEBRUARY" in entry["reason"]

    def test_non_numeric_month_is_logged(self):
        with capture_logs() as cap_logs:
            with pytest.raises(InvalidMonthIndexError):
                Month.parse("blah")

        assert [entry["field"] for entry in cap_logs] == ["month"]
        assert cap_logs[0]["raw_value"] == "blah"

    def test_month_and_date_both_log(self):
        with capture_logs() as cap_logs:
            with pytest.raises(InvalidMonthIndexError):
                Date.parse("10 blah 1902")

        assert [entry["field"] for entry in cap_logs] == ["month", "date"]

    def test_valid_date_logs_nothing(self):
        with capture_logs() as cap_logs:
            Date.parse("25 12 2000").days_between(Date.parse("26 12 2000"))

        assert cap_logs == []

    def test_context_is_bound(self):
        logger = get_logger("test")
        with capture_logs() as cap_logs:
            log_rejected_input(logger, "year", "x", ValueError("bad"), context={"row": 3})

        assert cap_logs[0]["context"] == {"row": 3}
        assert cap_logs[0]["error_type"] == "ValueError"
        assert cap_logs[0]["reason"] == "bad"


class TestConfigureLogging:
    """Test structlog configuration."""

    def test_json_renderer(self):
        configure_logging(level="DEBUG", format_json=True, cache_loggers=False)

        config = structlog.get_config()
        assert structlog.is_configured()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)
        assert config["cache_logger_on_first_use"] is False

    def test_console_renderer_with_caller(self):
        configure_logging(level="info", include_caller=True, include_timestamp=False,
                          cache_loggers=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert any(isinstance(p, structlog.processors.CallsiteParameterAdder) for p in processors)
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)

    def test_extra_processors_run_before_renderer(self):
        def marker(logger, method_name, event_dict):
            return event_dict

        configure_logging(extra_processors=[marker], cache_loggers=False)

        processors = structlog.get_config()["processors"]
        assert processors[-2] is marker

    def test_invalid_level(self):
        with pytest.raises(AttributeError):
            configure_logging(level="NOT_A_LEVEL", cache_loggers=False)
