"""Configuration management for date validation bounds."""

from .defaults import (
    DEFAULT_MAX_YEAR,
    DEFAULT_MIN_YEAR,
    DefaultConfig,
    YearRangeParams,
    get_default_config,
)
from .loader import ConfigLoader
from .validation import ConfigIssue, ConfigValidator

__all__ = [
    "DEFAULT_MAX_YEAR",
    "DEFAULT_MIN_YEAR",
    "ConfigIssue",
    "ConfigLoader",
    "ConfigValidator",
    "DefaultConfig",
    "YearRangeParams",
    "get_default_config",
]
