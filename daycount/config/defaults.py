"""Default configuration parameters for date validation."""

from dataclasses import dataclass

DEFAULT_MIN_YEAR = 1900
DEFAULT_MAX_YEAR = 2010


@dataclass(frozen=True)
class YearRangeParams:
    """Inclusive bounds a Year must fall within."""
    min_year: int = DEFAULT_MIN_YEAR
    max_year: int = DEFAULT_MAX_YEAR


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    year_range: YearRangeParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        year_range=YearRangeParams(),
    )
