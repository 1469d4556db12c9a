"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ConfigIssue:
    """Represents a configuration validation problem."""
    field: str
    message: str
    value: Any


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_year_range(params: dict[str, Any]) -> list[ConfigIssue]:
        """Validate year range parameters."""
        issues = []

        for field in ("min_year", "max_year"):
            if field in params:
                value = params[field]
                if not _is_int(value) or value <= 0:
                    issues.append(ConfigIssue(
                        field=field,
                        message="Must be a positive integer",
                        value=value
                    ))

        # Only compare bounds that are individually valid
        if not issues and "min_year" in params and "max_year" in params:
            if params["min_year"] > params["max_year"]:
                issues.append(ConfigIssue(
                    field="min_year",
                    message="Must not be greater than max_year",
                    value=params["min_year"]
                ))

        return issues

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ConfigIssue]:
        """Validate complete configuration."""
        issues = []

        if "year_range" in config:
            year_range = config["year_range"]
            if isinstance(year_range, dict):
                issues.extend(ConfigValidator.validate_year_range(year_range))
            else:
                issues.append(ConfigIssue(
                    field="year_range",
                    message="Must be a mapping",
                    value=year_range
                ))

        return issues
