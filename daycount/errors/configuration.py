"""
Configuration failures raised when loaded settings do not validate.
"""

from typing import Any, Optional


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""

    def __init__(self, message: str, issues: Optional[list[Any]] = None):
        super().__init__(message)
        self.issues = issues or []
