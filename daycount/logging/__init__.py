"""
Logging configuration and utilities for daycount.
"""
from .config import configure_logging, get_logger, log_rejected_input

__all__ = ["configure_logging", "get_logger", "log_rejected_input"]
