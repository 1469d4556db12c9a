"""
Integer field parsing for the textual DD MM YYYY format.

Fields are plain ASCII decimal integers. A leading sign is tolerated so
that negative values reach the range checks instead of being reported as
non-numeric.
"""

import re
from typing import Any, Optional

from ..errors import BlankInputError, NotANumberError

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def is_blank(text: Optional[str]) -> bool:
    """True for None, empty or whitespace-only text."""
    return text is None or not text.strip()


def parse_integer_field(text: Optional[str], field_name: str) -> int:
    """
    Parse a mandatory integer field.

    Args:
        text: Raw field text
        field_name: Field label used in error messages ("year", "day")

    Returns:
        The parsed integer

    Raises:
        BlankInputError: If text is None, empty or whitespace only
        NotANumberError: If text is not a decimal integer
    """
    if is_blank(text):
        raise BlankInputError(field_name)

    if not _INTEGER_PATTERN.fullmatch(text):
        raise NotANumberError(field_name, text)

    try:
        return int(text)
    except ValueError as error:
        # Digit strings past the interpreter's conversion limit
        raise NotANumberError(field_name, text) from error


def require_integer(value: Any, field_name: str) -> int:
    """
    Reject non-integer values passed to a constructor.

    Raises:
        NotANumberError: If value is not an int (bools included)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise NotANumberError(field_name, value)
    return value
