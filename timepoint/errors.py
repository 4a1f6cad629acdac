"""Timepoint exception hierarchy.

All Timepoint-specific exceptions inherit from TimepointError.
"""

from __future__ import annotations

from typing import Any


class TimepointError(Exception):
    """Base exception for all Timepoint errors."""

    pass


class ParseError(TimepointError, ValueError):
    """Input could not be resolved to a timestamp.

    The offending input is kept on the ``input`` attribute so callers can
    report it without re-deriving it from the message.

    Examples:
        - Unrecognized date string ("not a date")
        - Invalid calendar fields ("2020-02-30")
        - Unsupported input type (a list, a bool)
    """

    def __init__(self, message: str, input: Any = None) -> None:
        super().__init__(message)
        self.input = input


class InvalidArgument(TimepointError, TypeError):
    """Wrong type or shape passed to an operation.

    Examples:
        - move() with a float or list span
        - Options override that is not a mapping
        - Unknown option key
        - Range query with an unsupported unit
    """

    pass


class TimezoneError(TimepointError):
    """Invalid or unknown timezone.

    Examples:
        - Invalid UTC offset format
        - Offset outside valid range (-14h to +14h)
        - Unknown IANA zone key
    """

    pass


__all__ = [
    "TimepointError",
    "ParseError",
    "InvalidArgument",
    "TimezoneError",
]
