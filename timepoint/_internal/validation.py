"""Validation utilities for Timepoint.

Field checks shared by the string parser and strptime. Invalid fields
are reported as ParseError carrying the text being parsed.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import Any

from timepoint._internal.calendar import days_in_month
from timepoint._internal.constants import MAX_EPOCH, MAX_YEAR, MIN_EPOCH, MIN_YEAR
from timepoint.errors import ParseError


def validate_date(year: int, month: int, day: int, source: Any = None) -> None:
    """Validate that year, month, day form a valid calendar date.

    Raises:
        ParseError: If any field is out of range for the calendar.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ParseError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}", source
        )
    if month < 1 or month > 12:
        raise ParseError(f"month must be between 1 and 12, got {month}", source)

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ParseError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}",
            source,
        )


def validate_time(hour: int, minute: int, second: int, source: Any = None) -> None:
    """Validate a 24-hour time of day.

    Raises:
        ParseError: If hour, minute or second is out of range.
    """
    if hour < 0 or hour > 23:
        raise ParseError(f"hour must be between 0 and 23, got {hour}", source)
    if minute < 0 or minute > 59:
        raise ParseError(f"minute must be between 0 and 59, got {minute}", source)
    if second < 0 or second > 59:
        raise ParseError(f"second must be between 0 and 59, got {second}", source)


def validate_epoch(epoch: int, source: Any = None) -> int:
    """Check that an epoch value fits in a signed 64-bit integer."""
    if epoch < MIN_EPOCH or epoch > MAX_EPOCH:
        raise ParseError(f"timestamp {epoch} is outside the 64-bit range", source)
    return epoch


__all__ = [
    "validate_date",
    "validate_time",
    "validate_epoch",
]
