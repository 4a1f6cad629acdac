"""Comparison operations for TimePoint.

TimePoint defines no ordering operators; these functions are the
canonical way to order points in time.

Comparison Rules:
    - Points are compared by epoch seconds only; options and timezone
      never affect the result.
    - Arguments that are not TimePoints (ints, numeric strings, date
      strings) are parsed first. Date strings are anchored at the left
      operand and resolved in its timezone, so ``after(x, "+1 day")``
      asks whether x is after the day following x.
    - None is rejected rather than treated as "now".

Supported Operations:
    - compare: Return an Ordering (LESS, EQUAL, GREATER)
    - after: Test strictly later
    - before: Test strictly earlier
    - equal: Test same epoch
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Any

from timepoint.errors import InvalidArgument
from timepoint.infer import parse_epoch

if TYPE_CHECKING:
    from timepoint.units.timezone import TimezoneResolver


class Ordering(IntEnum):
    """Result of a three-way comparison."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def _epochs(left: Any, right: Any) -> tuple[int, int]:
    from timepoint.core.point import TimePoint

    if left is None or right is None:
        raise InvalidArgument("cannot compare with None")

    timezone: TimezoneResolver | None = None
    if isinstance(left, TimePoint):
        timezone = left.timezone

    left_epoch = parse_epoch(left, timezone=timezone)
    right_epoch = parse_epoch(right, left_epoch, timezone=timezone)
    return left_epoch, right_epoch


def compare(left: Any, right: Any) -> Ordering:
    """Compare two points in time.

    Args:
        left: A TimePoint or any parseable value.
        right: A TimePoint or any parseable value.

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER.

    Raises:
        InvalidArgument: If either argument is None.
        ParseError: If either argument cannot be parsed.

    Examples:
        >>> compare(1582635600, 1582635601)
        <Ordering.LESS: -1>
        >>> compare(1582635600, "1582635600")
        <Ordering.EQUAL: 0>
    """
    left_epoch, right_epoch = _epochs(left, right)
    if left_epoch < right_epoch:
        return Ordering.LESS
    if left_epoch > right_epoch:
        return Ordering.GREATER
    return Ordering.EQUAL


def after(left: Any, right: Any) -> bool:
    """Test if left is strictly later than right."""
    return compare(left, right) is Ordering.GREATER


def before(left: Any, right: Any) -> bool:
    """Test if left is strictly earlier than right."""
    return compare(left, right) is Ordering.LESS


def equal(left: Any, right: Any) -> bool:
    """Test if left and right are the same point in time."""
    return compare(left, right) is Ordering.EQUAL


__all__ = [
    "Ordering",
    "compare",
    "after",
    "before",
    "equal",
]
