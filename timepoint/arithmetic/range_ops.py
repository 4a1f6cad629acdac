"""Calendar boundaries and range membership.

Boundaries are computed on the civil calendar of the point's timezone:
the first second of a day, month or year, and the last second (one
second before the first of the next unit). Range queries compare epoch
seconds.

Functions:
    - first_of, last_of: Boundary of the day/month/year containing a point
    - first_of_day, first_of_month, first_of_year: Shortcuts
    - last_of_day, last_of_month, last_of_year: Shortcuts
    - between: Exclusive range membership
    - within: Inclusive range membership
    - on_day, in_month, in_year: Membership of a calendar unit
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

from timepoint._internal.calendar import CivilTime, add_days, add_months
from timepoint.arithmetic.ops import Span, move as _move, set_time
from timepoint.errors import InvalidArgument, ParseError
from timepoint.infer import parse_epoch
from timepoint.units.timeunit import TimeUnit

if TYPE_CHECKING:
    from timepoint.core.point import TimePoint

UnitLike = Union[TimeUnit, str]

_BOUNDARY_UNITS = (TimeUnit.DAY, TimeUnit.MONTH, TimeUnit.YEAR)

# A bare year: "2020" or 2020
_YEAR_LENGTH = 4


def _boundary_unit(unit: UnitLike) -> TimeUnit:
    if isinstance(unit, str):
        try:
            unit = TimeUnit(unit.lower())
        except ValueError:
            raise InvalidArgument(f"unknown time unit: {unit!r}") from None
    if unit not in _BOUNDARY_UNITS:
        raise InvalidArgument(
            f"boundaries are only defined for day, month and year, got {unit!r}"
        )
    return unit


def _start_civil(civil: CivilTime, unit: TimeUnit) -> CivilTime:
    if unit == TimeUnit.DAY:
        return CivilTime(civil.year, civil.month, civil.day)
    if unit == TimeUnit.MONTH:
        return CivilTime(civil.year, civil.month, 1)
    return CivilTime(civil.year, 1, 1)


def _next_start_civil(civil: CivilTime, unit: TimeUnit) -> CivilTime:
    start = _start_civil(civil, unit)
    if unit == TimeUnit.DAY:
        return CivilTime(*add_days(start.year, start.month, start.day, 1))
    if unit == TimeUnit.MONTH:
        return CivilTime(*add_months(start.year, start.month, 1, 1))
    return CivilTime(start.year + 1, 1, 1)


def _at_civil(point: "TimePoint", civil: CivilTime, adjust: int = 0) -> "TimePoint":
    from timepoint.core.point import TimePoint

    try:
        epoch = point.timezone.from_civil(civil) + adjust
    except (OverflowError, OSError, ValueError) as exc:
        raise ParseError(f"cannot resolve {civil!r}: {exc}", civil) from exc
    return TimePoint._from_epoch(epoch, point.options, point.timezone)


def first_of(point: "TimePoint", unit: UnitLike, move: Span = None) -> "TimePoint":
    """Return the first second of the day, month or year containing ``point``.

    Args:
        point: The reference point.
        unit: TimeUnit.DAY, TimeUnit.MONTH or TimeUnit.YEAR (or their names).
        move: Optional span applied to the boundary afterwards.

    Raises:
        InvalidArgument: If unit is not day, month or year.

    Examples:
        >>> from timepoint import TimePoint
        >>> from timepoint.units.timezone import Timezone
        >>> point = TimePoint("2020-02-15 13:00", timezone=Timezone.utc())
        >>> str(first_of(point, TimeUnit.MONTH))
        '2020-02-01 00:00:00'
    """
    unit = _boundary_unit(unit)
    civil = point.timezone.to_civil(point.epoch_seconds)
    return _move(_at_civil(point, _start_civil(civil, unit)), move)


def last_of(point: "TimePoint", unit: UnitLike, move: Span = None) -> "TimePoint":
    """Return the last second of the day, month or year containing ``point``.

    Examples:
        >>> from timepoint import TimePoint
        >>> from timepoint.units.timezone import Timezone
        >>> point = TimePoint("2020-02-15 13:00", timezone=Timezone.utc())
        >>> str(last_of(point, TimeUnit.MONTH))
        '2020-02-29 23:59:59'
    """
    unit = _boundary_unit(unit)
    civil = point.timezone.to_civil(point.epoch_seconds)
    return _move(_at_civil(point, _next_start_civil(civil, unit), -1), move)


def first_of_day(point: "TimePoint", move: Span = None) -> "TimePoint":
    return first_of(point, TimeUnit.DAY, move)


def first_of_month(point: "TimePoint", move: Span = None) -> "TimePoint":
    return first_of(point, TimeUnit.MONTH, move)


def first_of_year(point: "TimePoint", move: Span = None) -> "TimePoint":
    return first_of(point, TimeUnit.YEAR, move)


def last_of_day(point: "TimePoint", move: Span = None) -> "TimePoint":
    return last_of(point, TimeUnit.DAY, move)


def last_of_month(point: "TimePoint", move: Span = None) -> "TimePoint":
    return last_of(point, TimeUnit.MONTH, move)


def last_of_year(point: "TimePoint", move: Span = None) -> "TimePoint":
    return last_of(point, TimeUnit.YEAR, move)


def _bounds(point: "TimePoint", start: Any, end: Any) -> tuple[int, int]:
    if start is None or end is None:
        raise InvalidArgument("range bounds must not be None")
    anchor = point.epoch_seconds
    return (
        parse_epoch(start, anchor, timezone=point.timezone),
        parse_epoch(end, anchor, timezone=point.timezone),
    )


def between(point: "TimePoint", start: Any, end: Any) -> bool:
    """Test ``start < point < end`` (both bounds excluded).

    Examples:
        >>> from timepoint import TimePoint
        >>> from timepoint.units.timezone import Timezone
        >>> point = TimePoint("2020-01-01", timezone=Timezone.utc())
        >>> between(point, "2020-01-01", "2020-12-31")
        False
        >>> within(point, "2020-01-01", "2020-12-31")
        True
    """
    low, high = _bounds(point, start, end)
    return low < point.epoch_seconds < high


def within(point: "TimePoint", start: Any, end: Any) -> bool:
    """Test ``start <= point <= end`` (both bounds included)."""
    low, high = _bounds(point, start, end)
    return low <= point.epoch_seconds <= high


def _in_unit(point: "TimePoint", value: Any, unit: TimeUnit) -> bool:
    if value is None:
        raise InvalidArgument(f"{unit.value} must not be None")
    target = set_time(point, value)
    return within(point, first_of(target, unit), last_of(target, unit))


def on_day(point: "TimePoint", day: Any) -> bool:
    """Test whether ``point`` falls on the calendar day of ``day``."""
    return _in_unit(point, day, TimeUnit.DAY)


def in_month(point: "TimePoint", month: Any) -> bool:
    """Test whether ``point`` falls in the calendar month of ``month``."""
    return _in_unit(point, month, TimeUnit.MONTH)


def in_year(point: "TimePoint", year: Any) -> bool:
    """Test whether ``point`` falls in the calendar year of ``year``.

    A bare four-character string or a four-digit int is read as a year
    ("2020" -> "2020-01-01") rather than as a time of day or timestamp.

    Examples:
        >>> from timepoint import TimePoint
        >>> from timepoint.units.timezone import Timezone
        >>> in_year(TimePoint("2020-06-15", timezone=Timezone.utc()), 2020)
        True
    """
    if isinstance(year, str) and len(year.strip()) == _YEAR_LENGTH:
        year = f"{year.strip()}-01-01"
    elif isinstance(year, int) and not isinstance(year, bool) and 1000 <= year <= 9999:
        year = f"{year}-01-01"
    return _in_unit(point, year, TimeUnit.YEAR)


__all__ = [
    "UnitLike",
    "first_of",
    "last_of",
    "first_of_day",
    "first_of_month",
    "first_of_year",
    "last_of_day",
    "last_of_month",
    "last_of_year",
    "between",
    "within",
    "on_day",
    "in_month",
    "in_year",
]
