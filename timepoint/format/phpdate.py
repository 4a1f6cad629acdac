"""PHP ``date()`` style formatting.

Format characters are single letters; a backslash makes the next
character literal. Names are always English, matching PHP.

Supported Characters:
    Day:      d D j l N S w z
    Week:     W
    Month:    F m M n t
    Year:     L o Y y
    Time:     a A g G h H i s u v
    Timezone: e T P p O Z
    Full:     c r U

Examples:
    >>> from timepoint import TimePoint
    >>> from timepoint.units.timezone import Timezone
    >>> point = TimePoint("2020-02-25 13:00", timezone=Timezone.utc())
    >>> php_date(point, "D, jS F Y g:i a")
    'Tue, 25th February 2020 1:00 pm'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from timepoint._internal.calendar import (
    CivilTime,
    civil_from_days,
    days_from_civil,
    days_in_month,
    is_leap_year,
)
from timepoint.units.timezone import _format_offset

if TYPE_CHECKING:
    from timepoint.core.point import TimePoint

_DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_MONTH_NAMES = (
    "",
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def _ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _iso_week(civil: CivilTime) -> tuple[int, int]:
    """ISO 8601 (year, week) of a date; weeks start on Monday."""
    thursday = civil.to_days() - civil.weekday + 3
    year = civil_from_days(thursday)[0]
    week = (thursday - days_from_civil(year, 1, 1)) // 7 + 1
    return year, week


def _hour12(hour: int) -> int:
    return hour % 12 or 12


class _Context:
    """Civil fields plus zone data for one point, shared by the renderers."""

    __slots__ = ("civil", "epoch", "timezone")

    def __init__(self, point: "TimePoint") -> None:
        self.epoch = point.epoch_seconds
        self.timezone = point.timezone
        self.civil = self.timezone.to_civil(self.epoch)

    @property
    def offset(self) -> int:
        return self.timezone.utcoffset(self.epoch)


_Renderer = Callable[[_Context], str]

_RENDERERS: dict[str, _Renderer] = {
    # Day
    "d": lambda c: f"{c.civil.day:02d}",
    "D": lambda c: _DAY_NAMES[c.civil.weekday][:3],
    "j": lambda c: str(c.civil.day),
    "l": lambda c: _DAY_NAMES[c.civil.weekday],
    "N": lambda c: str(c.civil.weekday + 1),
    "S": lambda c: _ordinal_suffix(c.civil.day),
    "w": lambda c: str((c.civil.weekday + 1) % 7),
    "z": lambda c: str(c.civil.day_of_year - 1),
    # Week
    "W": lambda c: f"{_iso_week(c.civil)[1]:02d}",
    # Month
    "F": lambda c: _MONTH_NAMES[c.civil.month],
    "m": lambda c: f"{c.civil.month:02d}",
    "M": lambda c: _MONTH_NAMES[c.civil.month][:3],
    "n": lambda c: str(c.civil.month),
    "t": lambda c: str(days_in_month(c.civil.year, c.civil.month)),
    # Year
    "L": lambda c: "1" if is_leap_year(c.civil.year) else "0",
    "o": lambda c: str(_iso_week(c.civil)[0]),
    "Y": lambda c: f"{c.civil.year:04d}",
    "y": lambda c: f"{c.civil.year % 100:02d}",
    # Time
    "a": lambda c: "am" if c.civil.hour < 12 else "pm",
    "A": lambda c: "AM" if c.civil.hour < 12 else "PM",
    "g": lambda c: str(_hour12(c.civil.hour)),
    "G": lambda c: str(c.civil.hour),
    "h": lambda c: f"{_hour12(c.civil.hour):02d}",
    "H": lambda c: f"{c.civil.hour:02d}",
    "i": lambda c: f"{c.civil.minute:02d}",
    "s": lambda c: f"{c.civil.second:02d}",
    "u": lambda c: "000000",
    "v": lambda c: "000",
    # Timezone
    "e": lambda c: getattr(c.timezone, "key", None) or c.timezone.tzname(c.epoch),
    "T": lambda c: c.timezone.tzname(c.epoch),
    "P": lambda c: _format_offset(c.offset),
    "p": lambda c: "Z" if c.offset == 0 else _format_offset(c.offset),
    "O": lambda c: _format_offset(c.offset, colon=False),
    "Z": lambda c: str(c.offset),
    # Full date/time
    "c": lambda c: _render(c, "Y-m-d\\TH:i:sP"),
    "r": lambda c: _render(c, "D, d M Y H:i:s O"),
    "U": lambda c: str(c.epoch),
}


def _render(context: _Context, fmt: str) -> str:
    result = []
    i = 0
    while i < len(fmt):
        char = fmt[i]
        if char == "\\" and i + 1 < len(fmt):
            result.append(fmt[i + 1])
            i += 2
            continue
        renderer = _RENDERERS.get(char)
        result.append(renderer(context) if renderer else char)
        i += 1
    return "".join(result)


def php_date(point: "TimePoint", fmt: str) -> str:
    """Format a TimePoint with PHP ``date()`` format characters.

    Unknown characters are copied through unchanged.

    Examples:
        >>> from timepoint import TimePoint
        >>> from timepoint.units.timezone import Timezone
        >>> php_date(TimePoint(1582635600, timezone=Timezone.utc()), "c")
        '2020-02-25T13:00:00+00:00'
    """
    return _render(_Context(point), fmt)


__all__ = ["php_date"]
