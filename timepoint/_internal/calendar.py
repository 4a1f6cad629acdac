"""Calendar utilities for Timepoint.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, and conversions between civil
fields and days/seconds since the Unix epoch (1970-01-01).

This module is not part of the public API.
"""

from __future__ import annotations

from typing import NamedTuple

from timepoint._internal.constants import (
    DAYS_IN_MONTH,
    EPOCH_WEEKDAY,
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)

# Days in the 400/100/4-year Gregorian cycles
_DAYS_IN_400_YEARS = 146097
_DAYS_IN_100_YEARS = 36524
_DAYS_IN_4_YEARS = 1461

# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


class CivilTime(NamedTuple):
    """Wall-clock fields of a point in time in some timezone."""

    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0

    @property
    def weekday(self) -> int:
        """Day of week, Monday=0 through Sunday=6."""
        return weekday_from_days(days_from_civil(self.year, self.month, self.day))

    @property
    def day_of_year(self) -> int:
        """Day of the year, 1-366."""
        return _days_before_month(self.year, self.month) + self.day

    @property
    def seconds_of_day(self) -> int:
        return self.hour * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE + self.second

    def to_days(self) -> int:
        """Days since 1970-01-01 for the date part."""
        return days_from_civil(self.year, self.month, self.day)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2020)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (0001-01-01 is day 1).

    Python's floor division keeps the formula valid for year 0 and
    negative years as well.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number back to year, month, day.

    Uses the 400/100/4/1-year cycle decomposition; divmod floors, so
    ordinals before year 1 fall into the previous 400-year cycle.
    """
    n = ordinal - 1

    n400, n = divmod(n, _DAYS_IN_400_YEARS)
    n100, n = divmod(n, _DAYS_IN_100_YEARS)
    n4, n = divmod(n, _DAYS_IN_4_YEARS)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert day-of-year (1-366) to month and day."""
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


_EPOCH_ORDINAL = ymd_to_ordinal(1970, 1, 1)


def days_from_civil(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 for the given date (negative before it)."""
    return ymd_to_ordinal(year, month, day) - _EPOCH_ORDINAL


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Year, month, day for a count of days since 1970-01-01."""
    return ordinal_to_ymd(days + _EPOCH_ORDINAL)


def weekday_from_days(days: int) -> int:
    """Day of week (Monday=0) for a count of days since 1970-01-01."""
    return (days + EPOCH_WEEKDAY) % 7


def civil_from_epoch(epoch: int, offset: int = 0) -> CivilTime:
    """Split epoch seconds into civil fields at a fixed UTC offset."""
    days, secs = divmod(epoch + offset, SECONDS_PER_DAY)
    year, month, day = civil_from_days(days)
    hour, secs = divmod(secs, SECONDS_PER_HOUR)
    minute, second = divmod(secs, SECONDS_PER_MINUTE)
    return CivilTime(year, month, day, hour, minute, second)


def epoch_from_civil(civil: CivilTime, offset: int = 0) -> int:
    """Inverse of civil_from_epoch for a fixed UTC offset."""
    return civil.to_days() * SECONDS_PER_DAY + civil.seconds_of_day - offset


def add_months(year: int, month: int, day: int, months: int) -> tuple[int, int, int]:
    """Shift a date by whole months, clamping the day to the target month.

    Examples:
        >>> add_months(2020, 1, 31, 1)
        (2020, 2, 29)
        >>> add_months(2020, 3, 15, -3)
        (2019, 12, 15)
    """
    total = year * 12 + (month - 1) + months
    year, month = divmod(total, 12)
    month += 1
    return (year, month, min(day, days_in_month(year, month)))


def add_days(year: int, month: int, day: int, days: int) -> tuple[int, int, int]:
    """Shift a date by a number of calendar days."""
    return civil_from_days(days_from_civil(year, month, day) + days)


__all__ = [
    "CivilTime",
    "is_leap_year",
    "days_in_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "days_from_civil",
    "civil_from_days",
    "weekday_from_days",
    "civil_from_epoch",
    "epoch_from_civil",
    "add_months",
    "add_days",
]
