"""Timepoint: an immutable date/time value with flexible parsing.

Timepoint turns epoch integers, numeric strings and natural date strings
("2020-02-25 13:00", "+1 day", "first day of next month") into a single
canonical value, and offers chainable transforms, template-based
formatting, explicit comparisons and calendar range queries on it.

Core Types:
    TimePoint: Immutable point in time with options and a timezone
    FormatOptions: Date/time/datetime formatting templates

Units:
    TimeUnit: Standard time units (SECOND ... YEAR)
    Timezone: Fixed UTC offset resolver
    LocalTimezone: Platform local time resolver
    ZoneInfoTimezone: IANA zone resolver

Configuration:
    configure: Install process-wide options, timezone and clock
    get_settings: Return the active settings
    reset: Restore built-in defaults

Exceptions:
    TimepointError: Base exception
    ParseError: Input could not be resolved to a timestamp
    InvalidArgument: Wrong type or shape passed to an operation
    TimezoneError: Invalid or unknown timezone

Example:
    >>> from timepoint import TimePoint, Timezone
    >>> point = TimePoint("2020-02-25 13:00", timezone=Timezone.utc())
    >>> point.move("+1 day").format("%Y-%m-%d %H:%M")
    '2020-02-26 13:00'
"""

from __future__ import annotations

from typing import Any

__version__ = "0.1.0"

# Core types
from timepoint.core.options import FormatOptions
from timepoint.core.point import TimePoint

# Units
from timepoint.units.timeunit import TimeUnit
from timepoint.units.timezone import (
    LocalTimezone,
    Timezone,
    TimezoneResolver,
    ZoneInfoTimezone,
)

# Clocks and configuration
from timepoint.clock import FixedClock, system_clock
from timepoint.config import Settings, configure, get_settings, reset

# Comparison result
from timepoint.arithmetic.comparisons import Ordering

# Exceptions
from timepoint.errors import (
    InvalidArgument,
    ParseError,
    TimepointError,
    TimezoneError,
)


def parse(value: Any, reference: Any = None, **kwargs: Any) -> TimePoint:
    """Parse any supported value into a TimePoint.

    Keyword arguments (options, timezone, clock) are passed to
    TimePoint.parse().

    Raises:
        ParseError: If value is None or cannot be parsed.
    """
    return TimePoint.parse(value, reference, **kwargs)


__all__: list[str] = [
    "__version__",
    "parse",
    # Core types
    "TimePoint",
    "FormatOptions",
    "Ordering",
    # Units
    "TimeUnit",
    "Timezone",
    "LocalTimezone",
    "ZoneInfoTimezone",
    "TimezoneResolver",
    # Clocks and configuration
    "FixedClock",
    "system_clock",
    "Settings",
    "configure",
    "get_settings",
    "reset",
    # Exceptions
    "TimepointError",
    "ParseError",
    "InvalidArgument",
    "TimezoneError",
]
