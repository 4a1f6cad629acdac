"""Timepoint units: time units and timezone resolvers."""

from __future__ import annotations

from timepoint.units.timeunit import TimeUnit
from timepoint.units.timezone import (
    LocalTimezone,
    Timezone,
    TimezoneResolver,
    ZoneInfoTimezone,
)

__all__: list[str] = [
    "TimeUnit",
    "Timezone",
    "LocalTimezone",
    "ZoneInfoTimezone",
    "TimezoneResolver",
]
