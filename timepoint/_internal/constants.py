"""Internal constants for Timepoint.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400
DAYS_PER_WEEK: int = 7

# Epoch values are signed 64-bit integers
MIN_EPOCH: int = -(2**63)
MAX_EPOCH: int = 2**63 - 1

# Calendar limits accepted by the string parser
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# 1970-01-01 was a Thursday (Monday=0)
EPOCH_WEEKDAY: int = 3

# Timezone offset limits (in seconds)
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR


__all__ = [
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "DAYS_PER_WEEK",
    "MIN_EPOCH",
    "MAX_EPOCH",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "EPOCH_WEEKDAY",
    "MAX_UTC_OFFSET_SECONDS",
]
