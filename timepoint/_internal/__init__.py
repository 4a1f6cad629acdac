"""Internal utilities for Timepoint.

This module contains private implementation details:
    - Constants and magic numbers
    - Proleptic Gregorian calendar math
    - Field validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from timepoint._internal.calendar import (
    CivilTime,
    civil_from_epoch,
    days_in_month,
    epoch_from_civil,
    is_leap_year,
)
from timepoint._internal.validation import (
    validate_date,
    validate_epoch,
    validate_time,
)

__all__: list[str] = [
    "CivilTime",
    "civil_from_epoch",
    "days_in_month",
    "epoch_from_civil",
    "is_leap_year",
    "validate_date",
    "validate_epoch",
    "validate_time",
]
