"""TimeUnit enumeration.

Units name the steps of relative expressions ("+3 days", "next month")
and the spans of boundary queries (first/last of a day, month or year).
Seconds, minutes and hours are elapsed time; days and longer follow the
calendar of the resolving timezone.
"""

from __future__ import annotations

from enum import Enum

from timepoint._internal.constants import SECONDS_PER_HOUR, SECONDS_PER_MINUTE


class TimeUnit(Enum):
    """Units understood by relative expressions and boundary queries.

    Examples:
        >>> TimeUnit("hour").to_seconds()
        3600
        >>> TimeUnit.MONTH.is_elapsed
        False
    """

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

    @property
    def is_elapsed(self) -> bool:
        """True for units added as a fixed number of seconds."""
        return self in _ELAPSED_SECONDS

    def to_seconds(self) -> int:
        """Length of one unit in seconds.

        Raises:
            ValueError: For calendar units (day and longer), whose length
                depends on the date and timezone they are applied in.
        """
        try:
            return _ELAPSED_SECONDS[self]
        except KeyError:
            raise ValueError(f"{self.value} is a calendar unit with no fixed length") from None


_ELAPSED_SECONDS: dict[TimeUnit, int] = {
    TimeUnit.SECOND: 1,
    TimeUnit.MINUTE: SECONDS_PER_MINUTE,
    TimeUnit.HOUR: SECONDS_PER_HOUR,
}


__all__ = ["TimeUnit"]
