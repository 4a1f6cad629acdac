"""TimePoint: an immutable point in time.

A TimePoint holds integer epoch seconds (UTC) together with the
formatting options and timezone resolver it was created with. Every
transform returns a new TimePoint that inherits both.

Examples:
    >>> from timepoint import TimePoint
    >>> from timepoint.units.timezone import Timezone
    >>> point = TimePoint("2020-02-25 13:00", timezone=Timezone.utc())
    >>> point.epoch_seconds
    1582635600
    >>> point.move("+1 day").format("%Y-%m-%d %H:%M")
    '2020-02-26 13:00'
    >>> point.first_of_month().to_string()
    '2020-02-01 00:00:00'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from timepoint.config import get_settings
from timepoint.core.options import FormatOptions, OptionsLike, merge_options, resolve_options
from timepoint.infer import is_timestamp, parse_epoch

if TYPE_CHECKING:
    from timepoint.arithmetic.comparisons import Ordering
    from timepoint.arithmetic.ops import Span
    from timepoint.arithmetic.range_ops import UnitLike
    from timepoint.clock import Clock
    from timepoint.format import FormatSpec
    from timepoint.units.timezone import TimezoneResolver


class TimePoint:
    """A point in time with formatting options and a timezone.

    TimePoint instances are immutable. Equality and hashing use the epoch
    only; ordering goes through compare(), after() and before().

    Attributes:
        epoch_seconds: Seconds since 1970-01-01T00:00:00Z.
        options: FormatOptions used by format() without a pattern.
        timezone: Resolver for calendar semantics (boundaries, formatting,
            relative strings).

    Examples:
        >>> from timepoint.units.timezone import Timezone
        >>> TimePoint(0, timezone=Timezone.utc())
        TimePoint(0, '1970-01-01 00:00:00')

        >>> TimePoint(86400) == TimePoint("86400")
        True
    """

    __slots__ = ("_epoch", "_options", "_tz")

    def __init__(
        self,
        value: Any = None,
        options: OptionsLike | None = None,
        *,
        reference: Any = None,
        timezone: TimezoneResolver | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Create a TimePoint.

        Args:
            value: Epoch seconds, a numeric or date string, or another
                TimePoint. None means the current time from the clock.
            options: Overrides merged over the configured FormatOptions.
            reference: Anchor for relative date strings ("+1 day").
            timezone: Resolver for this instance. Defaults to the configured one.
            clock: Source of "now". Defaults to the configured one.

        Raises:
            ParseError: If value cannot be parsed.
            InvalidArgument: If options is not a valid options mapping.
        """
        settings = get_settings()
        timezone = timezone if timezone is not None else settings.timezone
        clock = clock if clock is not None else settings.clock

        resolved = merge_options(settings.options, options)
        if value is None:
            epoch = parse_epoch(clock(), timezone=timezone, clock=clock)
        else:
            epoch = parse_epoch(value, reference, timezone=timezone, clock=clock)

        self._epoch: int = epoch
        self._options: FormatOptions = resolved
        self._tz: TimezoneResolver = timezone

    @classmethod
    def _from_epoch(
        cls,
        epoch: int,
        options: OptionsLike | None = None,
        timezone: TimezoneResolver | None = None,
    ) -> TimePoint:
        """Create a TimePoint from an already validated epoch.

        This is an internal factory method that bypasses parsing.
        Missing options and timezone come from the active settings.
        """
        if timezone is None or not isinstance(options, FormatOptions):
            settings = get_settings()
            if timezone is None:
                timezone = settings.timezone
            if not isinstance(options, FormatOptions):
                options = merge_options(settings.options, options)

        instance = object.__new__(cls)
        instance._epoch = epoch
        instance._options = options
        instance._tz = timezone
        return instance

    @classmethod
    def now(
        cls,
        options: OptionsLike | None = None,
        *,
        timezone: TimezoneResolver | None = None,
        clock: Clock | None = None,
    ) -> TimePoint:
        """Return the current time from the clock."""
        return cls(None, options, timezone=timezone, clock=clock)

    @classmethod
    def parse(
        cls,
        value: Any,
        reference: Any = None,
        *,
        options: OptionsLike | None = None,
        timezone: TimezoneResolver | None = None,
        clock: Clock | None = None,
    ) -> TimePoint:
        """Parse any supported value into a TimePoint.

        Unlike the constructor, None is rejected rather than read as "now".

        Raises:
            ParseError: If value is None or cannot be parsed.
        """
        if value is None:
            from timepoint.errors import ParseError

            raise ParseError("cannot parse None; use TimePoint.now() for the current time", value)
        return cls(value, options, reference=reference, timezone=timezone, clock=clock)

    @classmethod
    def from_format(
        cls,
        text: str,
        fmt: str,
        *,
        options: OptionsLike | None = None,
        timezone: TimezoneResolver | None = None,
    ) -> TimePoint:
        """Parse ``text`` with a strftime-style pattern.

        Examples:
            >>> from timepoint.units.timezone import Timezone
            >>> TimePoint.from_format("25.02.2020 13:00", "%d.%m.%Y %H:%M",
            ...                       timezone=Timezone.utc()).epoch_seconds
            1582635600
        """
        from timepoint.format.strftime import strptime

        return strptime(text, fmt, timezone=timezone, options=options)

    @staticmethod
    def is_timestamp(value: Any) -> bool:
        """Return True if value is numeric and equal to its integer cast."""
        return is_timestamp(value)

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def epoch_seconds(self) -> int:
        return self._epoch

    @property
    def options(self) -> FormatOptions:
        return self._options

    @property
    def timezone(self) -> TimezoneResolver:
        return self._tz

    def get_options(self, overrides: OptionsLike | None = None) -> FormatOptions:
        """Return this instance's options with per-call overrides applied.

        The overrides are not persisted; use set_options() for that.
        """
        return resolve_options(self._options, overrides)

    # =========================================================================
    # Transforms
    # =========================================================================

    def move(self, span: Span) -> TimePoint:
        """Return a TimePoint shifted by seconds or a relative date string."""
        from timepoint.arithmetic.ops import move

        return move(self, span)

    def copy(self, span_or_options: Any = None) -> TimePoint:
        """Return a copy, optionally moved or with merged options."""
        from timepoint.arithmetic.ops import copy

        return copy(self, span_or_options)

    def set_time(self, value: Any) -> TimePoint:
        """Return a TimePoint at ``value`` with this instance's options and timezone."""
        from timepoint.arithmetic.ops import set_time

        return set_time(self, value)

    def set_options(self, overrides: OptionsLike) -> TimePoint:
        """Return a TimePoint with ``overrides`` merged into the options."""
        from timepoint.arithmetic.ops import set_options

        return set_options(self, overrides)

    # =========================================================================
    # Formatting
    # =========================================================================

    def format(self, spec: FormatSpec = None) -> str:
        """Format with a strftime pattern, or with the options template.

        Examples:
            >>> from timepoint.units.timezone import Timezone
            >>> point = TimePoint(1582635600, timezone=Timezone.utc())
            >>> point.format()
            '25.02.2020 13:00'
            >>> point.format("%H:%M")
            '13:00'
            >>> point.format({"datetime": "{date}"})
            '25.02.2020'
        """
        from timepoint.format import format_point

        return format_point(self, spec)

    def php_date(self, fmt: str) -> str:
        """Format with PHP date() format characters."""
        from timepoint.format.phpdate import php_date

        return php_date(self, fmt)

    def to_string(self) -> str:
        """Canonical "YYYY-MM-DD HH:MM:SS" in this instance's timezone."""
        from timepoint.format import to_string

        return to_string(self)

    def debug_info(self) -> dict[str, Any]:
        """Return a summary of this instance for debugging output."""
        return {
            "string": self.to_string(),
            "formatted": self.format(),
            "epoch": self._epoch,
            "options": self._options.to_dict(),
            "timezone": repr(self._tz),
        }

    # =========================================================================
    # Comparison
    # =========================================================================

    def compare(self, other: Any) -> Ordering:
        """Three-way comparison by epoch seconds."""
        from timepoint.arithmetic.comparisons import compare

        return compare(self, other)

    def after(self, other: Any) -> bool:
        from timepoint.arithmetic.comparisons import after

        return after(self, other)

    def before(self, other: Any) -> bool:
        from timepoint.arithmetic.comparisons import before

        return before(self, other)

    def equal(self, other: Any) -> bool:
        from timepoint.arithmetic.comparisons import equal

        return equal(self, other)

    # =========================================================================
    # Boundaries and ranges
    # =========================================================================

    def first_of(self, unit: UnitLike, move: Span = None) -> TimePoint:
        from timepoint.arithmetic.range_ops import first_of

        return first_of(self, unit, move)

    def last_of(self, unit: UnitLike, move: Span = None) -> TimePoint:
        from timepoint.arithmetic.range_ops import last_of

        return last_of(self, unit, move)

    def first_of_day(self, move: Span = None) -> TimePoint:
        from timepoint.arithmetic.range_ops import first_of_day

        return first_of_day(self, move)

    def first_of_month(self, move: Span = None) -> TimePoint:
        from timepoint.arithmetic.range_ops import first_of_month

        return first_of_month(self, move)

    def first_of_year(self, move: Span = None) -> TimePoint:
        from timepoint.arithmetic.range_ops import first_of_year

        return first_of_year(self, move)

    def last_of_day(self, move: Span = None) -> TimePoint:
        from timepoint.arithmetic.range_ops import last_of_day

        return last_of_day(self, move)

    def last_of_month(self, move: Span = None) -> TimePoint:
        from timepoint.arithmetic.range_ops import last_of_month

        return last_of_month(self, move)

    def last_of_year(self, move: Span = None) -> TimePoint:
        from timepoint.arithmetic.range_ops import last_of_year

        return last_of_year(self, move)

    def between(self, start: Any, end: Any) -> bool:
        """True if this point is strictly between start and end."""
        from timepoint.arithmetic.range_ops import between

        return between(self, start, end)

    def within(self, start: Any, end: Any) -> bool:
        """True if this point is between start and end, bounds included."""
        from timepoint.arithmetic.range_ops import within

        return within(self, start, end)

    def on_day(self, day: Any) -> bool:
        from timepoint.arithmetic.range_ops import on_day

        return on_day(self, day)

    def in_month(self, month: Any) -> bool:
        from timepoint.arithmetic.range_ops import in_month

        return in_month(self, month)

    def in_year(self, year: Any) -> bool:
        from timepoint.arithmetic.range_ops import in_year

        return in_year(self, year)

    # =========================================================================
    # Dunder methods
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        """Two TimePoints are equal if they hold the same epoch."""
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self._epoch == other._epoch

    def __hash__(self) -> int:
        return hash(self._epoch)

    def __repr__(self) -> str:
        return f"TimePoint({self._epoch}, {self.to_string()!r})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["TimePoint"]
