"""Transform operations for TimePoint.

Every operation is pure: it returns a new TimePoint and never touches
its input. Results inherit the source's options and timezone unless the
operation replaces them.

Supported Operations:
    - move: Shift by seconds or by a relative date string
    - copy: Duplicate, optionally shifted or with merged options
    - set_time: Same options and timezone, different point in time
    - set_options: Same point in time, merged options
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Union

from timepoint._internal.validation import validate_epoch
from timepoint.core.options import FormatOptions, OptionsLike, merge_options
from timepoint.errors import InvalidArgument
from timepoint.infer import parse_epoch

if TYPE_CHECKING:
    from timepoint.core.point import TimePoint

Span = Union[int, str, None]


def _derive(point: "TimePoint", epoch: int, options: FormatOptions | None = None) -> "TimePoint":
    from timepoint.core.point import TimePoint

    return TimePoint._from_epoch(
        epoch, options if options is not None else point.options, point.timezone
    )


def move(point: "TimePoint", span: Span) -> "TimePoint":
    """Return a TimePoint shifted by ``span``.

    Args:
        point: The starting point.
        span: None (no change), an int number of seconds, or a date string
            resolved relative to ``point`` in its timezone ("+1 day",
            "next monday", "first day of next month").

    Raises:
        InvalidArgument: If span has any other type.
        ParseError: If the string cannot be resolved or the result leaves
            the 64-bit range.

    Examples:
        >>> from timepoint import TimePoint
        >>> from timepoint.units.timezone import Timezone
        >>> point = TimePoint(1582635600, timezone=Timezone.utc())
        >>> move(point, 60).epoch_seconds
        1582635660
        >>> str(move(point, "+1 day"))
        '2020-02-26 13:00:00'
    """
    if span is None:
        return _derive(point, point.epoch_seconds)

    if isinstance(span, bool):
        raise InvalidArgument(f"cannot move by a bool: {span!r}")

    if isinstance(span, int):
        return _derive(point, validate_epoch(point.epoch_seconds + span, span))

    if isinstance(span, str):
        epoch = parse_epoch(span, point.epoch_seconds, timezone=point.timezone)
        return _derive(point, epoch)

    raise InvalidArgument(
        f"move span must be an int, a string or None, got {type(span).__name__}"
    )


def copy(point: "TimePoint", span_or_options: Any = None) -> "TimePoint":
    """Return a copy of ``point``, optionally moved or with merged options.

    Args:
        point: The source.
        span_or_options: None, a span accepted by ``move``, or an options
            mapping merged over the source's options.

    Raises:
        InvalidArgument: For any other argument type or invalid options.
    """
    if span_or_options is None:
        return _derive(point, point.epoch_seconds)

    if isinstance(span_or_options, (Mapping, FormatOptions)):
        return _derive(
            point, point.epoch_seconds, merge_options(point.options, span_or_options)
        )

    if isinstance(span_or_options, (int, str)) and not isinstance(span_or_options, bool):
        return move(point, span_or_options)

    raise InvalidArgument(
        "copy expects a span (int or str), an options mapping or None, "
        f"got {type(span_or_options).__name__}"
    )


def set_time(point: "TimePoint", value: Any) -> "TimePoint":
    """Return a TimePoint at ``value`` that keeps ``point``'s options and timezone.

    Raises:
        ParseError: If value cannot be parsed.
    """
    return _derive(point, parse_epoch(value, timezone=point.timezone))


def set_options(point: "TimePoint", overrides: OptionsLike) -> "TimePoint":
    """Return a TimePoint with ``overrides`` merged into its options.

    Raises:
        InvalidArgument: If overrides is not a valid options mapping.
    """
    return _derive(point, point.epoch_seconds, merge_options(point.options, overrides))


__all__ = [
    "Span",
    "move",
    "copy",
    "set_time",
    "set_options",
]
