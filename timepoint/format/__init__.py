"""Formatting and format-driven parsing.

Public API:
    format_point: Format with an explicit pattern or the options template.
    to_string: Canonical "YYYY-MM-DD HH:MM:SS" rendering.
    strftime: strftime-style formatting.
    strptime: strftime-style parsing.
    php_date: PHP date()-style formatting.

Examples:
    >>> from timepoint import TimePoint
    >>> from timepoint.units.timezone import Timezone
    >>> point = TimePoint("2020-02-25 13:00", timezone=Timezone.utc())
    >>> format_point(point)
    '25.02.2020 13:00'
    >>> format_point(point, {"date": "%Y-%m-%d"})
    '2020-02-25 13:00'
    >>> to_string(point)
    '2020-02-25 13:00:00'
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Union

from timepoint.core.options import FormatOptions, resolve_options
from timepoint.errors import InvalidArgument
from timepoint.format.phpdate import php_date
from timepoint.format.strftime import strftime, strptime

if TYPE_CHECKING:
    from timepoint.core.point import TimePoint

FormatSpec = Union[str, FormatOptions, Mapping[str, str], None]


def format_point(point: "TimePoint", spec: FormatSpec = None) -> str:
    """Format a TimePoint.

    Args:
        point: The TimePoint to format.
        spec: A strftime pattern used as is, or None / an options mapping
            whose keys override the point's options for this call only.

    Raises:
        InvalidArgument: If spec has any other type, or the mapping is invalid.
    """
    if isinstance(spec, str):
        return strftime(point, spec)
    if spec is None or isinstance(spec, (Mapping, FormatOptions)):
        options = resolve_options(point.options, spec)
        return strftime(point, options.template())
    raise InvalidArgument(
        f"format spec must be a string, a mapping or None, got {type(spec).__name__}"
    )


def to_string(point: "TimePoint") -> str:
    """Canonical rendering in the point's timezone, independent of options."""
    c = point.timezone.to_civil(point.epoch_seconds)
    return (
        f"{c.year:04d}-{c.month:02d}-{c.day:02d} "
        f"{c.hour:02d}:{c.minute:02d}:{c.second:02d}"
    )


__all__ = [
    "FormatSpec",
    "format_point",
    "to_string",
    "strftime",
    "strptime",
    "php_date",
]
