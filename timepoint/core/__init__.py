"""Core types: FormatOptions and TimePoint."""

from __future__ import annotations

# Options first: config depends on it and point depends on config
from timepoint.core.options import FormatOptions, merge_options, resolve_options
from timepoint.core.point import TimePoint

__all__: list[str] = [
    "FormatOptions",
    "TimePoint",
    "merge_options",
    "resolve_options",
]
