"""TimePoint operations.

The functions in this module are the canonical implementations behind
the TimePoint methods of the same names.

Transform Operations (from timepoint.arithmetic.ops):
    - move: Shift by seconds or a relative date string
    - copy: Duplicate, optionally moved or with merged options
    - set_time: New point in time, same options and timezone
    - set_options: Same point in time, merged options

Comparison Operations (from timepoint.arithmetic.comparisons):
    - compare: Return an Ordering
    - after, before, equal: Ordering predicates

Range Operations (from timepoint.arithmetic.range_ops):
    - first_of, last_of and the day/month/year shortcuts
    - between, within: Exclusive/inclusive range membership
    - on_day, in_month, in_year: Calendar unit membership
"""

from __future__ import annotations

from timepoint.arithmetic.ops import (
    copy,
    move,
    set_options,
    set_time,
)
from timepoint.arithmetic.comparisons import (
    Ordering,
    after,
    before,
    compare,
    equal,
)
from timepoint.arithmetic.range_ops import (
    between,
    first_of,
    first_of_day,
    first_of_month,
    first_of_year,
    in_month,
    in_year,
    last_of,
    last_of_day,
    last_of_month,
    last_of_year,
    on_day,
    within,
)

__all__ = [
    # Transform operations
    "move",
    "copy",
    "set_time",
    "set_options",
    # Comparison operations
    "Ordering",
    "compare",
    "after",
    "before",
    "equal",
    # Range operations
    "first_of",
    "last_of",
    "first_of_day",
    "first_of_month",
    "first_of_year",
    "last_of_day",
    "last_of_month",
    "last_of_year",
    "between",
    "within",
    "on_day",
    "in_month",
    "in_year",
]
