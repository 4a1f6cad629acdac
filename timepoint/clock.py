"""Current-time sources.

A clock is any zero-argument callable returning integer epoch seconds.
"""

from __future__ import annotations

import time as _time
from typing import Callable

Clock = Callable[[], int]


def system_clock() -> int:
    """Return the current wall-clock time as integer epoch seconds."""
    return int(_time.time())


class FixedClock:
    """A clock frozen at a given epoch, for tests and reproducible runs.

    Examples:
        >>> clock = FixedClock(1582635600)
        >>> clock()
        1582635600
    """

    __slots__ = ("_epoch",)

    def __init__(self, epoch: int) -> None:
        self._epoch = int(epoch)

    def __call__(self) -> int:
        return self._epoch

    def __repr__(self) -> str:
        return f"FixedClock({self._epoch})"


__all__ = ["Clock", "system_clock", "FixedClock"]
