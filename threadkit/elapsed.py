"""Helpers for measuring elapsed time."""

from __future__ import annotations

import time
from enum import IntEnum
from typing import Any, Callable


class TimeUnit(IntEnum):
    """Length of a unit in nanoseconds."""

    NANOSECONDS = 1
    MICROSECONDS = 1_000
    MILLISECONDS = 1_000_000
    SECONDS = 1_000_000_000


Clock = Callable[[], int]


def _truncate(diff_ns: int, unit: int) -> int:
    if diff_ns >= 0:
        return diff_ns // unit
    return -((-diff_ns) // unit)


class ElapsedTime:
    """Measures time from ``start()`` to ``stop()``.

    ``clock`` returns nanoseconds; the result is a whole count of ``unit``.
    """

    def __init__(self, clock: Clock = time.monotonic_ns, unit: int = TimeUnit.MILLISECONDS) -> None:
        self._clock = clock
        self._unit = int(unit)
        self._tp = 0

    def start(self) -> None:
        """Record the current instant."""
        self._tp = self._clock()

    def stop(self) -> int:
        """Return the time since ``start()``, truncated to whole units."""
        return _truncate(self._clock() - self._tp, self._unit)


class Stopwatch:
    """Context manager storing the time spent inside its block in ``elapsed``."""

    def __init__(self, clock: Clock = time.monotonic_ns, unit: int = TimeUnit.MILLISECONDS) -> None:
        self._clock = clock
        self._unit = int(unit)
        self._tp = 0
        self.elapsed = 0

    def __enter__(self) -> "Stopwatch":
        self._tp = self._clock()
        return self

    def __exit__(self, *args: Any) -> None:
        self.elapsed = _truncate(self._clock() - self._tp, self._unit)


def elapsed_time(func: Callable[..., Any], *args: Any, **kwargs: Any) -> tuple[Any, int]:
    """Call ``func`` and return its result with the milliseconds it took."""
    with Stopwatch() as watch:
        result = func(*args, **kwargs)
    return result, watch.elapsed