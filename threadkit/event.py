"""Event synchronisation primitives for signalling one or all waiting threads."""

from __future__ import annotations

import threading
from enum import Enum

from .monitor import Monitor


class EventWait(Enum):
    """Outcome of a timed wait."""

    TIMEOUT = 0
    SIGNALED = 1


def _drop_current(waiting: list[int]) -> None:
    ident = threading.get_ident()
    waiting[:] = [t for t in waiting if t != ident]


class Event:
    """Event built on a lock and a condition variable.

    With ``auto_reset`` the event clears itself once the last waiting thread
    has been released, so the next wait blocks again. Timeouts are in seconds.
    """

    def __init__(self, auto_reset: bool) -> None:
        self._auto_reset = auto_reset
        self._condition = threading.Condition()
        self._predicate = False
        self._waiting: list[int] = []

    def wait_for(self, timeout: float) -> EventWait:
        """Wait until the event is signalled or ``timeout`` seconds pass."""
        with self._condition:
            outcome = EventWait.SIGNALED
            if not self._predicate:
                self._waiting.append(threading.get_ident())
                signaled = self._condition.wait_for(lambda: self._predicate, timeout)
                outcome = EventWait.SIGNALED if signaled else EventWait.TIMEOUT
                _drop_current(self._waiting)
                if self._auto_reset and not self._waiting:
                    self._predicate = False
            return outcome

    def wait(self) -> None:
        """Wait without limit until the event is signalled."""
        with self._condition:
            if not self._predicate:
                self._waiting.append(threading.get_ident())
                self._condition.wait_for(lambda: self._predicate)
                _drop_current(self._waiting)
                if self._auto_reset and not self._waiting:
                    self._predicate = False

    def notify(self) -> None:
        """Signal the event and wake a single waiting thread."""
        with self._condition:
            self._predicate = True
            self._condition.notify()

    def broadcast(self) -> None:
        """Signal the event and wake every waiting thread."""
        with self._condition:
            self._predicate = True
            self._condition.notify_all()

    def reset(self) -> None:
        """Clear the event by hand."""
        with self._condition:
            self._predicate = False


class MonitorEvent:
    """Event built on a :class:`Monitor`; ``wait_for`` returns a bool."""

    def __init__(self, auto_reset: bool) -> None:
        self._auto_reset = auto_reset
        self._sync = Monitor()
        self._flag = False
        self._waiting: list[int] = []

    def _after_wait(self) -> None:
        _drop_current(self._waiting)
        if self._auto_reset and not self._waiting:
            self._flag = False

    def wait(self) -> None:
        """Wait without limit until the event is signalled."""
        with self._sync.get_lock():
            if self._flag:
                return
            self._waiting.append(threading.get_ident())
        with self._sync.wait(lambda: self._flag):
            self._after_wait()

    def wait_for(self, timeout: float) -> bool:
        """Wait up to ``timeout`` seconds; return whether the event was signalled."""
        with self._sync.get_lock():
            if self._flag:
                return True
            self._waiting.append(threading.get_ident())
        result, guard = self._sync.wait_for(timeout, lambda: self._flag)
        with guard:
            self._after_wait()
        return result

    def _set(self) -> None:
        self._flag = True

    def signal(self) -> None:
        """Signal the event and wake a single waiting thread."""
        self._sync.notify_one(self._set)

    def broadcast(self) -> None:
        """Signal the event and wake every waiting thread."""
        self._sync.notify_all(self._set)