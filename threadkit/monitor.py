"""Monitor object: a lock and condition guarding a client's state."""

from __future__ import annotations

import threading
from typing import Any, Callable


class LockGuard:
    """An already acquired lock, released on ``release()`` or leaving a ``with`` block."""

    def __init__(self, lock: threading.Lock) -> None:
        self._lock = lock
        self._held = True

    @property
    def held(self) -> bool:
        return self._held

    def release(self) -> None:
        if self._held:
            self._held = False
            self._lock.release()

    def __enter__(self) -> "LockGuard":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.release()


class Monitor:
    """Serialises access to shared state and lets threads wait on predicates over it."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._condition = threading.Condition(self._lock)

    def get_lock(self) -> LockGuard:
        """Acquire the monitor lock and return a guard holding it."""
        self._lock.acquire()
        return LockGuard(self._lock)

    def wait(self, predicate: Callable[..., bool], *args: Any) -> LockGuard:
        """Block until ``predicate(*args)`` holds; return a guard still holding the lock."""
        self._lock.acquire()
        try:
            self._condition.wait_for(lambda: predicate(*args))
        except BaseException:
            self._lock.release()
            raise
        return LockGuard(self._lock)

    def wait_for(
        self, timeout: float, predicate: Callable[..., bool], *args: Any
    ) -> tuple[bool, LockGuard]:
        """Wait up to ``timeout`` seconds for the predicate.

        Returns whether the predicate held, and a guard still holding the lock.
        """
        self._lock.acquire()
        try:
            result = bool(self._condition.wait_for(lambda: predicate(*args), timeout))
        except BaseException:
            self._lock.release()
            raise
        return result, LockGuard(self._lock)

    def notify_one(self, func: Callable[..., Any], *args: Any) -> Any:
        """Run ``func`` under the lock, then wake one waiter; return its result."""
        return self._notify(False, func, *args)

    def notify_all(self, func: Callable[..., Any], *args: Any) -> Any:
        """Run ``func`` under the lock, then wake every waiter; return its result."""
        return self._notify(True, func, *args)

    def _notify(self, broadcast: bool, func: Callable[..., Any], *args: Any) -> Any:
        with self._condition:
            try:
                return func(*args)
            finally:
                if broadcast:
                    self._condition.notify_all()
                else:
                    self._condition.notify()