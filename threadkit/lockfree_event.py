"""Single producer / single consumer event with compare-and-swap semantics."""

from __future__ import annotations

import argparse
import threading
import time
from enum import Enum
from typing import Any, Callable, NamedTuple

GIGA = 1_000_000_000


class Timespec(NamedTuple):
    tv_sec: int
    tv_nsec: int


def remained_time(start: int, end: int) -> Timespec:
    """Split the span from ``start`` to ``end`` (nanoseconds) into seconds and nanoseconds."""
    diff = int(end) - int(start)
    sec, nsec = divmod(abs(diff), GIGA)
    if diff < 0:
        return Timespec(-sec, -nsec)
    return Timespec(sec, nsec)


class EventState(Enum):
    WAITING = 1
    SIGNALED = 2


class LockFreeEvent:
    """Event whose waiters consume the signalled state; timeouts are in seconds."""

    def __init__(self, auto_reset: bool) -> None:
        self._auto_reset = auto_reset
        self._state = EventState.WAITING
        self._condition = threading.Condition()

    @property
    def state(self) -> EventState:
        return self._state

    def _try_consume(self) -> bool:
        if self._state is not EventState.SIGNALED:
            return False
        if self._auto_reset:
            self._state = EventState.WAITING
        return True

    def notify(self) -> None:
        """Signal the event and wake waiting threads."""
        with self._condition:
            self._state = EventState.SIGNALED
            self._condition.notify_all()

    def wait_for(self, timeout: float) -> bool:
        """Wait up to ``timeout`` seconds; return whether the event was signalled."""
        deadline = time.monotonic() + timeout
        with self._condition:
            while not self._try_consume():
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                self._condition.wait(remaining)
            return True

    def wait_until(self, deadline: float) -> bool:
        """Wait until the ``time.monotonic()`` instant ``deadline``."""
        now = time.monotonic()
        if deadline <= now:
            return False
        return self.wait_for(deadline - now)

    def wait(self) -> None:
        """Wait without limit until the event is signalled."""
        with self._condition:
            while not self._try_consume():
                self._condition.wait()

    def wait_and_then(self, func: Callable[..., Any], *args: Any) -> Any:
        """Wait for the event, then call ``func(*args)`` and return its result."""
        self.wait()
        return func(*args)


def main(argv: list[str] | None = None) -> int:
    """Run a producer that signals after a delay and a consumer that waits."""
    parser = argparse.ArgumentParser(prog="lockfree-event")
    parser.add_argument("--delay", type=int, default=1000, help="producer delay in ms")
    parser.add_argument("--timeout", type=int, default=700, help="consumer timeout in ms")
    parser.add_argument("--wait", action="store_true", help="wait without a timeout")
    args = parser.parse_args(argv)

    event = LockFreeEvent(True)
    print_lock = threading.Lock()

    def producer() -> None:
        time.sleep(args.delay / 1000)
        with print_lock:
            print(f"Signal event, after: {args.delay}ms")
        event.notify()

    def consumer() -> None:
        start = time.monotonic()
        if args.wait:
            event.wait()
        else:
            rv = event.wait_for(args.timeout / 1000)
            with print_lock:
                print(f"waitFor(): {'true' if rv else 'false'}")
        waited = int((time.monotonic() - start) * 1000)
        with print_lock:
            print(f"Waited for: {waited}ms")

    producer_thread = threading.Thread(target=producer)
    consumer_thread = threading.Thread(target=consumer)
    producer_thread.start()
    consumer_thread.start()
    consumer_thread.join()
    producer_thread.join()
    return 0