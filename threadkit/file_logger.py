"""Logger that caches data and writes it to a file from a background thread."""

from __future__ import annotations

import queue
import threading
from concurrent.futures import Future
from typing import Any, Callable, Iterable

from .logger import DataLogger


class FileLogger(DataLogger[Iterable[Any]]):
    """Collects logged items in a cache of ``cache`` entries and writes it out when full.

    ``file`` is an output stream with ``write(chunk)`` and ``close()``, such as a
    :class:`threadkit.filestream.BinaryOutputFileStream` for bytes or a
    :class:`threadkit.filestream.CharOutputFileStream` for strings. All cache
    and file work runs, in order, on a background thread named ``name``.
    Closing flushes the cache, stops the thread and closes the file.
    """

    def __init__(self, cache: int, file: Any, name: str = "file-logger") -> None:
        if cache < 0:
            raise ValueError("cache size must not be negative")
        self._capacity = cache
        self._buffer: list[Any] = []
        self._file = file
        self._tasks: queue.Queue = queue.Queue()
        self._lock = threading.Lock()
        self._closed = False
        self._thread = threading.Thread(target=self._run, name=name, daemon=True)
        self._thread.start()

    @property
    def closed(self) -> bool:
        return self._closed

    def _run(self) -> None:
        while True:
            item = self._tasks.get()
            if item is None:
                break
            job, future = item
            if not future.set_running_or_notify_cancel():
                continue
            try:
                future.set_result(job())
            except BaseException as exc:  # noqa: BLE001 - handed to the future
                future.set_exception(exc)

    def _put(self, job: Callable[[], Any]) -> Future:
        future: Future = Future()
        self._tasks.put((job, future))
        return future

    def _flush(self) -> None:
        if self._buffer:
            self._file.write(self._buffer)
        self._buffer = []

    def _store(self, items: list[Any]) -> None:
        if self._capacity - len(self._buffer) < len(items):
            # Never grow the cache: write it out and keep the new data instead.
            self._flush()
            self._buffer = items
            self._capacity = max(self._capacity, len(items))
        else:
            self._buffer.extend(items)

    def log(self, data: Iterable[Any]) -> None:
        """Queue ``data`` for the cache; the call returns without waiting.

        Raises RuntimeError once the logger is closed.
        """
        items = list(data)
        with self._lock:
            if self._closed:
                raise RuntimeError("logger is closed")
            self._put(lambda: self._store(items))

    def close(self) -> None:
        """Flush the cache to the file, stop the thread and close the file."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            flushed = self._put(self._flush)
            self._tasks.put(None)
        try:
            flushed.result()
        finally:
            self._thread.join()
            self._file.close()

    def __enter__(self) -> "FileLogger":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()