"""Loggers with verbosity levels, tags, console output and fan-out to several loggers."""

from __future__ import annotations

import sys
import threading
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import Any, Generic, TextIO, TypeVar

from .commons import string_format

T = TypeVar("T")


class LogVerbosity(IntEnum):
    """Message verbosity, from the most detailed to the most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4


def _require_str(msg: Any) -> str:
    if not isinstance(msg, str):
        raise TypeError(f"log message must be a string, got {type(msg).__name__}")
    return msg


class Logger(ABC):
    """Interface of every logger: log a message at a verbosity level."""

    @abstractmethod
    def log(self, verbosity: LogVerbosity, msg: str) -> None:
        """Log ``msg`` at ``verbosity``."""


class LoggerWithTag(Logger):
    """Logger carrying a tag, such as a channel path, that prefixes its output."""

    def __init__(self, tag: str) -> None:
        self._tag = tag

    def tag(self) -> str:
        """Return the logging tag."""
        return self._tag


class LoggerBase(LoggerWithTag):
    """Logger whose output is produced by the subclass's ``log_impl_with_tag``."""

    @classmethod
    def create_logger(cls, tag: str, *args: Any) -> "LoggerBase":
        """Create a logger of this class with ``tag`` and further constructor arguments."""
        return cls(tag, *args)

    def log(self, verbosity: LogVerbosity, msg: str) -> None:
        """Log ``msg`` at ``verbosity``."""
        self.log_impl_with_tag(verbosity, _require_str(msg))

    def log_formatted(self, verbosity: LogVerbosity, fmt: str, *args: Any) -> None:
        """Log a printf-style formatted message.

        A format that does not fit its arguments is reported on standard
        error instead of raising.
        """
        try:
            msg = string_format(fmt, *args)
        except Exception as exc:  # noqa: BLE001 - reported, never raised
            sys.stderr.write(f"<Error> {exc}")
            return
        self.log_impl_with_tag(verbosity, msg)

    @abstractmethod
    def log_impl_with_tag(self, verbosity: LogVerbosity, msg: str) -> None:
        """Write ``msg`` to the logger's medium."""


class CoutLogger(LoggerBase):
    """Writes ``<tag>: message`` lines to standard output, errors to standard error.

    Messages below ``level`` are dropped, except errors, which always go out.
    """

    _class_lock = threading.Lock()

    def __init__(
        self,
        tag: str,
        level: LogVerbosity = LogVerbosity.INFO,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        super().__init__(tag)
        self._level = LogVerbosity(level)
        self._out = out
        self._err = err

    @property
    def level(self) -> LogVerbosity:
        return self._level

    def log_impl_with_tag(self, verbosity: LogVerbosity, msg: str) -> None:
        with CoutLogger._class_lock:
            line = string_format("<%s>: %s\n", self.tag(), msg)
            if verbosity == LogVerbosity.ERROR:
                (self._err if self._err is not None else sys.stderr).write(line)
            elif verbosity >= self._level:
                (self._out if self._out is not None else sys.stdout).write(line)


class ConsoleLogger:
    """Plain console logger serialised by a lock shared by all its instances."""

    _class_lock = threading.Lock()

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out

    def _stream(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    def log_all(self, *args: Any) -> None:
        """Write every argument, one after another, with no separator or newline."""
        with ConsoleLogger._class_lock:
            self._stream().write("".join(str(arg) for arg in args))

    def log(self, fmt: str, *args: Any) -> None:
        """Write a line: ``fmt`` as it is, or printf-formatted with ``args`` if any.

        Raises RuntimeError when the arguments do not fit the format.
        """
        with ConsoleLogger._class_lock:
            msg = string_format(fmt, *args) if args else fmt
            self._stream().write(msg + "\n")


class LoggingMerge:
    """Logs every message to several loggers at once."""

    def __init__(self, *policies: Logger) -> None:
        self._policies = tuple(policies)

    @property
    def policies(self) -> tuple[Logger, ...]:
        return self._policies

    def log(self, verbosity: LogVerbosity, msg: str) -> None:
        """Log ``msg`` to every logger."""
        _require_str(msg)
        for policy in self._policies:
            policy.log(verbosity, msg)

    def log_to(self, policy: int, verbosity: LogVerbosity, msg: str) -> None:
        """Log ``msg`` to the logger at index ``policy``.

        Raises IndexError when there is no such logger.
        """
        if not 0 <= policy < len(self._policies):
            raise IndexError("Policy index out of range!")
        self._policies[policy].log(verbosity, _require_str(msg))


class DataLogger(ABC, Generic[T]):
    """Interface of loggers that record data items rather than messages."""

    @abstractmethod
    def log(self, data: T) -> None:
        """Record ``data``."""