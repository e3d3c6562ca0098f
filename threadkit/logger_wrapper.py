"""Convenience front end over a tagged logger, with one set of methods per verbosity level."""

from __future__ import annotations

from typing import Any

from .logger import LoggerBase, LogVerbosity
from .logging_helper import to_str

_NOT_AVAILABLE = "<n/a>"


def _require_str(msg: Any) -> str:
    if not isinstance(msg, str):
        raise TypeError(f"log message must be a string, got {type(msg).__name__}")
    return msg


class LoggerWrapper:
    """Owns a logger created from ``logger_cls`` and offers level-specific helpers.

    The ``*_with_func`` variants prefix the message with ``[func] ``; the
    ``*_args_with_func`` variants convert each argument with
    :func:`threadkit.logging_helper.to_str`, writing ``<n/a>`` for those that
    have no string form.
    """

    def __init__(self, logger_cls: type, tag: str, *args: Any) -> None:
        if not (isinstance(logger_cls, type) and issubclass(logger_cls, LoggerBase)):
            raise TypeError("Invalid logger type!")
        self._logger: LoggerBase = logger_cls.create_logger(tag, *args)

    @property
    def logger(self) -> LoggerBase:
        return self._logger

    # Shared implementation

    def _log(self, verbosity: LogVerbosity, msg: str) -> None:
        self._logger.log(verbosity, _require_str(msg))

    def _log_with_func(self, verbosity: LogVerbosity, func: str, msg: str) -> None:
        self._logger.log(verbosity, f"[{func}] {_require_str(msg)}")

    def _log_args_with_func(self, verbosity: LogVerbosity, func: str, *args: Any) -> None:
        parts = []
        for arg in args:
            text = to_str(arg)
            parts.append(_NOT_AVAILABLE if text is None else text)
        self._logger.log(verbosity, f"[{func}] " + "".join(parts))

    def _log_formatted(self, verbosity: LogVerbosity, fmt: str, *args: Any) -> None:
        self._logger.log_formatted(verbosity, fmt, *args)

    def _log_formatted_with_func(
        self, verbosity: LogVerbosity, func: str, fmt: str, *args: Any
    ) -> None:
        self._logger.log_formatted(verbosity, f"[{func}] {fmt}", *args)

    # Trace level

    def log_trace(self, msg: str) -> None:
        self._log(LogVerbosity.TRACE, msg)

    def log_trace_with_func(self, func: str, msg: str) -> None:
        self._log_with_func(LogVerbosity.TRACE, func, msg)

    def log_trace_args_with_func(self, func: str, *args: Any) -> None:
        self._log_args_with_func(LogVerbosity.TRACE, func, *args)

    def log_trace_formatted(self, fmt: str, *args: Any) -> None:
        self._log_formatted(LogVerbosity.TRACE, fmt, *args)

    def log_trace_formatted_with_func(self, func: str, fmt: str, *args: Any) -> None:
        self._log_formatted_with_func(LogVerbosity.TRACE, func, fmt, *args)

    # Debug level

    def log_debug(self, msg: str) -> None:
        self._log(LogVerbosity.DEBUG, msg)

    def log_debug_with_func(self, func: str, msg: str) -> None:
        self._log_with_func(LogVerbosity.DEBUG, func, msg)

    def log_debug_args_with_func(self, func: str, *args: Any) -> None:
        self._log_args_with_func(LogVerbosity.DEBUG, func, *args)

    def log_debug_formatted(self, fmt: str, *args: Any) -> None:
        self._log_formatted(LogVerbosity.DEBUG, fmt, *args)

    def log_debug_formatted_with_func(self, func: str, fmt: str, *args: Any) -> None:
        self._log_formatted_with_func(LogVerbosity.DEBUG, func, fmt, *args)

    # Info level

    def log_info(self, msg: str) -> None:
        self._log(LogVerbosity.INFO, msg)

    def log_info_with_func(self, func: str, msg: str) -> None:
        self._log_with_func(LogVerbosity.INFO, func, msg)

    def log_info_args_with_func(self, func: str, *args: Any) -> None:
        self._log_args_with_func(LogVerbosity.INFO, func, *args)

    def log_info_formatted(self, fmt: str, *args: Any) -> None:
        self._log_formatted(LogVerbosity.INFO, fmt, *args)

    def log_info_formatted_with_func(self, func: str, fmt: str, *args: Any) -> None:
        self._log_formatted_with_func(LogVerbosity.INFO, func, fmt, *args)

    # Warning level

    def log_warning(self, msg: str) -> None:
        self._log(LogVerbosity.WARNING, msg)

    def log_warning_with_func(self, func: str, msg: str) -> None:
        self._log_with_func(LogVerbosity.WARNING, func, msg)

    def log_warning_args_with_func(self, func: str, *args: Any) -> None:
        self._log_args_with_func(LogVerbosity.WARNING, func, *args)

    def log_warning_formatted(self, fmt: str, *args: Any) -> None:
        self._log_formatted(LogVerbosity.WARNING, fmt, *args)

    def log_warning_formatted_with_func(self, func: str, fmt: str, *args: Any) -> None:
        self._log_formatted_with_func(LogVerbosity.WARNING, func, fmt, *args)

    # Error level

    def log_error(self, msg: str) -> None:
        self._log(LogVerbosity.ERROR, msg)

    def log_error_with_func(self, func: str, msg: str) -> None:
        self._log_with_func(LogVerbosity.ERROR, func, msg)

    def log_error_args_with_func(self, func: str, *args: Any) -> None:
        self._log_args_with_func(LogVerbosity.ERROR, func, *args)

    def log_error_formatted(self, fmt: str, *args: Any) -> None:
        self._log_formatted(LogVerbosity.ERROR, fmt, *args)

    def log_error_formatted_with_func(self, func: str, fmt: str, *args: Any) -> None:
        self._log_formatted_with_func(LogVerbosity.ERROR, func, fmt, *args)