"""String conversion for log arguments and building of log tags."""

from __future__ import annotations

import numbers
from enum import Enum
from typing import Any

from .commons import to_utype


def is_string(value: Any) -> bool:
    """Return whether ``value`` is already a string."""
    return isinstance(value, str)


def _number_to_str(value: Any) -> str:
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return "%f" % float(value)
    return str(value)


def to_str(value: Any) -> str | None:
    """Convert a log argument to a string.

    Strings are returned as they are, numbers in their decimal form, enum
    members by their underlying value, and objects with a ``to_string()``
    method returning a string by that method. Anything else gives None.
    """
    if is_string(value):
        return value
    if isinstance(value, Enum):
        underlying = to_utype(value)
        if isinstance(underlying, numbers.Number):
            return _number_to_str(underlying)
        return None
    if isinstance(value, numbers.Real):
        return _number_to_str(value)
    method = getattr(value, "to_string", None)
    if callable(method):
        result = method()
        if isinstance(result, str):
            return result
    return None


def append_subchannels(*subchannels: str) -> str:
    """Render subchannels as ``.sub1.sub2...``."""
    for sub in subchannels:
        if not is_string(sub):
            raise TypeError(f"subchannel must be a string, got {type(sub).__name__}")
    return "".join("." + sub for sub in subchannels)


def generate_log_tag(app: str, channel: str, *subchannels: str) -> str:
    """Build a tag ``app:channel`` followed by any subchannels."""
    tag = f"{app}:{channel}"
    if subchannels:
        tag += append_subchannels(*subchannels)
    return tag