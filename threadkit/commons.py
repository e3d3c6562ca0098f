"""Small shared helpers: enum value extraction and printf-style formatting."""

from __future__ import annotations

from enum import Enum
from typing import Any


def to_utype(e: Enum) -> Any:
    """Return the underlying value of an enumeration member."""
    if not isinstance(e, Enum):
        raise TypeError(f"expected an enumeration member, got {type(e).__name__}")
    return e.value


def string_format(fmt: str, *args: Any) -> str:
    """Format ``args`` with a printf-style ``fmt`` string.

    Raises RuntimeError when the arguments do not fit the format, or when
    the formatted result is empty.
    """
    try:
        result = fmt % args
    except (TypeError, ValueError, KeyError) as exc:
        raise RuntimeError("Error while obtaining the size.") from exc
    if not result:
        raise RuntimeError("Error while formatting.")
    return result