"""
params.py — Operation Parameter Converters
===========================================
Each registry entry maps parameter names to one of these converters.
They turn raw request input (JSON values or form strings) into the types
the engines expect and raise ValueError on anything unusable; the session
layer turns that into an InvalidArgumentError for the caller.
"""

import math
from typing import Any, Callable, Union

Number = Union[int, float]


def number(raw: Any) -> Number:
    """Finite int or float.  Integral floats come back as int ("42" → 42)."""
    if isinstance(raw, bool) or raw is None:
        raise ValueError(f"expected a number, got {raw!r}")
    if isinstance(raw, (int, float)):
        value = raw
    else:
        text_value = str(raw).strip()
        try:
            value = int(text_value)
        except ValueError:
            value = float(text_value)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"expected a finite number, got {raw!r}")
        if value.is_integer():
            return int(value)
    return value


def integer(raw: Any) -> int:
    value = number(raw)
    if not isinstance(value, int):
        raise ValueError(f"expected an integer, got {raw!r}")
    return value


def key(raw: Any) -> str:
    """Non-blank string, kept exactly as typed (spaces change the hash)."""
    if not isinstance(raw, str) or not raw.strip():
        raise ValueError(f"expected a non-empty key, got {raw!r}")
    return raw


def vertex(raw: Any) -> str:
    """Vertex ids are trimmed; numbers are accepted and stringified."""
    if isinstance(raw, bool) or raw is None:
        raise ValueError(f"expected a vertex id, got {raw!r}")
    text_value = str(raw).strip()
    if not text_value:
        raise ValueError("vertex id must not be empty")
    return text_value


def payload(raw: Any) -> Any:
    """Hash-table values are free-form; None becomes the empty string."""
    return "" if raw is None else raw


def choice(*options: str) -> Callable[[Any], str]:
    def convert(raw: Any) -> str:
        value = str(raw).strip().lower()
        if value not in options:
            raise ValueError(f"expected one of {', '.join(options)}, got {raw!r}")
        return value
    convert.__name__ = f"choice({'/'.join(options)})"
    return convert
