"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any, Optional, TextIO

CONVERSIONS = "cspdiuxX%"

_UINT32_MASK = (1 << 32) - 1
_UINT64_MASK = (1 << 64) - 1
_INT32_SIGN = 1 << 31


class FormatError(ValueError):
    """Raised for an unknown conversion or a missing argument."""


def _int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value >= _INT32_SIGN else value


def _next_arg(values: Iterator[Any], spec: str) -> Any:
    try:
        return next(values)
    except StopIteration:
        raise FormatError(f"missing argument for conversion %{spec}") from None


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value


def _pointer(value: Any) -> str:
    if not value:
        return "(nil)"
    return "0x" + format(int(value) & _UINT64_MASK, "x")


def _convert(spec: Optional[str], values: Iterator[Any]) -> str:
    if spec is None:
        raise FormatError("format string ends with a lone '%'")
    if spec == "%":
        return "%"
    if spec not in CONVERSIONS:
        raise FormatError(f"unknown conversion %{spec}")
    value = _next_arg(values, spec)
    if spec == "c":
        return _char(value)
    if spec == "s":
        return _string(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_int32(int(value)))
    if spec == "u":
        return str(int(value) & _UINT32_MASK)
    if spec == "x":
        return format(int(value) & _UINT32_MASK, "x")
    return format(int(value) & _UINT32_MASK, "X")


def format_string(fmt: str, *args: Any) -> str:
    """Return fmt with every conversion replaced by the next argument.

    Integers are treated as 32-bit (signed for d and i, unsigned for u, x
    and X); pointers for p as 64-bit unsigned. Raises FormatError for an
    unknown conversion, a trailing '%' or too few arguments.
    """
    values = iter(args)
    chars = iter(fmt)
    pieces: list[str] = []
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        pieces.append(_convert(next(chars, None), values))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (stdout by default) and return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)