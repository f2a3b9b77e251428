"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from wirefdf.strings import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: Union[str, int], stream: Optional[TextIO] = None) -> None:
    """Write one character, given as a string or a code, to stream (stdout by default)."""
    if isinstance(char, int):
        char = chr(char & 0xFF)
    if len(char) != 1:
        raise ValueError(f"put_char: expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write text to stream; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write text followed by a newline; None writes only the newline."""
    out = _target(stream)
    put_str(text, out)
    out.write("\n")


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write a 32-bit signed integer in decimal.

    Raises OverflowError for a number outside the 32-bit signed range.
    """
    _target(stream).write(itoa(number))