"""C-style string searching, comparison, bounded copying and integer conversion.

Strings are treated as NUL-terminated: a "\\0" character (or zero byte)
ends the string just as the end of the Python object does. Searching
functions return indices instead of pointers, and None where nothing is
found.
"""

from __future__ import annotations

from itertools import takewhile
from typing import Optional, Union

Text = Union[str, bytes, bytearray]
CharLike = Union[str, int]

_WHITESPACE = " \t\n\v\f\r"
_INT_BITS = 32
_INT_MIN = -(2 ** (_INT_BITS - 1))
_INT_MAX = 2 ** (_INT_BITS - 1) - 1


def _codes(text: Text) -> list[int]:
    """Return the character codes of text up to its first NUL."""
    raw = (ord(c) for c in text) if isinstance(text, str) else iter(text)
    return list(takewhile(lambda code: code != 0, raw))


def _char_code(char: CharLike) -> int:
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        return ord(char)
    return char & 0xFF


def _wrap_int32(value: int) -> int:
    """Reduce value to the range of a 32-bit signed integer, wrapping around."""
    value &= (1 << _INT_BITS) - 1
    return value - (1 << _INT_BITS) if value > _INT_MAX else value


def _length(buffer: Union[bytes, bytearray]) -> int:
    return len(_codes(buffer))


def strchr(text: Text, char: CharLike) -> Optional[int]:
    """Return the index of the first occurrence of char, or None.

    Searching for NUL returns the length of the string.
    """
    codes = _codes(text)
    target = _char_code(char)
    if target == 0:
        return len(codes)
    return next((i for i, code in enumerate(codes) if code == target), None)


def strrchr(text: Text, char: CharLike) -> Optional[int]:
    """Return the index of the last occurrence of char, or None.

    Searching for NUL returns the length of the string.
    """
    codes = _codes(text)
    target = _char_code(char)
    if target == 0:
        return len(codes)
    return next(
        (i for i in reversed(range(len(codes))) if codes[i] == target), None
    )


def _compare(first: list[int], second: list[int], count: Optional[int]) -> int:
    limit = max(len(first), len(second)) + 1
    if count is not None:
        limit = min(limit, count)
    for i in range(limit):
        a = first[i] if i < len(first) else 0
        b = second[i] if i < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strncmp(first: Text, second: Text, count: int) -> int:
    """Compare at most count characters; return the difference of the first unequal pair."""
    if count < 1:
        return 0
    return _compare(_codes(first), _codes(second), count)


def strcmp(first: Text, second: Text) -> int:
    """Compare two strings; return the difference of the first unequal pair, else 0."""
    return _compare(_codes(first), _codes(second), None)


def strnstr(haystack: Text, needle: Text, length: int) -> Optional[int]:
    """Return the index of needle within the first length characters of haystack, or None.

    An empty needle is found at index 0.
    """
    big = _codes(haystack)
    little = _codes(needle)
    if not little:
        return 0
    if length < 1:
        return None
    window = big[:length]
    last_start = len(window) - len(little)
    return next(
        (
            i
            for i in range(last_start + 1)
            if window[i:i + len(little)] == little
        ),
        None,
    )


def strlcpy(dest: bytearray, src: Union[bytes, bytearray], size: int) -> int:
    """Copy src into dest, writing at most size bytes including the terminating NUL.

    Returns the length of src, so a result of size or more means truncation.
    """
    source = bytes(_codes(src))
    if size <= 0:
        return len(source)
    copied = min(len(source), size - 1)
    if copied + 1 > len(dest):
        raise ValueError("strlcpy: destination buffer is too small")
    dest[:copied] = source[:copied]
    dest[copied] = 0
    return len(source)


def strlcat(dest: Optional[bytearray], src: Union[bytes, bytearray], size: int) -> int:
    """Append src to the NUL-terminated string in dest, bounded by size.

    Returns the length of the string it tried to create: the initial
    length of dest plus the length of src, or size plus the length of
    src when size is smaller than the initial length of dest.
    """
    source = bytes(_codes(src))
    if dest is None:
        if size == 0:
            return 0
        raise ValueError("strlcat: destination buffer is missing")
    dest_len = _length(dest)
    if size < dest_len:
        return len(source) + size
    copied = max(0, min(len(source), size - dest_len - 1))
    if dest_len + copied + 1 > len(dest):
        raise ValueError("strlcat: destination buffer is too small")
    dest[dest_len:dest_len + copied] = source[:copied]
    dest[dest_len + copied] = 0
    return dest_len + len(source)


def atoi(text: str) -> int:
    """Parse a leading decimal integer after optional whitespace and one sign.

    Parsing stops at the first non-digit; no digits give 0. The result
    wraps around like a 32-bit signed integer.
    """
    rest = text.split("\0", 1)[0].lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda c: "0" <= c <= "9", rest))
    value = int(digits) if digits else 0
    return _wrap_int32(value * sign)


def _check_base(base: str) -> None:
    if len(base) < 2:
        raise ValueError("base must have at least two digits")
    for c in base:
        if c in "+-" or c <= " " or c > "~":
            raise ValueError(f"invalid digit {c!r} in base")
    if len(set(base)) != len(base):
        raise ValueError("base has duplicate digits")


def atoi_base(text: str, base: str) -> int:
    """Parse a leading integer written with the digits of base.

    Whitespace is skipped, then any run of '+' and '-' signs: an odd
    number of '-' makes the result negative. Parsing stops at the first
    character that is not a digit of base. Raises ValueError if base has
    fewer than two digits, contains a sign, a blank or a non-printable
    character, or repeats a digit.
    """
    _check_base(base)
    rest = text.split("\0", 1)[0].lstrip(_WHITESPACE)
    signs = "".join(takewhile(lambda c: c in "+-", rest))
    sign = -1 if signs.count("-") % 2 else 1
    value = 0
    for c in rest[len(signs):]:
        digit = base.find(c)
        if digit < 0:
            break
        value = value * len(base) + digit
    return _wrap_int32(value * sign)


def itoa(number: int) -> str:
    """Return the decimal representation of a 32-bit signed integer."""
    if not _INT_MIN <= number <= _INT_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit signed integer")
    return str(number)