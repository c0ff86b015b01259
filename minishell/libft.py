"""String and character helpers with the semantics the shell relies on."""

from __future__ import annotations

from typing import Optional, Union

_WHITESPACE = " \t\n\v\f\r"
_INT32_SPAN = 1 << 32
_INT32_HALF = 1 << 31

CharLike = Union[int, str]


def _wrap_int32(value: int) -> int:
    return (value + _INT32_HALF) % _INT32_SPAN - _INT32_HALF


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    return int(c)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted and parsing
    stops at the first non-digit.  The result wraps to a signed 32-bit int;
    text with no digits yields 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return _wrap_int32(sign * result)


def itoa(n: int) -> str:
    """Return the decimal text of ``n`` taken as a signed 32-bit integer."""
    return str(_wrap_int32(int(n)))


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def strtrim(text: str, charset: str) -> str:
    """Remove every character of ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start at or past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find ``needle`` wholly within the first ``length`` characters.

    Returns the index of the first match, ``0`` for an empty needle, or
    ``None`` when there is no match.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if not needle:
        return 0
    index = haystack.find(needle, 0, length)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    if n < 0:
        raise ValueError("n must not be negative")
    for i in range(n):
        ca = ord(a[i]) if i < len(a) else 0
        cb = ord(b[i]) if i < len(b) else 0
        if ca != cb:
            return ca - cb
        if ca == 0:
            break
    return 0


def strcmp(a: str, b: str) -> int:
    """Compare two strings; return the difference at the first mismatch, else 0."""
    for ca, cb in zip(a, b):
        if ca != cb:
            return ord(ca) - ord(cb)
    if len(a) == len(b):
        return 0
    if len(a) > len(b):
        return ord(a[len(b)])
    return -ord(b[len(a)])


def isalpha(c: CharLike) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isalnum(c: CharLike) -> bool:
    """True for an ASCII letter or digit."""
    code = _code(c)
    return isalpha(code) or ord("0") <= code <= ord("9")


def isprint(c: CharLike) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def isascii(c: CharLike) -> bool:
    """True for a code in the range 0 to 127."""
    return 0 <= _code(c) <= 127