"""A small printf-style formatter supporting %c %s %d %i %u %x %X %p and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT32 = 1 << 32
_UINT64 = 1 << 64


def _as_int32(value: int) -> int:
    """Interpret an integer as a signed 32-bit value."""
    return (int(value) + (1 << 31)) % _UINT32 - (1 << 31)


def _as_uint32(value: int) -> int:
    return int(value) % _UINT32


def format_hex(n: int, uppercase: bool = False) -> str:
    """Return ``n`` as an unsigned 64-bit hexadecimal string without prefix."""
    n = int(n) % _UINT64
    digits = _HEX_UPPER if uppercase else _HEX_LOWER
    if n == 0:
        return "0"
    out = []
    while n:
        n, rem = divmod(n, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_pointer(address: int | None) -> str:
    """Return an address as ``0x`` followed by lower-case hex; null is ``0x0``."""
    if not address:
        return "0x0"
    return "0x" + format_hex(address, False)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        return value[:1] if value else "\0"
    return chr(int(value) & 0xFF)


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "csdiuxXp":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec in "di":
        return str(_as_int32(value))
    if spec == "u":
        return str(_as_uint32(value))
    if spec == "x":
        return format_hex(_as_uint32(value), False)
    if spec == "X":
        return format_hex(_as_uint32(value), True)
    return format_pointer(value)


def format_message(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args`` and return the resulting text.

    A ``%`` followed by an unknown character produces nothing; a lone
    trailing ``%`` is kept as is.
    """
    values = iter(args)
    parts = []
    pos = 0
    length = len(fmt)
    while pos < length:
        ch = fmt[pos]
        if ch == "%" and pos + 1 < length:
            parts.append(_convert(fmt[pos + 1], values))
            pos += 2
        else:
            parts.append(ch)
            pos += 1
    return "".join(parts)


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    target = sys.stdout if stream is None else stream
    text = format_message(fmt, *args)
    target.write(text)
    return len(text)