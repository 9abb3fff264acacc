"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions.

An unknown conversion character is skipped without output and without
consuming an argument. Integers wrap the way C's fixed-width types do: %d
and %i print a 32-bit signed value, %u, %x and %X a 32-bit unsigned value,
and %p a 64-bit unsigned address.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

_NULL_TEXT = "(null)"
_INT_BITS = 32
_PTR_BITS = 64


def _as_int(value: Any, conversion: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(
            f"%{conversion} expects an integer, got {type(value).__name__}"
        ) from None


def _unsigned(value: int, bits: int) -> int:
    return value & ((1 << bits) - 1)


def _signed(value: int, bits: int) -> int:
    value = _unsigned(value, bits)
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _render_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_unsigned(_as_int(value, "c"), 8))


def _render_str(value: Any) -> str:
    if value is None:
        return _NULL_TEXT
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string, got {type(value).__name__}")
    return value.split("\0", 1)[0]


def _render_ptr(value: Any) -> str:
    address = 0 if value is None else _as_int(value, "p")
    return "0x" + format(_unsigned(address, _PTR_BITS), "x")


def _render(conversion: str, args: Iterator[Any]) -> str:
    if conversion == "%":
        return "%"
    if conversion not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None
    if conversion == "c":
        return _render_char(value)
    if conversion == "s":
        return _render_str(value)
    if conversion == "p":
        return _render_ptr(value)
    number = _as_int(value, conversion)
    if conversion in "di":
        return str(_signed(number, _INT_BITS))
    unsigned = _unsigned(number, _INT_BITS)
    if conversion == "u":
        return str(unsigned)
    return format(unsigned, conversion)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args`` in order.

    Raises ValueError when ``fmt`` ends in a lone ``%`` and TypeError when
    an argument is missing or of the wrong kind. Extra arguments are ignored.
    """
    remaining = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            raise ValueError("format ends with an incomplete conversion")
        pieces.append(_render(conversion, remaining))
    return "".join(pieces)


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default).

    Returns the number of characters written.
    """
    text = format_string(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    return len(text)