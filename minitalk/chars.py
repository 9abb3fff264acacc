"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_WHITESPACE = frozenset(" \t\n\v\f\r")
_INT_BITS = 32


def _code(c: CharLike) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return int(c)


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return 65 <= code <= 90 or 97 <= code <= 122


def is_digit(c: CharLike) -> bool:
    """True for ASCII decimal digits."""
    return 48 <= _code(c) <= 57


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII characters (space through tilde)."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; other values come back unchanged."""
    code = _code(c)
    if 65 <= code <= 90:
        code += 32
    return chr(code) if isinstance(c, str) else code


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; other values come back unchanged."""
    code = _code(c)
    if 97 <= code <= 122:
        code -= 32
    return chr(code) if isinstance(c, str) else code


def _wrap_int(value: int) -> int:
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace and one optional sign are accepted; parsing stops at
    the first non-digit. The result wraps like a 32-bit signed int.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    while pos < length and "0" <= text[pos] <= "9":
        value = value * 10 + (ord(text[pos]) - 48)
        pos += 1
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Render an integer as decimal text."""
    return str(int(n))