"""String searching, comparison, copying, slicing, trimming and mapping.

Strings are treated as C strings: anything from the first NUL character on
is ignored, and looking for NUL finds the position just past the text.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[int, str]

_NUL = "\0"


def _cstr(s: str) -> str:
    """The part of ``s`` before its first NUL character."""
    return s.split(_NUL, 1)[0]


def _char(c: CharLike) -> str:
    """Normalise a character given as a one-character string or a code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(int(c) & 0xFF)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first ``c`` in ``s``, ``len(s)`` for NUL, else None."""
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last ``c`` in ``s``, ``len(s)`` for NUL, else None."""
    text = _cstr(s)
    ch = _char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` chars.

    An empty needle matches at 0. Returns None when there is no match.
    """
    _non_negative("length", length)
    hay = _cstr(haystack)
    pattern = _cstr(needle)
    if not pattern:
        return 0
    index = hay[:length].find(pattern)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters: -1, 0 or 1."""
    _non_negative("n", n)
    a = _cstr(s1)[:n]
    b = _cstr(s2)[:n]
    return (a > b) - (a < b)


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the NUL.

    Returns the text that fits and the full length of ``src``, so truncation
    happened when the length is at least ``size``. With ``size`` 0 nothing
    is written and the text is empty.
    """
    _non_negative("size", size)
    text = _cstr(src)
    copied = text[: size - 1] if size > 0 else ""
    return copied, len(text)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` in a buffer of ``size`` characters.

    Returns the resulting text and the length the full result would have
    had: ``min(len(dst), size) + len(src)``. When ``dst`` already fills the
    buffer it is returned unchanged.
    """
    _non_negative("size", size)
    head = _cstr(dst)
    tail = _cstr(src)
    used = min(len(head), size)
    if len(head) >= size:
        return head, used + len(tail)
    room = size - 1 - len(head)
    return head + tail[:room], used + len(tail)


def substr(s: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``s`` from ``start``; empty past the end."""
    _non_negative("start", start)
    _non_negative("length", length)
    text = _cstr(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    return _cstr(s1) + _cstr(s2)


def strtrim(s: str, charset: str) -> str:
    """Strip characters of ``charset`` from both ends of ``s``."""
    text = _cstr(s)
    chars = _cstr(charset)
    if not chars or not text:
        return text
    return text.strip(chars)


def split(s: str, sep: CharLike) -> List[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    text = _cstr(s)
    ch = _char(sep)
    if ch == _NUL:
        return [text] if text else []
    return [word for word in text.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for each character.

    Mapping stops once ``f`` yields NUL, which ends the string.
    """
    pieces: List[str] = []
    for index, ch in enumerate(_cstr(s)):
        mapped = _char(f(index, ch))
        if mapped == _NUL:
            break
        pieces.append(mapped)
    return "".join(pieces)


def striteri(chars: MutableSequence[str], f: Callable[[int, str], str]) -> None:
    """Replace each character in place with ``f(index, char)``.

    Iteration ends at the first element that is NUL, as it would at the end
    of a C string.
    """
    for index, ch in enumerate(chars):
        if ch == _NUL:
            break
        chars[index] = _char(f(index, ch))