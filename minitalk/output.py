"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string as is."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    _target(stream).write(s + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal."""
    _target(stream).write(str(int(n)))