"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from fillit.conversion import itoa


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    if not isinstance(c, str):
        raise TypeError(f"expected str, got {type(c).__name__}")
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` up to its first NUL; a missing string writes nothing."""
    if s is None:
        return
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    head, _, _ = s.partition("\0")
    _target(stream).write(head)


def putendl(s: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``s`` followed by a newline; a missing string writes only the newline."""
    out = _target(stream)
    putstr(s, out)
    putchar("\n", out)


def putnbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal, with a leading '-' when negative."""
    _target(stream).write(itoa(n))