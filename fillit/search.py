"""String length, searching and comparison.

Strings are treated like NUL-terminated text: anything from the first
``"\\0"`` onwards is ignored. Positions are returned as indexes into the
string, and a failed search gives None.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _text(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    head, _, _ = s.partition(_NUL)
    return head


def _char(c: Char) -> str:
    """Normalise a one-character string or a character code to a string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected str or int, got {type(c).__name__}")
    return chr(c)


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def strlen(s: str) -> int:
    """Number of characters before the terminating NUL."""
    return len(_text(s))


def strchr(s: str, c: Char) -> Optional[int]:
    """Index of the first ``c`` in ``s``.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _text(s)
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: str, c: Char) -> Optional[int]:
    """Index of the last ``c`` in ``s``; NUL finds the terminator."""
    text = _text(s)
    target = _char(c)
    if target == _NUL:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strstr(haystack: str, needle: str) -> Optional[int]:
    """Index of the first occurrence of ``needle``; an empty needle matches at 0."""
    text = _text(haystack)
    pattern = _text(needle)
    if not pattern:
        return 0
    index = text.find(pattern)
    return None if index < 0 else index


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Like :func:`strstr`, but the match must lie within the first ``length`` characters."""
    _check_count(length)
    text = _text(haystack)
    pattern = _text(needle)
    if not pattern:
        return 0
    index = text[:length].find(pattern)
    return None if index < 0 else index


def _difference(a, b) -> int:
    for x, y in zip_longest(a, b, fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
    return 0


def strcmp(a: str, b: str) -> int:
    """Difference of the first pair of unequal characters, or 0 if the strings match."""
    return _difference(_text(a), _text(b))


def strncmp(a: str, b: str, n: int) -> int:
    """Like :func:`strcmp`, looking at no more than ``n`` characters."""
    _check_count(n)
    pairs = islice(zip_longest(_text(a), _text(b), fillvalue=_NUL), n)
    for x, y in pairs:
        if x != y:
            return ord(x) - ord(y)
    return 0


def strequ(a: Optional[str], b: Optional[str]) -> bool:
    """True when both strings are given and equal."""
    if a is None or b is None:
        return False
    return _text(a) == _text(b)


def strnequ(a: Optional[str], b: Optional[str], n: int) -> bool:
    """True when both strings are given and their first ``n`` characters are equal."""
    if a is None or b is None:
        return False
    _check_count(n)
    return _text(a)[:n] == _text(b)[:n]