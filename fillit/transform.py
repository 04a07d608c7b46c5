"""Building new strings: copying, joining, slicing, mapping, trimming, splitting.

Strings are treated like NUL-terminated text. Anything from the first
``"\\0"`` onwards is ignored. Every function returns a new string and never
changes its arguments.
"""

from __future__ import annotations

from typing import Callable, List, Tuple, Union

Char = Union[str, int]

_NUL = "\0"
_TRIMMED = " \n\t"


def _text(s: str) -> str:
    """Return the part of ``s`` before its first NUL character."""
    if not isinstance(s, str):
        raise TypeError(f"expected str, got {type(s).__name__}")
    head, _, _ = s.partition(_NUL)
    return head


def _char(c: Char) -> str:
    """Turn a one-character string or a character code into a string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected str or int, got {type(c).__name__}")
    return chr(c)


def _check_count(n: int, what: str = "count") -> None:
    if n < 0:
        raise ValueError(f"{what} must not be negative, got {n}")


def strncpy(src: str, length: int) -> str:
    """Return exactly ``length`` characters: ``src`` cut short or padded with NULs."""
    _check_count(length, "length")
    return _text(src)[:length].ljust(length, _NUL)


def strncat(a: str, b: str, n: int) -> str:
    """Append at most ``n`` characters of ``b`` to ``a``."""
    _check_count(n)
    return _text(a) + _text(b)[:n]


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    The buffer holds the terminator too, so the result keeps at most
    ``size - 1`` characters. Returns the resulting text and the length the
    function tried to create. When ``dst`` already fills the buffer it is
    returned unchanged and the length is ``size + len(src)``.
    """
    _check_count(size, "size")
    head = _text(dst)
    tail = _text(src)
    if len(head) >= size:
        return head, size + len(tail)
    room = size - len(head) - 1
    return head + tail[:room], len(head) + len(tail)


def striter(s: str, f: Callable[[str], object]) -> None:
    """Call ``f`` on every character of ``s``, in order."""
    for c in _text(s):
        f(c)


def striteri(s: str, f: Callable[[int, str], object]) -> None:
    """Call ``f`` with the index and the character for every character of ``s``."""
    for index, c in enumerate(_text(s)):
        f(index, c)


def strmap(s: str, f: Callable[[str], str]) -> str:
    """Build a string from ``f`` applied to each character of ``s``."""
    return "".join(f(c) for c in _text(s))


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, character)`` for each character of ``s``."""
    return "".join(f(index, c) for index, c in enumerate(_text(s)))


def strsub(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` beginning at ``start``.

    A start at or past the end gives an empty string.
    """
    _check_count(start, "start")
    _check_count(length, "length")
    text = _text(s)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    return _text(a) + _text(b)


def strtrim(s: str) -> str:
    """Remove leading and trailing spaces, newlines and tabs."""
    return _text(s).strip(_TRIMMED)


def strsplit(s: str, sep: Char) -> List[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    text = _text(s)
    separator = _char(sep)
    if separator == _NUL:
        return [text] if text else []
    return [word for word in text.split(separator) if word]