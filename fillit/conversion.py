"""Integer to and from decimal text."""

from __future__ import annotations

from fillit.chars import is_digit, is_space

_INT_BITS = 32


def _wrap_int(value: int) -> int:
    """Reduce a value to the range of a 32-bit signed integer."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text with no digits gives 0. The
    result wraps like a 32-bit signed integer.
    """
    chars = iter(text)
    sign = 1
    current = next(chars, "")
    while current and is_space(current):
        current = next(chars, "")
    if current in ("-", "+"):
        if current == "-":
            sign = -1
        current = next(chars, "")
    value = 0
    while current and is_digit(current):
        value = value * 10 + (ord(current) - ord("0"))
        current = next(chars, "")
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Format an integer as decimal text, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected int, got {type(n).__name__}")
    if n == 0:
        return "0"
    magnitude = abs(n)
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))