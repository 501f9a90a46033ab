"""Integer parsing and formatting with 32-bit C ``int`` behaviour."""

from __future__ import annotations

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = "\t\n\r\v\f "


def _wrap32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping like machine arithmetic."""
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value > INT_MAX else value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is read, then ASCII digits
    up to the first non-digit. No digits give 0. The result wraps to 32 bits.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for char in rest:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return _wrap32(sign * value)


def count_digits(n: int) -> int:
    """Return the number of decimal digits in ``n``, not counting a sign."""
    return len(str(abs(n)))


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(n)