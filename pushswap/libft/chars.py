"""Character classification and case conversion for ASCII code points."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_CASE_OFFSET = 32


def _code(c: CharLike) -> int:
    """Return the integer code of ``c``, which is a code point or one character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def isupper(c: CharLike) -> bool:
    """True for the ASCII letters 'A' to 'Z'."""
    return ord("A") <= _code(c) <= ord("Z")


def islower(c: CharLike) -> bool:
    """True for the ASCII letters 'a' to 'z'."""
    return ord("a") <= _code(c) <= ord("z")


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters of either case."""
    return isupper(c) or islower(c)


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits '0' to '9'."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII characters, space through tilde."""
    return 32 <= _code(c) <= 126


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    if isupper(c):
        return _same_kind(c, _code(c) + _CASE_OFFSET)
    return c


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    if islower(c):
        return _same_kind(c, _code(c) - _CASE_OFFSET)
    return c