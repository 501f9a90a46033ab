"""String helpers with C-style semantics expressed over Python strings.

Positions are returned as indices rather than pointers, and functions that
would fill a caller's buffer return the new string instead.
"""

from __future__ import annotations

from typing import Optional, Tuple, Union

CharLike = Union[int, str]

_TERMINATOR = "\0"


def _as_char(c: CharLike) -> str:
    """Return ``c`` as a one-character string, reduced to a byte like C's ``(char)c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative")


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the terminator finds the end of the string.
    """
    char = _as_char(c)
    if char == _TERMINATOR:
        return len(s)
    index = s.find(char)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the terminator finds the end of the string.
    """
    char = _as_char(c)
    if char == _TERMINATOR:
        return len(s)
    index = s.rfind(char)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the first unequal pair of character codes, a
    shorter string comparing as if followed by a zero code; 0 when equal.
    """
    _non_negative("n", n)
    for position in range(n):
        left = ord(s1[position]) if position < len(s1) else 0
        right = ord(s2[position]) if position < len(s2) else 0
        if left != right or left == 0:
            return left - right
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` lying wholly within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0; a miss gives None.
    """
    _non_negative("length", length)
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the full length of ``src``, which exceeds the
    copy's length when it was truncated.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters including the terminator.

    Returns the resulting text and the length the caller would have needed:
    ``len(dst) + len(src)``, or ``len(src) + size`` when ``size`` leaves no room
    past ``dst``.
    """
    _non_negative("size", size)
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(src) + len(dst)


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    return s1 + s2


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start past the end or a zero length gives the empty string.
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start >= len(s) or length == 0:
        return ""
    return s[start : start + length]


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    if not isinstance(charset, str):
        raise TypeError("charset must be a string")
    return s.lstrip(charset).rstrip(charset) if charset else s