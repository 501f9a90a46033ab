"""Word-level helpers: counting, extracting and splitting words, and per-character mapping."""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, TypeVar

T = TypeVar("T")


def _words(s: str, charset: str):
    """Yield the maximal runs of characters of ``s`` that are not in ``charset``."""
    word: List[str] = []
    for char in s:
        if char in charset:
            if word:
                yield "".join(word)
                word = []
        else:
            word.append(char)
    if word:
        yield "".join(word)


def count_words(s: Optional[str], charset: str) -> int:
    """Return the number of words in ``s`` separated by any character of ``charset``.

    A missing or empty string holds no words.
    """
    if not s:
        return 0
    return sum(1 for _ in _words(s, charset))


def first_word(s: str, charset: str) -> str:
    """Return the first word of ``s``, skipping leading separator characters.

    Gives the empty string when ``s`` holds only separators.
    """
    return next(_words(s, charset), "")


def split(s: str, sep: str) -> List[str]:
    """Split ``s`` on the single character ``sep``, dropping empty words."""
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return list(_words(s, sep))


def striteri(buffer: MutableSequence[T], f: Callable[[int, T], Optional[T]]) -> None:
    """Call ``f(index, item)`` for each item of ``buffer`` in order.

    When ``f`` returns something other than None, that value replaces the item
    in place.
    """
    for index, item in enumerate(buffer):
        replacement = f(index, item)
        if replacement is not None:
            buffer[index] = replacement


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character of ``s``."""
    return "".join(f(index, char) for index, char in enumerate(s))