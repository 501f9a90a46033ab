"""Reading the initial stack from command-line arguments."""

from __future__ import annotations

from typing import Iterable, List

from pushswap.libft.chars import isdigit
from pushswap.libft.numbers import atoi


class ParseError(ValueError):
    """The arguments do not describe a stack of non-negative integers."""


def is_digit_string(text: str) -> bool:
    """True when every character of ``text`` is an ASCII digit; the empty string qualifies."""
    return all(isdigit(char) for char in text)


def parse(args: Iterable[str]) -> List[int]:
    """Return the values named by ``args``, top of the stack first.

    Each argument must consist of digits only; values wrap to 32 bits.
    """
    values = list(args)
    if not values:
        raise ParseError("no values given")
    for arg in values:
        if not is_digit_string(arg):
            raise ParseError(f"not a non-negative integer: {arg!r}")
    return [atoi(arg) for arg in values]