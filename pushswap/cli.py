"""Command line: print the moves that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO

from pushswap.game import Game
from pushswap.parser import ParseError, parse
from pushswap.solver import solve


def run(args: Iterable[str], out: Optional[TextIO] = None) -> int:
    """Solve the stack named by ``args``, writing moves to ``out``; return the exit status.

    No arguments give status 1. Arguments that do not parse leave the stack
    empty, so nothing is written and the status is 0.
    """
    arguments = list(args)
    if not arguments:
        return 1
    try:
        values = parse(arguments)
    except ParseError:
        values = []
    solve(Game(values, out=out))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; ``argv`` defaults to the process arguments."""
    arguments = sys.argv[1:] if argv is None else argv
    return run(arguments)


if __name__ == "__main__":
    sys.exit(main())