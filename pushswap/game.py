"""The two stacks of a push_swap game and the moves that act on them."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, TextIO

from pushswap.libft.linkedlist import LinkedList
from pushswap.libft.output import put_endl


class Game:
    """Stacks ``a`` and ``b``, with the top of each stack at the head of its list.

    Each move that takes effect writes its name on a line of ``out``.
    """

    def __init__(
        self,
        a: Iterable[int] = (),
        b: Iterable[int] = (),
        out: Optional[TextIO] = None,
    ) -> None:
        self.a = LinkedList(a)
        self.b = LinkedList(b)
        self.out = sys.stdout if out is None else out

    def __repr__(self) -> str:
        return f"Game(a={list(self.a)!r}, b={list(self.b)!r})"

    def _emit(self, name: str) -> None:
        put_endl(name, self.out)

    @staticmethod
    def _has_two(stack: LinkedList) -> bool:
        return stack.head is not None and stack.head.next is not None

    @staticmethod
    def _swap(stack: LinkedList) -> None:
        top = stack.head
        top.content, top.next.content = top.next.content, top.content

    @staticmethod
    def _rotate(stack: LinkedList) -> None:
        stack.append(stack.popleft())

    @staticmethod
    def _reverse_rotate(stack: LinkedList) -> None:
        before_tail = stack.previous_last()
        tail = before_tail.next
        before_tail.next = None
        stack.appendleft(tail.content)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        if not self._has_two(self.a):
            return
        self._emit("sa")
        self._swap(self.a)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        if not self._has_two(self.b):
            return
        self._emit("sb")
        self._swap(self.b)

    def ss(self) -> None:
        """Swap the tops of both stacks; ``b`` is left alone when ``a`` cannot swap."""
        self._emit("ss")
        if not self._has_two(self.a):
            return
        self._swap(self.a)
        if self._has_two(self.b):
            self._swap(self.b)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if self.b.head is None:
            return
        self._emit("pa")
        self.a.appendleft(self.b.popleft())

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if self.a.head is None:
            return
        self._emit("pb")
        self.b.appendleft(self.a.popleft())

    def ra(self) -> None:
        """Rotate ``a`` so its top goes to the bottom."""
        if self.a.head is None:
            return
        self._emit("ra")
        self._rotate(self.a)

    def rb(self) -> None:
        """Rotate ``b`` so its top goes to the bottom."""
        if self.b.head is None:
            return
        self._emit("rb")
        self._rotate(self.b)

    def rr(self) -> None:
        """Rotate both stacks; ``b`` is left alone when ``a`` is empty."""
        self._emit("rr")
        if self.a.head is None:
            return
        self._rotate(self.a)
        if self.b.head is not None:
            self._rotate(self.b)

    def rra(self) -> None:
        """Rotate ``a`` so its bottom comes to the top."""
        if not self._has_two(self.a):
            return
        self._emit("rra")
        self._reverse_rotate(self.a)

    def rrb(self) -> None:
        """Rotate ``b`` so its bottom comes to the top."""
        if not self._has_two(self.b):
            return
        self._emit("rrb")
        self._reverse_rotate(self.b)

    def rrr(self) -> None:
        """Reverse-rotate both stacks; ``b`` is left alone when ``a`` has fewer than two."""
        self._emit("rrr")
        if not self._has_two(self.a):
            return
        self._reverse_rotate(self.a)
        if self._has_two(self.b):
            self._reverse_rotate(self.b)

    def render(self) -> str:
        """Return the two stacks side by side, tops first, with a footer naming them."""
        a_items = list(self.a)
        b_items = list(self.b)
        rows = []
        for row in range(max(len(a_items), len(b_items))):
            left = f"{a_items[row]} " if row < len(a_items) else "  "
            right = f"{b_items[row]}" if row < len(b_items) else " "
            rows.append(left + right + "\n")
        rows.append("- -\na b\n")
        return "".join(rows)