"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: its content and the following node."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list reached through its ``head`` node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.append(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def append(self, content: Any) -> Node:
        """Add ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def appendleft(self, content: Any) -> Node:
        """Add ``content`` at the front and return its node."""
        self.head = Node(content, self.head)
        return self.head

    def popleft(self) -> Any:
        """Remove the first node and return its content."""
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        self.head = node.next
        node.next = None
        return node.content

    def last(self) -> Optional[Node]:
        """Return the last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def previous_last(self) -> Optional[Node]:
        """Return the node before the last one, or None with fewer than two nodes."""
        previous = None
        for node in self._nodes():
            if node.next is None:
                return previous
            previous = node
        return None

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Empty the list, handing each content to ``delete`` first when given."""
        if delete is not None:
            for content in self:
                delete(content)
        self.head = None

    def for_each(self, f: Callable[[Any], None]) -> None:
        """Call ``f`` on each content in order."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """Return a new list of ``f`` applied to each content.

        If ``f`` raises, the contents made so far are handed to ``delete`` and
        the error propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.append(f(content))
        except Exception:
            result.clear(delete)
            raise
        return result