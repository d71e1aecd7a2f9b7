"""A singly linked list of arbitrary values."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class Node:
    """One link of a list: a value and the following node."""

    value: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list with front and back insertion."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, value: Any) -> Node:
        """Insert value at the front and return its node."""
        self.head = Node(value, self.head)
        return self.head

    def push_back(self, value: Any) -> Node:
        """Append value at the back and return its node."""
        node = Node(value)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """Return the final node, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, release: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each value to release in order first."""
        node = self.head
        while node is not None:
            following = node.next
            if release is not None:
                release(node.value)
            node.next = None
            node = following
        self.head = None

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every value, front to back."""
        for value in self:
            func(value)

    def map(
        self,
        func: Callable[[Any], Any],
        release: Callable[[Any], Any] | None = None,
    ) -> "LinkedList":
        """Return a new list of func applied to every value.

        If func fails, the values already produced are passed to release and
        the error propagates.
        """
        result = LinkedList()
        try:
            for value in self:
                result.push_back(func(value))
        except Exception:
            result.clear(release)
            raise
        return result