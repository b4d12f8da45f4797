"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")
U = TypeVar("U")


@dataclass(eq=False)
class Node(Generic[T]):
    """One link of a list: its content and the node that follows it."""

    content: T
    next: Node[T] | None = None


class LinkedList(Generic[T]):
    """A singly linked list whose nodes can be added at either end."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self.head: Node[T] | None = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node[T]]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: T) -> Node[T]:
        """Add ``content`` at the front of the list and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: T) -> Node[T]:
        """Add ``content`` at the end of the list and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node[T] | None:
        """The last node of the list, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Callable[[T], Any] | None = None) -> None:
        """Empty the list, passing each content to ``delete`` from the last to the first."""
        nodes = list(self._nodes())
        self.head = None
        if delete is not None:
            for node in reversed(nodes):
                delete(node.content)

    def for_each(self, f: Callable[[T], Any]) -> None:
        """Call ``f`` on each content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[T], U]) -> LinkedList[U]:
        """Return a new list holding ``f`` applied to each content, in order."""
        return LinkedList(f(content) for content in self)

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"