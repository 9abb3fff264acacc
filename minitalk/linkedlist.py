"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list that keeps its head, tail and length."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def last(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        return self._tail

    def __len__(self) -> int:
        return self._size

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each content to ``delete`` first."""
        node = self.head
        self.head = None
        self._tail = None
        self._size = 0
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content, front to back."""
        for content in self:
            f(content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> "LinkedList":
        """Return a new list of ``f(content)`` for every content.

        When ``f`` yields None the contents mapped so far are handed to
        ``delete`` and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = f(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError(f"mapping produced no value for {content!r}")
            result.push_back(mapped)
        return result