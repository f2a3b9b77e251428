"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a list: its content and the node after it."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list with appends at either end."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._head: Optional[Node] = None
        self._tail: Optional[Node] = None
        self._size = 0
        for item in items or ():
            self.append(item)

    @property
    def head(self) -> Optional[Node]:
        """The first node, or None for an empty list."""
        return self._head

    def append(self, content: Any) -> Node:
        """Add content at the end of the list and return its node."""
        node = Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1
        return node

    def appendleft(self, content: Any) -> Node:
        """Add content at the front of the list and return its node."""
        node = Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def last(self) -> Any:
        """Return the content of the last node; raise IndexError if empty."""
        if self._tail is None:
            raise IndexError("last of an empty list")
        return self._tail.content

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, first passing every content to delete in order."""
        nodes = list(self._nodes())
        self._head = self._tail = None
        self._size = 0
        if delete is not None:
            for node in nodes:
                delete(node.content)

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every content, front to back."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], Any]] = None,
    ) -> LinkedList:
        """Return a new list of func applied to every content.

        If func raises, the contents already produced are passed to delete
        and the exception propagates.
        """
        result = LinkedList()
        try:
            for content in self:
                result.append(func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result