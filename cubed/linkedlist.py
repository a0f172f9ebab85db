"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a :class:`LinkedList`."""

    content: Any
    next: Optional[Node] = None


class LinkedList:
    """A singly linked list that hands out its contents in order."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        for item in items:
            self.push_back(item)

    def push_front(self, content: Any) -> Node:
        """Insert ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append ``content`` at the end and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Node | None:
        """The final node, or None when the list is empty."""
        node = self.head
        if node is None:
            return None
        while node.next is not None:
            node = node.next
        return node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def for_each(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content, front to back."""
        for node in self._nodes():
            f(node.content)

    def map(
        self,
        f: Callable[[Any], Any],
        delete: Callable[[Any], Any] | None = None,
    ) -> LinkedList:
        """Return a new list holding ``f`` of every content.

        If ``f`` fails part way, ``delete`` is called on every content already
        produced, the partial list is discarded and the error propagates.
        """
        result = LinkedList()
        try:
            for node in self._nodes():
                result.push_back(f(node.content))
        except BaseException:
            result.clear(delete)
            raise
        return result

    def clear(self, delete: Callable[[Any], Any] | None = None) -> None:
        """Remove every node, calling ``delete`` on each content when given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content