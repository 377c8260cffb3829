"""A doubly linked list whose nodes carry arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Callable[[Any], None]


@dataclass(eq=False)
class Node:
    """One list element, linked to its neighbours."""

    content: Any = None
    prev: Optional["Node"] = field(default=None, repr=False)
    next: Optional["Node"] = field(default=None, repr=False)


def delete_node(node: Optional[Node], delete: Deleter) -> None:
    """Hand the node's content to ``delete`` and unlink the node.

    A missing node is ignored.
    """
    if node is None:
        return
    delete(node.content)
    node.prev = None
    node.next = None


class LinkedList:
    """A doubly linked list reached through its first node."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.add_back(Node(content))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def add_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the first element; a missing node is ignored."""
        if node is None:
            return
        node.prev = None
        node.next = self.head
        if self.head is not None:
            self.head.prev = node
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Make ``node`` the last element; a missing node is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
            node.prev = tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def last(self) -> Optional[Node]:
        """Return the final node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Deleter]) -> None:
        """Delete every node with ``delete`` and empty the list.

        Without a ``delete`` function the list is left untouched.
        """
        if delete is None:
            return
        for node in self._nodes():
            delete_node(node, delete)
        self.head = None

    def iterate(self, f: Optional[Callable[[Any], Any]]) -> None:
        """Call ``f`` on the content of every node, first to last."""
        if f is None:
            return
        for content in self:
            f(content)

    def map(
        self,
        f: Optional[Callable[[Any], Any]],
        delete: Optional[Deleter],
    ) -> "LinkedList":
        """Return a new list holding ``f`` applied to each content.

        If ``f`` raises, the contents built so far are passed to ``delete``
        and the error propagates. Without ``f`` or ``delete`` the result
        is empty.
        """
        result = LinkedList()
        if f is None or delete is None:
            return result
        try:
            for content in self:
                result.add_back(Node(f(content)))
        except Exception:
            result.clear(delete)
            raise
        return result