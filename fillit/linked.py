"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One element of a linked list."""

    content: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list; new elements are added at the front."""

    def __init__(self, contents: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        if contents is not None:
            tail: Optional[Node] = None
            for content in contents:
                node = Node(content)
                if tail is None:
                    self.head = node
                else:
                    tail.next = node
                tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def push(self, content: Any) -> Node:
        """Add ``content`` at the front and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def pop(self, delete: Optional[Callable[[Any], object]] = None) -> Any:
        """Remove the front element, pass its content to ``delete`` and return it."""
        if self.head is None:
            raise IndexError("pop from empty list")
        node = self.head
        self.head = node.next
        node.next = None
        if delete is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Optional[Callable[[Any], object]] = None) -> None:
        """Remove every element, passing each content to ``delete`` from the front."""
        while self.head is not None:
            self.pop(delete)

    def for_each(self, f: Callable[[Node], object]) -> None:
        """Call ``f`` on every node, front to back."""
        for node in self._nodes():
            f(node)

    def map(self, f: Callable[[Node], Any]) -> "LinkedList":
        """Build a new list from ``f`` applied to every node, keeping the order.

        ``f`` may return a Node, which is linked in as is, or any other
        value, which becomes the content of a new node.
        """
        result = LinkedList()
        tail: Optional[Node] = None
        for node in self._nodes():
            produced = f(node)
            new = produced if isinstance(produced, Node) else Node(produced)
            new.next = None
            if tail is None:
                result.head = new
            else:
                tail.next = new
            tail = new
        return result

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())