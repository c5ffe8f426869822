"""Doubly-linked list of value nodes with O(1) operations at both ends."""

from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class Node(Generic[T]):
    """A node in the doubly-linked list."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: Node[T] | None = None
        self.next: Node[T] | None = None


class DoublyLinkedList(Generic[T]):
    """
    Doubly-linked list with explicit head and tail references.

    An empty list has ``head`` and ``tail`` both set to None. When non-empty,
    ``head.prev`` and ``tail.next`` are always None.
    """

    def __init__(self) -> None:
        self.head: Node[T] | None = None
        self.tail: Node[T] | None = None
        self._size = 0

    def append(self, node: Node[T]) -> None:
        """Append node to the end of the list. O(1)."""
        node.prev = self.tail
        node.next = None
        if self.tail is not None:
            self.tail.next = node
        else:
            self.head = node
        self.tail = node
        self._size += 1

    def appendleft(self, node: Node[T]) -> None:
        """Prepend node to the beginning of the list. O(1)."""
        node.prev = None
        node.next = self.head
        if self.head is not None:
            self.head.prev = node
        else:
            self.tail = node
        self.head = node
        self._size += 1

    def remove(self, node: Node[T]) -> None:
        """Unlink a node from the list. O(1)."""
        if node.prev is not None:
            node.prev.next = node.next
        else:
            self.head = node.next
        if node.next is not None:
            node.next.prev = node.prev
        else:
            self.tail = node.prev
        node.prev = None
        node.next = None
        self._size -= 1

    def popleft(self) -> Node[T] | None:
        """Remove and return the first node. O(1)."""
        node = self.head
        if node is not None:
            self.remove(node)
        return node

    def pop(self) -> Node[T] | None:
        """Remove and return the last node. O(1)."""
        node = self.tail
        if node is not None:
            self.remove(node)
        return node

    def clear(self) -> int:
        """Unlink every node and return how many were released. O(n)."""
        released = self._size
        node = self.head
        while node is not None:
            following = node.next
            node.prev = None
            node.next = None
            node = following
        self.head = None
        self.tail = None
        self._size = 0
        return released

    def __iter__(self) -> Iterator[Node[T]]:
        """Yield nodes from head to tail."""
        node = self.head
        while node is not None:
            # Advance before yielding so the caller may unlink the current node
            following = node.next
            yield node
            node = following

    def __reversed__(self) -> Iterator[Node[T]]:
        """Yield nodes from tail to head."""
        node = self.tail
        while node is not None:
            preceding = node.prev
            yield node
            node = preceding

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0
