"""Main DequeSet implementation."""

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Generic

from dequeset.errors import InvalidValueError
from dequeset.linkedlist import DoublyLinkedList, Node
from dequeset.types import T, U, Visitor

logger = logging.getLogger(__name__)


class DequeSet(Generic[T]):
    """
    Ordered set with deque-style O(1) operations.

    Combines set membership (unique, hashable values) with insertion-order
    sequence semantics. A dictionary maps each value to its node in a
    doubly-linked list, so pushes and pops at either end, removal of an
    arbitrary value, and membership tests are all O(1).

    None is not a storable value; every "nothing there" result is reported
    as None.

    Not thread-safe: callers must serialize access when sharing an instance.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[T] | None = None) -> None:
        """
        Initialize the set.

        Args:
            values: Optional iterable pushed to the back in order. Later
                duplicates are skipped; the first occurrence keeps its place.

        Raises:
            InvalidValueError: If values contains None
        """
        self._index: dict[T, Node[T]] = {}
        self._list = DoublyLinkedList[T]()
        if values is not None:
            self._extend(values)

    @classmethod
    def from_iterable(cls, values: Iterable[T]) -> "DequeSet[T]":
        """
        Build a set by pushing each value to the back, in order.

        Duplicates after the first occurrence are silently skipped.

        Raises:
            InvalidValueError: If values contains None
        """
        return cls(values)

    def _extend(self, values: Iterable[T]) -> None:
        skipped = 0
        for value in values:
            if not self.push_back(value):
                skipped += 1
        if skipped:
            logger.debug("Skipped %d duplicate value(s) while building %s", skipped, type(self).__name__)

    # Insertion

    def push_front(self, value: T) -> bool:
        """
        Insert a value as the new first element.

        Returns:
            True if inserted, False if the value was already a member

        Raises:
            InvalidValueError: If value is None
        """
        if value is None:
            raise InvalidValueError("push_front() does not accept None")
        if value in self._index:
            return False

        node = Node(value)
        self._list.appendleft(node)
        self._index[value] = node
        return True

    def push_back(self, value: T) -> bool:
        """
        Insert a value as the new last element.

        Returns:
            True if inserted, False if the value was already a member

        Raises:
            InvalidValueError: If value is None
        """
        if value is None:
            raise InvalidValueError("push_back() does not accept None")
        if value in self._index:
            return False

        node = Node(value)
        self._list.append(node)
        self._index[value] = node
        return True

    # Removal

    def pop(self, value: T) -> T | None:
        """
        Remove a value from the set.

        Returns:
            The stored value if it was a member, None otherwise
        """
        node = self._index.pop(value, None)  # type: ignore[arg-type]
        if node is None:
            return None
        self._list.remove(node)
        return node.value

    def pop_front(self) -> T | None:
        """Remove and return the first value, or None if the set is empty."""
        node = self._list.popleft()
        if node is None:
            return None
        del self._index[node.value]
        return node.value

    def pop_back(self) -> T | None:
        """Remove and return the last value, or None if the set is empty."""
        node = self._list.pop()
        if node is None:
            return None
        del self._index[node.value]
        return node.value

    def clear(self) -> None:
        """Remove every value, releasing all nodes."""
        released = self._list.clear()
        self._index.clear()
        logger.debug("Cleared %s, released %d node(s)", type(self).__name__, released)

    # Queries

    def has(self, value: T) -> bool:
        """Return True if value is a member."""
        return value in self._index

    def front(self) -> T | None:
        """Return the first value without removing it, or None if empty."""
        head = self._list.head
        return head.value if head is not None else None

    def back(self) -> T | None:
        """Return the last value without removing it, or None if empty."""
        tail = self._list.tail
        return tail.value if tail is not None else None

    def empty(self) -> bool:
        """Return True if the set has no values."""
        return not self._list

    def size(self) -> int:
        """Return the number of values in the set."""
        return len(self._list)

    # Traversal and derivation

    def iterate(self) -> Iterator[T]:
        """
        Return a fresh iterator over the values in insertion order.

        No snapshot is taken: mutating the set while an iterator is in
        progress gives undefined positions for that iterator.
        """
        for node in self._list:
            yield node.value

    def each(self, visitor: Visitor[T]) -> None:
        """
        Call visitor once per value in insertion order.

        Traversal stops as soon as visitor returns False; any other return
        value (including None) continues. The visitor must not mutate the set.
        """
        for node in self._list:
            if visitor(node.value) is False:
                break

    def map(self, transform: Callable[[T], U]) -> list[U]:
        """Return transform applied to each value, in insertion order."""
        return [transform(node.value) for node in self._list]

    def to_list(self) -> list[T]:
        """Return the values as a list in insertion order."""
        return [node.value for node in self._list]

    def to_dict(self) -> dict[T, bool]:
        """Return a membership mapping of every value to True."""
        return dict.fromkeys(self._index, True)

    def clone(self) -> "DequeSet[T]":
        """Return an independent copy with the same values in the same order."""
        copied: DequeSet[T] = type(self)()
        for node in self._list:
            copied.push_back(node.value)
        return copied

    # Python protocols

    def __contains__(self, value: object) -> bool:
        """Membership test, same as has()."""
        return value in self._index

    def __iter__(self) -> Iterator[T]:
        """Iterate values in insertion order."""
        return self.iterate()

    def __reversed__(self) -> Iterator[T]:
        """Iterate values from last to first."""
        for node in reversed(self._list):
            yield node.value

    def __len__(self) -> int:
        """Return the number of values in the set."""
        return len(self._list)

    def __bool__(self) -> bool:
        """Return True if the set is non-empty."""
        return bool(self._list)

    def __copy__(self) -> "DequeSet[T]":
        return self.clone()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DequeSet):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"
