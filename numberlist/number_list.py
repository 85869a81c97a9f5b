"""Singly-linked list of floating-point numbers.

The list owns a chain of ``_Node`` records and keeps references to both ends
plus a cached element count, so appending is O(1) while positional and
content-based operations walk the chain.
"""

from __future__ import annotations

import logging
import numbers
import statistics
from typing import Iterable, Iterator, List, Optional, Set

from numberlist.errors import EmptyListError, InvalidArgumentError, ListIndexError

LOGGER = logging.getLogger("numberlist")


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, v: float):
        self.value: float = v
        self.next: Optional["_Node"] = None


def _as_float(item: object) -> float:
    # bool is a Real; keep it, float(True) == 1.0
    if not isinstance(item, numbers.Real):
        raise TypeError(f"NumberList stores real numbers, got {type(item).__name__}")
    return float(item)


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class NumberList:
    """Ordered sequence of floats backed by a singly-linked chain.

    Operations that can fail check their preconditions before touching the
    chain, so a raised error always leaves the list as it was.
    """

    def __init__(self, values: Optional[Iterable[float]] = None):
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size: int = 0
        if values is not None:
            for v in values:
                self.add(v)

    # ---- basics ----
    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[float]:
        n = self._head
        while n is not None:
            yield n.value
            n = n.next

    def clear(self) -> None:
        n = self._head
        while n is not None:
            nxt = n.next
            n.next = None
            n = nxt
        LOGGER.debug("Cleared %d nodes", self._size)
        self._head = self._tail = None
        self._size = 0

    # ---- append ----
    def add(self, item: float) -> None:
        n = _Node(_as_float(item))
        if self._tail is None:
            self._head = self._tail = n
        else:
            self._tail.next = n
            self._tail = n
        self._size += 1

    def _push_front(self, value: float) -> None:
        n = _Node(value)
        n.next = self._head
        self._head = n
        if self._tail is None:
            self._tail = n
        self._size += 1

    # ---- queries ----
    def first_element(self) -> float:
        """Return the value at the head.

        Raises:
            EmptyListError: if the list has no elements.
        """
        if self._head is None:
            raise EmptyListError("first_element from empty list")
        return self._head.value

    def ends_positive(self) -> bool:
        """Return True when the last value is strictly greater than zero."""
        if self._tail is None:
            raise EmptyListError("ends_positive on empty list")
        return self._tail.value > 0

    def average(self) -> float:
        """Return the arithmetic mean of all values.

        The sum is taken exactly, so a list holding ``n`` copies of ``x``
        averages to exactly ``x``.

        Raises:
            EmptyListError: if the list has no elements.
        """
        if self._size == 0:
            raise EmptyListError("average of empty list")
        return float(statistics.mean(self))

    # ---- mutation ----
    def fill(self, item: float) -> None:
        value = _as_float(item)
        n = self._head
        while n is not None:
            n.value = value
            n = n.next

    def insert(self, index: int, item: float) -> None:
        """Insert ``item`` so that it ends up at position ``index``.

        ``index`` must lie in ``[0, size()]``; ``index == size()`` appends.

        Raises:
            ListIndexError: if ``index`` is not an int or is out of range.
        """
        if not _is_int(index) or index < 0 or index > self._size:
            raise ListIndexError(f"insert index {index!r} out of range [0, {self._size}]")
        value = _as_float(item)
        if index == 0:
            self._push_front(value)
            return
        if index == self._size:
            self.add(value)
            return
        prev = self._head
        for _ in range(index - 1):
            assert prev is not None
            prev = prev.next
        assert prev is not None
        n = _Node(value)
        n.next = prev.next
        prev.next = n
        self._size += 1

    def remove(self, item: float) -> bool:
        """Remove the first node whose value equals ``item`` exactly.

        Returns True if a node was removed, False if no value matched.
        """
        prev: Optional[_Node] = None
        n = self._head
        while n is not None and n.value != item:
            prev = n
            n = n.next
        if n is None:
            return False

        if prev is None:
            self._head = n.next
        else:
            prev.next = n.next
        if n is self._tail:
            self._tail = prev
        n.next = None
        self._size -= 1
        return True

    def remove_duplicates(self) -> None:
        """Keep the first occurrence of every value and drop later repeats.

        Values are compared by exact float equality; there is no tolerance.
        """
        if self._head is None:
            return
        seen: Set[float] = {self._head.value}
        prev = self._head
        removed = 0
        while prev.next is not None:
            n = prev.next
            if n.value in seen:
                prev.next = n.next
                n.next = None
                removed += 1
            else:
                seen.add(n.value)
                prev = n
        self._tail = prev
        self._size -= removed
        if removed:
            LOGGER.debug("Removed %d duplicate nodes", removed)

    def rotate_right(self, positions: int) -> None:
        """Rotate the list cyclically to the right by ``positions`` steps.

        The last ``positions % size()`` values move to the front, keeping their
        order. Lists with fewer than two elements, and rotations by a multiple
        of the size, are left unchanged.

        Raises:
            InvalidArgumentError: if ``positions`` is not a positive int.
        """
        if not _is_int(positions) or positions <= 0:
            raise InvalidArgumentError(
                f"rotate_right positions must be a positive int, got {positions!r}"
            )
        if self._size <= 1:
            return
        k = positions % self._size
        if k == 0:
            return

        # the node at index size - k - 1 becomes the new tail
        new_tail = self._head
        for _ in range(self._size - k - 1):
            assert new_tail is not None
            new_tail = new_tail.next
        assert new_tail is not None and self._tail is not None
        new_head = new_tail.next
        self._tail.next = self._head
        new_tail.next = None
        self._head = new_head
        self._tail = new_tail
        LOGGER.debug("Rotated %d nodes right by %d", self._size, k)

    # ---- utils ----
    def to_list(self) -> List[float]:
        return list(self)

    def copy(self) -> "NumberList":
        return NumberList(self)

    def __str__(self) -> str:
        return " ".join(str(v) for v in self)

    def __repr__(self) -> str:
        return f"NumberList({self.to_list()!r})"
