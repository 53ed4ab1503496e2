"""
Min-priority queue with linear-scan selection.

Entries are kept in insertion order and the minimum is found at read
time, so enqueue is O(1) and peek/dequeue are O(n). Among entries that
share the smallest priority, the earliest inserted one is served first.
"""

from __future__ import annotations

from typing import Generic, TypeVar

T = TypeVar('T')


class PriorityQueue(Generic[T]):
    """
    Queue of (element, priority) entries served lowest priority first.

    An empty queue is an ordinary state: peek() and dequeue() return None
    instead of raising.

    Examples:
        >>> q = PriorityQueue()
        >>> q.enqueue("a", 3)
        >>> q.enqueue("b", 1)
        >>> q.dequeue()
        'b'
    """

    __slots__ = ('_entries',)

    def __init__(self) -> None:
        self._entries: list[tuple[T, int]] = []

    @property
    def is_empty(self) -> bool:
        """True iff the queue holds no entries."""
        return not self._entries

    def enqueue(self, element: T, priority: int) -> None:
        """Add element with the given priority; lower values are served first."""
        self._entries.append((element, priority))

    def _min_index(self) -> int:
        # strict < keeps the earliest entry on ties
        best = 0
        for i in range(1, len(self._entries)):
            if self._entries[i][1] < self._entries[best][1]:
                best = i
        return best

    def dequeue(self) -> T | None:
        """Remove and return the element with the lowest priority, or None."""
        if self.is_empty:
            return None
        element, _ = self._entries.pop(self._min_index())
        return element

    def peek(self) -> T | None:
        """Return the element dequeue() would remove, without removing it."""
        if self.is_empty:
            return None
        return self._entries[self._min_index()][0]

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return not self.is_empty

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._entries)})"
