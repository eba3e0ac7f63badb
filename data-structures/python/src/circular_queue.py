"""Growable ring-buffer FIFO.

Drives breadth-first traversal of the trees in this package. Named
'circular_queue' so it never shadows the stdlib queue module.
"""

from typing import Generic, List, Optional, TypeVar

T = TypeVar('T')

_INITIAL_CAPACITY = 4


class CircularQueue(Generic[T]):
    def __init__(self) -> None:
        self._capacity: int = _INITIAL_CAPACITY
        self._slots: List[Optional[T]] = [None] * self._capacity
        self._head: int = 0
        self._count: int = 0

    def _index(self, offset: int) -> int:
        return (self._head + offset) % self._capacity

    def enqueue(self, item: T) -> None:
        if self._count == self._capacity:
            self._resize(self._capacity * 2)
        self._slots[self._index(self._count)] = item
        self._count += 1

    def dequeue(self) -> T:
        if self._count == 0:
            raise IndexError("dequeue from empty queue")
        item = self._slots[self._head]
        self._slots[self._head] = None
        self._head = self._index(1)
        self._count -= 1
        return item  # type: ignore[return-value]

    def front(self) -> T:
        if self._count == 0:
            raise IndexError("front from empty queue")
        return self._slots[self._head]  # type: ignore[return-value]

    def back(self) -> T:
        if self._count == 0:
            raise IndexError("back from empty queue")
        return self._slots[self._index(self._count - 1)]  # type: ignore[return-value]

    def size(self) -> int:
        return self._count

    def is_empty(self) -> bool:
        return self._count == 0

    def clear(self) -> None:
        self._slots = [None] * self._capacity
        self._head = 0
        self._count = 0

    def copy(self) -> 'CircularQueue[T]':
        """Return a shallow copy; the clone is compacted to start at slot 0."""
        clone: CircularQueue[T] = CircularQueue()
        clone._resize(self._capacity)
        for offset in range(self._count):
            clone._slots[offset] = self._slots[self._index(offset)]
        clone._count = self._count
        return clone

    def _resize(self, capacity: int) -> None:
        slots: List[Optional[T]] = [None] * capacity
        for offset in range(self._count):
            slots[offset] = self._slots[self._index(offset)]
        self._slots = slots
        self._head = 0
        self._capacity = capacity

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __repr__(self) -> str:
        items = [self._slots[self._index(i)] for i in range(self._count)]
        return f"CircularQueue({items})"
