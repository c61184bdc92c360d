"""Fixed-capacity FIFO queue backed by a circular buffer."""

from __future__ import annotations


class CircularQueue:
    """First-in first-out queue holding at most ``capacity`` items."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._items: list[int | None] = [None] * capacity
        self._front = 0
        self._rear = capacity - 1
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._items)

    def full(self) -> bool:
        """Return True when no more items fit."""
        return self._size == self.capacity

    def empty(self) -> bool:
        """Return True when the queue holds nothing."""
        return self._size == 0

    def push(self, value: int) -> None:
        """Add ``value`` at the rear."""
        if self.full():
            raise OverflowError("queue is full")
        self._rear = (self._rear + 1) % self.capacity
        self._items[self._rear] = value
        self._size += 1

    def pop(self) -> int:
        """Remove and return the front item."""
        value = self.front()
        self._items[self._front] = None
        self._front = (self._front + 1) % self.capacity
        self._size -= 1
        return value

    def front(self) -> int:
        """Return the front item without removing it."""
        if self.empty():
            raise IndexError("queue is empty")
        return self._items[self._front]

    def __len__(self) -> int:
        return self._size