"""Singly linked list with head and tail pointers."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class Node:
    """One cell of a singly linked chain."""

    value: int
    next: Node | None = None


class LinkedList:
    """Singly linked list supporting front/back insertion and in-place reversal."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.push_back(value)

    @property
    def head(self) -> Node | None:
        """The first node, or None when the list is empty."""
        return self._head

    def push_front(self, value: int) -> None:
        """Insert ``value`` before the current first element."""
        node = Node(value, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Append ``value`` after the current last element."""
        node = Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            self._tail = node
        self._size += 1

    def insert(self, value: int, position: int) -> None:
        """Insert ``value`` so that it ends up at index ``position``."""
        if not 0 <= position <= self._size:
            raise IndexError(f"position {position} out of range for length {self._size}")
        if position == 0:
            self.push_front(value)
            return
        if position == self._size:
            self.push_back(value)
            return
        previous = self._head
        for _ in range(position - 1):
            previous = previous.next
        previous.next = Node(value, previous.next)
        self._size += 1

    def search(self, value: int) -> bool:
        """Return True if some element equals ``value``."""
        return any(item == value for item in self)

    def pop_front(self) -> int:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("pop from empty list")
        node = self._head
        self._head = node.next
        node.next = None
        if self._head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        previous: Node | None = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self._head = previous

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"