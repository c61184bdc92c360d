"""Three LIFO stack implementations and algorithms over any stack."""

from __future__ import annotations

from collections import deque
from typing import Generic, Protocol, TypeVar

from dsakit.linked_list import Node

T = TypeVar("T")


class Stack(Protocol[T]):
    """Anything with push, pop, top and empty."""

    def push(self, value: T) -> None: ...

    def pop(self) -> T: ...

    def top(self) -> T: ...

    def empty(self) -> bool: ...


class LinkedStack:
    """Stack whose top is the head of a singly linked chain."""

    def __init__(self) -> None:
        self._head: Node | None = None

    def push(self, value: int) -> None:
        self._head = Node(value, self._head)

    def pop(self) -> int:
        value = self.top()
        node = self._head
        self._head = node.next
        node.next = None
        return value

    def top(self) -> int:
        if self._head is None:
            raise IndexError("stack is empty")
        return self._head.value

    def empty(self) -> bool:
        return self._head is None


class QueueStack:
    """Stack built from two FIFO queues; the newest item is always at a queue front."""

    def __init__(self) -> None:
        self._first: deque[int] = deque()
        self._second: deque[int] = deque()

    def push(self, value: int) -> None:
        target, source = (
            (self._first, self._second) if not self._first else (self._second, self._first)
        )
        target.append(value)
        while source:
            target.append(source.popleft())

    def pop(self) -> int:
        if self._first:
            return self._first.popleft()
        if self._second:
            return self._second.popleft()
        raise IndexError("stack is empty")

    def top(self) -> int:
        if self._first:
            return self._first[0]
        if self._second:
            return self._second[0]
        raise IndexError("stack is empty")

    def empty(self) -> bool:
        return not self._first and not self._second


class ListStack(Generic[T]):
    """Stack of any item type backed by a Python list."""

    def __init__(self) -> None:
        self._items: list[T] = []

    def push(self, value: T) -> None:
        self._items.append(value)

    def pop(self) -> T:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items.pop()

    def top(self) -> T:
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


def drain(stack: Stack[T]) -> list[T]:
    """Pop everything off ``stack`` and return it, top first."""
    out: list[T] = []
    while not stack.empty():
        out.append(stack.pop())
    return out


def insert_at_bottom(stack: Stack[T], value: T) -> None:
    """Place ``value`` beneath every item currently on ``stack``."""
    held = drain(stack)
    stack.push(value)
    for item in reversed(held):
        stack.push(item)


def reverse_stack(stack: Stack[T]) -> None:
    """Reverse ``stack`` in place so that its bottom becomes its top."""
    for item in drain(stack):
        stack.push(item)