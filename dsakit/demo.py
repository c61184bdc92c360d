"""Scripted demonstrations of the list, queue and stack types."""

from __future__ import annotations

import argparse
import sys
from collections import deque
from collections.abc import Callable, Iterable, Sequence

from dsakit.linked_list import LinkedList
from dsakit.queues import CircularQueue
from dsakit.stacks import (
    LinkedStack,
    ListStack,
    QueueStack,
    Stack,
    drain,
    insert_at_bottom,
    reverse_stack,
)


def _spaced(values: Iterable[object]) -> str:
    return "".join(f"{value} " for value in values)


def _filled(stack: Stack, values: Iterable[object]) -> Stack:
    for value in values:
        stack.push(value)
    return stack


def _linked_list() -> str:
    ll = LinkedList()
    for value in (2, 1, 3, 4, 0):
        ll.push_front(value)
    for value in (7, 8, 9, 10):
        ll.push_back(value)
    ll.insert(15, 9)
    ll.insert(11, 3)
    ll.pop_front()
    ll.reverse()
    return "".join(f"{value}->" for value in ll) + "\n"


def _queue() -> str:
    q = CircularQueue()
    for value in (4, 6, 3, 2, 1, 5):
        q.push(value)
    out = []
    while not q.empty():
        out.append(q.pop())
    return _spaced(out)


def _queue_stl() -> str:
    q = deque([4, 6, 3, 2, 1, 5])
    return _spaced(q.popleft() for _ in range(len(q)))


def _stack_linked() -> str:
    return _spaced(drain(_filled(LinkedStack(), (5, 1, 2, 3, 4))))


def _stack_stl() -> str:
    return _spaced(drain(_filled(ListStack(), "abwfc")))


def _stack_queues() -> str:
    stack = _filled(QueueStack(), (5, 1, 3, 10, 2))
    stack.pop()
    stack.push(4)
    return _spaced(drain(stack))


def _stack_vector() -> str:
    return _spaced(drain(_filled(ListStack(), (2, 23, 12, 1, 5))))


def _insert_at_bottom() -> str:
    stack = _filled(ListStack(), (3, 31, 10, 4, 2, 1))
    insert_at_bottom(stack, 5)
    return _spaced(drain(stack))


def _stack_reverse() -> str:
    stack = _filled(ListStack(), (3, 31, 10, 4, 2, 1))
    reverse_stack(stack)
    return _spaced(drain(stack))


DEMOS: dict[str, Callable[[], str]] = {
    "linked-list": _linked_list,
    "queue": _queue,
    "queue-stl": _queue_stl,
    "stack-linked": _stack_linked,
    "stack-stl": _stack_stl,
    "stack-queues": _stack_queues,
    "stack-vector": _stack_vector,
    "insert-at-bottom": _insert_at_bottom,
    "stack-reverse": _stack_reverse,
}


def run_demo(name: str) -> str:
    """Run the named demonstration and return what it prints."""
    try:
        demo = DEMOS[name]
    except KeyError:
        raise ValueError(f"unknown demo {name!r}; choose from {', '.join(DEMOS)}") from None
    return demo()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the output of the chosen demonstrations (all of them by default)."""
    parser = argparse.ArgumentParser(description="Run data-structure demonstrations.")
    parser.add_argument("names", nargs="*", choices=[*DEMOS, []] and list(DEMOS), metavar="NAME",
                        help=f"one of: {', '.join(DEMOS)}")
    args = parser.parse_args(argv)
    for name in args.names or DEMOS:
        sys.stdout.write(run_demo(name))
    return 0


if __name__ == "__main__":
    sys.exit(main())