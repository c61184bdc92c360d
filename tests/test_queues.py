import pytest

from dsakit.queues import CircularQueue


def test_fifo_order():
    items = [4, 6, 3, 2, 1, 5]
    q = CircularQueue()
    for item in items:
        q.push(item)
    out = []
    while not q.empty():
        out.append(q.front())
        q.pop()
    assert out == items


def test_pop_returns_front():
    q = CircularQueue(3)
    q.push(8)
    q.push(9)
    assert q.pop() == 8
    assert q.front() == 9
    assert len(q) == 1


def test_default_capacity_is_ten():
    q = CircularQueue()
    for item in range(10):
        q.push(item)
    assert q.full()
    with pytest.raises(OverflowError):
        q.push(10)


def test_full_and_empty_flags():
    q = CircularQueue(2)
    assert q.empty() and not q.full()
    q.push(1)
    assert not q.empty() and not q.full()
    q.push(2)
    assert q.full()
    assert len(q) == 2


def test_wraparound_preserves_order():
    q = CircularQueue(3)
    out = []
    for item in range(10):
        if q.full():
            out.append(q.pop())
        q.push(item)
    while not q.empty():
        out.append(q.pop())
    assert out == list(range(10))


def test_empty_errors():
    q = CircularQueue(2)
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(IndexError):
        q.pop()


@pytest.mark.parametrize("capacity", [0, -3])
def test_bad_capacity(capacity):
    with pytest.raises(ValueError):
        CircularQueue(capacity)