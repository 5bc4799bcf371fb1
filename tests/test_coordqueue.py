import pytest

from snakegame.coord import Coord
from snakegame.coordqueue import CoordQueue


def test_new_queue_is_empty():
    q = CoordQueue()
    assert q.is_empty()
    assert len(q) == 0
    assert list(q) == []


def test_enqueue_order_and_ends():
    q = CoordQueue()
    items = [Coord(0, 0), Coord(1, 0), Coord(2, 0)]
    for c in items:
        q.enqueue(c)
    assert list(q) == items
    assert q.head == items[0]
    assert q.tail == items[-1]
    assert len(q) == len(items)
    assert not q.is_empty()


def test_dequeue_is_fifo():
    q = CoordQueue()
    items = [Coord(i, i) for i in range(4)]
    for c in items:
        q.enqueue(c)
    assert [q.dequeue() for _ in items] == items
    assert q.is_empty()


def test_single_element_head_equals_tail():
    q = CoordQueue()
    q.enqueue(Coord(5, 6))
    assert q.head == q.tail == Coord(5, 6)


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        CoordQueue().dequeue()


def test_head_of_empty_raises():
    q = CoordQueue()
    with pytest.raises(IndexError):
        _ = q.head
    assert len(q) == 0


def test_tail_of_empty_raises():
    q = CoordQueue()
    with pytest.raises(IndexError):
        _ = q.tail
    assert q.is_empty()


def test_reuse_after_emptying():
    q = CoordQueue()
    q.enqueue(Coord(1, 1))
    q.dequeue()
    q.enqueue(Coord(2, 2))
    assert q.head == q.tail == Coord(2, 2)
    assert len(q) == 1