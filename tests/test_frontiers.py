import pytest

from jugsearch.core.frontiers import FIFOQueue


def test_fifo_order():
    q = FIFOQueue()
    for x in (1, 2, 3):
        q.push(x)
    assert len(q) == 3
    assert q.peek() == 1
    assert [q.pop(), q.pop(), q.pop()] == [1, 2, 3]
    assert not q


def test_pop_empty_is_an_error():
    with pytest.raises(IndexError):
        FIFOQueue().pop()
