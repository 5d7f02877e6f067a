import pytest

from schedsim.fifo import BoundedQueue


def test_items_come_out_in_insertion_order():
    q = BoundedQueue([1, 2, 3, 4, 5])
    assert [q.dequeue() for _ in range(len(q))] == [1, 2, 3, 4, 5]
    assert q.is_empty()


def test_head_and_tail():
    q = BoundedQueue([1, 2, 3, 4, 5])
    assert q.head() == 1
    assert q.tail() == 5
    q.enqueue(6)
    assert q.tail() == 6
    q.dequeue()
    assert q.head() == 2


def test_str_format():
    q = BoundedQueue([2, 3, 4])
    assert str(q) == "{ 2 3 4 }"
    q.clear()
    assert str(q) == "{ }"


def test_default_capacity_is_ten():
    q = BoundedQueue(range(10))
    assert q.is_full()
    assert len(q) == 10
    with pytest.raises(OverflowError):
        q.enqueue(99)
    assert list(q) == list(range(10))


def test_custom_capacity():
    q = BoundedQueue(capacity=2)
    q.enqueue("a")
    assert not q.is_full()
    q.enqueue("b")
    assert q.is_full()
    with pytest.raises(OverflowError):
        q.enqueue("c")


def test_unbounded_queue():
    q = BoundedQueue(range(50), capacity=None)
    assert len(q) == 50
    assert not q.is_full()


def test_too_many_initial_items_rejected():
    with pytest.raises(OverflowError):
        BoundedQueue(range(3), capacity=2)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        BoundedQueue(capacity=-1)


def test_empty_queue_errors():
    q = BoundedQueue()
    with pytest.raises(IndexError):
        q.dequeue()
    with pytest.raises(IndexError):
        q.head()
    with pytest.raises(IndexError):
        q.tail()


def test_clear_empties_and_allows_reuse():
    q = BoundedQueue([1, 2, 3])
    q.clear()
    assert q.is_empty()
    assert len(q) == 0
    q.enqueue(7)
    assert q.head() == q.tail() == 7