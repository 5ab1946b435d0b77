import pytest

from dsakit.linked_queue import LinkedQueue, QueueUnderflowError


def test_source_sequence():
    q = LinkedQueue()
    q.enqueue(7)
    q.enqueue(3)
    q.enqueue(8)
    assert q.peek() == 7
    q.dequeue()
    assert q.peek() == 3
    q.dequeue()
    assert q.peek() == 8
    q.dequeue()
    assert q.is_empty() is True


def test_dequeue_returns_in_fifo_order():
    q = LinkedQueue()
    values = [5, 1, 9, 2]
    for value in values:
        q.enqueue(value)
    assert [q.dequeue() for _ in values] == values


def test_empty_queue_raises():
    q = LinkedQueue()
    with pytest.raises(QueueUnderflowError):
        q.dequeue()
    with pytest.raises(QueueUnderflowError):
        q.peek()


def test_reuse_after_draining():
    q = LinkedQueue()
    q.enqueue(1)
    q.dequeue()
    q.enqueue(2)
    q.enqueue(3)
    assert q.peek() == 2
    assert q.dequeue() == 2
    assert q.dequeue() == 3
    assert q.is_empty() is True


def test_new_queue_is_empty():
    q = LinkedQueue()
    assert q.is_empty() is True
    q.enqueue("x")
    assert q.is_empty() is False