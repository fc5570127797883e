from metricsdb.linked_queue import LinkedQueue


def test_push_front():
    queue = LinkedQueue()
    queue.push_front(5)
    assert queue.peek_front() == 5
    assert len(queue) == 1


def test_empty_queue():
    queue = LinkedQueue()
    assert queue.peek_front() is None
    assert queue.pop_front() is None


def test_push_and_pop_order():
    queue = LinkedQueue()
    queue.push_front(1)
    queue.push_front(2)
    queue.push_front(3)
    assert queue.peek_front() == 3
    assert queue.pop_front() == 3
    assert queue.pop_front() == 2
    queue.push_front(4)
    assert queue.pop_front() == 4
    assert queue.pop_front() == 1
    assert queue.pop_front() is None
    assert len(queue) == 0