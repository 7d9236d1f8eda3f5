import pytest

from environment.containers import BoundedQueue, BoundedStack
from environment.errors import CapacityExceeded, MazeError, Underflow


def test_stack_is_lifo():
    stack = BoundedStack(3)
    for x in (1, 2, 3):
        stack.push(x)
    assert len(stack) == 3
    assert stack.peek() == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


def test_stack_push_when_full_raises():
    stack = BoundedStack(2)
    stack.push("a")
    stack.push("b")
    assert stack.is_full()
    with pytest.raises(CapacityExceeded):
        stack.push("c")
    # Невдалий push нічого не змінює
    assert list(stack) == ["a", "b"]


def test_stack_pop_and_peek_when_empty_raise():
    stack = BoundedStack(1)
    with pytest.raises(Underflow):
        stack.pop()
    with pytest.raises(Underflow):
        stack.peek()
    stack.push(1)
    stack.pop()
    with pytest.raises(Underflow):
        stack.pop()


def test_container_errors_share_base_class():
    assert issubclass(CapacityExceeded, MazeError)
    assert issubclass(Underflow, MazeError)


def test_stack_iterates_bottom_to_top():
    stack = BoundedStack(4)
    for x in "abc":
        stack.push(x)
    assert list(stack) == ["a", "b", "c"]
    assert stack.capacity == 4


def test_queue_is_fifo():
    queue = BoundedQueue(4)
    for x in (1, 2, 3):
        queue.enqueue(x)
    assert queue.dequeue() == 1
    assert queue.dequeue() == 2
    assert len(queue) == 1
    assert not queue.is_empty()


def test_queue_full_and_empty_errors():
    queue = BoundedQueue(2)
    with pytest.raises(Underflow):
        queue.dequeue()
    queue.enqueue(1)
    queue.enqueue(2)
    assert queue.is_full()
    with pytest.raises(CapacityExceeded):
        queue.enqueue(3)


def test_queue_wraps_around_without_losing_slots():
    queue = BoundedQueue(4)
    for i in range(20):
        queue.enqueue(i)
        queue.enqueue(i + 100)
        assert queue.dequeue() == i
        assert queue.dequeue() == i + 100
    assert queue.is_empty()

    for x in "wxyz":
        queue.enqueue(x)
    assert list(queue) == ["w", "x", "y", "z"]


def test_zero_capacity_is_rejected():
    with pytest.raises(ValueError):
        BoundedStack(0)
    with pytest.raises(ValueError):
        BoundedQueue(0)
