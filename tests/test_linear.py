import pytest

from katamachine.dsa.linear import Queue, RingBuffer, Stack


def test_queue_scenario():
    queue = Queue()
    queue.enqueue(5)
    queue.enqueue(7)
    queue.enqueue(9)

    assert queue.deque() == 5
    assert len(queue) == 2

    queue.enqueue(11)
    assert queue.deque() == 7
    assert queue.deque() == 9
    assert queue.peek() == 11
    assert queue.deque() == 11

    with pytest.raises(IndexError):
        queue.deque()
    assert len(queue) == 0

    queue.enqueue(69)
    assert queue.peek() == 69
    assert len(queue) == 1


def test_queue_peek_empty_raises():
    with pytest.raises(IndexError):
        Queue().peek()


def test_queue_keeps_order_after_emptying():
    queue = Queue()
    queue.enqueue(1)
    assert queue.deque() == 1
    queue.enqueue(2)
    queue.enqueue(3)
    assert [queue.deque(), queue.deque()] == [2, 3]


def test_stack_scenario():
    stack = Stack()
    stack.push(5)
    stack.push(7)
    stack.push(9)

    assert stack.pop() == 9
    assert len(stack) == 2

    stack.push(11)
    assert stack.pop() == 11
    assert stack.pop() == 7
    assert stack.peek() == 5
    assert stack.pop() == 5

    with pytest.raises(IndexError):
        stack.pop()
    assert len(stack) == 0

    stack.push(69)
    assert stack.peek() == 69
    assert len(stack) == 1


def test_stack_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_ring_buffer_scenario():
    buffer = RingBuffer()
    buffer.push(5)
    assert buffer.pop() == 5
    with pytest.raises(IndexError):
        buffer.pop()

    buffer.push(42)
    buffer.push(9)
    assert buffer.pop() == 42
    assert buffer.pop() == 9
    with pytest.raises(IndexError):
        buffer.pop()

    buffer.push(42)
    buffer.push(9)
    buffer.push(12)
    assert buffer.get(2) == 12
    assert buffer.get(1) == 9
    assert buffer.get(0) == 42


def test_ring_buffer_get_out_of_range():
    buffer = RingBuffer()
    buffer.push(1)
    with pytest.raises(IndexError):
        buffer.get(1)
    with pytest.raises(IndexError):
        buffer.get(-1)


def test_ring_buffer_wraps_and_grows():
    buffer = RingBuffer()
    expected = []
    for value in range(50):
        buffer.push(value)
        expected.append(value)
        if value % 3 == 0:
            assert buffer.pop() == expected.pop(0)
    assert len(buffer) == len(expected)
    assert list(buffer) == expected
    assert [buffer.get(i) for i in range(len(buffer))] == expected