from collections import deque
from itertools import accumulate

import pytest
from hypothesis import given, strategies as st

from algoset.structures import MinStack, TwoStackQueue

operations = st.lists(
    st.one_of(st.integers(-100, 100), st.just(None)),
    max_size=40,
)


@given(st.lists(st.integers(-100, 100), max_size=40))
def test_min_stack_tracks_minimum(values):
    stack = MinStack()
    prefix_mins = list(accumulate(values, min))
    for count, (value, expected_min) in enumerate(zip(values, prefix_mins), start=1):
        stack.push(value)
        assert len(stack) == count
        assert stack.top() == value
        assert stack.get_min() == expected_min
    for remaining, (value, expected_min) in zip(
        range(len(values), 0, -1), reversed(list(zip(values, prefix_mins)))
    ):
        assert len(stack) == remaining
        assert stack.top() == value
        assert stack.get_min() == expected_min
        assert stack.pop() == value
    assert len(stack) == 0


def test_min_stack_example_sequence():
    stack = MinStack()
    for value in (-2, 0, -3):
        stack.push(value)
    assert stack.get_min() == -3
    stack.pop()
    assert stack.top() == 0
    assert stack.get_min() == -2


@pytest.mark.parametrize("method", ["pop", "top", "get_min"])
def test_min_stack_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(MinStack(), method)()


@given(operations)
def test_queue_is_fifo(ops):
    queue = TwoStackQueue()
    model = deque()
    for op in ops:
        if op is None:
            if model:
                assert queue.peek() == model[0]
                assert queue.pop() == model.popleft()
        else:
            queue.push(op)
            model.append(op)
        assert len(queue) == len(model)
        assert queue.is_empty() is (not model)


def test_queue_interleaved_push_and_pop():
    queue = TwoStackQueue()
    queue.push(1)
    queue.push(2)
    assert queue.peek() == 1
    assert queue.pop() == 1
    queue.push(3)
    assert queue.pop() == 2
    assert queue.pop() == 3
    assert queue.is_empty() is True


@pytest.mark.parametrize("method", ["pop", "peek"])
def test_queue_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(TwoStackQueue(), method)()