import pytest

from dsakit.stacks import ArrayStack, LinkedStack, StackEmptyError, StackFullError


def test_push_pop_is_lifo():
    items = [12, 11, 13, 33, 2]
    for stack in (ArrayStack(), LinkedStack()):
        for item in items:
            stack.push(item)
        popped = [stack.pop() for _ in items]
        assert popped == items[::-1]
        assert len(stack) == 0


def test_peek_does_not_remove():
    for stack in (ArrayStack(), LinkedStack()):
        stack.push(10)
        stack.push(20)
        assert stack.peek() == 20
        assert len(stack) == 2
        assert stack.pop() == 20
        assert stack.peek() == 10


def test_iteration_is_top_down():
    for stack in (ArrayStack(), LinkedStack()):
        for item in [10, 20, 30]:
            stack.push(item)
        assert list(stack) == [30, 20, 10]


def test_empty_pop_raises():
    with pytest.raises(StackEmptyError):
        ArrayStack().pop()
    with pytest.raises(StackEmptyError):
        LinkedStack().pop()


def test_empty_peek_raises():
    with pytest.raises(StackEmptyError):
        ArrayStack().peek()
    with pytest.raises(StackEmptyError):
        LinkedStack().peek()


def test_str_lists_top_first():
    for stack in (ArrayStack(), LinkedStack()):
        for item in [1, 2, 3]:
            stack.push(item)
        assert str(stack) == "3  2  1"


def test_stack_empty_error_is_index_error():
    with pytest.raises(IndexError):
        LinkedStack().pop()


def test_array_stack_default_capacity_is_128():
    stack = ArrayStack()
    for item in range(128):
        stack.push(item)
    assert len(stack) == 128
    with pytest.raises(StackFullError):
        stack.push(128)
    assert stack.peek() == 127


def test_array_stack_custom_capacity():
    stack = ArrayStack(capacity=2)
    stack.push(1)
    stack.push(2)
    with pytest.raises(StackFullError):
        stack.push(3)
    assert stack.pop() == 2
    stack.push(3)
    assert list(stack) == [3, 1]


def test_array_stack_rejects_bad_capacity():
    with pytest.raises(ValueError):
        ArrayStack(capacity=0)


def test_push_after_pop_sequence():
    stack = ArrayStack()
    for item in [12, 11, 13, 33, 2]:
        stack.push(item)
    assert stack.pop() == 2
    stack.push(24)
    assert stack.peek() == 24
    assert list(stack) == [24, 33, 13, 11, 12]


def test_linked_stack_unbounded():
    stack = LinkedStack()
    for item in range(500):
        stack.push(item)
    assert len(stack) == 500
    assert stack.pop() == 499