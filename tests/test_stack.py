import pytest

from rpnkit.stack import Stack


def test_push_pop_characters():
    stack = Stack()
    for ch in "ABC":
        stack.push(ch)
    popped = []
    while stack:
        popped.append(stack.pop())
    assert popped == ["C", "B", "A"]


def test_push_pop_operations():
    stack = Stack()
    for op in "+-*":
        stack.push(op)
    assert [stack.pop() for _ in range(3)] == ["*", "-", "+"]
    assert len(stack) == 0


def test_top_after_push_and_pop():
    stack = Stack()
    stack.push(1)
    stack.push(2)
    stack.push(3)
    assert stack.peek() == 3
    stack.pop()
    assert stack.peek() == 2
    stack.pop()
    assert stack.peek() == 1
    stack.push(4)
    stack.push(5)
    assert stack.peek() == 5

    drained = []
    while stack:
        drained.append(stack.peek())
        stack.pop()
    assert drained == [5, 4, 1]


def test_copy_matches_while_draining():
    stack = Stack()
    for value in (1, 4, 5):
        stack.push(value)
    copy = stack.copy()
    while stack:
        assert stack.peek() == copy.peek()
        copy.pop()
        stack.pop()
    assert not copy


def test_copy_is_independent():
    stack = Stack([1, 2])
    copy = stack.copy()
    copy.push(3)
    assert len(stack) == 2
    assert stack.peek() == 2


def test_iteration_is_top_down():
    stack = Stack([1, 2, 3])
    assert list(stack) == [3, 2, 1]


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Stack().pop()


def test_peek_empty_raises():
    with pytest.raises(IndexError):
        Stack().peek()


def test_bool_reflects_contents():
    stack = Stack()
    assert not stack
    stack.push("x")
    assert stack
    assert len(stack) == 1