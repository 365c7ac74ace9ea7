import pytest

from stacklab.stack import (
    ArrayStack,
    LinkedStack,
    StackEmptyError,
    StackError,
    StackFullError,
)


def test_push_pop_is_lifo():
    for stack in (ArrayStack(), LinkedStack()):
        for item in "abc":
            stack.push(item)
        assert [stack.pop() for _ in range(3)] == ["c", "b", "a"]
        assert stack.is_empty()


def test_peek_does_not_remove():
    for stack in (ArrayStack(), LinkedStack()):
        stack.push(1)
        stack.push(2)
        assert stack.peek() == 2
        assert len(stack) == 2


def test_empty_pop_and_peek_raise():
    for stack in (ArrayStack(), LinkedStack()):
        with pytest.raises(StackEmptyError):
            stack.pop()
        with pytest.raises(StackEmptyError):
            stack.peek()


def test_empty_error_is_stack_error():
    for stack in (ArrayStack(), LinkedStack()):
        with pytest.raises(StackError):
            stack.pop()


def test_len_tracks_pushes_and_pops():
    for stack in (ArrayStack(), LinkedStack()):
        for item in range(5):
            stack.push(item)
        stack.pop()
        assert len(stack) == 4


def test_iteration_goes_top_to_bottom():
    for stack in (ArrayStack(), LinkedStack()):
        for item in [1, 2, 3]:
            stack.push(item)
        assert list(stack) == [3, 2, 1]


def test_contains():
    for stack in (ArrayStack(), LinkedStack()):
        stack.push("x")
        stack.push("y")
        assert "x" in stack
        assert "z" not in stack


def test_array_stack_default_capacity_is_100():
    stack = ArrayStack()
    for item in range(100):
        stack.push(item)
    assert stack.is_full()
    with pytest.raises(StackFullError):
        stack.push(100)
    assert len(stack) == 100


def test_array_stack_small_capacity():
    stack = ArrayStack(2)
    stack.push("a")
    assert not stack.is_full()
    stack.push("b")
    with pytest.raises(StackFullError):
        stack.push("c")
    assert stack.pop() == "b"


def test_array_stack_rejects_bad_capacity():
    with pytest.raises(ValueError):
        ArrayStack(0)


def test_array_stack_equality():
    first, second = ArrayStack(), ArrayStack(10)
    for item in "abc":
        first.push(item)
        second.push(item)
    assert first == second
    second.pop()
    assert not first == second
    second.push("z")
    assert not first == second


def test_empty_array_stacks_are_equal():
    empty = ArrayStack()
    other = ArrayStack(5)
    assert (empty == other) is True
    other.push("a")
    assert (empty == other) is False
    other.pop()
    assert (empty == other) is True


def test_linked_matches_same_top():
    first, second = LinkedStack(), LinkedStack()
    for item in [1, 2]:
        first.push(item)
    for item in [9, 2]:
        second.push(item)
    assert first.matches_any_position(second)


def test_linked_matches_deeper_position():
    first, second = LinkedStack(), LinkedStack()
    for item in [5, 7]:
        first.push(item)
    for item in [5, 8]:
        second.push(item)
    assert first.matches_any_position(second)


def test_linked_no_match():
    first, second = LinkedStack(), LinkedStack()
    for item in [1, 2, 3]:
        first.push(item)
    for item in [4, 5, 6]:
        second.push(item)
    assert not first.matches_any_position(second)


def test_linked_match_only_within_shorter_depth():
    first, second = LinkedStack(), LinkedStack()
    for item in [1, 2, 3]:
        first.push(item)
    second.push(1)
    assert not first.matches_any_position(second)


def test_linked_empty_never_matches():
    first = LinkedStack()
    first.push(1)
    assert not LinkedStack().matches_any_position(first)