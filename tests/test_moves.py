import pytest

from sudokit.moves import EmptyStackError, Move, MoveStack


def test_move_defaults():
    assert Move() == Move(0, 0, 0)


def test_new_stack_is_empty():
    stack = MoveStack()
    assert stack.is_empty()
    assert len(stack) == 0


def test_push_pop_lifo():
    stack = MoveStack()
    first, second = Move(0, 1, 2), Move(3, 4, 5)
    stack.push(first)
    stack.push(second)
    assert stack.pop() == second
    assert stack.pop() == first
    assert stack.is_empty()


def test_top_does_not_remove():
    stack = MoveStack()
    stack.push(Move(1, 1, 7))
    assert stack.top() == Move(1, 1, 7)
    assert len(stack) == 1


def test_grows_past_initial_capacity():
    stack = MoveStack()
    moves = [Move(i % 9, i // 9, 1 + i % 9) for i in range(25)]
    for move in moves:
        stack.push(move)
    assert len(stack) == 25
    popped = [stack.pop() for _ in range(25)]
    assert popped == moves[::-1]


def test_pop_empty_raises():
    with pytest.raises(EmptyStackError, match="Stack underflow!"):
        MoveStack().pop()


def test_top_empty_raises():
    with pytest.raises(EmptyStackError, match="Stack is empty!"):
        MoveStack().top()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        MoveStack().pop()