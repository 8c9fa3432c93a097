"""Moves made while solving and a stack to undo them."""

from __future__ import annotations

from dataclasses import dataclass


class EmptyStackError(IndexError):
    """Raised when popping or peeking an empty move stack."""


@dataclass(frozen=True)
class Move:
    """A digit placed at a cell."""

    row: int = 0
    col: int = 0
    value: int = 0


class MoveStack:
    """Last-in, first-out store of moves for backtracking."""

    def __init__(self) -> None:
        self._moves: list[Move] = []

    def push(self, move: Move) -> None:
        self._moves.append(move)

    def pop(self) -> Move:
        if not self._moves:
            raise EmptyStackError("Stack underflow!")
        return self._moves.pop()

    def top(self) -> Move:
        if not self._moves:
            raise EmptyStackError("Stack is empty!")
        return self._moves[-1]

    def is_empty(self) -> bool:
        return not self._moves

    def __len__(self) -> int:
        return len(self._moves)