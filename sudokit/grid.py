"""A 9x9 Sudoku board with puzzle generation and solving."""

from __future__ import annotations

import random

from sudokit.moves import Move, MoveStack

SIZE = 9
BOX = 3


class SudokuGrid:
    """A 9x9 grid of digits where 0 marks an empty cell."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._cells = [[0] * SIZE for _ in range(SIZE)]

    def clear(self) -> None:
        """Empty every cell."""
        for row in self._cells:
            row[:] = [0] * SIZE

    @staticmethod
    def _check_position(position: tuple[int, int]) -> tuple[int, int]:
        row, col = position
        if not (0 <= row < SIZE and 0 <= col < SIZE):
            raise IndexError(f"cell ({row}, {col}) is outside the grid")
        return row, col

    def __getitem__(self, position: tuple[int, int]) -> int:
        row, col = self._check_position(position)
        return self._cells[row][col]

    def __setitem__(self, position: tuple[int, int], value: int) -> None:
        row, col = self._check_position(position)
        if not 0 <= value <= SIZE:
            raise ValueError(f"cell value must be 0-{SIZE}, got {value}")
        self._cells[row][col] = value

    def render(self) -> str:
        """The grid as text, one row per line."""
        return "\n".join(" ".join(str(v) for v in row) for row in self._cells)

    def is_safe(self, row: int, col: int, num: int) -> bool:
        """True if ``num`` appears in neither the row, column nor box."""
        if num in self._cells[row]:
            return False
        if any(line[col] == num for line in self._cells):
            return False
        start_row, start_col = row - row % BOX, col - col % BOX
        return all(
            self._cells[r][c] != num
            for r in range(start_row, start_row + BOX)
            for c in range(start_col, start_col + BOX)
        )

    def find_empty_cell(self) -> tuple[int, int] | None:
        """Position of the first empty cell in row order, or None."""
        for row, line in enumerate(self._cells):
            for col, value in enumerate(line):
                if value == 0:
                    return row, col
        return None

    def solve(self) -> bool:
        """Fill every empty cell by backtracking; False if impossible.

        On failure the grid is left as it was.
        """
        stack = MoveStack()
        position = self.find_empty_cell()
        start = 1
        while position is not None:
            row, col = position
            for num in range(start, SIZE + 1):
                if self.is_safe(row, col, num):
                    self._cells[row][col] = num
                    stack.push(Move(row, col, num))
                    position = self.find_empty_cell()
                    start = 1
                    break
            else:
                if stack.is_empty():
                    return False
                move = stack.pop()
                self._cells[move.row][move.col] = 0
                position = (move.row, move.col)
                start = move.value + 1
        return True

    def random_int(self, low: int, high: int) -> int:
        """A random integer between ``low`` and ``high`` inclusive."""
        return self._rng.randint(low, high)

    def fill_box(self, row: int, col: int) -> None:
        """Fill the 3x3 box whose top-left cell is (row, col) with 1-9 shuffled."""
        digits = list(range(1, SIZE + 1))
        self._rng.shuffle(digits)
        cells = ((r, c) for r in range(row, row + BOX) for c in range(col, col + BOX))
        for (r, c), digit in zip(cells, digits):
            self._cells[r][c] = digit

    def fill_diagonal_boxes(self) -> None:
        """Fill the three independent boxes on the main diagonal."""
        for i in range(0, SIZE, BOX):
            self.fill_box(i, i)

    def fill_remaining(self, row: int, col: int) -> bool:
        """Fill the cells outside the diagonal boxes, starting at (row, col)."""
        if col >= SIZE and row < SIZE - 1:
            row += 1
            col = 0
        if row >= SIZE and col >= SIZE:
            return True

        if row < BOX:
            if col < BOX:
                col = BOX
        elif row < SIZE - BOX:
            if col == (row // BOX) * BOX:
                col += BOX
        elif col == SIZE - BOX:
            row += 1
            col = 0
            if row >= SIZE:
                return True

        for num in range(1, SIZE + 1):
            if self.is_safe(row, col, num):
                self._cells[row][col] = num
                if self.fill_remaining(row, col + 1):
                    return True
                self._cells[row][col] = 0
        return False

    def remove_digits(self, count: int) -> None:
        """Blank ``count`` randomly chosen filled cells."""
        filled = sum(1 for line in self._cells for v in line if v)
        if count > filled:
            raise ValueError(f"cannot remove {count} digits from {filled} filled cells")
        while count > 0:
            row = self.random_int(0, SIZE - 1)
            col = self.random_int(0, SIZE - 1)
            if self._cells[row][col] != 0:
                self._cells[row][col] = 0
                count -= 1