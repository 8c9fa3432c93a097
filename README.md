# sudokit

Building blocks for working with 9x9 Sudoku puzzles. There are no dependencies beyond the standard library.

- `sudokit.grid.SudokuGrid` is a 9x9 grid of digits, and 0 marks an empty cell.
  - You read and write cells with `grid[row, col]`.
  - `is_safe` checks whether a digit may go in a cell.
  - `find_empty_cell` returns the first empty cell in row order.
  - `solve` fills the empty cells by backtracking with a `MoveStack`. If the grid cannot be solved it returns `False` and leaves the grid unchanged.
  - `fill_diagonal_boxes` and `fill_remaining` build a full grid.
  - `remove_digits` blanks cells at random to make a puzzle.
  - Randomness comes from the `random.Random` you pass in, or from a fresh one.
- `sudokit.graph.Graph` is a constraint graph with one `Node` per cell.
  - `build_sudoku_constraints` creates the 81 cells and links each cell to every other cell in its row, column and box.
  - A node carries a `value` and a domain of candidate digits from 1 to 9.
  - `render_grid` draws the board as boxed text, with `.` for empty cells.
  - `is_valid_value` checks that no neighbour of a node already holds a value.
- `sudokit.candidates.Candidates` is the ordered set of digits still possible for one cell.
  - It is empty until `initialize()` fills it with 1 to 9.
  - `next_possible()` returns the smallest remaining digit, or `None`.
- `sudokit.moves.MoveStack` is a last-in, first-out stack of `Move(row, col, value)` records, used to undo placements.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Example

```python
import random

from sudokit.grid import SudokuGrid
from sudokit.graph import Graph
from sudokit.candidates import Candidates
from sudokit.moves import Move, MoveStack

grid = SudokuGrid(random.Random(7))
grid.fill_diagonal_boxes()
grid.fill_remaining(0, 3)
grid.remove_digits(40)
print(grid.render())
print(grid.solve())                       # True

graph = Graph()
graph.build_sudoku_constraints()
cell = graph.node_at(0, 0)
print(cell.edge_count())                  # 20 peers
print(graph.is_valid_value(cell, 5))      # True
print(graph.render_grid())

cands = Candidates()
cands.initialize()
cands.remove(1)
print(cands.next_possible())              # 2

stack = MoveStack()
stack.push(Move(0, 0, 5))
print(stack.pop())                        # Move(row=0, col=0, value=5)
```

## Errors

- `MoveStack.pop()` and `MoveStack.top()` raise `sudokit.moves.EmptyStackError` when the stack is empty. This error is a subclass of `IndexError`.
- `grid[row, col]` raises `IndexError` when the position is outside the grid.
- Assigning a value outside 0 to 9 raises `ValueError`.
- `SudokuGrid.remove_digits(count)` raises `ValueError` when `count` is larger than the number of filled cells.

## What it does not do

This is a library only. It has no command-line program and no interactive game, and it does not save or load puzzles. The grid, the constraint graph and the candidate sets are separate pieces. Connecting them is up to you.

## Running the tests

```
pytest
```