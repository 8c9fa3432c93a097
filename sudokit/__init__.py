"""Grid, constraint graph, candidate sets and move stack for 9x9 Sudoku."""

__version__ = "0.1.0"
__all__ = ["candidates", "graph", "grid", "moves"]