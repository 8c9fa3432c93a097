"""Candidate digits still possible for a single Sudoku cell."""

from __future__ import annotations

from collections.abc import Iterator

DIGITS = tuple(range(1, 10))


class Candidates:
    """Ordered set of the digits 1-9 that a cell may still take.

    A fresh instance holds nothing until :meth:`initialize` is called.
    """

    def __init__(self) -> None:
        self._numbers: list[int] | None = None

    def initialize(self) -> None:
        """Fill with the digits 1 to 9 unless already filled."""
        if self._numbers is None:
            self._numbers = list(DIGITS)

    def remove(self, num: int) -> None:
        """Drop ``num`` from the candidates, if present."""
        if self._numbers is not None and num in self._numbers:
            self._numbers.remove(num)

    def __contains__(self, num: object) -> bool:
        return self._numbers is not None and num in self._numbers

    def __len__(self) -> int:
        return 0 if self._numbers is None else len(self._numbers)

    def __iter__(self) -> Iterator[int]:
        return iter(self._numbers or ())

    def is_empty(self) -> bool:
        """True when no candidate digits remain."""
        return len(self) == 0

    def next_possible(self) -> int | None:
        """The smallest remaining candidate, or None when there is none."""
        return self._numbers[0] if self._numbers else None

    def render(self) -> str:
        """Human-readable listing of the remaining candidates."""
        if self._numbers is None:
            return "Empty Tree"
        listing = " ".join(str(n) for n in self._numbers)
        return f"the remaining possible numbers are:\n{listing}"