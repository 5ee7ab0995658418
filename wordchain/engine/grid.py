"""Board representation and the gravity rule."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from ..core.constants import COMPASS_STEPS, EMPTY, Bounds
from ..core.models import Cell, Path


class LetterGrid:
    """Immutable square board of lower-case letters and ``EMPTY`` markers.

    Every transformation returns a new grid, so search branches can hold on
    to the board they were handed without observing each other's moves.
    """

    __slots__ = ("_cells", "dim", "bounds")

    def __init__(self, cells: Sequence[Sequence[str]]) -> None:
        self._cells: Tuple[Tuple[str, ...], ...] = tuple(tuple(row) for row in cells)
        self.dim = len(self._cells)
        self.bounds = Bounds(rows=self.dim, cols=self.dim)

    @classmethod
    def from_rows(cls, rows: Sequence[Union[str, Sequence[str]]]) -> "LetterGrid":
        """Build a grid from row strings (``"ca"``) or per-cell sequences."""

        return cls([[letter.lower() for letter in row] for row in rows])

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def letter(self, cell: Cell) -> str:
        row, col = cell
        return self._cells[row][col]

    def is_empty(self, cell: Cell) -> bool:
        return self.letter(cell) == EMPTY

    def cell_at(self, index: int) -> Cell:
        """Map a row-major linear index onto its ``(row, col)`` cell."""

        return divmod(index, self.dim)

    def occupied_cells(self, indices: Optional[Iterable[int]] = None) -> Iterator[Cell]:
        """Yield letter-holding cells, optionally restricted to linear ``indices``."""

        if indices is None:
            indices = range(self.dim * self.dim)
        for index in indices:
            cell = self.cell_at(index)
            if not self.is_empty(cell):
                yield cell

    def neighbors(self, cell: Cell) -> Iterator[Cell]:
        """Yield the in-bounds, letter-holding compass neighbours of ``cell``."""

        row, col = cell
        for dr, dc in COMPASS_STEPS:
            nr, nc = row + dr, col + dc
            if self.bounds.contains(nr, nc) and self._cells[nr][nc] != EMPTY:
                yield (nr, nc)

    def letter_count(self) -> int:
        return sum(1 for row in self._cells for letter in row if letter != EMPTY)

    def rows(self) -> List[str]:
        return ["".join(row) for row in self._cells]

    # ------------------------------------------------------------------
    # Gravity
    # ------------------------------------------------------------------
    def apply_word(self, path: Union[Path, Iterable[Cell]]) -> "LetterGrid":
        """Remove the traced cells and let the remaining letters fall.

        Each column is settled on its own: a letter with an empty cell directly
        below it drops one row, repeated until nothing in the column can move.
        """

        cells = path.cells if isinstance(path, Path) else tuple(path)
        board = [list(row) for row in self._cells]
        for row, col in cells:
            board[row][col] = EMPTY

        for col in range(self.dim):
            column = [board[row][col] for row in range(self.dim)]
            _settle_column(column)
            for row in range(self.dim):
                board[row][col] = column[row]
        return LetterGrid(board)

    def is_settled(self) -> bool:
        """True when no column has an empty cell directly below a letter."""

        for row in range(self.dim - 1):
            for col in range(self.dim):
                if self._cells[row][col] != EMPTY and self._cells[row + 1][col] == EMPTY:
                    return False
        return True

    # ------------------------------------------------------------------
    # Dunder helpers
    # ------------------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LetterGrid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"LetterGrid({self.rows()!r})"


def _settle_column(column: List[str]) -> None:
    moved = True
    while moved:
        moved = False
        for row in range(len(column) - 1, 0, -1):
            if column[row] == EMPTY and column[row - 1] != EMPTY:
                column[row], column[row - 1] = column[row - 1], EMPTY
                moved = True
