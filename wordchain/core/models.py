"""Data models shared by the search engine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from ..engine.grid import LetterGrid


Cell = Tuple[int, int]
WordSequence = Tuple[str, ...]


@dataclass(frozen=True)
class Path:
    """A traced run of distinct, 8-adjacent cells and the word they spell."""

    cells: Tuple[Cell, ...]
    word: str

    @classmethod
    def start(cls, cell: Cell, letter: str) -> "Path":
        return cls(cells=(cell,), word=letter)

    def extend(self, cell: Cell, letter: str) -> "Path":
        return Path(cells=self.cells + (cell,), word=self.word + letter)

    def contains(self, cell: Cell) -> bool:
        return cell in self.cells

    @property
    def last(self) -> Cell:
        return self.cells[-1]

    def __len__(self) -> int:
        return len(self.cells)


@dataclass(frozen=True)
class Puzzle:
    """A validated puzzle: a square board plus the ordered word lengths."""

    grid: "LetterGrid"
    lengths: Tuple[int, ...]

    @property
    def dim(self) -> int:
        return self.grid.dim

    @property
    def total_letters(self) -> int:
        return sum(self.lengths)
