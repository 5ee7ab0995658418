"""Prefix-pruned depth-first traversal of board paths."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from ..core.models import Path
from ..data.dictionary import DictionaryIndex
from .grid import LetterGrid


class PathSearch:
    """Enumerate every path on ``grid`` that spells a ``length``-letter word.

    The traversal keeps its own stack instead of recursing, so :meth:`run`
    can be consumed lazily, abandoned part way (close the generator) or
    resumed later. ``starts`` restricts the first cell to the given row-major
    indices; ``None`` seeds from every occupied cell.
    """

    def __init__(
        self,
        dictionary: DictionaryIndex,
        grid: LetterGrid,
        length: int,
        starts: Optional[Iterable[int]] = None,
    ) -> None:
        self.dictionary = dictionary
        self.grid = grid
        self.length = length
        self.starts = starts

    def run(self) -> Iterator[Path]:
        grid = self.grid
        dictionary = self.dictionary
        length = self.length

        stack: List[Path] = [
            Path.start(cell, grid.letter(cell)) for cell in grid.occupied_cells(self.starts)
        ]
        while stack:
            cur = stack.pop()
            if len(cur) == length:
                if dictionary.contains(cur.word):
                    yield cur
                continue

            if not dictionary.is_viable_prefix(cur.word):
                continue
            for cell in grid.neighbors(cur.last):
                if not cur.contains(cell):
                    stack.append(cur.extend(cell, grid.letter(cell)))

    def __iter__(self) -> Iterator[Path]:
        return self.run()


def find_words(
    dictionary: DictionaryIndex,
    grid: LetterGrid,
    length: int,
    starts: Optional[Iterable[int]] = None,
) -> List[Path]:
    """Collect every candidate path of ``length`` letters."""

    return list(PathSearch(dictionary, grid, length, starts).run())
