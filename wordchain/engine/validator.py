"""Shape validation for puzzles before any search starts."""

from __future__ import annotations

from typing import Optional, Sequence, Union

from ..core.exceptions import InputShapeError
from ..core.models import Puzzle
from ..data.normalization import is_letter
from ..utils.logger import get_logger
from .grid import LetterGrid


LOGGER = get_logger(__name__)

Rows = Sequence[Union[str, Sequence[str]]]


class PuzzleValidator:
    """Checks board and length inputs, raising :class:`InputShapeError` on the first fault."""

    def validate(
        self,
        rows: Rows,
        lengths: Sequence[int],
        dim: Optional[int] = None,
        word_count: Optional[int] = None,
    ) -> Puzzle:
        if dim is None:
            dim = len(rows)
        self.check_dimension(dim)
        self._check_square(rows, dim)
        self._check_letters(rows)
        self.check_lengths(lengths, word_count)

        puzzle = Puzzle(grid=LetterGrid.from_rows(rows), lengths=tuple(lengths))
        if puzzle.total_letters > dim * dim:
            LOGGER.warning(
                "Target lengths need %d letters but the board holds %d; no sequence can exist",
                puzzle.total_letters,
                dim * dim,
            )
        return puzzle

    def check_dimension(self, dim: int) -> None:
        if dim <= 0:
            raise InputShapeError(f"Grid dimension must be positive, got {dim}")

    def check_lengths(self, lengths: Sequence[int], word_count: Optional[int] = None) -> None:
        if word_count is not None and len(lengths) != word_count:
            raise InputShapeError(
                f"Expected {word_count} word lengths, got {len(lengths)}"
            )
        if not lengths:
            raise InputShapeError("At least one target word length is required")
        for position, length in enumerate(lengths, start=1):
            if isinstance(length, bool) or not isinstance(length, int):
                raise InputShapeError(f"Length of word {position} is not an integer: {length!r}")
            if length <= 0:
                raise InputShapeError(f"Length of word {position} must be positive, got {length}")

    def _check_square(self, rows: Rows, dim: int) -> None:
        if len(rows) != dim:
            raise InputShapeError(f"Board has {len(rows)} rows, expected {dim}")
        for index, row in enumerate(rows):
            if len(row) != dim:
                raise InputShapeError(
                    f"Board row {index} has {len(row)} cells, expected {dim}"
                )

    def _check_letters(self, rows: Rows) -> None:
        for r, row in enumerate(rows):
            for c, token in enumerate(row):
                if not isinstance(token, str) or not is_letter(token):
                    raise InputShapeError(f"Invalid board token {token!r} at ({r},{c})")
