"""Pretty-print helpers for boards and solutions."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from ..engine.grid import LetterGrid
    from ..engine.solver import SolveResult


WORD_SEPARATOR = "  "


def format_grid(grid: LetterGrid) -> str:
    width = grid.dim
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r, row in enumerate(grid.rows()):
        row_render = " ".join(f"{letter:>2}" for letter in row)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def format_sequence(sequence: Sequence[str]) -> str:
    return WORD_SEPARATOR.join(sequence)


def pretty_print_grid(grid: LetterGrid, *, label: str | None = None, stream=None) -> None:
    """Print the board in a human-friendly format."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(grid), file=stream)


def print_solutions(result: SolveResult, *, stream=None) -> None:
    """Print every solved sequence, one per line, in sorted order."""

    stream = stream or sys.stdout
    print("-- Possible Combinations:", file=stream)
    for sequence in result.sequences.sorted():
        print(format_sequence(sequence), file=stream)
