"""Reading puzzles from whitespace-separated text input.

The format is the one the solver has always accepted on standard input::

    <dimension>
    <number of words>
    <length 1> <length 2> ...
    <dimension * dimension letters, row-major>

Letters may be separated by whitespace or run together (``cats`` and
``c a t s`` read the same), so a board can be typed one row per line.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, List, Optional, Sequence, TextIO

from ..core.exceptions import InputShapeError
from ..core.models import Puzzle
from ..engine.validator import PuzzleValidator, Rows


Prompt = Callable[[str], None]


class _TokenReader:
    """Pulls whitespace-separated tokens from a stream one line at a time."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._tokens: Deque[str] = deque()

    def _fill(self) -> bool:
        line = self._stream.readline()
        if not line:
            return False
        self._tokens.extend(line.split())
        return True

    def next_token(self, what: str) -> str:
        while not self._tokens:
            if not self._fill():
                raise InputShapeError(f"Unexpected end of input while reading {what}")
        return self._tokens.popleft()

    def next_int(self, what: str) -> int:
        token = self.next_token(what)
        try:
            return int(token)
        except ValueError as exc:
            raise InputShapeError(f"Expected an integer for {what}, got {token!r}") from exc

    def next_chars(self, count: int, what: str) -> List[str]:
        chars: List[str] = []
        while len(chars) < count:
            token = self.next_token(what)
            needed = count - len(chars)
            chars.extend(token[:needed])
            if len(token) > needed:
                self._tokens.appendleft(token[needed:])
        return chars

    def buffered(self) -> List[str]:
        return list(self._tokens)


def read_puzzle(
    stream: TextIO,
    prompt: Optional[Prompt] = None,
    validator: Optional[PuzzleValidator] = None,
) -> Puzzle:
    """Read one puzzle from ``stream``; ``prompt`` is called before each group."""

    validator = validator or PuzzleValidator()
    reader = _TokenReader(stream)

    def ask(text: str) -> None:
        if prompt is not None:
            prompt(text)

    ask("Grid dimension: ")
    dim = reader.next_int("grid dimension")
    validator.check_dimension(dim)

    ask("Number of words: ")
    word_count = reader.next_int("number of words")
    if word_count <= 0:
        raise InputShapeError(f"Number of words must be positive, got {word_count}")

    ask("Enter the length of each word (space separated, in order): ")
    lengths = [reader.next_int(f"length of word {i + 1}") for i in range(word_count)]
    extra = [token for token in reader.buffered() if token.lstrip("-").isdigit()]
    if extra:
        raise InputShapeError(
            f"Expected {word_count} word lengths, got {word_count + len(extra)}"
        )

    ask("Enter the characters in the grid, row-major: ")
    letters = [char.lower() for char in reader.next_chars(dim * dim, "grid letters")]
    rows = [letters[r * dim:(r + 1) * dim] for r in range(dim)]
    return validator.validate(rows, lengths, dim=dim, word_count=word_count)


def puzzle_from_rows(
    rows: Rows,
    lengths: Sequence[int],
    validator: Optional[PuzzleValidator] = None,
) -> Puzzle:
    """Validate an in-memory board (``["ca", "ts"]``) and target lengths."""

    validator = validator or PuzzleValidator()
    normalized = [[token.lower() if isinstance(token, str) else token for token in row] for row in rows]
    return validator.validate(normalized, list(lengths))


__all__ = ["read_puzzle", "puzzle_from_rows", "Prompt"]
