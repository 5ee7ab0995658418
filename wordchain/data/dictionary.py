"""Word list loading and the word/prefix index used to prune the search."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import FrozenSet, Iterable, List, TextIO, Union

from ..core.exceptions import DictionaryLoadError
from ..io.remote import fetch_word_list, is_remote_source
from ..utils.logger import get_logger
from .normalization import clean_word


LOGGER = get_logger(__name__)

DictionarySource = Union[Path, str, TextIO]


@dataclass
class DictionaryConfig:
    """Configuration for dictionary loading."""

    source: DictionarySource
    encoding: str = "utf-8"
    timeout_seconds: float = 30.0


class DictionaryIndex:
    """Immutable set of words plus the set of every prefix of those words.

    A full word counts as a prefix of itself, so ``is_viable_prefix`` is true
    for any string that is, or begins, a dictionary word. The index is built
    once and then only read, which lets every search branch and worker share
    it without synchronization.
    """

    __slots__ = ("_words", "_prefixes", "_max_length")

    def __init__(self, words: Iterable[str]) -> None:
        word_set = set()
        prefix_set = set()
        for raw in words:
            word = clean_word(raw)
            if not word:
                continue
            word_set.add(word)
            for end in range(1, len(word) + 1):
                prefix_set.add(word[:end])
        self._words: FrozenSet[str] = frozenset(word_set)
        self._prefixes: FrozenSet[str] = frozenset(prefix_set)
        self._max_length = max((len(w) for w in self._words), default=0)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def from_words(cls, words: Iterable[str]) -> "DictionaryIndex":
        return cls(words)

    @classmethod
    def build(cls, source: DictionarySource, **options) -> "DictionaryIndex":
        """Read a one-word-per-line source and index it.

        ``source`` may be a filesystem path, an open text stream or an
        ``http(s)://`` URL. Raises :class:`DictionaryLoadError` when the source
        is missing or unreadable.
        """

        return cls.from_config(DictionaryConfig(source=source, **options))

    @classmethod
    def from_config(cls, config: DictionaryConfig) -> "DictionaryIndex":
        lines = _read_lines(config)
        index = cls(lines)
        LOGGER.info(
            "Dictionary loaded: %d words, %d prefixes (longest word %d letters)",
            len(index._words),
            len(index._prefixes),
            index._max_length,
        )
        return index

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def contains(self, word: str) -> bool:
        return word in self._words

    def is_viable_prefix(self, prefix: str) -> bool:
        return prefix in self._prefixes

    def has_length(self, length: int) -> bool:
        if length > self._max_length:
            return False
        return any(len(word) == length for word in self._words)

    @property
    def max_length(self) -> int:
        return self._max_length

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)


def _read_lines(config: DictionaryConfig) -> List[str]:
    source = config.source
    if hasattr(source, "read"):
        try:
            return source.read().splitlines()  # type: ignore[union-attr]
        except (OSError, UnicodeDecodeError) as exc:
            raise DictionaryLoadError(f"Unable to read dictionary stream: {exc}") from exc

    if is_remote_source(str(source)):
        return fetch_word_list(str(source), timeout_seconds=config.timeout_seconds)

    path = Path(source)
    if not path.is_file():
        raise DictionaryLoadError(f"Missing dictionary file: {path}")
    LOGGER.debug("Reading dictionary from %s", path)
    try:
        return path.read_text(encoding=config.encoding).splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise DictionaryLoadError(f"Unable to read dictionary {path}: {exc}") from exc


__all__ = ["DictionaryConfig", "DictionaryIndex", "DictionarySource"]
