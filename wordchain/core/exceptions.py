"""Custom exception hierarchy for word-chain solving."""


class WordChainError(Exception):
    """Base exception for solver failures."""


class DictionaryLoadError(WordChainError):
    """Raised when the word list cannot be read or downloaded."""


class InputShapeError(WordChainError):
    """Raised when the puzzle board or target lengths are malformed."""
