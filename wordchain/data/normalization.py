"""Shared helpers for word and letter normalization."""

from __future__ import annotations


def clean_word(text: str) -> str:
    """Return ``text`` stripped of surrounding whitespace and folded to lower case."""

    if not text:
        return ""
    return text.strip().lower()


def is_letter(token: str) -> bool:
    """True when ``token`` is exactly one alphabetic character."""

    return len(token) == 1 and token.isalpha()


__all__ = ["clean_word", "is_letter"]
