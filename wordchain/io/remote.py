"""Lightweight HTTP download of word lists."""

from __future__ import annotations

from typing import List

import requests

from ..core.exceptions import DictionaryLoadError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

REMOTE_SCHEMES = ("http://", "https://")


def is_remote_source(source: str) -> bool:
    return source.lower().startswith(REMOTE_SCHEMES)


def fetch_word_list(url: str, timeout_seconds: float = 30.0) -> List[str]:
    """Download a one-word-per-line list and return its lines."""

    LOGGER.info("Downloading dictionary from %s", url)
    try:
        response = requests.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise DictionaryLoadError(f"Dictionary download failed: {exc}") from exc

    lines = response.text.splitlines()
    LOGGER.debug("Downloaded %d lines from %s", len(lines), url)
    return lines
