"""CLI entrypoint for the word-chain grid solver."""

from __future__ import annotations

import multiprocessing
import sys

from wordchain.cli import main


if __name__ == "__main__":  # pragma: no cover
    multiprocessing.freeze_support()
    sys.exit(main())
