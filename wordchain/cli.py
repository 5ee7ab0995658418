"""Command-line entrypoint for the word-chain solver."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional, TextIO

from .core.constants import DEFAULT_DICTIONARY_PATH, ExecutorKind
from .core.exceptions import DictionaryLoadError, InputShapeError
from .engine.solver import SolverConfig, WordChainSolver
from .io.puzzle_input import read_puzzle
from .utils.logger import configure_logging, get_logger
from .utils.pretty import pretty_print_grid, print_solutions


LOGGER = get_logger(__name__)

EXIT_OK = 0
EXIT_DICTIONARY_ERROR = 1
EXIT_INPUT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find every word sequence that clears a word-chain letter grid",
    )
    parser.add_argument(
        "--dict",
        dest="dictionary",
        type=str,
        default=DEFAULT_DICTIONARY_PATH,
        help="Word list path or http(s) URL, one word per line",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=None,
        help="Number of search workers (default and maximum: CPU count)",
    )
    parser.add_argument(
        "--processes",
        action="store_true",
        help="Run workers in separate processes instead of threads",
    )
    parser.add_argument(
        "--noquery",
        action="store_true",
        help="Do not print input prompts (for piped input)",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def main(
    argv: Optional[List[str]] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    # Clamp rather than reject, matching the historical --threads behaviour.
    threads = max(1, args.threads) if args.threads is not None else None
    config = SolverConfig(
        dictionary_source=args.dictionary,
        worker_count=threads,
        executor=ExecutorKind.PROCESS if args.processes else ExecutorKind.THREAD,
        interactive=not args.noquery,
    )
    LOGGER.info("Using %d worker(s)", config.effective_workers())

    try:
        solver = WordChainSolver(config)
    except DictionaryLoadError as exc:
        LOGGER.error("Failed to load dictionary: %s", exc)
        return EXIT_DICTIONARY_ERROR

    def prompt(text: str) -> None:
        print(text, end="", file=stdout, flush=True)

    try:
        puzzle = read_puzzle(stdin, prompt if config.interactive else None, solver.validator)
    except InputShapeError as exc:
        LOGGER.error("Invalid puzzle: %s", exc)
        return EXIT_INPUT_ERROR

    if config.interactive:
        pretty_print_grid(puzzle.grid, label="Board:", stream=stdout)

    result = solver.solve(puzzle)
    print_solutions(result, stream=stdout)

    if args.output:
        payload = result.to_jsonable()
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Wrote %d sequence(s) to %s", len(result.sequences), args.output)
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
