"""Command line entry point: ``sudoku-solve <file>``."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Mapping, NoReturn, Optional

from contracts.errors import ConfigError, MalformedPuzzleError, SudokuError, UsageError
from orchestrator.orchestrator import run_solve
from project_config import get_section


class _SolveArgumentParser(argparse.ArgumentParser):
    """Parser reporting every argument problem as a single usage line."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(self.prog)


def build_parser(prog: str) -> argparse.ArgumentParser:
    parser = _SolveArgumentParser(
        prog=prog,
        description="Solve a 9x9 Sudoku puzzle by backtracking.",
        add_help=False,
    )
    parser.add_argument("file", help="Text file with 81 digits, 0 marking blanks.")
    return parser


def _configure_logging(env: Mapping[str, str]) -> None:
    level_name = env.get("SUDOKU_LOG_LEVEL") or str(get_section("logging.level"))
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format=str(get_section("logging.format")),
        stream=sys.stderr,
    )


def _parse_file_argument(program: str, args_list: List[str]) -> str:
    """Return the single puzzle path, dashes included.

    The count is checked before argparse sees the tokens, so ``--`` and
    option-like names such as ``-p.txt`` count as ordinary arguments.
    """

    if len(args_list) != 1:
        raise UsageError(program)
    args = build_parser(program).parse_args(["--", args_list[0]])
    return args.file


def main(argv: Optional[List[str]] = None, *, prog: Optional[str] = None) -> int:
    args_list = sys.argv[1:] if argv is None else list(argv)
    program = prog if prog is not None else sys.argv[0]
    env = dict(os.environ)

    try:
        path = _parse_file_argument(program, args_list)
    except UsageError as exc:
        print(str(exc))
        return 1

    try:
        _configure_logging(env)
        outcome = run_solve(path, env=env)
    except MalformedPuzzleError as exc:
        print(f"Malformed puzzle in {path}: {exc}")
        return 1
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    except SudokuError as exc:
        print(str(exc))
        return 1

    sys.stdout.write(outcome.report())
    return 0


__all__ = ["build_parser", "main"]


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    raise SystemExit(main())
