"""Command line entry point that solves one of the bundled puzzles."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from sudokulogic.board import BoardError
from sudokulogic.solver import SudokuSolver

Given = tuple[int, int, int]

KNOWN_VALUES: tuple[Given, ...] = (
    (0, 0, 5), (0, 1, 3), (0, 4, 7),
    (1, 0, 6), (1, 3, 1), (1, 4, 9), (1, 5, 5),
    (2, 1, 9), (2, 2, 8), (2, 7, 6),
    (3, 0, 8), (3, 4, 6), (3, 8, 3),
    (4, 0, 4), (4, 3, 8), (4, 5, 3), (4, 8, 1),
    (5, 0, 7), (5, 4, 2), (5, 8, 6),
    (6, 1, 6), (6, 6, 2), (6, 7, 8),
    (7, 3, 4), (7, 4, 1), (7, 5, 9), (7, 8, 5),
    (8, 4, 8), (8, 7, 7), (8, 8, 9),
)

KNOWN_VALUES2: tuple[Given, ...] = (
    (0, 1, 5), (0, 4, 6), (0, 7, 3),
    (1, 0, 4), (1, 2, 8), (1, 3, 5),
    (2, 0, 3), (2, 8, 8),
    (3, 0, 8), (3, 2, 7), (3, 3, 3),
    (4, 1, 1),
    (5, 6, 6), (5, 7, 8), (5, 8, 4),
    (6, 1, 6), (6, 3, 1), (6, 6, 4), (6, 8, 7),
    (7, 7, 9), (7, 8, 1),
    (8, 1, 9), (8, 5, 4), (8, 8, 5),
)

KNOWN_VALUES3: tuple[Given, ...] = (
    (1, 5, 3), (1, 7, 8), (1, 8, 5),
    (2, 2, 1), (2, 4, 2),
    (3, 3, 5), (3, 5, 7),
    (4, 2, 4), (4, 6, 1),
    (5, 1, 9),
    (6, 0, 5), (6, 7, 7), (6, 8, 3),
    (7, 2, 2), (7, 4, 1),
    (8, 4, 4), (8, 8, 9),
)

PUZZLES: dict[int, tuple[Given, ...]] = {
    1: KNOWN_VALUES,
    2: KNOWN_VALUES2,
    3: KNOWN_VALUES3,
}


def _parse_given(text: str) -> Given:
    parts = text.split(",")
    if len(parts) != 3:
        raise argparse.ArgumentTypeError(f"expected ROW,COL,VALUE, got {text!r}")
    try:
        row, col, value = (int(part) for part in parts)
    except ValueError as error:
        raise argparse.ArgumentTypeError(
            f"expected integers in ROW,COL,VALUE, got {text!r}"
        ) from error
    return row, col, value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudokulogic", description="Solve a 9x9 Sudoku by logical deduction."
    )
    parser.add_argument(
        "--puzzle",
        type=int,
        choices=sorted(PUZZLES),
        default=2,
        help="which bundled puzzle to solve (default: 2)",
    )
    parser.add_argument(
        "--given",
        type=_parse_given,
        action="append",
        default=[],
        metavar="ROW,COL,VALUE",
        help="an extra given digit, 0-based position; may be repeated",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log every solving step"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(message)s")

    solver = SudokuSolver(9)
    for row, col, value in (*PUZZLES[args.puzzle], *args.given):
        solver.set(row, col, value)

    try:
        board = solver.solve()
    except BoardError as error:
        print(error)
        return 1

    print(f"Final Board:\n{board.render_candidates()}")
    print(f"Solved:\n{board}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())