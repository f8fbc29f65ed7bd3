"""Rule-based solver that applies logical techniques until nothing changes."""

from __future__ import annotations

import logging

from sudokulogic.board import BoardError, SudokuBoard
from sudokulogic.pointing_rule import PointingSetEnforcer
from sudokulogic.subsets_rule import SubSetEnforcer

log = logging.getLogger(__name__)


class SudokuSolver:
    """Collects the given digits of a puzzle and solves it by deduction.

    An invalid given is remembered; later givens are then ignored and
    :meth:`solve` raises the first error.
    """

    def __init__(self, size: int = 9) -> None:
        self.board = SudokuBoard(size)
        self.enforcers = [SubSetEnforcer(), PointingSetEnforcer()]
        self.pre_solve_error: BoardError | None = None

    def set(self, row: int, col: int, value: int) -> None:
        """Place a given digit, recording the first contradiction met."""
        if self.pre_solve_error is not None:
            return
        try:
            self.board.set(row, col, value)
        except BoardError as error:
            self.pre_solve_error = error

    def solve(self) -> SudokuBoard:
        """Apply the rules until a pass changes nothing; return the board.

        The board may be left partly unsolved when the rules run out.
        Raises ``BoardError`` if a given digit contradicted the board.
        """
        if self.pre_solve_error is not None:
            raise self.pre_solve_error
        board = self.board
        if board.is_solved():
            return board

        log.debug("solving:\n%s\n%s", board, board.render_candidates())
        iteration = 1
        while board.improved:
            board.improved.clear()
            for enforcer in self.enforcers:
                try:
                    solved = enforcer.enforce_rule(board)
                except BoardError as error:
                    log.debug("solver %s failed: %s", enforcer.name, error)
                    solved = False
                if solved:
                    break
                log.debug(
                    "iteration: %d solver %s board:\n%s",
                    iteration,
                    enforcer.name,
                    board.render_candidates(),
                )
            log.debug("Improvements: %s", board.improved)
            iteration += 1
        return board