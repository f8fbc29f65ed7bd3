"""A Sudoku board that propagates every placement to the affected cells."""

from __future__ import annotations

from collections.abc import Iterator, Sequence

from sudokulogic.possibility import PossibilityMatrix
from sudokulogic.region import RegionType
from sudokulogic.subset import Subset

Position = tuple[int, int]


class BoardError(Exception):
    """Raised when a move would leave the board in a contradictory state."""


class SudokuBoard:
    """Candidate grid plus the propagation of placements and eliminations.

    ``improved`` records every cell whose candidates changed, in order.
    """

    def __init__(self, size: int = 9) -> None:
        self._matrix = PossibilityMatrix(size)
        self.size = self._matrix.size
        self.block_size = self._matrix.block_size
        self.improved: list[Position] = []

    def possible_values(self, row: int, col: int) -> Iterator[int]:
        """Iterate over the candidates of the cell in increasing order."""
        return self._matrix.possible_values(row, col)

    def is_solved(self) -> bool:
        return self._matrix.is_board_resolved()

    def set(self, row: int, col: int, value: int) -> bool:
        """Place ``value`` and remove it from every peer.

        Returns whether the board is solved afterwards.
        """
        if not self._matrix.is_possible_value(row, col, value):
            candidates = list(self._matrix.possible_values(row, col))
            raise BoardError(
                f"This board is invalid, Cannot set position ({row},{col}) as "
                f"{value} because is not one of the possible values {candidates}."
            )
        self.improved.append((row, col))
        self._matrix.set(row, col, value)
        excluded = ((row, col),)
        self._remove_from_row(excluded, value)
        self._remove_from_col(excluded, value)
        self._remove_from_box(excluded, value)
        return self._matrix.is_board_resolved()

    def _remove_value(self, row: int, col: int, value: int) -> bool:
        if self._matrix.is_cell_resolved(row, col):
            if next(self._matrix.possible_values(row, col)) == value:
                raise BoardError(
                    f"Invalid Board, at ({row},{col}) removed resolved value {value}."
                )
            return False
        if not self._matrix.is_possible_value(row, col, value):
            return False
        self.improved.append((row, col))
        self._matrix.remove_value(row, col, value)
        if self._matrix.is_cell_resolved(row, col):
            remaining = next(self._matrix.possible_values(row, col))
            return self.set(row, col, remaining)
        return False

    def _remove_from_cells(
        self, cells: Iterator[Position], excluded: Sequence[Position], value: int
    ) -> bool:
        for row, col in cells:
            if (row, col) in excluded:
                continue
            if self._remove_value(row, col, value):
                return True
        return False

    def _remove_from_row(self, excluded: Sequence[Position], value: int) -> bool:
        row = excluded[0][0]
        cells = ((row, i) for i in range(self.size))
        return self._remove_from_cells(cells, excluded, value)

    def _remove_from_col(self, excluded: Sequence[Position], value: int) -> bool:
        col = excluded[0][1]
        cells = ((i, col) for i in range(self.size))
        return self._remove_from_cells(cells, excluded, value)

    def _remove_from_box(self, excluded: Sequence[Position], value: int) -> bool:
        bs = self.block_size
        box_row = (excluded[0][0] // bs) * bs
        box_col = (excluded[0][1] // bs) * bs
        cells = (
            (box_row + i, box_col + j) for i in range(bs) for j in range(bs)
        )
        return self._remove_from_cells(cells, excluded, value)

    def apply_external_subset(self, region_type: RegionType, subset: Subset) -> bool:
        """Remove the subset's values from the rest of the region it lies in.

        Returns whether the board became solved.
        """
        removers = {
            RegionType.ROW: self._remove_from_row,
            RegionType.COL: self._remove_from_col,
            RegionType.BOX: self._remove_from_box,
        }
        remove = removers[region_type]
        for value in subset.values:
            if remove(subset.positions, value):
                return True
        return False

    def apply_internal_subset(self, subset: Subset) -> bool:
        """Restrict the subset's cells to the subset's values.

        A subset of one digit places that digit. Returns whether the board
        became solved. A subset that contradicts the board is a programming
        error and raises ``ValueError``.
        """
        if subset.size() == 1:
            (row, col), value = subset.positions[0], subset.values[0]
            return self.set(row, col, value)

        try:
            self.is_valid_subset(subset)
        except BoardError as error:
            raise ValueError(str(error)) from error

        for row, col in subset.positions:
            if tuple(self._matrix.possible_values(row, col)) == subset.values:
                continue
            self.improved.append((row, col))
            self._matrix.constrain_possible_values(row, col, subset.values)
        return False

    def is_valid_subset(self, subset: Subset) -> None:
        """Raise ``BoardError`` unless every subset cell's candidates lie in it."""
        allowed = set(subset.values)
        for row, col in subset.positions:
            candidates = list(self._matrix.possible_values(row, col))
            if not allowed.issuperset(candidates):
                raise BoardError(
                    f"Can't set position ({row},{col}) as {list(subset.values)} "
                    f"because it's not it the valid options: {candidates}."
                )

    def render_candidates(self) -> str:
        """Render the grid listing every candidate of every cell."""
        return self._matrix.render_candidates()

    def __str__(self) -> str:
        return str(self._matrix)