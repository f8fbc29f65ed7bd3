"""Pointing sets: digits of a box confined to one row or column of it."""

from __future__ import annotations

from collections.abc import Sequence

from sudokulogic.board import SudokuBoard
from sudokulogic.region import RegionType, get_all_boxes
from sudokulogic.subset import Subset

Position = tuple[int, int]


def _infer_pointing_sets(
    pos_lines: list[list[Position]],
    val_lines: list[list[int]],
    val_total: list[int],
) -> list[Subset]:
    pointing_sets = []
    for line_values, line_positions in zip(val_lines, pos_lines):
        only_in_line = [
            digit
            for digit, (total, in_line) in enumerate(
                zip(val_total, line_values), start=1
            )
            if total == in_line and total != 1
        ]
        if only_in_line:
            pointing_sets.append(Subset(only_in_line, line_positions))
    return pointing_sets


def _pointing_sets_in_box(
    board: SudokuBoard, box: Sequence[Position]
) -> list[tuple[RegionType, Subset]]:
    size, bs = board.size, board.block_size
    pos_rows: list[list[Position]] = [[] for _ in range(bs)]
    pos_cols: list[list[Position]] = [[] for _ in range(bs)]
    val_rows = [[0] * size for _ in range(bs)]
    val_cols = [[0] * size for _ in range(bs)]
    val_total = [0] * size

    for row, col in box:
        pos_rows[row % bs].append((row, col))
        pos_cols[col % bs].append((row, col))
        for value in board.possible_values(row, col):
            val_rows[row % bs][value - 1] += 1
            val_cols[col % bs][value - 1] += 1
            val_total[value - 1] += 1

    rows = _infer_pointing_sets(pos_rows, val_rows, val_total)
    cols = _infer_pointing_sets(pos_cols, val_cols, val_total)
    return [(RegionType.ROW, s) for s in rows] + [(RegionType.COL, s) for s in cols]


class PointingSetEnforcer:
    """Eliminates box-confined digits from the rest of their row or column."""

    name = "PointingSetEnforcer"

    def __init__(self) -> None:
        self.known_pointing_sets: set[Subset] = set()

    def enforce_rule(self, board: SudokuBoard) -> bool:
        """Apply every new pointing set; return whether the board got solved."""
        for box in get_all_boxes(board.size):
            for region_type, subset in _pointing_sets_in_box(board, box):
                if subset in self.known_pointing_sets:
                    continue
                if board.apply_external_subset(region_type, subset):
                    return True
                self.known_pointing_sets.add(subset)
        return False