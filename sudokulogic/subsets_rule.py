"""Naked subsets: n cells of a region that share exactly n candidates."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations

from sudokulogic.board import SudokuBoard
from sudokulogic.region import get_all_regions
from sudokulogic.subset import Subset

Position = tuple[int, int]


def get_values_set(value_lists: Iterable[Iterable[int]], size: int) -> list[int]:
    """Return the distinct values of all lists, sorted.

    Values must lie between 0 and ``size``.
    """
    values = {value for values in value_lists for value in values}
    for value in values:
        if not 0 <= value <= size:
            raise ValueError(f"Value {value} out of range 0..{size}")
    return sorted(values)


class SubSetEnforcer:
    """Finds naked subsets in every region and eliminates their digits."""

    name = "SubSetEnforcer"

    def __init__(self) -> None:
        self.known_sub_sets: set[Subset] = set()

    @staticmethod
    def _candidate_combinations(
        board: SudokuBoard, region: Sequence[Position]
    ) -> list[tuple[tuple[Position, list[int]], ...]]:
        max_size = board.size // 2
        cells = [
            (position, values)
            for position in region
            if 1 < len(values := list(board.possible_values(*position))) < max_size
        ]
        return [
            combination
            for size in range(max_size + 1)
            for combination in combinations(cells, size)
        ]

    @classmethod
    def _sub_sets_in_region(
        cls, board: SudokuBoard, region: Sequence[Position]
    ) -> list[Subset]:
        sub_sets = []
        for combination in cls._candidate_combinations(board, region):
            positions = [position for position, _ in combination]
            values = get_values_set((vals for _, vals in combination), board.size)
            if len(positions) == len(values):
                sub_sets.append(Subset(values, positions))
        return sub_sets

    def enforce_rule(self, board: SudokuBoard) -> bool:
        """Apply every new naked subset; return whether the board got solved."""
        for region_type, region in get_all_regions(board.size):
            for subset in self._sub_sets_in_region(board, region):
                if subset in self.known_sub_sets:
                    continue
                if board.apply_external_subset(region_type, subset):
                    return True
                if board.apply_internal_subset(subset):
                    return True
                self.known_sub_sets.add(subset)
        return False