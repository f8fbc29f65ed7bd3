"""Bit-mask storage of the candidate digits of every cell of a board."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from math import isqrt

SUPPORTED_SIZES = (9, 16, 25, 36)


def iter_mask(mask: int, size: int) -> Iterator[int]:
    """Yield the digits (1-based) whose bits are set in ``mask``, lowest first.

    Iteration stops at the first set bit that lies outside the board size.
    """
    while mask > 0:
        bit_pos = (mask & -mask).bit_length() - 1
        if bit_pos >= size:
            return
        mask &= mask - 1
        yield bit_pos + 1


class PossibilityMatrix:
    """A square grid where each cell holds the set of digits still possible."""

    def __init__(self, size: int) -> None:
        if size not in SUPPORTED_SIZES:
            raise ValueError(
                f"Unsupported board size {size}, expected one of {SUPPORTED_SIZES}"
            )
        self.size = size
        self.block_size = isqrt(size)
        self._full = (1 << size) - 1
        self._cells = [[self._full] * size for _ in range(size)]

    def _check_position(self, row: int, col: int) -> None:
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"Invalid position ({row},{col})")

    def _bit(self, value: int) -> int:
        if not 0 < value <= self.size:
            raise ValueError(
                f"Invalid value {value} expected between 1 and {self.size}"
            )
        return 1 << (value - 1)

    def set(self, row: int, col: int, value: int) -> None:
        """Make ``value`` the only candidate of the cell."""
        self._check_position(row, col)
        self._cells[row][col] = self._bit(value)

    def set_possible_values(self, row: int, col: int, values: Iterable[int]) -> None:
        """Replace the candidates of the cell with ``values``."""
        self._check_position(row, col)
        mask = 0
        for value in values:
            mask |= self._bit(value)
        self._cells[row][col] = mask

    def constrain_possible_values(
        self, row: int, col: int, values: Iterable[int]
    ) -> None:
        """Keep only those candidates of the cell that are in ``values``."""
        self._check_position(row, col)
        values = list(values)
        if not values:
            raise ValueError("Cannot constrain a cell to an empty set of values")
        mask = 0
        for value in values:
            mask |= self._bit(value)
        self._cells[row][col] &= mask

    def remove_value(self, row: int, col: int, value: int) -> None:
        """Drop ``value`` from the candidates of the cell."""
        self._check_position(row, col)
        self._cells[row][col] &= ~self._bit(value)

    def possible_values(self, row: int, col: int) -> Iterator[int]:
        """Iterate over the candidates of the cell in increasing order."""
        self._check_position(row, col)
        return iter_mask(self._cells[row][col], self.size)

    def is_possible_value(self, row: int, col: int, value: int) -> bool:
        self._check_position(row, col)
        return bool(self._cells[row][col] & self._bit(value))

    def is_cell_resolved(self, row: int, col: int) -> bool:
        """True when exactly one candidate is left in the cell."""
        self._check_position(row, col)
        bits = self._cells[row][col] & self._full
        return bits != 0 and bits & (bits - 1) == 0

    def is_board_resolved(self) -> bool:
        return all(
            self.is_cell_resolved(row, col)
            for row in range(self.size)
            for col in range(self.size)
        )

    def _horizontal_line(self, line_width: int) -> str:
        return ("+" + "-" * line_width) * self.block_size + "+\n"

    def render_candidates(self) -> str:
        """Render the grid listing every candidate of every cell."""
        cell_width = self.size * 2
        line = self._horizontal_line((cell_width + 1) * self.block_size + 1)
        parts = [line]
        for row in range(self.size):
            parts.append("| ")
            for col in range(self.size):
                values = list(self.possible_values(row, col))
                text = ",".join(map(str, values))
                parts.append(f"{text:<{cell_width}} ")
                if (col + 1) % self.block_size == 0:
                    parts.append("| ")
            parts.append("\n")
            if (row + 1) % self.block_size == 0:
                parts.append(line)
        return "".join(parts)

    def __str__(self) -> str:
        line = self._horizontal_line(3 * self.block_size)
        parts = [line]
        for row in range(self.size):
            parts.append("|")
            for col in range(self.size):
                values = list(self.possible_values(row, col))
                if not values:
                    parts.append(" ! ")
                elif len(values) == 1:
                    parts.append(f" {values[0]} ")
                else:
                    parts.append(" _ ")
                if (col + 1) % self.block_size == 0:
                    parts.append("|")
            parts.append("\n")
            if (row + 1) % self.block_size == 0:
                parts.append(line)
        return "".join(parts)