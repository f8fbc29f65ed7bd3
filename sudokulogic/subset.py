"""A group of digits confined to a group of cells."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class Subset:
    values: tuple[int, ...]
    positions: tuple[tuple[int, int], ...]

    def __init__(
        self, values: Iterable[int], positions: Iterable[tuple[int, int]]
    ) -> None:
        object.__setattr__(self, "values", tuple(values))
        object.__setattr__(self, "positions", tuple(tuple(p) for p in positions))

    def size(self) -> int:
        """Number of digits in the subset."""
        return len(self.values)