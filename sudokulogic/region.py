"""Rows, columns and boxes of a square board."""

from __future__ import annotations

from enum import Enum
from functools import lru_cache
from math import isqrt

Position = tuple[int, int]


class RegionType(Enum):
    ROW = "row"
    COL = "col"
    BOX = "box"


@lru_cache(maxsize=None)
def get_all_boxes(size: int) -> tuple[tuple[Position, ...], ...]:
    """Return the cells of every box, boxes in row-major order."""
    block_size = isqrt(size)
    offsets = [(i, j) for i in range(block_size) for j in range(block_size)]
    return tuple(
        tuple((bi * block_size + i, bj * block_size + j) for i, j in offsets)
        for bi in range(block_size)
        for bj in range(block_size)
    )


@lru_cache(maxsize=None)
def get_all_regions(size: int) -> tuple[tuple[RegionType, tuple[Position, ...]], ...]:
    """Return every region: row and column pairs by index, then the boxes."""
    regions: list[tuple[RegionType, tuple[Position, ...]]] = []
    for i in range(size):
        regions.append((RegionType.ROW, tuple((i, j) for j in range(size))))
        regions.append((RegionType.COL, tuple((j, i) for j in range(size))))
    regions.extend((RegionType.BOX, box) for box in get_all_boxes(size))
    return tuple(regions)