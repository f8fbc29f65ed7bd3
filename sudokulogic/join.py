"""Numbered joining of item representations."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def debug_join(items: Iterable[Any], sep: str) -> str:
    """Join ``repr`` of each item, prefixed by its index, with ``sep``."""
    return sep.join(f"{i}. {item!r}" for i, item in enumerate(items))