"""Logical Sudoku solving through candidate elimination."""

__version__ = "0.1.0"