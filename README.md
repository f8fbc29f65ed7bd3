# sudokulogic

A Sudoku solver that works the way a person does. Every cell keeps a set of
candidate values. The solver narrows those sets with logical rules until a
full pass of the rules changes nothing more. It never guesses and never
backtracks, so a hard puzzle may come back only partly solved.

Placing a value removes it from every other cell of the same row, column and
box. A cell left with one candidate is placed in turn. On top of that, two
rules run in a loop:

- **Subsets** (`SubSetEnforcer`). When n cells of a row, column or box
  together hold exactly n candidates, those candidates are removed from the
  rest of the region. Only cells with fewer than `size // 2` candidates take
  part, and at most `size // 2` cells are combined.
- **Pointing sets** (`PointingSetEnforcer`). When a value inside a box can
  only sit on one row or column of that box, it is removed from the rest of
  that row or column.

Boards of size 9, 16, 25 and 36 are supported by the library.

## Installation

```
pip install .
```

To install with the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Command line

```
sudokulogic
```

This solves one of three 9x9 puzzles that ship with the package and prints
the final board twice: first with every cell's remaining candidates, then as
a plain grid.

Options:

- `--puzzle {1,2,3}` chooses the bundled puzzle (default: 2).
- `--given ROW,COL,VALUE` adds a given digit; rows and columns count from 0,
  values from 1. It may be repeated.
- `-v`, `--verbose` logs the starting board, the board after each rule in
  each iteration, and the cells changed in each iteration.

If the givens contradict each other, the error message is printed and the
command exits with status 1.

## Library use

```python
from sudokulogic.solver import SudokuSolver

solver = SudokuSolver(9)
solver.set(0, 1, 5)   # row, column, value (rows and columns from 0, values from 1)
solver.set(0, 4, 6)
# ... more givens ...

board = solver.solve()   # raises sudokulogic.board.BoardError on a contradicting given
print(board)                      # plain grid: "_" marks an unsolved cell, "!" an impossible one
print(board.render_candidates())  # every cell's remaining candidates
print(board.is_solved())
```

`SudokuSolver.set` remembers the first contradicting given and ignores the
givens after it; `solve` then raises that error.

Lower-level pieces can be used on their own:

- `sudokulogic.possibility.PossibilityMatrix` is the grid of candidate bit
  masks; `iter_mask(mask, size)` lists the digits set in a mask.
- `sudokulogic.board.SudokuBoard` spreads each placement to the cell's row,
  column and box, and records changed cells in `improved`.
- `sudokulogic.region.get_all_regions(size)` and `get_all_boxes(size)` list
  the cell positions of each region; `RegionType` names the kind of region.
- `sudokulogic.subset.Subset` holds a group of values and the cells they are
  confined to.
- `sudokulogic.subsets_rule.SubSetEnforcer` and
  `sudokulogic.pointing_rule.PointingSetEnforcer` apply one rule to a board
  through `enforce_rule(board)`.
- `sudokulogic.join.debug_join(items, sep)` joins numbered `repr`s of items.

## What it does not do

- The command line solves 9x9 boards only and reads no puzzle files; givens
  come from a bundled puzzle plus `--given` options.
- There is no guessing or search: when the rules run out, the board is
  returned as far as they took it.