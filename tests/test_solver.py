import pytest

from sudokulogic.board import BoardError
from sudokulogic.region import get_all_regions
from sudokulogic.solver import SudokuSolver

CLASSIC = (
    (0, 0, 5), (0, 1, 3), (0, 4, 7),
    (1, 0, 6), (1, 3, 1), (1, 4, 9), (1, 5, 5),
    (2, 1, 9), (2, 2, 8), (2, 7, 6),
    (3, 0, 8), (3, 4, 6), (3, 8, 3),
    (4, 0, 4), (4, 3, 8), (4, 5, 3), (4, 8, 1),
    (5, 0, 7), (5, 4, 2), (5, 8, 6),
    (6, 1, 6), (6, 6, 2), (6, 7, 8),
    (7, 3, 4), (7, 4, 1), (7, 5, 9), (7, 8, 5),
    (8, 4, 8), (8, 7, 7), (8, 8, 9),
)


def _full_grid():
    return [[(r * 3 + r // 3 + c) % 9 + 1 for c in range(9)] for r in range(9)]


def _candidates(board):
    return [[list(board.possible_values(r, c)) for c in range(9)] for r in range(9)]


def _assert_consistent(board):
    cells = _candidates(board)
    for _, region in get_all_regions(9):
        resolved = [cells[r][c][0] for r, c in region if len(cells[r][c]) == 1]
        assert len(resolved) == len(set(resolved))
    assert all(cells[r][c] for r in range(9) for c in range(9))


def test_full_grid_with_blanks_is_solved():
    full = _full_grid()
    blanks = {(r, (r * 2) % 9) for r in range(9)}
    solver = SudokuSolver(9)
    for r in range(9):
        for c in range(9):
            if (r, c) not in blanks:
                solver.set(r, c, full[r][c])
    board = solver.solve()
    assert board.is_solved()
    assert [[cell[0] for cell in row] for row in _candidates(board)] == full


def test_single_given_runs_rules_without_contradiction():
    solver = SudokuSolver(9)
    solver.set(4, 4, 7)
    board = solver.solve()
    assert not board.is_solved()
    assert list(board.possible_values(4, 4)) == [7]
    assert 7 not in board.possible_values(4, 0)
    _assert_consistent(board)


def test_empty_board_is_returned_untouched():
    board = SudokuSolver(9).solve()
    assert not board.is_solved()
    assert all(
        list(board.possible_values(r, c)) == list(range(1, 10))
        for r in range(9)
        for c in range(9)
    )


def test_conflicting_given_raises_on_solve():
    solver = SudokuSolver(9)
    solver.set(0, 0, 5)
    solver.set(0, 1, 5)
    with pytest.raises(BoardError, match=r"Cannot set position \(0,1\)"):
        solver.solve()


def test_first_error_is_kept_and_later_givens_ignored():
    solver = SudokuSolver(9)
    solver.set(0, 0, 5)
    solver.set(0, 1, 5)
    solver.set(1, 0, 5)
    assert "(0,1)" in str(solver.pre_solve_error)
    assert list(solver.board.possible_values(1, 0)) != [5]
    with pytest.raises(BoardError, match=r"\(0,1\)"):
        solver.solve()


def test_unsupported_size_rejected():
    with pytest.raises(ValueError):
        SudokuSolver(10)


def test_out_of_range_given_raises():
    solver = SudokuSolver(9)
    with pytest.raises(ValueError):
        solver.set(0, 0, 10)