"""Validation utilities for Sudoku grids."""

from __future__ import annotations
from typing import TYPE_CHECKING

import numpy as np

from .errors import InvalidBoardError
from .search import SearchState

if TYPE_CHECKING:
    from .grid import Grid

# Searching past two solutions is enough to tell "unique" from "not unique".
UNIQUENESS_LIMIT = 2


def _check_unit(values: np.ndarray, unit: str, index: int) -> None:
    non_zero = values[values != 0]
    if len(non_zero) == len(np.unique(non_zero)):
        return
    uniq, counts = np.unique(non_zero, return_counts=True)
    duplicate = int(uniq[counts > 1][0])
    raise InvalidBoardError(
        f"duplicate value {duplicate} in {unit} {index + 1}", unit=unit, index=index
    )


def validate(grid: Grid) -> None:
    """
    Check that every value is in range and no row, column or box repeats a value.

    Args:
        grid: The grid to check. Not modified.

    Raises:
        InvalidBoardError: On the first rule violation found.
    """
    cells = grid.cells
    out_of_range = np.argwhere((cells < 0) | (cells > grid.size))
    if len(out_of_range):
        row, col = (int(x) for x in out_of_range[0])
        raise InvalidBoardError(
            f"value {int(cells[row, col])} at row {row + 1}, column {col + 1} "
            f"is outside 0-{grid.size}",
            unit="range",
        )

    for i in range(grid.size):
        _check_unit(grid.get_row(i), "row", i)
        _check_unit(grid.get_col(i), "column", i)

    index = 0
    for box_row in range(0, grid.size, grid.box_rows):
        for box_col in range(0, grid.size, grid.box_cols):
            _check_unit(grid.get_box(box_row, box_col), "box", index)
            index += 1


def is_valid_board(grid: Grid) -> bool:
    """Non-raising form of :func:`validate`."""
    try:
        validate(grid)
    except InvalidBoardError:
        return False
    return True


def is_valid_placement(grid: Grid, row: int, col: int, value: int) -> bool:
    """
    Check if placing a value at (row, col) is valid.

    Args:
        grid: The Sudoku grid.
        row: Row index.
        col: Column index.
        value: Value to check (1 to grid.size).

    Returns:
        True if the value does not already appear in the row, column or box.
    """
    if value < 1 or value > grid.size:
        return False

    if value in grid.get_row(row):
        return False

    if value in grid.get_col(col):
        return False

    if value in grid.get_box(row, col):
        return False

    return True


def count_solutions(grid: Grid, limit: int = UNIQUENESS_LIMIT) -> int:
    """
    Count the number of solutions for a puzzle (up to limit).

    Exhaustive row-major backtracking that stops as soon as ``limit``
    solutions have been seen. Candidates are tried in ascending order.

    Args:
        grid: The puzzle. Not modified.
        limit: Maximum solutions to count before stopping.

    Returns:
        Number of solutions found (up to limit). 0 for an invalid grid.
    """
    if not is_valid_board(grid):
        return 0

    state = SearchState(grid)
    empties = state.empties
    values = range(1, grid.size + 1)
    count = [0]  # Use list to allow modification in nested function

    def backtrack(depth: int) -> bool:
        """Returns True if limit reached."""
        if depth == len(empties):
            count[0] += 1
            return count[0] >= limit

        row, col = empties[depth]
        for value in values:
            if state.can_place(row, col, value):
                state.place(row, col, value)
                if backtrack(depth + 1):
                    return True
                state.remove(row, col)
        return False

    backtrack(0)
    return count[0]


def has_unique_solution(grid: Grid, limit: int = UNIQUENESS_LIMIT) -> bool:
    """
    Check if a puzzle has exactly one solution.

    Args:
        grid: The puzzle.
        limit: Counting cap passed to :func:`count_solutions`.

    Returns:
        True if the puzzle has exactly one solution.
    """
    return count_solutions(grid, limit=limit) == 1


def validate_solution(puzzle: Grid, solution: Grid) -> bool:
    """
    Validate that a solution correctly solves the puzzle.

    Returns:
        True if solution is complete, valid and keeps every clue of the puzzle.
    """
    if (puzzle.size, puzzle.box_rows, puzzle.box_cols) != \
            (solution.size, solution.box_rows, solution.box_cols):
        return False

    clues = puzzle.cells != 0
    if not np.array_equal(puzzle.cells[clues], solution.cells[clues]):
        return False

    return solution.is_complete() and is_valid_board(solution)
