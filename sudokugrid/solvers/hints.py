"""Single-cell hints built on a full solve."""

from __future__ import annotations
import random
from typing import Optional, Tuple

from .backtracking import BacktrackingSolver
from ..core.grid import Grid
from ..core.validator import is_valid_board


def hint(grid: Grid, rng: Optional[random.Random] = None) -> Optional[Tuple[int, int, int]]:
    """
    Suggest a value for the first empty cell (row-major).

    Solves the whole grid and reads back one cell.

    Returns:
        (row, col, value) with 0-based indices, or None when the grid is
        invalid, unsolvable, or already full.
    """
    if not is_valid_board(grid):
        return None

    solution, _ = BacktrackingSolver(rng=rng).solve(grid)
    if solution is None:
        return None

    cell = grid.first_empty()
    if cell is None:
        return None
    row, col = cell
    return row, col, solution.get(row, col)
