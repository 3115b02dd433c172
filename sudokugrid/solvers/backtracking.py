"""Depth-first backtracking solver with randomized value order."""

from __future__ import annotations
import random
from typing import Optional

from .base_solver import BaseSolver
from ..core.grid import Grid
from ..core.rng import new_rng
from ..core.search import SearchState
from ..core.validator import is_valid_board


class BacktrackingSolver(BaseSolver):
    """
    Depth-First Search solver using recursive backtracking.

    Cells are assigned in row-major order: the first empty cell is always the
    next one filled. At each cell the values 1..size are tried in an order
    shuffled by the solver's random source, so grids with several completions
    yield different (but always valid) solutions for different seeds.
    """

    name = "Backtracking"

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None):
        """
        Initialize the solver.

        Args:
            rng: Random source for value ordering. Takes precedence over seed.
            seed: Seed for a private random source when rng is not given.
        """
        super().__init__()
        self.rng = rng if rng is not None else new_rng(seed)

    def _solve(self, grid: Grid) -> Optional[Grid]:
        if not is_valid_board(grid):
            return None

        state = SearchState(grid)
        self.stats.empty_cells = len(state.empties)
        if self._backtrack(state, 0):
            return state.write_to(grid)
        return None

    def _backtrack(self, state: SearchState, depth: int) -> bool:
        """
        Recursive backtracking algorithm.

        Returns True if solution found, False otherwise.
        """
        self.stats.iterations += 1

        if depth == len(state.empties):
            return True

        row, col = state.empties[depth]
        values = list(range(1, state.size + 1))
        self.rng.shuffle(values)

        for value in values:
            if state.can_place(row, col, value):
                state.place(row, col, value)
                if self._backtrack(state, depth + 1):
                    return True
                state.remove(row, col)

        self.stats.backtracks += 1
        return False
