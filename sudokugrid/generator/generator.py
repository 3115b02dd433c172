"""Sudoku puzzle generator with configurable difficulty levels."""

from __future__ import annotations
import logging
import random
from enum import Enum
from typing import List, Optional, Tuple, Union

from ..core.errors import GenerationError
from ..core.grid import Grid
from ..core.rng import new_rng
from ..core.validator import has_unique_solution
from ..solvers.backtracking import BacktrackingSolver

logger = logging.getLogger(__name__)

DEFAULT_ATTEMPTS = 3
# Fewest clues any generated puzzle targets, whatever its size.
MIN_CLUES = 8


class Difficulty(Enum):
    """Difficulty levels for Sudoku puzzles."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def base_clues(self) -> int:
        """Target clue count for a 9x9 puzzle."""
        return {
            Difficulty.EASY: 40,
            Difficulty.MEDIUM: 32,
            Difficulty.HARD: 26,
        }[self]

    def clues_for(self, size: int) -> int:
        """Target clue count scaled to a size x size grid."""
        if size == 9:
            return self.base_clues
        return max(MIN_CLUES, size * size * self.base_clues // 81)

    @classmethod
    def from_name(cls, name: Union[str, Difficulty]) -> Difficulty:
        """Look up a difficulty by its (case-insensitive) name."""
        if isinstance(name, Difficulty):
            return name
        if not isinstance(name, str):
            raise ValueError(f"invalid difficulty: {name!r}")
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"invalid difficulty: {name}") from None


class SudokuGenerator:
    """
    Generator for Sudoku puzzles with a unique solution.

    Algorithm, repeated up to ``attempts`` times:
    1. Fill the boxes on the main box diagonal with random permutations
    2. Complete the grid with the backtracking solver
    3. Remove cells in random order, keeping a removal only while the
       puzzle still has exactly one solution, until the clue target is met
    4. Re-check uniqueness and accept the puzzle
    """

    def __init__(self, size: int = 9, box_rows: Optional[int] = None,
                 box_cols: Optional[int] = None, seed: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        """
        Initialize the generator.

        Args:
            size: Grid size (default 9 for standard Sudoku).
            box_rows: Rows per sub-box (defaults to the square root of size).
            box_cols: Columns per sub-box (defaults to the square root of size).
            seed: Random seed for reproducibility.
            rng: Random source to use instead of a seeded private one.
        """
        template = Grid(size, box_rows, box_cols)
        self.size = template.size
        self.box_rows = template.box_rows
        self.box_cols = template.box_cols
        self.rng = rng if rng is not None else new_rng(seed)
        self.solver = BacktrackingSolver(rng=self.rng)

    def generate(self, difficulty: Difficulty = Difficulty.MEDIUM,
                 attempts: int = DEFAULT_ATTEMPTS) -> Grid:
        """
        Generate a Sudoku puzzle with the specified difficulty.

        Args:
            difficulty: Desired difficulty level.
            attempts: Retry budget; values below 1 count as 1.

        Returns:
            A Grid with the puzzle (clues only, no solution).

        Raises:
            GenerationError: Every attempt failed.
        """
        puzzle, _ = self.generate_with_solution(difficulty, attempts)
        return puzzle

    def generate_batch(self, count: int, difficulty: Difficulty = Difficulty.MEDIUM,
                       attempts: int = DEFAULT_ATTEMPTS) -> List[Grid]:
        """Generate multiple puzzles of the same difficulty."""
        return [self.generate(difficulty, attempts) for _ in range(count)]

    def generate_with_solution(self, difficulty: Difficulty = Difficulty.MEDIUM,
                               attempts: int = DEFAULT_ATTEMPTS) -> Tuple[Grid, Grid]:
        """
        Generate a puzzle along with its solution.

        Returns:
            Tuple of (puzzle, solution) grids.

        Raises:
            GenerationError: Every attempt failed.
        """
        difficulty = Difficulty.from_name(difficulty)
        attempts = max(1, attempts)
        reason = GenerationError.NO_BASE_GRID

        for attempt in range(1, attempts + 1):
            solution = self._generate_complete_grid()
            if solution is None:
                reason = GenerationError.NO_BASE_GRID
                logger.debug("Attempt %d/%d: %s", attempt, attempts, reason)
                continue

            puzzle = self._remove_cells(solution, difficulty)
            if has_unique_solution(puzzle):
                return puzzle, solution

            reason = GenerationError.NOT_UNIQUE
            logger.debug("Attempt %d/%d: %s", attempt, attempts, reason)

        logger.warning("Generation of %dx%d %s puzzle failed after %d attempt(s): %s",
                       self.size, self.size, difficulty.value, attempts, reason)
        raise GenerationError(reason, attempts)

    def _generate_complete_grid(self) -> Optional[Grid]:
        """Generate a complete valid grid, or None if the fill fails."""
        grid = Grid(self.size, self.box_rows, self.box_cols)
        self._fill_diagonal_boxes(grid)
        solution, _ = self.solver.solve(grid)
        return solution

    def _fill_diagonal_boxes(self, grid: Grid) -> None:
        """
        Fill the boxes on the main box diagonal with random permutations.

        These boxes share no row, column or box, so they never conflict.
        With rectangular boxes the diagonal runs for as many steps as the
        shorter box dimension allows.
        """
        steps = min(self.size // self.box_rows, self.size // self.box_cols)
        for i in range(steps):
            self._fill_box(grid, i * self.box_rows, i * self.box_cols)

    def _fill_box(self, grid: Grid, start_row: int, start_col: int) -> None:
        """Fill a single box with random values."""
        values = self.rng.sample(range(1, self.size + 1), self.size)

        idx = 0
        for i in range(self.box_rows):
            for j in range(self.box_cols):
                grid.set(start_row + i, start_col + j, values[idx])
                idx += 1

    def _remove_cells(self, solution: Grid, difficulty: Difficulty) -> Grid:
        """
        Remove cells from a complete solution to create a puzzle.

        Single greedy pass over a random cell order. A removal that breaks
        uniqueness is undone and never retried, so the result may keep more
        clues than the target.
        """
        puzzle = solution.copy()
        target = difficulty.clues_for(self.size)
        clues = puzzle.count_filled()

        total_cells = self.size * self.size
        order = self.rng.sample(range(total_cells), total_cells)

        for index in order:
            if clues <= target:
                break

            row, col = divmod(index, self.size)
            original_value = puzzle.get(row, col)
            if original_value == 0:
                continue

            puzzle.clear(row, col)
            if has_unique_solution(puzzle):
                clues -= 1
            else:
                puzzle.set(row, col, original_value)

        return puzzle
