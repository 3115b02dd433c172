"""Plain-function entry points for validating, solving and generating puzzles."""

from __future__ import annotations
import random
from typing import Optional, Tuple, Union

from .core import codec, rng as _rng, validator
from .core.grid import Grid
from .generator import DEFAULT_ATTEMPTS, Difficulty, SudokuGenerator
from .solvers import BacktrackingSolver
from .solvers import hint as _hint


def validate(grid: Grid) -> None:
    """Raise :class:`InvalidBoardError` if the grid breaks a Sudoku rule."""
    validator.validate(grid)


def solve(grid: Grid, rng: Optional[random.Random] = None) -> Optional[Grid]:
    """Return a completed copy of the grid, or None if it has no completion."""
    solution, _ = BacktrackingSolver(rng=rng).solve(grid)
    return solution


def generate(difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
             attempts: int = DEFAULT_ATTEMPTS, size: int = 9,
             box_rows: Optional[int] = None, box_cols: Optional[int] = None,
             rng: Optional[random.Random] = None) -> Grid:
    """Generate a puzzle with a unique solution; raises :class:`GenerationError`."""
    generator = SudokuGenerator(size, box_rows, box_cols, rng=rng)
    return generator.generate(Difficulty.from_name(difficulty), attempts)


def hint(grid: Grid, rng: Optional[random.Random] = None) -> Optional[Tuple[int, int, int]]:
    return _hint(grid, rng=rng)


def parse_from_string(text: str, size: int = 9, box_rows: Optional[int] = None,
                      box_cols: Optional[int] = None) -> Grid:
    return codec.parse_grid(text, size, box_rows, box_cols)


def format_to_string(grid: Grid) -> str:
    return codec.format_grid(grid)


def set_random_seed(seed: int) -> None:
    """Make later calls that get no explicit random source reproducible."""
    _rng.set_random_seed(seed)
