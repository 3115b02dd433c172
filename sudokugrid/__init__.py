"""Sudoku generator and backtracking solver for square grids with rectangular boxes."""

__version__ = "1.0.0"

from .core import (
    Grid,
    ClassicBoard,
    MAX_GRID_SIZE,
    SudokuError,
    InvalidBoardError,
    ParseError,
    GenerationError,
    has_unique_solution,
)
from .generator import SudokuGenerator, Difficulty
from .solvers import BacktrackingSolver
from .api import (
    validate,
    solve,
    generate,
    hint,
    parse_from_string,
    format_to_string,
    set_random_seed,
)

__all__ = [
    "__version__",
    "Grid",
    "ClassicBoard",
    "MAX_GRID_SIZE",
    "SudokuError",
    "InvalidBoardError",
    "ParseError",
    "GenerationError",
    "has_unique_solution",
    "SudokuGenerator",
    "Difficulty",
    "BacktrackingSolver",
    "validate",
    "solve",
    "generate",
    "hint",
    "parse_from_string",
    "format_to_string",
    "set_random_seed",
]
