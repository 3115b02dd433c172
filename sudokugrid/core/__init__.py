"""Core module for Sudoku grid representation, validation and encoding."""

from .grid import Grid, ClassicBoard, MAX_GRID_SIZE
from .errors import SudokuError, InvalidBoardError, ParseError, GenerationError
from .validator import (
    validate,
    is_valid_board,
    is_valid_placement,
    count_solutions,
    has_unique_solution,
    validate_solution,
)
from .codec import (
    parse_grid,
    parse_board,
    parse_box,
    format_grid,
    grid_from_rows,
    to_classic,
    to_general,
)
from .rng import new_rng, set_random_seed

__all__ = [
    "Grid",
    "ClassicBoard",
    "MAX_GRID_SIZE",
    "SudokuError",
    "InvalidBoardError",
    "ParseError",
    "GenerationError",
    "validate",
    "is_valid_board",
    "is_valid_placement",
    "count_solutions",
    "has_unique_solution",
    "validate_solution",
    "parse_grid",
    "parse_board",
    "parse_box",
    "format_grid",
    "grid_from_rows",
    "to_classic",
    "to_general",
    "new_rng",
    "set_random_seed",
]
