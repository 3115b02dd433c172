"""Generator module for creating Sudoku puzzles."""

from .generator import SudokuGenerator, Difficulty, DEFAULT_ATTEMPTS

__all__ = ["SudokuGenerator", "Difficulty", "DEFAULT_ATTEMPTS"]
