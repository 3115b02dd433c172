"""Exception types raised by sudokugrid."""

from __future__ import annotations
from typing import Optional


class SudokuError(Exception):
    """Base class for every error raised by this package."""


class InvalidBoardError(SudokuError, ValueError):
    """
    A grid breaks a Sudoku rule.

    Attributes:
        unit: Which kind of unit failed ("row", "column", "box" or "range").
        index: Index of the failing unit, when there is one.
    """

    def __init__(self, message: str = "invalid board",
                 unit: Optional[str] = None, index: Optional[int] = None):
        super().__init__(message)
        self.unit = unit
        self.index = index


class ParseError(SudokuError, ValueError):
    """Textual or array input could not be turned into a grid."""


class GenerationError(SudokuError, RuntimeError):
    """Every generation attempt failed."""

    NO_BASE_GRID = "failed to build solved grid"
    NOT_UNIQUE = "puzzle uniqueness not achieved"

    def __init__(self, reason: str, attempts: int):
        super().__init__(f"generation failed after {attempts} attempt(s): {reason}")
        self.reason = reason
        self.attempts = attempts
