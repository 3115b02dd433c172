"""Solvers module for Sudoku puzzles."""

from .base_solver import BaseSolver, SolverStats
from .backtracking import BacktrackingSolver
from .hints import hint

__all__ = [
    "BaseSolver",
    "SolverStats",
    "BacktrackingSolver",
    "hint",
]
