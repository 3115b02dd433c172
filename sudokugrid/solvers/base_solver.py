"""Solver contract shared by every search strategy."""

from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple
import time

from ..core.grid import Grid


@dataclass
class SolverStats:
    """
    Counters collected during one call to :meth:`BaseSolver.solve`.

    ``iterations`` counts search nodes entered, ``backtracks`` counts cells
    whose candidates were all exhausted, and ``empty_cells`` is how many
    cells the search had to fill.
    """
    algorithm: str = ""
    solved: bool = False
    time_seconds: float = 0.0
    empty_cells: int = 0
    iterations: int = 0
    backtracks: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class BaseSolver(ABC):
    """A strategy that completes a grid, or reports that it cannot."""

    name: str = "BaseSolver"

    def __init__(self):
        self.stats = SolverStats(algorithm=self.name)

    def solve(self, grid: Grid) -> Tuple[Optional[Grid], SolverStats]:
        """
        Complete a copy of ``grid``; the caller's grid is left untouched.

        Returns:
            ``(solution, stats)``. ``solution`` is None when the grid has no
            legal completion, which is a normal outcome rather than an error.
        """
        self.stats = SolverStats(algorithm=self.name)
        started = time.perf_counter()

        solution = self._solve(grid.copy())

        self.stats.time_seconds = time.perf_counter() - started
        self.stats.solved = solution is not None
        return solution, self.stats

    @abstractmethod
    def _solve(self, grid: Grid) -> Optional[Grid]:
        """Fill ``grid`` in place and return it, or return None."""
