"""Unit tests for single-cell hints."""

import random

import pytest
from sudokugrid.core.grid import Grid
from sudokugrid.core.codec import parse_grid
from sudokugrid.solvers import hint

from puzzles import CLASSIC_PUZZLE, CLASSIC_SOLUTION, UNSOLVABLE_PUZZLE, SMALL_4X4


class TestHint:
    """Tests for hint."""

    def test_first_empty_cell(self):
        """The hint targets the first empty cell in row-major order."""
        assert hint(parse_grid(CLASSIC_PUZZLE)) == (0, 2, 4)

    def test_value_matches_solution(self):
        grid = parse_grid(CLASSIC_PUZZLE)
        grid.set(0, 2, 4)
        row, col, value = hint(grid)
        assert (row, col) == (0, 3)
        assert value == int(CLASSIC_SOLUTION[3])

    def test_grid_not_modified(self):
        grid = parse_grid(CLASSIC_PUZZLE)
        hint(grid)
        assert grid.count_filled() == 30

    def test_small_grid(self):
        grid = Grid(4, 2, 2, SMALL_4X4)
        row, col, value = hint(grid, rng=random.Random(0))
        assert (row, col) == (0, 0)
        assert value in (1, 2)

    def test_unsolvable(self):
        assert hint(parse_grid(UNSOLVABLE_PUZZLE)) is None

    def test_invalid_grid(self):
        grid = Grid(4, 2, 2)
        grid.set(0, 0, 2)
        grid.set(3, 0, 2)
        assert hint(grid) is None

    def test_full_grid(self):
        assert hint(parse_grid(CLASSIC_SOLUTION)) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
