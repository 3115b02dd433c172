"""Unit tests for validation and solution counting."""

import pytest
from sudokugrid.core.grid import Grid, ClassicBoard
from sudokugrid.core.errors import InvalidBoardError
from sudokugrid.core.codec import parse_grid
from sudokugrid.core.validator import (
    validate,
    is_valid_board,
    is_valid_placement,
    count_solutions,
    has_unique_solution,
    validate_solution,
)

from puzzles import CLASSIC_PUZZLE, CLASSIC_SOLUTION, SMALL_4X4


class TestValidate:
    """Tests for rule checking."""

    def test_empty_grid_is_valid(self):
        validate(Grid())
        assert is_valid_board(Grid(6, 2, 3))

    def test_row_duplicate(self):
        board = ClassicBoard()
        board.set(0, 0, 5)
        board.set(0, 1, 5)
        with pytest.raises(InvalidBoardError) as exc_info:
            validate(board)
        assert exc_info.value.unit == "row"
        assert exc_info.value.index == 0

    def test_column_duplicate(self):
        board = ClassicBoard()
        board.set(0, 0, 7)
        board.set(1, 0, 7)
        with pytest.raises(InvalidBoardError) as exc_info:
            validate(board)
        assert exc_info.value.unit == "column"

    def test_box_duplicate(self):
        board = ClassicBoard()
        board.set(0, 0, 3)
        board.set(1, 1, 3)
        with pytest.raises(InvalidBoardError) as exc_info:
            validate(board)
        assert exc_info.value.unit == "box"

    def test_rectangular_box_tiling(self):
        """2x3 boxes: (0,0) and (1,2) share a box, (0,0) and (1,3) do not."""
        grid = Grid(6, 2, 3)
        grid.set(0, 0, 1)
        grid.set(1, 3, 1)
        assert is_valid_board(grid)

        grid.clear(1, 3)
        grid.set(1, 2, 1)
        with pytest.raises(InvalidBoardError) as exc_info:
            validate(grid)
        assert exc_info.value.unit == "box"

    def test_out_of_range_value(self):
        """Values outside 0..size are rejected even without duplicates."""
        grid = Grid(4, 2, 2, [[5, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        with pytest.raises(InvalidBoardError) as exc_info:
            validate(grid)
        assert exc_info.value.unit == "range"

        grid = Grid(4, 2, 2, [[0, 0, 0, 0], [0, -1, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        assert not is_valid_board(grid)

    def test_validate_does_not_mutate(self):
        grid = Grid(4, 2, 2, SMALL_4X4)
        before = grid.copy()
        validate(grid)
        assert grid == before


class TestPlacement:
    """Tests for the legality predicate."""

    def test_is_valid_placement(self):
        """Test placement validation."""
        board = ClassicBoard()
        board.set(0, 0, 5)

        # Can't place 5 in same row
        assert not is_valid_placement(board, 0, 5, 5)

        # Can't place 5 in same column
        assert not is_valid_placement(board, 5, 0, 5)

        # Can't place 5 in same box
        assert not is_valid_placement(board, 1, 1, 5)

        # Can place different value
        assert is_valid_placement(board, 0, 5, 7)

    def test_value_range(self):
        grid = Grid(4, 2, 2)
        assert not is_valid_placement(grid, 0, 0, 0)
        assert not is_valid_placement(grid, 0, 0, 5)
        assert is_valid_placement(grid, 0, 0, 4)


class TestSolutionCounting:
    """Tests for the uniqueness counter."""

    def test_classic_puzzle_is_unique(self):
        puzzle = parse_grid(CLASSIC_PUZZLE)
        assert count_solutions(puzzle) == 1
        assert has_unique_solution(puzzle)

    def test_solved_grid_has_one_solution(self):
        assert count_solutions(parse_grid(CLASSIC_SOLUTION)) == 1

    def test_empty_grid_stops_at_limit(self):
        """An empty grid has many solutions; counting stops at the limit."""
        assert count_solutions(Grid(9)) == 2
        assert count_solutions(Grid(4, 2, 2), limit=5) == 5
        assert not has_unique_solution(Grid(4, 2, 2))

    def test_all_4x4_grids(self):
        """There are exactly 288 completed 4x4 grids."""
        assert count_solutions(Grid(4, 2, 2), limit=1000) == 288

    def test_unsolvable_and_invalid(self):
        grid = Grid(9)
        for col in range(1, 9):
            grid.set(0, col, col)
        grid.set(1, 0, 9)
        assert count_solutions(grid) == 0

        grid = Grid(9)
        grid.set(0, 0, 1)
        grid.set(0, 1, 1)
        assert count_solutions(grid) == 0

    def test_counting_does_not_mutate(self):
        puzzle = parse_grid(CLASSIC_PUZZLE)
        before = puzzle.copy()
        count_solutions(puzzle)
        assert puzzle == before


class TestValidateSolution:
    """Tests for puzzle/solution consistency."""

    def test_matching_solution(self):
        assert validate_solution(parse_grid(CLASSIC_PUZZLE), parse_grid(CLASSIC_SOLUTION))

    def test_incomplete_solution(self):
        puzzle = parse_grid(CLASSIC_PUZZLE)
        assert not validate_solution(puzzle, puzzle)

    def test_changed_clue(self):
        puzzle = parse_grid(CLASSIC_PUZZLE)
        puzzle.set(0, 2, 1)  # clue not present in the solution
        assert not validate_solution(puzzle, parse_grid(CLASSIC_SOLUTION))

    def test_dimension_mismatch(self):
        assert not validate_solution(Grid(4, 2, 2), parse_grid(CLASSIC_SOLUTION))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
