"""Mutable search state shared by the solver and the solution counter."""

from __future__ import annotations
from typing import List, Tuple

from .grid import Grid


class SearchState:
    """
    Working copy of a grid for depth-first search.

    Row, column and box occupancy are tracked as bitmasks (bit ``v`` set when
    value ``v`` is present), so a placement check is a single mask test.
    ``empties`` lists the empty cells in row-major order; a search that always
    fills ``empties[depth]`` at depth ``depth`` therefore always assigns the
    first empty cell of the grid.

    The grid must already be valid: duplicate clues would be merged into one
    mask bit and go unnoticed.
    """

    __slots__ = ("size", "box_rows", "box_cols", "boxes_per_row",
                 "cells", "rows", "cols", "boxes", "empties")

    def __init__(self, grid: Grid):
        self.size = grid.size
        self.box_rows = grid.box_rows
        self.box_cols = grid.box_cols
        self.boxes_per_row = grid.size // grid.box_cols
        self.cells: List[List[int]] = grid.to_list()
        self.rows = [0] * self.size
        self.cols = [0] * self.size
        self.boxes = [0] * self.size
        self.empties: List[Tuple[int, int]] = []

        for r in range(self.size):
            for c in range(self.size):
                value = self.cells[r][c]
                if value:
                    bit = 1 << value
                    self.rows[r] |= bit
                    self.cols[c] |= bit
                    self.boxes[self.box_index(r, c)] |= bit
                else:
                    self.empties.append((r, c))

    def box_index(self, row: int, col: int) -> int:
        return (row // self.box_rows) * self.boxes_per_row + col // self.box_cols

    def can_place(self, row: int, col: int, value: int) -> bool:
        """True iff value appears nowhere in the cell's row, column or box."""
        used = self.rows[row] | self.cols[col] | self.boxes[self.box_index(row, col)]
        return not used & (1 << value)

    def place(self, row: int, col: int, value: int) -> None:
        bit = 1 << value
        self.cells[row][col] = value
        self.rows[row] |= bit
        self.cols[col] |= bit
        self.boxes[self.box_index(row, col)] |= bit

    def remove(self, row: int, col: int) -> None:
        mask = ~(1 << self.cells[row][col])
        self.cells[row][col] = 0
        self.rows[row] &= mask
        self.cols[col] &= mask
        self.boxes[self.box_index(row, col)] &= mask

    def write_to(self, grid: Grid) -> Grid:
        """Copy the current cell values into ``grid`` and return it."""
        grid.cells[:, :] = self.cells
        return grid
