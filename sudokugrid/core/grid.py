"""Sudoku grid representation with configurable box dimensions."""

from __future__ import annotations
import copy
from typing import List, Optional, Set, Tuple

import numpy as np

# Maximum allowed grid size, keeps memory and search depth bounded.
MAX_GRID_SIZE = 25


class Grid:
    """
    A square Sudoku grid of ``size`` x ``size`` cells split into
    ``box_rows`` x ``box_cols`` sub-boxes, with ``size == box_rows * box_cols``.

    Classic Sudoku is 9x9 with 3x3 boxes. Rectangular boxes are supported,
    e.g. 6x6 with 2x3 boxes. Empty cells hold 0.
    """

    def __init__(self, size: int = 9, box_rows: Optional[int] = None,
                 box_cols: Optional[int] = None, cells=None):
        """
        Initialize a grid.

        Args:
            size: Number of rows (and columns).
            box_rows: Rows per sub-box. Defaults to the square root of size.
            box_cols: Columns per sub-box. Defaults to the square root of size.
            cells: Optional initial values (2D list or array). Copied.
        """
        if box_rows is None and box_cols is None:
            root = int(np.sqrt(size)) if size > 0 else 0
            box_rows = box_cols = root
        elif box_rows is None or box_cols is None:
            raise ValueError("box_rows and box_cols must be given together")

        if size <= 0 or box_rows <= 0 or box_cols <= 0 or size != box_rows * box_cols:
            raise ValueError(
                f"Invalid dimensions: size={size} box_rows={box_rows} box_cols={box_cols}"
            )
        if size > MAX_GRID_SIZE:
            raise ValueError(f"Grid size {size} exceeds maximum allowed ({MAX_GRID_SIZE})")

        self.size = size
        self.box_rows = box_rows
        self.box_cols = box_cols

        if cells is not None:
            try:
                arr = np.asarray(cells, dtype=np.int64)
            except OverflowError as e:
                raise ValueError(f"cell value too large: {e}") from e
            if arr.shape != (size, size):
                raise ValueError(f"Grid shape must be ({size}, {size}), got {arr.shape}")
            narrowed = arr.astype(np.int32)
            if np.any(narrowed != arr):
                raise ValueError("cell value out of range")
            self.cells = narrowed
        else:
            self.cells = np.zeros((size, size), dtype=np.int32)

    def copy(self) -> Grid:
        """Create a deep copy of the grid."""
        clone = copy.copy(self)
        clone.cells = self.cells.copy()
        return clone

    def get(self, row: int, col: int) -> int:
        """Get value at position (row, col). 0 means empty."""
        return int(self.cells[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """Set value at position (row, col). Use 0 to clear."""
        if value < 0 or value > self.size:
            raise ValueError(f"Value must be 0-{self.size}, got {value}")
        self.cells[row, col] = value

    def clear(self, row: int, col: int) -> None:
        """Clear the cell at position (row, col)."""
        self.cells[row, col] = 0

    def is_empty(self, row: int, col: int) -> bool:
        return self.cells[row, col] == 0

    def get_row(self, row: int) -> np.ndarray:
        return self.cells[row, :]

    def get_col(self, col: int) -> np.ndarray:
        return self.cells[:, col]

    def box_origin(self, row: int, col: int) -> Tuple[int, int]:
        """Top-left cell of the sub-box containing (row, col)."""
        return (row // self.box_rows) * self.box_rows, (col // self.box_cols) * self.box_cols

    def get_box(self, row: int, col: int) -> np.ndarray:
        """Get all values in the box containing (row, col)."""
        box_row, box_col = self.box_origin(row, col)
        return self.cells[box_row:box_row + self.box_rows,
                          box_col:box_col + self.box_cols].flatten()

    def get_candidates(self, row: int, col: int) -> Set[int]:
        """
        Get all legal values for an empty cell.

        Returns:
            Set of values (1 to size) that can be placed at (row, col).
            Returns empty set if cell is not empty.
        """
        if not self.is_empty(row, col):
            return set()

        used = set(self.get_row(row).tolist())
        used |= set(self.get_col(col).tolist())
        used |= set(self.get_box(row, col).tolist())
        return set(range(1, self.size + 1)) - used

    def empty_cells(self) -> List[Tuple[int, int]]:
        """All empty cell positions in row-major order."""
        rows, cols = np.nonzero(self.cells == 0)
        return list(zip(rows.tolist(), cols.tolist()))

    def first_empty(self) -> Optional[Tuple[int, int]]:
        """The lowest-row, lowest-column empty cell, or None when full."""
        empty = self.empty_cells()
        return empty[0] if empty else None

    def count_empty(self) -> int:
        return int(np.sum(self.cells == 0))

    def count_filled(self) -> int:
        """Number of clues (non-empty cells)."""
        return int(np.sum(self.cells != 0))

    def is_complete(self) -> bool:
        """Check if all cells are filled."""
        return self.count_empty() == 0

    def to_list(self) -> List[List[int]]:
        """Row-major nested list of plain ints."""
        return self.cells.tolist()

    def __str__(self) -> str:
        """Boxed text rendering; values above 9 print as letters (10 -> A)."""
        symbols = ".123456789" + "".join(chr(ord("A") + v) for v in range(MAX_GRID_SIZE - 9))
        band_sep = "+" + ("-" * (2 * self.box_cols + 1) + "+") * (self.size // self.box_cols)

        out = []
        for r, row in enumerate(self.cells.tolist()):
            if r % self.box_rows == 0:
                out.append(band_sep)
            chunks = [
                " ".join(symbols[v] for v in row[c:c + self.box_cols])
                for c in range(0, self.size, self.box_cols)
            ]
            out.append("| " + " | ".join(chunks) + " |")
        out.append(band_sep)
        return "\n".join(out)

    def __repr__(self) -> str:
        return (f"{type(self).__name__}(size={self.size}, box={self.box_rows}x{self.box_cols}, "
                f"filled={self.count_filled()})")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return False
        return (self.size == other.size
                and self.box_rows == other.box_rows
                and self.box_cols == other.box_cols
                and np.array_equal(self.cells, other.cells))

    def __hash__(self) -> int:
        return hash((self.size, self.box_rows, self.box_cols, self.cells.tobytes()))


class ClassicBoard(Grid):
    """The classic 9x9 board with 3x3 boxes."""

    def __init__(self, cells=None):
        super().__init__(9, 3, 3, cells)
