"""Conversion between grids and their string / nested-list forms.

The string form is exactly ``size * size`` characters in row-major order:
'1'-'9' for values and '0' or '.' for empty cells, with no separators.
A single character per cell caps the string form at size 9.
"""

from __future__ import annotations
import re
from typing import Optional, Sequence, Tuple

from .errors import ParseError
from .grid import ClassicBoard, Grid
from .validator import validate

EMPTY_CHARS = "0."
MAX_STRING_SIZE = 9

_BOX_RE = re.compile(r"^\s*(\d+)\s*[xX]\s*(\d+)\s*$")


def _dims(size: int, box_rows: Optional[int], box_cols: Optional[int]) -> Grid:
    try:
        return Grid(size, box_rows, box_cols)
    except ValueError as e:
        raise ParseError(str(e)) from e


def parse_grid(text: str, size: int = 9, box_rows: Optional[int] = None,
               box_cols: Optional[int] = None) -> Grid:
    """
    Parse a flat string into a validated grid.

    Args:
        text: String of length size*size. '0' or '.' for empty, '1'-'9' for values.
        size: Grid size.
        box_rows: Rows per sub-box (defaults to the square root of size).
        box_cols: Columns per sub-box (defaults to the square root of size).

    Raises:
        ParseError: Bad dimensions, wrong length, illegal character, or a
            digit larger than the grid size.
        InvalidBoardError: The parsed grid breaks a Sudoku rule.
    """
    grid = _dims(size, box_rows, box_cols)
    expected = size * size
    if len(text) != expected:
        raise ParseError(f"input must be {expected} characters, got {len(text)}")

    for idx, ch in enumerate(text):
        row, col = divmod(idx, size)
        if ch in EMPTY_CHARS:
            continue
        if ch not in "123456789":
            raise ParseError(f"invalid character {ch!r} at position {idx}")
        value = int(ch)
        if value > size:
            raise ParseError(f"digit {value} exceeds grid size {size}")
        grid.cells[row, col] = value

    validate(grid)
    return grid


def parse_board(text: str) -> ClassicBoard:
    """Parse an 81-character string into a classic 9x9 board."""
    return to_classic(parse_grid(text, 9, 3, 3))


def format_grid(grid: Grid) -> str:
    """
    Convert a grid to its flat string form ('0' for empty).

    Raises:
        ValueError: The grid holds a value that has no single-digit encoding.
    """
    chars = []
    for val in grid.cells.flat:
        val = int(val)
        if val > MAX_STRING_SIZE:
            raise ValueError(f"value {val} cannot be encoded as a single digit")
        chars.append(str(val))
    return ''.join(chars)


def grid_from_rows(rows: Sequence[Sequence[int]], box_rows: Optional[int] = None,
                   box_cols: Optional[int] = None) -> Grid:
    """
    Build a validated grid from a square 2D list.

    Raises:
        ParseError: The rows do not form a square grid matching the box dims.
        InvalidBoardError: The grid breaks a Sudoku rule.
    """
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ParseError(f"puzzle must be a {size}x{size} array")
    template = _dims(size, box_rows, box_cols)
    try:
        grid = Grid(size, template.box_rows, template.box_cols, [list(row) for row in rows])
    except (TypeError, ValueError, OverflowError) as e:
        raise ParseError(str(e)) from e
    validate(grid)
    return grid


def to_classic(grid: Grid) -> ClassicBoard:
    """
    Convert a general 9x9/3x3 grid into the fixed classic form.

    Raises:
        ValueError: The grid is not 9x9 with 3x3 boxes.
    """
    if isinstance(grid, ClassicBoard):
        return grid.copy()
    if (grid.size, grid.box_rows, grid.box_cols) != (9, 3, 3):
        raise ValueError(
            f"classic board needs 9x9 with 3x3 boxes, got {grid.size}x{grid.size} "
            f"with {grid.box_rows}x{grid.box_cols} boxes"
        )
    return ClassicBoard(grid.cells)


def to_general(board: Grid) -> Grid:
    """Convert any grid (including a classic board) into a plain :class:`Grid`."""
    return Grid(board.size, board.box_rows, board.box_cols, board.cells)


def parse_box(spec: str) -> Tuple[int, int]:
    """
    Parse a box shape such as "3x3" or "2x3" into (box_rows, box_cols).

    Raises:
        ParseError: The text is not of the form RxC with positive integers.
    """
    match = _BOX_RE.match(spec)
    if not match or int(match.group(1)) <= 0 or int(match.group(2)) <= 0:
        raise ParseError(f"invalid box dims {spec!r}; expected RxC")
    return int(match.group(1)), int(match.group(2))
