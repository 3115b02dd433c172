"""
CustomTkinter desktop interface: generate, solve, check and get hints
on 4x4, 6x6 and 9x9 grids.
"""

from __future__ import annotations
import time
from typing import List, Optional, Sequence

from .core.errors import GenerationError, InvalidBoardError, ParseError
from .core.grid import Grid
from .core.codec import grid_from_rows
from .core.validator import validate_solution
from .generator import Difficulty, SudokuGenerator
from .solvers import BacktrackingSolver, hint

# label -> (size, box_rows, box_cols)
SHAPES = {
    "4x4 (2x2)": (4, 2, 2),
    "6x6 (2x3)": (6, 2, 3),
    "9x9 (3x3)": (9, 3, 3),
}
DEFAULT_SHAPE = "9x9 (3x3)"
# 2x2 diagonal fills often leave an uncompletable grid, so the New button
# retries well past the library default.
NEW_PUZZLE_ATTEMPTS = 10

CELL_COLORS = ("#f5f7fa", "#e6ebf0")
CLUE_TEXT_COLOR = "#1f2937"
ENTRY_TEXT_COLOR = "#2563eb"


def cells_from_texts(texts: Sequence[Sequence[str]], size: int) -> List[List[int]]:
    """
    Turn the text of each entry widget into cell values.

    Blank, '0' and '.' are empty cells.

    Raises:
        ParseError: A cell holds anything else than a single digit 1..size.
    """
    rows = []
    for r, row in enumerate(texts):
        values = []
        for c, text in enumerate(row):
            text = text.strip()
            if text in ("", "0", "."):
                values.append(0)
                continue
            if not text.isdigit() or not 1 <= int(text) <= size:
                raise ParseError(f"cell ({r + 1}, {c + 1}) must be a digit 1-{size}")
            values.append(int(text))
        rows.append(values)
    return rows


def box_shade(row: int, col: int, box_rows: int, box_cols: int) -> str:
    """Alternating background colour per sub-box."""
    return CELL_COLORS[((row // box_rows) + (col // box_cols)) % 2]


def format_elapsed(seconds: float) -> str:
    minutes, secs = divmod(int(seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


def new_puzzle(shape: str, difficulty: Difficulty, seed: Optional[int] = None) -> Grid:
    """Generate a puzzle for one of the SHAPES labels."""
    size, box_rows, box_cols = SHAPES[shape]
    generator = SudokuGenerator(size, box_rows, box_cols, seed=seed)
    return generator.generate(difficulty, attempts=NEW_PUZZLE_ATTEMPTS)


def launch_gui():
    import customtkinter as ctk

    ctk.set_appearance_mode("system")
    ctk.set_default_color_theme("blue")

    app = ctk.CTk()
    app.title("Sudoku")

    shape_var = ctk.StringVar(value=DEFAULT_SHAPE)
    difficulty_var = ctk.StringVar(value=Difficulty.MEDIUM.value)
    status_var = ctk.StringVar(value="Ready.")
    timer_var = ctk.StringVar(value=format_elapsed(0))

    state = {
        "shape": SHAPES[DEFAULT_SHAPE],
        "entries": [],
        "clues": None,
        "started": None,
    }

    app.grid_columnconfigure(0, weight=1)

    # ----- Toolbar -----
    frame_top = ctk.CTkFrame(app)
    frame_top.grid(row=0, column=0, padx=10, pady=10, sticky="ew")

    ctk.CTkLabel(frame_top, text="Grid").grid(row=0, column=0, padx=5, pady=5)
    ctk.CTkOptionMenu(
        frame_top, values=list(SHAPES), variable=shape_var,
        command=lambda _: rebuild(),
    ).grid(row=0, column=1, padx=5, pady=5)

    ctk.CTkLabel(frame_top, text="Difficulty").grid(row=0, column=2, padx=5, pady=5)
    ctk.CTkOptionMenu(
        frame_top, values=[d.value for d in Difficulty], variable=difficulty_var,
    ).grid(row=0, column=3, padx=5, pady=5)

    ctk.CTkLabel(frame_top, textvariable=timer_var,
                 font=ctk.CTkFont(family="monospace", size=14)).grid(
        row=0, column=4, padx=(20, 5), pady=5
    )

    # ----- Grid -----
    frame_grid = ctk.CTkFrame(app)
    frame_grid.grid(row=1, column=0, padx=10, pady=5)

    # ----- Bottom -----
    frame_bottom = ctk.CTkFrame(app)
    frame_bottom.grid(row=2, column=0, padx=10, pady=(5, 10), sticky="ew")
    frame_bottom.grid_columnconfigure(0, weight=1)

    ctk.CTkLabel(frame_bottom, textvariable=status_var, anchor="w").grid(
        row=1, column=0, columnspan=5, padx=10, pady=5, sticky="w"
    )

    def rebuild(clues: Optional[Grid] = None):
        for child in frame_grid.winfo_children():
            child.destroy()
        size, box_rows, box_cols = SHAPES[shape_var.get()]
        state["shape"] = (size, box_rows, box_cols)
        state["clues"] = clues
        state["entries"] = []
        for r in range(size):
            row_entries = []
            for c in range(size):
                entry = ctk.CTkEntry(
                    frame_grid, width=36, height=36, justify="center",
                    fg_color=box_shade(r, c, box_rows, box_cols),
                    text_color=ENTRY_TEXT_COLOR,
                    font=ctk.CTkFont(family="monospace", size=16),
                )
                pad_x = (4 if c and c % box_cols == 0 else 1, 1)
                pad_y = (4 if r and r % box_rows == 0 else 1, 1)
                entry.grid(row=r, column=c, padx=pad_x, pady=pad_y)
                if clues is not None and not clues.is_empty(r, c):
                    entry.insert(0, str(clues.get(r, c)))
                    entry.configure(state="disabled", text_color=CLUE_TEXT_COLOR)
                row_entries.append(entry)
            state["entries"].append(row_entries)

    def read_grid() -> Grid:
        size, box_rows, box_cols = state["shape"]
        texts = [[entry.get() for entry in row] for row in state["entries"]]
        return grid_from_rows(cells_from_texts(texts, size), box_rows, box_cols)

    def write_cell(row: int, col: int, value: int):
        entry = state["entries"][row][col]
        if entry.cget("state") == "disabled":
            return
        entry.delete(0, "end")
        if value:
            entry.insert(0, str(value))

    def current_grid() -> Optional[Grid]:
        try:
            return read_grid()
        except (ParseError, InvalidBoardError) as e:
            status_var.set(f"Invalid grid: {e}")
            return None

    def on_new():
        difficulty = Difficulty(difficulty_var.get())
        status_var.set("Generating...")
        app.update_idletasks()
        try:
            puzzle = new_puzzle(shape_var.get(), difficulty)
        except GenerationError as e:
            status_var.set(str(e))
            return
        rebuild(puzzle)
        state["started"] = time.monotonic()
        status_var.set(f"New {difficulty.value} puzzle, {puzzle.count_filled()} clues.")

    def on_solve():
        grid = current_grid()
        if grid is None:
            return
        solution, stats = BacktrackingSolver().solve(grid)
        if solution is None:
            status_var.set("No solution exists for this grid.")
            return
        for r, c in grid.empty_cells():
            write_cell(r, c, solution.get(r, c))
        state["started"] = None
        status_var.set(f"Solved in {stats.time_seconds * 1000:.1f} ms.")

    def on_check():
        grid = current_grid()
        if grid is None:
            return
        if not grid.is_complete():
            status_var.set(f"No conflicts so far, {grid.count_empty()} cells left.")
        elif state["clues"] is None or validate_solution(state["clues"], grid):
            state["started"] = None
            status_var.set("Solved, well done!")
        else:
            status_var.set("Complete, but the clues were changed.")

    def on_hint():
        grid = current_grid()
        if grid is None:
            return
        result = hint(grid)
        if result is None:
            status_var.set("No hint available.")
            return
        r, c, value = result
        write_cell(r, c, value)
        status_var.set(f"Hint: row {r + 1}, col {c + 1} = {value}")

    def on_clear():
        for r, row in enumerate(state["entries"]):
            for c, _ in enumerate(row):
                write_cell(r, c, 0)
        status_var.set("Cleared.")

    for col, (label, command) in enumerate((
        ("New", on_new),
        ("Solve", on_solve),
        ("Check", on_check),
        ("Hint", on_hint),
        ("Clear", on_clear),
    )):
        ctk.CTkButton(frame_bottom, text=label, width=80, command=command).grid(
            row=0, column=col, padx=5, pady=5
        )

    def tick():
        if state["started"] is not None:
            timer_var.set(format_elapsed(time.monotonic() - state["started"]))
        app.after(500, tick)

    rebuild()
    tick()
    app.mainloop()


if __name__ == "__main__":
    launch_gui()
