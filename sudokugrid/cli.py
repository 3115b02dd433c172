"""Command-line interface for generating and solving Sudoku puzzles."""

import argparse
import json
import sys
from typing import List, Optional, Tuple

from tqdm import tqdm

from . import __version__
from .core.codec import format_grid, parse_grid, parse_box as parse_box_spec
from .core.errors import ParseError, SudokuError
from .core.grid import Grid
from .generator import DEFAULT_ATTEMPTS, Difficulty, SudokuGenerator
from .solvers import BacktrackingSolver, hint

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


class UsageError(Exception):
    """Bad flag values that argparse itself cannot catch."""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudokugrid",
        description="Sudoku puzzle generator & backtracking solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Generate a hard classic puzzle and show its solution
  sudokugrid generate --difficulty hard --solution

  # Generate a 6x6 puzzle with 2x3 boxes as JSON
  sudokugrid generate --size 6 --box 2x3 --json

  # Solve a puzzle given inline
  sudokugrid solve --string "530070000600195000..."

  # Ask for a hint on a puzzle stored in a file
  sudokugrid hint --file puzzle.txt
        """
    )
    parser.add_argument(
        "--version", action="version", version=f"sudokugrid {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    gen_parser = subparsers.add_parser("generate", help="Generate Sudoku puzzles")
    _add_shape_args(gen_parser)
    gen_parser.add_argument(
        "--difficulty", "-d",
        choices=[d.value for d in Difficulty],
        default="medium",
        help="Difficulty level (default: medium)"
    )
    gen_parser.add_argument(
        "--attempts", type=int, default=DEFAULT_ATTEMPTS,
        help=f"Generation attempts for uniqueness (default: {DEFAULT_ATTEMPTS})"
    )
    gen_parser.add_argument(
        "--count", "-n", type=int, default=1,
        help="Number of puzzles to generate (default: 1)"
    )
    gen_parser.add_argument(
        "--seed", "-s", type=int, default=None,
        help="Random seed for reproducibility"
    )
    gen_parser.add_argument(
        "--solution", action="store_true",
        help="Also show the solution"
    )
    gen_parser.add_argument("--json", action="store_true", help="Print output as JSON")

    for name, help_text in (
        ("solve", "Solve a Sudoku puzzle"),
        ("hint", "Suggest the value of one empty cell"),
        ("validate", "Check a puzzle against the Sudoku rules"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        _add_shape_args(sub)
        source = sub.add_mutually_exclusive_group(required=True)
        source.add_argument(
            "--string", "-p", type=str,
            help="Puzzle string (size*size chars, 0 or . for empty cells)"
        )
        source.add_argument(
            "--file", "-f", type=str,
            help="Path to a file containing the puzzle string"
        )
        sub.add_argument("--json", action="store_true", help="Print output as JSON")

    subparsers.add_parser("gui", help="Launch the desktop interface")

    return parser


def _add_shape_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--size", type=int, default=9,
        help="Grid size (SxS), e.g. 4, 6, 9 (default: 9)"
    )
    parser.add_argument(
        "--box", type=str, default=None,
        help="Sub-box dims RxC, e.g. 2x2 for 4x4, 2x3 for 6x6 (default: square root of size)"
    )


def parse_box(size: int, box: Optional[str]) -> Tuple[int, int]:
    """Resolve --size/--box into (box_rows, box_cols)."""
    if box is None:
        try:
            template = Grid(size)
        except ValueError as e:
            raise UsageError(f"{e}; pass --box RxC") from e
        return template.box_rows, template.box_cols

    try:
        box_rows, box_cols = parse_box_spec(box)
    except ParseError as e:
        raise UsageError(str(e)) from e
    try:
        Grid(size, box_rows, box_cols)
    except ValueError as e:
        raise UsageError(f"invalid box dims; ensure size == R*C ({e})") from e
    return box_rows, box_cols


def read_puzzle(args) -> str:
    """Puzzle text from --string, or from --file ignoring blank and '#' lines."""
    if args.string is not None:
        return args.string.strip()
    with open(args.file) as f:
        lines = [line.strip() for line in f]
    return "".join(line for line in lines if line and not line.startswith("#"))


def grid_payload(grid: Grid) -> dict:
    payload = {
        "size": grid.size,
        "boxR": grid.box_rows,
        "boxC": grid.box_cols,
        "puzzle": grid.to_list(),
        "clues": grid.count_filled(),
    }
    if grid.size <= 9:
        payload["string"] = format_grid(grid)
    return payload


def _print_json(data) -> None:
    print(json.dumps(data, indent=2))


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_USAGE

    handlers = {
        "generate": cmd_generate,
        "solve": cmd_solve,
        "hint": cmd_hint,
        "validate": cmd_validate,
        "gui": cmd_gui,
    }
    try:
        return handlers[args.command](args)
    except UsageError as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except (SudokuError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_FAILURE


def cmd_generate(args) -> int:
    """Handle the generate command."""
    box_rows, box_cols = parse_box(args.size, args.box)
    if args.count < 1:
        raise UsageError("--count must be at least 1")
    difficulty = Difficulty(args.difficulty)
    generator = SudokuGenerator(args.size, box_rows, box_cols, seed=args.seed)

    results = []
    for _ in tqdm(range(args.count), desc=f"Generating {difficulty.value}",
                  disable=args.count <= 1, file=sys.stderr):
        results.append(generator.generate_with_solution(difficulty, args.attempts))

    if args.json:
        out = []
        for puzzle, solution in results:
            item = grid_payload(puzzle)
            item["difficulty"] = difficulty.value
            if args.solution:
                item["solution"] = solution.to_list()
            out.append(item)
        _print_json(out[0] if len(out) == 1 else out)
        return EXIT_OK

    for i, (puzzle, solution) in enumerate(results, 1):
        label = f" {i}" if len(results) > 1 else ""
        print(f"Generated{label} ({difficulty.value}, {puzzle.size}x{puzzle.size} with "
              f"{puzzle.box_rows}x{puzzle.box_cols} boxes, {puzzle.count_filled()} clues):")
        print(puzzle)
        if args.solution:
            print("\nSolution:")
            print(solution)
        if i < len(results):
            print()
    return EXIT_OK


def _load(args) -> Grid:
    box_rows, box_cols = parse_box(args.size, args.box)
    return parse_grid(read_puzzle(args), args.size, box_rows, box_cols)


def cmd_solve(args) -> int:
    """Handle the solve command."""
    grid = _load(args)
    solution, _ = BacktrackingSolver().solve(grid)
    if solution is None:
        print("error: unsolvable puzzle", file=sys.stderr)
        return EXIT_FAILURE

    if args.json:
        _print_json({"solution": solution.to_list(), "string": format_grid(solution)})
        return EXIT_OK

    print("Solution:")
    print(solution)
    return EXIT_OK


def cmd_hint(args) -> int:
    """Handle the hint command."""
    grid = _load(args)
    result = hint(grid)
    if result is None:
        print("error: no hint available", file=sys.stderr)
        return EXIT_FAILURE

    row, col, value = result
    if args.json:
        _print_json({"row": row, "col": col, "val": value})
    else:
        print(f"Hint: row {row + 1}, col {col + 1} = {value}")
    return EXIT_OK


def cmd_validate(args) -> int:
    """Handle the validate command."""
    # Parsing already rejects rule violations.
    grid = _load(args)
    if args.json:
        _print_json({"valid": True, "clues": grid.count_filled()})
    else:
        print("valid")
    return EXIT_OK


def cmd_gui(args) -> int:
    """Handle the gui command."""
    from .gui import launch_gui

    launch_gui()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
