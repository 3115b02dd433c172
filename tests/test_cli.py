"""Tests for the command-line interface."""

import json

import pytest
from sudokugrid import __version__
from sudokugrid.cli import main, parse_box, UsageError

from puzzles import CLASSIC_PUZZLE, CLASSIC_SOLUTION, DUPLICATE_PUZZLE, UNSOLVABLE_PUZZLE


class TestGenerateCommand:
    """Tests for `sudokugrid generate`."""

    def test_generate_text(self, capsys):
        assert main(["generate", "-d", "easy", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Generated (easy, 9x9 with 3x3 boxes, 40 clues):")

    def test_generate_json(self, capsys):
        assert main(["generate", "--size", "6", "--box", "2x3", "--seed", "3",
                     "--attempts", "10", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert (data["size"], data["boxR"], data["boxC"]) == (6, 2, 3)
        assert data["difficulty"] == "medium"
        assert len(data["string"]) == 36
        assert "solution" not in data

    def test_generate_with_solution(self, capsys):
        assert main(["generate", "--size", "4", "--seed", "2", "--attempts", "10",
                     "--solution", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["solution"]) == 4
        assert all(0 not in row for row in data["solution"])

    def test_generate_count(self, capsys):
        assert main(["generate", "--size", "4", "-n", "3", "--seed", "4",
                     "--attempts", "10", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert isinstance(data, list)
        assert len(data) == 3

    def test_generate_seed_reproducible(self, capsys):
        main(["generate", "--seed", "10", "--json"])
        first = capsys.readouterr().out
        main(["generate", "--seed", "10", "--json"])
        assert capsys.readouterr().out == first

    def test_bad_box(self, capsys):
        assert main(["generate", "--size", "4", "--box", "2x3"]) == 2
        assert "error:" in capsys.readouterr().err

    def test_bad_count(self):
        assert main(["generate", "--count", "0"]) == 2

    def test_bad_difficulty(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["generate", "-d", "expert"])
        assert excinfo.value.code == 2


class TestPuzzleCommands:
    """Tests for solve, hint and validate."""

    def test_solve_text(self, capsys):
        assert main(["solve", "--string", CLASSIC_PUZZLE]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Solution:")
        assert "5 3 4" in out

    def test_solve_json(self, capsys):
        assert main(["solve", "-p", CLASSIC_PUZZLE, "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["string"] == CLASSIC_SOLUTION

    def test_solve_from_file(self, tmp_path, capsys):
        path = tmp_path / "puzzle.txt"
        rows = [CLASSIC_PUZZLE[i:i + 9] for i in range(0, 81, 9)]
        path.write_text("# classic\n\n" + "\n".join(rows) + "\n")
        assert main(["solve", "--file", str(path), "--json"]) == 0
        assert json.loads(capsys.readouterr().out)["string"] == CLASSIC_SOLUTION

    def test_missing_file(self, tmp_path, capsys):
        assert main(["solve", "--file", str(tmp_path / "nope.txt")]) == 1
        assert capsys.readouterr().err.startswith("error:")

    def test_solve_unsolvable(self, capsys):
        assert main(["solve", "--string", UNSOLVABLE_PUZZLE]) == 1
        assert "unsolvable" in capsys.readouterr().err

    def test_solve_malformed(self, capsys):
        assert main(["solve", "--string", "123"]) == 1
        assert "81 characters" in capsys.readouterr().err

    def test_hint_text(self, capsys):
        assert main(["hint", "--string", CLASSIC_PUZZLE]) == 0
        assert capsys.readouterr().out.strip() == "Hint: row 1, col 3 = 4"

    def test_hint_json(self, capsys):
        assert main(["hint", "--string", CLASSIC_PUZZLE, "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == {"row": 0, "col": 2, "val": 4}

    def test_hint_full_grid(self, capsys):
        assert main(["hint", "--string", CLASSIC_SOLUTION]) == 1
        assert "no hint" in capsys.readouterr().err

    def test_validate_ok(self, capsys):
        assert main(["validate", "--string", CLASSIC_PUZZLE, "--json"]) == 0
        assert json.loads(capsys.readouterr().out) == {"valid": True, "clues": 30}

    def test_validate_duplicate(self, capsys):
        assert main(["validate", "--string", DUPLICATE_PUZZLE]) == 1
        assert "row" in capsys.readouterr().err

    def test_validate_small_grid(self, capsys):
        assert main(["validate", "--size", "4", "--string", "1234341221434321"]) == 0
        assert capsys.readouterr().out.strip() == "valid"

    def test_source_required(self):
        with pytest.raises(SystemExit) as excinfo:
            main(["solve"])
        assert excinfo.value.code == 2


class TestMisc:
    """Tests for top-level behaviour and helpers."""

    def test_no_command(self, capsys):
        assert main([]) == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--version"])
        assert excinfo.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_parse_box(self):
        assert parse_box(9, None) == (3, 3)
        assert parse_box(6, "3x2") == (3, 2)
        with pytest.raises(UsageError):
            parse_box(6, None)
        with pytest.raises(UsageError):
            parse_box(6, "bad")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
