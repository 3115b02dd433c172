"""Shared puzzle fixtures for the test suite."""

# A known solvable puzzle with a unique solution
CLASSIC_PUZZLE = (
    "530070000"
    "600195000"
    "098000060"
    "800060003"
    "400803001"
    "700020006"
    "060000280"
    "000419005"
    "000080079"
)

# The solution to the classic puzzle
CLASSIC_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# Row 0 holds 1..8 and column 0 holds 9, so cell (0, 0) has no legal value.
UNSOLVABLE_PUZZLE = "012345678" + "900000000" + "0" * 63

# Two 5s in the first row
DUPLICATE_PUZZLE = "550070000" + CLASSIC_PUZZLE[9:]

SMALL_4X4 = [
    [0, 0, 3, 4],
    [3, 4, 0, 0],
    [0, 0, 4, 3],
    [4, 3, 0, 0],
]
