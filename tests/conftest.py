import pytest

from models.sudoku_grid import SudokuGrid

PUZZLE = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

PUZZLE_TEXT = """\
53__7____
6__195___
_98____6_
8___6___3
4__8_3__1
7___2___6
_6____28_
___419__5
____8__79
"""

# Valid clues, but (0, 8) can only hold a 9 and column 8 already has one
UNSOLVABLE_TEXT = """\
12345678.
.........
.........
.........
........9
.........
.........
.........
.........
"""


# Row 1 can only be finished with a 9 in column 8, which row 4 already holds;
# row 0 is filled in every possible way before that dead end is reached
DEAD_END_TEXT = """\
.........
12345678.
.........
.........
........9
.........
.........
.........
.........
"""


@pytest.fixture
def puzzle():
    return SudokuGrid(PUZZLE)


@pytest.fixture
def solution():
    return SudokuGrid(SOLUTION)


@pytest.fixture
def write_puzzle(tmp_path):
    def _write(text, name="puzzle.txt"):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write
