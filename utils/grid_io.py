from models.sudoku_grid import GRID_SIZE, BOX_SIZE, EMPTY, SudokuGrid

EMPTY_CHARS = ".0_"


class GridParseError(ValueError):
    """Raised when puzzle text cannot be turned into a valid grid"""


def parse_grid(text):
    """Parse puzzle text into a SudokuGrid.

    The text should contain 9 lines with 9 cells each. Empty cells can be
    written as '0', '.' or '_':

        53__7____
        6__195___
        _98____6_
        8___6___3
        4__8_3__1
        7___2___6
        _6____28_
        ___419__5
        ____8__79

    Raises GridParseError on a wrong number of lines or cells, an invalid
    character, or clues that repeat a digit in a row, column or box.
    """
    lines = text.rstrip().splitlines()

    if len(lines) > GRID_SIZE:
        raise GridParseError(f"Input has more than {GRID_SIZE} lines")
    if len(lines) < GRID_SIZE:
        raise GridParseError(f"Input has {len(lines)} lines, expected {GRID_SIZE}")

    cells = []
    for i, line in enumerate(lines):
        line = line.strip()
        if len(line) != GRID_SIZE:
            raise GridParseError(f"Line {i + 1} has {len(line)} cells, expected {GRID_SIZE}")

        row = []
        for j, char in enumerate(line):
            if char in EMPTY_CHARS:
                row.append(EMPTY)
            elif char in "123456789":
                row.append(int(char))
            else:
                raise GridParseError(f"Invalid character {char!r} at line {i + 1}, column {j + 1}")
        cells.append(row)

    grid = SudokuGrid(cells)

    conflict = grid.find_conflict()
    if conflict is not None:
        unit, index, digit = conflict
        raise GridParseError(f"Digit {digit} appears more than once in {unit} {index + 1}")

    return grid


def load_grid(path):
    """Read and parse a puzzle file"""
    try:
        with open(path, encoding="utf-8") as f:
            text = f.read()
    except OSError as e:
        raise GridParseError(f"Failed to read file {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise GridParseError(f"File {path} is not valid UTF-8 text") from e

    return parse_grid(text)


def format_grid(grid):
    """Format grid as text, with '.' for empty cells"""
    lines = []
    for i in range(GRID_SIZE):
        if i % BOX_SIZE == 0 and i != 0:
            lines.append("------+-------+------")

        row_str = ""
        for j in range(GRID_SIZE):
            if j % BOX_SIZE == 0 and j != 0:
                row_str += "| "
            cell = grid.at(i, j)
            row_str += str(cell if cell != EMPTY else '.') + " "

        lines.append(row_str.rstrip())

    return "\n".join(lines)
