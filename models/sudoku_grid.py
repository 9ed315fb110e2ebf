import numpy as np

GRID_SIZE = 9
BOX_SIZE = 3
EMPTY = 0
DIGITS = range(1, GRID_SIZE + 1)


class SudokuGrid:
    """9x9 Sudoku board. Empty cells hold 0, filled cells hold 1-9."""

    def __init__(self, cells=None):
        if cells is None:
            self.cells = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.uint8)
            return

        array = np.array(cells)
        if array.shape != (GRID_SIZE, GRID_SIZE):
            raise ValueError(f"Grid must be {GRID_SIZE}x{GRID_SIZE}, got shape {array.shape}")
        # Integer dtypes only; bools and floats would be silently coerced
        if array.dtype.kind not in "iu":
            raise ValueError(f"Cell values must be integers, got {array.dtype}")
        if array.min() < EMPTY or array.max() > GRID_SIZE:
            raise ValueError(f"Cell values must be between {EMPTY} and {GRID_SIZE}")

        self.cells = array.astype(np.uint8)

    @classmethod
    def empty(cls):
        return cls()

    def _check_position(self, row, col):
        if not (0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE):
            raise ValueError(f"Cell ({row}, {col}) is outside the grid")

    def _check_digit(self, digit):
        if digit not in DIGITS:
            raise ValueError(f"Digit must be between 1 and {GRID_SIZE}, got {digit}")

    def at(self, row, col):
        self._check_position(row, col)
        return int(self.cells[row, col])

    def set(self, row, col, digit):
        """Place digit at (row, col) without checking the constraints"""
        self._check_position(row, col)
        self._check_digit(digit)
        self.cells[row, col] = digit

    def clear(self, row, col):
        self._check_position(row, col)
        self.cells[row, col] = EMPTY

    def is_valid_placement(self, row, col, digit):
        """Check if placing digit at (row, col) is valid"""
        self._check_position(row, col)
        self._check_digit(digit)

        # Check row and column
        if digit in self.cells[row, :] or digit in self.cells[:, col]:
            return False

        # Check 3x3 box
        start_row = (row // BOX_SIZE) * BOX_SIZE
        start_col = (col // BOX_SIZE) * BOX_SIZE
        box = self.cells[start_row:start_row + BOX_SIZE, start_col:start_col + BOX_SIZE]

        return digit not in box

    def find_next_empty(self):
        """First empty cell in row-major order, or None if the grid is full"""
        empties = np.argwhere(self.cells == EMPTY)
        if len(empties) == 0:
            return None

        row, col = empties[0]
        return int(row), int(col)

    def rows(self):
        return [self.cells[i, :] for i in range(GRID_SIZE)]

    def columns(self):
        return [self.cells[:, j] for j in range(GRID_SIZE)]

    def boxes(self):
        boxes = []
        for box in range(GRID_SIZE):
            start_row = (box // BOX_SIZE) * BOX_SIZE
            start_col = (box % BOX_SIZE) * BOX_SIZE
            boxes.append(self.cells[start_row:start_row + BOX_SIZE,
                                    start_col:start_col + BOX_SIZE].ravel())
        return boxes

    def find_conflict(self):
        """Return (unit, index, digit) for the first repeated digit, or None.

        Units are checked rows first, then columns, then boxes; empty cells
        are ignored.
        """
        for unit, groups in (("row", self.rows()), ("column", self.columns()), ("box", self.boxes())):
            for index, values in enumerate(groups):
                filled = values[values != EMPTY]
                counts = np.bincount(filled, minlength=GRID_SIZE + 1)
                repeated = np.flatnonzero(counts > 1)
                if len(repeated) > 0:
                    return unit, index, int(repeated[0])
        return None

    def is_valid(self):
        """Check that no row, column or box contains a repeated digit"""
        return self.find_conflict() is None

    def is_complete(self):
        return not (self.cells == EMPTY).any()

    def is_solved(self):
        return self.is_complete() and self.is_valid()

    def clues(self):
        """Boolean mask of the filled cells"""
        return self.cells != EMPTY

    def copy(self):
        return SudokuGrid(self.cells.copy())

    def to_list(self):
        return self.cells.astype(int).tolist()

    def __eq__(self, other):
        if not isinstance(other, SudokuGrid):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def __repr__(self):
        return f"SudokuGrid({self.to_list()!r})"
