from models.sudoku_grid import DIGITS


class SudokuSolver:
    def __init__(self):
        self.validations = 0

    def solve(self, grid):
        """Solve Sudoku in place using backtracking.

        Returns True and leaves the solution in grid, or False with grid
        unchanged when the clues admit no completion.
        """
        self.validations = 0

        # Clues that already clash can never be completed
        if not grid.is_valid():
            return False

        return self._solve_helper(grid)

    def _solve_helper(self, grid):
        """Recursive helper for solving"""
        empty = grid.find_next_empty()
        if empty is None:
            return True
        row, col = empty

        for digit in DIGITS:
            self.validations += 1
            if grid.is_valid_placement(row, col, digit):
                grid.set(row, col, digit)

                if self._solve_helper(grid):
                    return True

                grid.clear(row, col)  # Backtrack

        return False

    def solution(self, grid):
        """Solve a copy of grid, returning it or None if unsolvable"""
        solution = grid.copy()

        if self.solve(solution):
            return solution
        return None
