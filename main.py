import argparse
import sys

from models.sudoku_solver import SudokuSolver
from utils.grid_io import GridParseError, load_grid, format_grid
from utils.image_rendering import save_solution_image

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_UNSOLVABLE = 3


class SudokuApp:
    def __init__(self, verbose=False):
        self.sudoku_solver = SudokuSolver()
        self.verbose = verbose

    def run(self, puzzle_path, image_path=None):
        """Load, solve and report a puzzle file. Returns the exit code."""
        try:
            grid = load_grid(puzzle_path)
        except GridParseError as e:
            print(f"Error: {e}")
            return EXIT_INPUT_ERROR

        self.print_grid(grid, "Input:")

        original = grid.copy()
        solved = self.sudoku_solver.solve(grid)

        if self.verbose:
            print(f"Placement checks: {self.sudoku_solver.validations}")

        if not solved:
            print("No solution found")
            return EXIT_UNSOLVABLE

        self.print_grid(grid, "Solution:")

        if image_path is not None:
            try:
                save_solution_image(image_path, original, grid)
            except OSError as e:
                print(f"Error: {e}")
                return EXIT_INPUT_ERROR
            print(f"Solution image saved to {image_path}")

        return EXIT_OK

    def print_grid(self, grid, title="Grid:"):
        """Print grid to console"""
        print(title)
        print(format_grid(grid))
        print()


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Command line utility to solve sudoku puzzles")
    parser.add_argument("input", help="Input file containing the sudoku puzzle")
    parser.add_argument("--image", metavar="PATH",
                        help="Also write a picture of the solution to PATH (e.g. solution.png)")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Report how many placements were checked")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    app = SudokuApp(verbose=args.verbose)
    return app.run(args.input, args.image)


if __name__ == "__main__":
    sys.exit(main())
