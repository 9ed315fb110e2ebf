import cv2
import numpy as np

from models.sudoku_grid import GRID_SIZE, BOX_SIZE, EMPTY

CELL_SIZE = 50

# BGR colours
LINE_COLOR = (0, 0, 0)
CLUE_COLOR = (255, 0, 0)
SOLVED_COLOR = (0, 150, 0)


def render_solution_image(original_grid, solution_grid, cell_size=CELL_SIZE):
    """Draw the solution on a white canvas, clues in blue and filled cells in green"""
    size = GRID_SIZE * cell_size
    image = np.ones((size, size, 3), dtype=np.uint8) * 255

    # Draw grid lines, thicker around boxes
    for i in range(GRID_SIZE + 1):
        thickness = 3 if i % BOX_SIZE == 0 else 1
        offset = min(i * cell_size, size - 1)
        cv2.line(image, (offset, 0), (offset, size), LINE_COLOR, thickness)
        cv2.line(image, (0, offset), (size, offset), LINE_COLOR, thickness)

    # Scale the font with the cell
    font_scale = 0.8 * cell_size / CELL_SIZE
    text_offset = cell_size // 5

    for i in range(GRID_SIZE):
        for j in range(GRID_SIZE):
            digit = solution_grid.at(i, j)
            if digit == EMPTY:
                continue

            x = j * cell_size + cell_size // 2
            y = i * cell_size + cell_size // 2
            color = CLUE_COLOR if original_grid.at(i, j) != EMPTY else SOLVED_COLOR

            cv2.putText(image, str(digit), (x - text_offset, y + text_offset),
                        cv2.FONT_HERSHEY_SIMPLEX, font_scale, color, 2)

    return image


def save_solution_image(path, original_grid, solution_grid, cell_size=CELL_SIZE):
    image = render_solution_image(original_grid, solution_grid, cell_size)

    try:
        written = cv2.imwrite(str(path), image)
    except cv2.error as e:
        raise OSError(f"Could not write image to {path}") from e

    if not written:
        raise OSError(f"Could not write image to {path}")
