"""
2D layout of N-dimensional boards.

Higher axes are drawn as grids of grids: even axes spread along x, odd
axes along y, with a one cell gap between neighbouring sub-grids.
"""
from typing import List, Sequence, Tuple

import numpy as np

from .board import Board
from .coords import CoordinateCodec


# Observation value for the separator positions between sub-grids
GAP = -5


def layout_extent(codec: CoordinateCodec) -> Tuple[int, int]:
    """
    Size of the 2D surface a board projects onto.

    Returns:
        (width, height) in cells, gaps included.
    """
    far_corner = tuple(size - 1 for size in codec.dimensions)
    x, y = codec.flatten_to_2d(far_corner)
    return x + 1, y + 1


def layout_observation(board: Board) -> np.ndarray:
    """
    Board state laid out on its 2D surface.

    Returns:
        int32 array of shape (height, width) holding each cell's
        observation value at ``[y, x]`` and GAP everywhere else.
    """
    width, height = layout_extent(board.codec)
    surface = np.full((height, width), GAP, dtype=np.int32)
    for coord, cell in zip(board.coordinates(), board.cells):
        x, y = board.flatten_to_2d(coord)
        surface[y, x] = cell.to_observation()
    return surface


def highlight_neighbours(board: Board, coord: Sequence[int]) -> List[Tuple[int, int]]:
    """Surface positions of the neighbours of coord."""
    return [board.flatten_to_2d(neighbour) for neighbour in board.neighbours(coord)]


def render_ansi(board: Board) -> str:
    """Render board as text, one token per surface position."""
    width, height = layout_extent(board.codec)
    tokens = [[""] * width for _ in range(height)]
    for coord, cell in zip(board.coordinates(), board.cells):
        x, y = board.flatten_to_2d(coord)
        tokens[y][x] = cell.display_code().to_char()

    # Counts can run past 9 in higher dimensions
    cell_width = max(len(token) for row in tokens for token in row)
    lines = []
    for row in tokens:
        lines.append(" ".join(token.rjust(cell_width) for token in row).rstrip())
    return "\n".join(lines)
