"""
Neighbouring mine counts.
"""
from typing import Sequence

from .board import Board


def count_neighbour_mines(board: Board, coord: Sequence[int]) -> int:
    """Count mines among the neighbours of coord."""
    return sum(
        1 for neighbour in board.neighbours(coord)
        if board.cell(neighbour).is_mine
    )


def compute_neighbour_values(board: Board) -> None:
    """
    Store every cell's neighbouring mine count.

    Mine cells always get 0; the value is never shown for a mine.
    """
    for coord in board.coordinates():
        cell = board.cell(coord)
        cell.neighbour_mine_count = (
            0 if cell.is_mine else count_neighbour_mines(board, coord)
        )
