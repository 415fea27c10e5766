"""
Reveal logic for N-dimensional Minesweeper.

Uncovering cells, cascading through empty regions, disclosing every
mine after a loss and toggling flags. These functions only change cell
states; mines and counts are fixed once the board is set up.
"""
from collections import deque
from enum import Enum, auto
from typing import Deque, Sequence

from .board import Board
from .cell import CellState
from .coords import Coordinate


class RevealResult(Enum):
    """Outcome of uncovering a cell."""

    SAFE = auto()
    LOSS = auto()


def uncover(board: Board, coord: Sequence[int]) -> RevealResult:
    """
    Uncover the cell at coord.

    Uncovering a mine discloses every mine on the board. Uncovering a
    cell with no neighbouring mines cascades into its neighbours.

    Args:
        board: Board to play on.
        coord: Cell to uncover.

    Returns:
        LOSS if the cell held a mine, SAFE otherwise.

    Raises:
        CoordinateError: If coord is off the board.
    """
    cell = board.cell(coord)
    cell.state = CellState.UNCOVERED

    if cell.is_mine:
        disclose_all_mines(board)
        return RevealResult.LOSS

    if cell.neighbour_mine_count == 0:
        cascade(board, coord)
    return RevealResult.SAFE


def cascade(board: Board, origin: Sequence[int]) -> int:
    """
    Flood-fill the zero-count region around origin.

    Every neighbour of a zero-count cell is uncovered, so the region's
    one cell boundary ring is uncovered too. A cell is queued only when
    it leaves a non-uncovered state, which bounds the work by the board
    size.

    Args:
        board: Board to play on.
        origin: Starting cell. Nothing happens unless its count is 0.

    Returns:
        Number of cells this cascade uncovered.
    """
    if board.cell(origin).neighbour_mine_count != 0:
        return 0

    uncovered = 0
    frontier: Deque[Coordinate] = deque([tuple(origin)])
    while frontier:
        current = frontier.popleft()
        for neighbour in board.neighbours(current):
            cell = board.cell(neighbour)
            if cell.state == CellState.UNCOVERED:
                continue
            cell.state = CellState.UNCOVERED
            uncovered += 1
            if cell.neighbour_mine_count == 0:
                frontier.append(neighbour)
    return uncovered


def disclose_all_mines(board: Board) -> None:
    """
    Show the whole board's mines after a loss.

    Every mine becomes uncovered, flagged or not, and flags on safe
    cells are marked as wrong. Calling this again changes nothing.
    """
    for cell in board.cells:
        if cell.is_mine and cell.state in (CellState.COVERED, CellState.FLAGGED):
            cell.state = CellState.UNCOVERED
        elif not cell.is_mine and cell.state == CellState.FLAGGED:
            cell.state = CellState.FLAGGED_NOT_MINE


def toggle_flag(board: Board, coord: Sequence[int]) -> bool:
    """
    Flag a covered cell or unflag a flagged one.

    Returns:
        True if the state changed, False for any other state.
    """
    return board.cell(coord).toggle_flag()
