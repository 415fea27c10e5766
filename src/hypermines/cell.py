"""
Cell module for N-dimensional Minesweeper.

Represents individual cells on the game board with their state
(covered/uncovered/flagged) and content (mine/number), and the
display codes handed to whatever draws the board.
"""
from dataclasses import dataclass
from enum import Enum, auto


# ============================================================================
# Constants
# ============================================================================

class CellState(Enum):
    """Possible states of a cell."""

    COVERED = auto()
    UNCOVERED = auto()
    FLAGGED = auto()
    # Flag on a safe cell, only shown after the player lost
    FLAGGED_NOT_MINE = auto()


class DisplayKind(Enum):
    """The six things a renderer can be asked to draw for a cell."""

    EMPTY = auto()
    NUMBER = auto()
    FLAGGED = auto()
    EXPOSED_MINE = auto()
    COVERED = auto()
    FLAGGED_NOT_MINE = auto()


OBS_COVERED = -1
OBS_FLAGGED = -2
OBS_FLAGGED_NOT_MINE = -3
OBS_EXPOSED_MINE = -4

_KIND_TO_OBSERVATION = {
    DisplayKind.COVERED: OBS_COVERED,
    DisplayKind.FLAGGED: OBS_FLAGGED,
    DisplayKind.FLAGGED_NOT_MINE: OBS_FLAGGED_NOT_MINE,
    DisplayKind.EXPOSED_MINE: OBS_EXPOSED_MINE,
}

_KIND_TO_CHAR = {
    DisplayKind.EMPTY: "_",
    DisplayKind.COVERED: ".",
    DisplayKind.FLAGGED: "F",
    DisplayKind.FLAGGED_NOT_MINE: "x",
    DisplayKind.EXPOSED_MINE: "*",
}


# ============================================================================
# Display Code
# ============================================================================

@dataclass(frozen=True)
class DisplayCode:
    """
    What a renderer should draw for one cell.

    Attributes:
        kind: Which of the six display states applies.
        number: Neighbouring mine count, only meaningful for NUMBER.
    """

    kind: DisplayKind
    number: int = 0

    def to_observation(self) -> int:
        """
        Convert display code to an integer observation value.

        Returns:
            -1: Covered cell
            -2: Flagged cell
            -3: Flag that turned out not to be on a mine
            -4: Exposed mine
            0..: Uncovered cell with its neighbouring mine count
        """
        if self.kind in (DisplayKind.EMPTY, DisplayKind.NUMBER):
            return self.number
        return _KIND_TO_OBSERVATION[self.kind]

    def to_char(self) -> str:
        """Single text token for terminal rendering."""
        if self.kind == DisplayKind.NUMBER:
            return str(self.number)
        return _KIND_TO_CHAR[self.kind]


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the N-dimensional grid.

    Attributes:
        is_mine: Whether this cell contains a mine.
        neighbour_mine_count: Mines among the cell's Moore neighbours.
            Always 0 for a mine cell.
        state: Current state of the cell.
    """

    is_mine: bool = False
    neighbour_mine_count: int = 0
    state: CellState = CellState.COVERED

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if the cell is uncovered or
            already marked as a wrong flag.
        """
        if self.state == CellState.COVERED:
            self.state = CellState.FLAGGED
        elif self.state == CellState.FLAGGED:
            self.state = CellState.COVERED
        else:
            return False
        return True

    @property
    def is_covered(self) -> bool:
        """Check if cell is covered."""
        return self.state == CellState.COVERED

    @property
    def is_uncovered(self) -> bool:
        """Check if cell is uncovered."""
        return self.state == CellState.UNCOVERED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def display_code(self) -> DisplayCode:
        """Map the cell's content and state onto a display code."""
        if self.state == CellState.UNCOVERED:
            if self.is_mine:
                return DisplayCode(DisplayKind.EXPOSED_MINE)
            if self.neighbour_mine_count == 0:
                return DisplayCode(DisplayKind.EMPTY)
            return DisplayCode(DisplayKind.NUMBER, self.neighbour_mine_count)
        if self.state == CellState.FLAGGED:
            return DisplayCode(DisplayKind.FLAGGED)
        if self.state == CellState.FLAGGED_NOT_MINE:
            return DisplayCode(DisplayKind.FLAGGED_NOT_MINE)
        return DisplayCode(DisplayKind.COVERED)

    def to_observation(self) -> int:
        """Integer observation value, see DisplayCode.to_observation."""
        return self.display_code().to_observation()
