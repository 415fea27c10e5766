"""
Game session for N-dimensional Minesweeper.

Owns the current board and the playing/won/lost state, and is the one
object a front end talks to.
"""
import logging
import random
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Sequence, Tuple

from .board import Board, init_board
from .cell import CellState, DisplayCode
from .counting import compute_neighbour_values
from .errors import ConfigurationError
from .placement import MinePlacer
from .reveal import RevealResult, toggle_flag, uncover as uncover_cell


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass
class BoardConfig:
    """
    Configuration for a board.

    Attributes:
        dimensions: Size of each axis, axis 0 least significant.
        num_mines: Mines to try to place. More than the board holds is
            allowed; the board simply fills up.
    """

    dimensions: Tuple[int, ...] = (4, 4, 4, 4)
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.dimensions = tuple(self.dimensions)
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if not self.dimensions:
            raise ConfigurationError("Board needs at least one dimension")
        if any(size < 1 for size in self.dimensions):
            raise ConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ConfigurationError("Number of mines cannot be negative")

    @property
    def total_cells(self) -> int:
        total = 1
        for size in self.dimensions:
            total *= size
        return total


# ============================================================================
# Engine API
# ============================================================================

def reset_board(
    dimensions: Sequence[int],
    mine_count: int,
    placer: Optional[MinePlacer] = None,
) -> Tuple[Board, int]:
    """
    Build a fresh, ready to play board.

    Args:
        dimensions: Size of each axis.
        mine_count: Mines to try to place.
        placer: Mine placer to use (default: unseeded).

    Returns:
        Tuple of (board, mines actually placed).
    """
    board = init_board(dimensions)
    placed = (placer or MinePlacer()).place(board, mine_count)
    compute_neighbour_values(board)
    return board, placed


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    One game at a time on a board of fixed dimensions.

    Entry points must be called from a single thread, one at a time.
    Front ends may read ``board`` between calls but must not change it.
    """

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize the session and deal the first board.

        Args:
            config: Board configuration (default: 4x4x4x4 with 10 mines).
            seed: Seed for mine placement.
            rng: Random generator for mine placement, overrides seed.
        """
        self.config = config or BoardConfig()
        self.placer = MinePlacer(rng=rng, seed=seed)
        self.board: Board
        self.mines_placed = 0
        self._game_state = GameState.PLAYING
        self.reset()

    # ========================================================================
    # Game Actions
    # ========================================================================

    def uncover(self, coord: Sequence[int]) -> GameState:
        """
        Uncover a cell.

        Does nothing once the game is over or if the cell is flagged.

        Args:
            coord: Cell to uncover.

        Returns:
            Game state after the move.
        """
        if self._game_state != GameState.PLAYING:
            return self._game_state
        if self.board.cell(coord).state == CellState.FLAGGED:
            return self._game_state

        if uncover_cell(self.board, coord) == RevealResult.LOSS:
            self._game_state = GameState.LOST
            logger.info("Player lost at %s", tuple(coord))
        elif self.board.is_cleared():
            self._game_state = GameState.WON
            logger.info("Player won")
        return self._game_state

    def flag(self, coord: Sequence[int]) -> bool:
        """
        Toggle flag on a cell.

        Returns:
            True if flag was toggled, False otherwise.
        """
        if self._game_state != GameState.PLAYING:
            return False
        return toggle_flag(self.board, coord)

    def reset(self, seed: Optional[int] = None) -> None:
        """
        Deal a new board with the configured dimensions and mines.

        Args:
            seed: Reseed mine placement first, if given.
        """
        if seed is not None:
            self.placer.seed(seed)
        self.board, self.mines_placed = reset_board(
            self.config.dimensions, self.config.num_mines, self.placer
        )
        self._game_state = GameState.PLAYING
        if self.mines_placed < self.config.num_mines:
            logger.info(
                "Board holds only %d of %d requested mines",
                self.mines_placed,
                self.config.num_mines,
            )

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    def display_code(self, coord: Sequence[int]) -> DisplayCode:
        """What a renderer should draw at coord."""
        return self.board.display_code(coord)

    def flatten_to_2d(self, coord: Sequence[int]) -> Tuple[int, int]:
        """Display position of coord."""
        return self.board.flatten_to_2d(coord)
