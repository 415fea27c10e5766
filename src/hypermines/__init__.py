"""
N-dimensional Minesweeper engine.

Provides board storage and coordinate arithmetic, mine placement,
neighbour counting, cascade reveal and game session management.
"""
from .errors import MinesError, ConfigurationError, CoordinateError
from .cell import Cell, CellState, DisplayCode, DisplayKind
from .coords import Coordinate, CoordinateCodec, MixedRadixCounter
from .neighbours import NeighbourEnumerator
from .board import Board, init_board
from .placement import MinePlacer, randint, randomize
from .counting import compute_neighbour_values, count_neighbour_mines
from .reveal import RevealResult, uncover, cascade, disclose_all_mines, toggle_flag
from .session import BoardConfig, GameSession, GameState, reset_board

__all__ = [
    "MinesError",
    "ConfigurationError",
    "CoordinateError",
    "Cell",
    "CellState",
    "DisplayCode",
    "DisplayKind",
    "Coordinate",
    "CoordinateCodec",
    "MixedRadixCounter",
    "NeighbourEnumerator",
    "Board",
    "init_board",
    "MinePlacer",
    "randint",
    "randomize",
    "compute_neighbour_values",
    "count_neighbour_mines",
    "RevealResult",
    "uncover",
    "cascade",
    "disclose_all_mines",
    "toggle_flag",
    "BoardConfig",
    "GameSession",
    "GameState",
    "reset_board",
]
