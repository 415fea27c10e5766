"""
Board module for N-dimensional Minesweeper.

Stores every cell of a hyper-rectangular grid in one flat list, indexed
through a mixed-radix coordinate codec.
"""
from dataclasses import dataclass, field
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .cell import Cell, CellState, DisplayCode
from .coords import Coordinate, CoordinateCodec
from .errors import ConfigurationError
from .neighbours import NeighbourEnumerator


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    N-dimensional Minesweeper board.

    Attributes:
        dimensions: Size of every axis, axis 0 least significant.
        codec: Coordinate arithmetic for these dimensions.
    """

    dimensions: Tuple[int, ...]
    codec: CoordinateCodec = field(init=False, repr=False, compare=False)
    _cells: List[Cell] = field(init=False, repr=False, default_factory=list)

    def __post_init__(self) -> None:
        """Validate dimensions, then allocate the cells."""
        # The codec raises ConfigurationError before anything is allocated
        self.codec = CoordinateCodec(self.dimensions)
        self.dimensions = self.codec.dimensions
        self._init_cells()

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_cells(self) -> None:
        """Create a covered, mine-free cell for every position."""
        try:
            self._cells = [Cell() for _ in range(self.codec.size)]
        except MemoryError as error:
            raise ConfigurationError(
                f"Cannot allocate {self.codec.size} cells"
            ) from error

    # ========================================================================
    # Geometry
    # ========================================================================

    @property
    def n_dim(self) -> int:
        """Number of axes."""
        return self.codec.n_dim

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.codec.size

    @property
    def cells(self) -> List[Cell]:
        """Cells in flat index order."""
        return self._cells

    def coordinates(self) -> Iterator[Coordinate]:
        """Iterate over every coordinate in flat index order."""
        return self.codec.iter_coordinates()

    def neighbours(self, coord: Sequence[int]) -> NeighbourEnumerator:
        """Lazy enumerator over the in-bounds neighbours of coord."""
        return NeighbourEnumerator(self.codec, coord)

    def flatten_to_2d(self, coord: Sequence[int]) -> Tuple[int, int]:
        """Display position of coord, see CoordinateCodec.flatten_to_2d."""
        return self.codec.flatten_to_2d(coord)

    # ========================================================================
    # Cell Access
    # ========================================================================

    def cell(self, coord: Sequence[int]) -> Cell:
        """Get cell at coord. Raises CoordinateError if off the board."""
        return self._cells[self.codec.coordinate_to_index(coord)]

    def display_code(self, coord: Sequence[int]) -> DisplayCode:
        """What a renderer should draw at coord."""
        return self.cell(coord).display_code()

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def mine_count(self) -> int:
        """Number of mines on the board."""
        return sum(1 for cell in self._cells if cell.is_mine)

    def count_state(self, state: CellState) -> int:
        """Number of cells currently in the given state."""
        return sum(1 for cell in self._cells if cell.state == state)

    def is_cleared(self) -> bool:
        """Check if every non-mine cell is uncovered."""
        return all(
            cell.state == CellState.UNCOVERED
            for cell in self._cells
            if not cell.is_mine
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        The array has shape ``dimensions`` and is laid out so that
        ``obs[coord]`` is the observation value of the cell at coord.

        Returns:
            int32 array of DisplayCode.to_observation values.
        """
        flat = np.fromiter(
            (cell.to_observation() for cell in self._cells),
            dtype=np.int32,
            count=self.size,
        )
        # Axis 0 varies fastest in the flat list, i.e. Fortran order
        return flat.reshape(self.dimensions, order="F")

    def get_valid_actions(self) -> List[int]:
        """
        Get flat indices of cells that can still be uncovered.

        Returns:
            Indices of covered cells.
        """
        return [
            index for index, cell in enumerate(self._cells)
            if cell.state == CellState.COVERED
        ]


# ============================================================================
# Engine API
# ============================================================================

def init_board(dimensions: Sequence[int]) -> Board:
    """
    Create an all-covered, mine-free board.

    Raises:
        ConfigurationError: If dimensions is empty or any axis is < 1.
    """
    return Board(tuple(dimensions))
