"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import Callable, Iterable, Sequence

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hypermines import (
    Board,
    BoardConfig,
    Cell,
    CoordinateCodec,
    compute_neighbour_values,
)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def make_board() -> Callable[[Sequence[int], Iterable[Sequence[int]]], Board]:
    """Factory for boards with hand-placed mines and computed counts."""

    def _make(dimensions: Sequence[int], mines: Iterable[Sequence[int]] = ()) -> Board:
        board = Board(tuple(dimensions))
        for coord in mines:
            board.cell(coord).is_mine = True
        compute_neighbour_values(board)
        return board

    return _make


@pytest.fixture
def square_board(make_board) -> Board:
    """Create a 4x4 board with a single mine in the corner."""
    return make_board((4, 4), [(0, 0)])


@pytest.fixture
def empty_hypercube(make_board) -> Board:
    """Create a mine-free 2x2x2x2 board for cascade testing."""
    return make_board((2, 2, 2, 2))


@pytest.fixture
def empty_board(make_board) -> Board:
    """Create a mine-free 5x5 board."""
    return make_board((5, 5))


# ============================================================================
# Codec Fixtures
# ============================================================================

@pytest.fixture
def codec_4d() -> CoordinateCodec:
    """Codec for the default 4x4x4x4 board."""
    return CoordinateCodec((4, 4, 4, 4))


@pytest.fixture
def codec_mixed() -> CoordinateCodec:
    """Codec with axes of different sizes."""
    return CoordinateCodec((3, 5, 2))


# ============================================================================
# Cell / Config / RNG Fixtures
# ============================================================================

@pytest.fixture
def covered_cell() -> Cell:
    """Create a covered cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def small_config() -> BoardConfig:
    """Small 3x3x3 configuration."""
    return BoardConfig((3, 3, 3), 3)


@pytest.fixture
def rng() -> random.Random:
    """Seeded random generator."""
    return random.Random(1234)
