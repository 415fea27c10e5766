"""
Unit tests for 2D layout and text rendering.
"""
import numpy as np
from hypermines import Board, CellState, CoordinateCodec
from hypermines.layout import (
    GAP,
    highlight_neighbours,
    layout_extent,
    layout_observation,
    render_ansi,
)


class TestLayoutExtent:
    """Test the size of the projected surface."""

    def test_square(self) -> None:
        assert layout_extent(CoordinateCodec((4, 4))) == (4, 4)

    def test_four_dimensions(self, codec_4d: CoordinateCodec) -> None:
        """Four 4x4 sub-grids per row plus three gaps."""
        assert layout_extent(codec_4d) == (19, 19)

    def test_mixed(self, codec_mixed: CoordinateCodec) -> None:
        assert layout_extent(codec_mixed) == (7, 5)


class TestLayoutObservation:
    """Test the 2D observation surface."""

    def test_gaps_between_sub_grids(self) -> None:
        surface = layout_observation(Board((4, 4, 4, 4)))
        assert surface.shape == (19, 19)
        assert np.all(surface[:, 4] == GAP)
        assert np.all(surface[9, :] == GAP)
        assert (surface != GAP).sum() == 256

    def test_cell_values_placed(self) -> None:
        board = Board((2, 2, 2))
        cell = board.cell((1, 0, 1))
        cell.state = CellState.UNCOVERED
        cell.neighbour_mine_count = 3
        surface = layout_observation(board)
        assert surface[0, 4] == 3
        assert surface[0, 0] == -1


class TestRenderAnsi:
    """Test text rendering."""

    def test_covered_square(self) -> None:
        assert render_ansi(Board((2, 2))) == ". .\n. ."

    def test_gap_column(self) -> None:
        assert render_ansi(Board((2, 2, 2))) == ". .   . .\n. .   . ."

    def test_wide_numbers_pad_every_cell(self, make_board) -> None:
        dimensions = (3, 3, 3)
        mines = [c for c in Board(dimensions).coordinates() if c != (1, 1, 1)]
        board = make_board(dimensions, mines)
        board.cell((1, 1, 1)).state = CellState.UNCOVERED

        lines = render_ansi(board).split("\n")
        assert "26" in lines[1]
        assert lines[0].startswith(" .  .  .")

    def test_empty_cells_differ_from_gaps(self) -> None:
        board = Board((2, 2, 2))
        for cell in board.cells:
            cell.state = CellState.UNCOVERED
        assert render_ansi(board) == "_ _   _ _\n_ _   _ _"


class TestHighlight:
    """Test neighbour highlighting positions."""

    def test_corner_highlight(self) -> None:
        positions = highlight_neighbours(Board((4, 4)), (0, 0))
        assert set(positions) == {(1, 0), (0, 1), (1, 1)}

    def test_highlight_crosses_sub_grids(self) -> None:
        positions = highlight_neighbours(Board((2, 2, 2)), (1, 0, 0))
        assert (3, 0) in positions
