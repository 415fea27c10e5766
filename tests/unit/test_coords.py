"""
Unit tests for coordinate arithmetic.

Tests the mixed-radix counter, index encoding and decoding, and the 2D
display projection.
"""
import pytest
from hypermines import (
    ConfigurationError,
    CoordinateCodec,
    CoordinateError,
    MixedRadixCounter,
)


# ============================================================================
# Mixed-Radix Counter Tests
# ============================================================================

class TestMixedRadixCounter:
    """Test the odometer iterator."""

    def test_axis_zero_turns_fastest(self) -> None:
        counter = MixedRadixCounter([0, 0], [2, 3])
        assert list(counter) == [
            (0, 0), (1, 0), (0, 1), (1, 1), (0, 2), (1, 2),
        ]

    def test_offset_range(self) -> None:
        """Ranges need not start at zero."""
        values = list(MixedRadixCounter([-1], [2]))
        assert values == [(-1,), (0,), (1,)]

    def test_exhausted_counter_stays_empty(self) -> None:
        counter = MixedRadixCounter([0, 0], [2, 2])
        list(counter)
        assert counter.exhausted is True
        assert list(counter) == []

    def test_reset_restarts(self) -> None:
        counter = MixedRadixCounter([0, 0], [2, 2])
        first = list(counter)
        counter.reset()
        assert list(counter) == first

    def test_empty_range_yields_nothing(self) -> None:
        assert list(MixedRadixCounter([0, 0], [2, 0])) == []

    def test_mismatched_lengths_raise(self) -> None:
        with pytest.raises(ValueError):
            MixedRadixCounter([0], [1, 2])


# ============================================================================
# Codec Construction Tests
# ============================================================================

class TestCodecConstruction:
    """Test dimension validation."""

    def test_no_dimensions_raises(self) -> None:
        with pytest.raises(ConfigurationError):
            CoordinateCodec(())

    def test_zero_sized_axis_raises(self) -> None:
        with pytest.raises(ConfigurationError, match="must be positive"):
            CoordinateCodec((3, 0))

    def test_size_is_product(self, codec_mixed: CoordinateCodec) -> None:
        assert codec_mixed.size == 30
        assert codec_mixed.strides == (1, 3, 15)


# ============================================================================
# Index Encoding Tests
# ============================================================================

class TestIndexEncoding:
    """Test coordinate <-> index conversion."""

    def test_axis_zero_least_significant(
        self, codec_mixed: CoordinateCodec
    ) -> None:
        assert codec_mixed.coordinate_to_index((1, 0, 0)) == 1
        assert codec_mixed.coordinate_to_index((0, 1, 0)) == 3
        assert codec_mixed.coordinate_to_index((1, 2, 1)) == 22

    def test_decode(self, codec_mixed: CoordinateCodec) -> None:
        assert codec_mixed.index_to_coordinate(22) == (1, 2, 1)
        assert codec_mixed.index_to_coordinate(29) == (2, 4, 1)

    @pytest.mark.parametrize(
        "dimensions", [(1,), (7,), (3, 5, 2), (4, 4, 4, 4), (2, 1, 3, 1, 2)]
    )
    def test_round_trip_every_index(self, dimensions) -> None:
        """Decoding then encoding returns every index unchanged."""
        codec = CoordinateCodec(dimensions)
        for index in range(codec.size):
            coord = codec.index_to_coordinate(index)
            assert codec.coordinate_to_index(coord) == index

    @pytest.mark.parametrize("coord", [(3, 0, 0), (0, 5, 0), (-1, 0, 0), (0, 0)])
    def test_bad_coordinate_raises(
        self, codec_mixed: CoordinateCodec, coord
    ) -> None:
        with pytest.raises(CoordinateError):
            codec_mixed.coordinate_to_index(coord)

    @pytest.mark.parametrize("index", [-1, 30, 100])
    def test_bad_index_raises(self, codec_mixed: CoordinateCodec, index) -> None:
        with pytest.raises(CoordinateError):
            codec_mixed.index_to_coordinate(index)

    @pytest.mark.parametrize("coord", [(1.0, 0, 0), (0, "1", 0), (0, 0, None)])
    def test_non_integer_coordinate_raises(
        self, codec_mixed: CoordinateCodec, coord
    ) -> None:
        with pytest.raises(CoordinateError, match="must hold integers"):
            codec_mixed.coordinate_to_index(coord)

    def test_coordinate_error_is_index_error(
        self, codec_mixed: CoordinateCodec
    ) -> None:
        with pytest.raises(IndexError):
            codec_mixed.coordinate_to_index((9, 9, 9))

    def test_iteration_follows_index_order(
        self, codec_mixed: CoordinateCodec
    ) -> None:
        indices = [
            codec_mixed.coordinate_to_index(coord)
            for coord in codec_mixed.iter_coordinates()
        ]
        assert indices == list(range(codec_mixed.size))


# ============================================================================
# 2D Projection Tests
# ============================================================================

class TestFlatten:
    """Test projection onto display axes."""

    def test_two_dimensions_is_identity(self) -> None:
        codec = CoordinateCodec((4, 4))
        assert codec.flatten_to_2d((2, 3)) == (2, 3)

    def test_one_dimension_is_a_row(self) -> None:
        assert CoordinateCodec((5,)).flatten_to_2d((3,)) == (3, 0)

    def test_four_dimensions_leave_gaps(self, codec_4d: CoordinateCodec) -> None:
        """Higher axes step over a sub-grid plus one gap cell."""
        assert codec_4d.flatten_to_2d((0, 0, 1, 0)) == (5, 0)
        assert codec_4d.flatten_to_2d((0, 0, 0, 1)) == (0, 5)
        assert codec_4d.flatten_to_2d((1, 2, 3, 0)) == (16, 2)

    def test_three_dimensions_mixed_sizes(
        self, codec_mixed: CoordinateCodec
    ) -> None:
        assert codec_mixed.flatten_to_2d((2, 4, 1)) == (6, 4)

    def test_projection_is_injective(self, codec_4d: CoordinateCodec) -> None:
        positions = {
            codec_4d.flatten_to_2d(coord) for coord in codec_4d.iter_coordinates()
        }
        assert len(positions) == codec_4d.size

    def test_out_of_bounds_raises(self, codec_4d: CoordinateCodec) -> None:
        with pytest.raises(CoordinateError):
            codec_4d.flatten_to_2d((4, 0, 0, 0))
