"""
Coordinate module for N-dimensional Minesweeper.

Converts between N-dimensional coordinates, flat cell indices and the
2D projection used to lay the board out on a screen. Axis 0 is always
the least significant axis.
"""
import numbers
from typing import Iterator, List, Sequence, Tuple

from .errors import ConfigurationError, CoordinateError


Coordinate = Tuple[int, ...]


# ============================================================================
# Mixed-Radix Counter
# ============================================================================

class MixedRadixCounter:
    """
    Odometer over per-axis ranges ``[lows[n], highs[n])``.

    Axis 0 turns fastest. The counter is its own iterator: it yields the
    starting vector first, then every successor until the odometer wraps
    back to the start. Call ``reset`` to run it again.
    """

    def __init__(self, lows: Sequence[int], highs: Sequence[int]) -> None:
        if len(lows) != len(highs):
            raise ValueError("lows and highs must have the same length")
        self._lows: List[int] = list(lows)
        self._highs: List[int] = list(highs)
        self._digits: List[int] = []
        self._started = False
        self._exhausted = False
        self.reset()

    def reset(self) -> None:
        """Rewind the counter to its starting vector."""
        self._digits = list(self._lows)
        self._started = False
        self._exhausted = not self._lows or any(
            high <= low for low, high in zip(self._lows, self._highs)
        )

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    def _advance(self) -> bool:
        """Increment with carry. Returns False once the counter wraps."""
        for axis, high in enumerate(self._highs):
            self._digits[axis] += 1
            if self._digits[axis] < high:
                return True
            self._digits[axis] = self._lows[axis]
        return False

    def __iter__(self) -> "MixedRadixCounter":
        return self

    def __next__(self) -> Coordinate:
        if self._exhausted:
            raise StopIteration
        if self._started:
            if not self._advance():
                self._exhausted = True
                raise StopIteration
        else:
            self._started = True
        return tuple(self._digits)


# ============================================================================
# Coordinate Codec
# ============================================================================

class CoordinateCodec:
    """
    Mixed-radix arithmetic for a board of the given dimensions.

    ``index = sum(coord[n] * prod(dimensions[:n]))``
    """

    def __init__(self, dimensions: Sequence[int]) -> None:
        dimensions = tuple(dimensions)
        if not dimensions:
            raise ConfigurationError("Board needs at least one dimension")
        if any(size < 1 for size in dimensions):
            raise ConfigurationError(
                f"Board dimensions must be positive, got {dimensions}"
            )

        self.dimensions: Tuple[int, ...] = dimensions
        self.strides: Tuple[int, ...] = self._compute_strides(dimensions)
        self.size: int = self.strides[-1] * dimensions[-1]

    @staticmethod
    def _compute_strides(dimensions: Tuple[int, ...]) -> Tuple[int, ...]:
        strides = []
        multiplier = 1
        for size in dimensions:
            strides.append(multiplier)
            multiplier *= size
        return tuple(strides)

    @property
    def n_dim(self) -> int:
        return len(self.dimensions)

    def contains(self, coord: Sequence[int]) -> bool:
        """Check if coordinate has the right arity and lies on the board."""
        if len(coord) != self.n_dim:
            return False
        return all(0 <= value < size for value, size in zip(coord, self.dimensions))

    def validate(self, coord: Sequence[int]) -> Coordinate:
        """Return coord as a tuple, or raise CoordinateError."""
        if not all(isinstance(value, numbers.Integral) for value in coord):
            raise CoordinateError(f"Coordinate {tuple(coord)} must hold integers")
        if not self.contains(coord):
            raise CoordinateError(
                f"Coordinate {tuple(coord)} is outside board {self.dimensions}"
            )
        return tuple(coord)

    def coordinate_to_index(self, coord: Sequence[int]) -> int:
        """Encode a coordinate as a flat index."""
        coord = self.validate(coord)
        return sum(value * stride for value, stride in zip(coord, self.strides))

    def index_to_coordinate(self, index: int) -> Coordinate:
        """Decode a flat index into a coordinate."""
        if not 0 <= index < self.size:
            raise CoordinateError(
                f"Index {index} is outside board of {self.size} cells"
            )
        coord = []
        for size in self.dimensions:
            index, value = divmod(index, size)
            coord.append(value)
        return tuple(coord)

    def flatten_to_2d(self, coord: Sequence[int]) -> Tuple[int, int]:
        """
        Project a coordinate onto two display axes.

        Even axes accumulate into x and odd axes into y. After each axis
        the axis multiplier grows by one extra unit, which leaves a one
        cell gap between neighbouring sub-grids.

        Args:
            coord: Coordinate to project.

        Returns:
            (x, y) cell position on the 2D surface.
        """
        coord = self.validate(coord)
        position = [0, 0]
        multiplier = [1, 1]
        for axis, (value, size) in enumerate(zip(coord, self.dimensions)):
            target = axis & 1
            position[target] += value * multiplier[target]
            multiplier[target] = multiplier[target] * size + 1
        return position[0], position[1]

    def iter_coordinates(self) -> Iterator[Coordinate]:
        """Every coordinate on the board, in flat index order."""
        return MixedRadixCounter([0] * self.n_dim, self.dimensions)
