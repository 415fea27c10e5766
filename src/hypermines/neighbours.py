"""
Neighbour enumeration for N-dimensional boards.

The Moore neighbourhood of a cell is every cell reached by moving each
axis by -1, 0 or +1, except the cell itself.
"""
from typing import Optional, Sequence

from .coords import Coordinate, CoordinateCodec, MixedRadixCounter


# ============================================================================
# Neighbour Enumerator
# ============================================================================

class NeighbourEnumerator:
    """
    Lazy iterator over the in-bounds neighbours of one centre cell.

    Offsets are produced by an odometer over ``{-1, 0, 1}`` per axis.
    The all-zero offset and any offset that steps off the board are
    skipped. Yield order is not part of the contract.

    The enumerator is single pass; ``reset`` rewinds it, optionally onto
    a new centre.
    """

    def __init__(self, codec: CoordinateCodec, centre: Sequence[int]) -> None:
        self._codec = codec
        self._offsets = MixedRadixCounter([-1] * codec.n_dim, [2] * codec.n_dim)
        self._centre: Coordinate = codec.validate(centre)

    @property
    def centre(self) -> Coordinate:
        return self._centre

    def reset(self, centre: Optional[Sequence[int]] = None) -> None:
        """Rewind the offset odometer, moving to a new centre if given."""
        if centre is not None:
            self._centre = self._codec.validate(centre)
        self._offsets.reset()

    def __iter__(self) -> "NeighbourEnumerator":
        return self

    def __next__(self) -> Coordinate:
        dimensions = self._codec.dimensions
        for offset in self._offsets:
            if not any(offset):
                continue
            neighbour = tuple(
                value + delta for value, delta in zip(self._centre, offset)
            )
            if all(0 <= value < size for value, size in zip(neighbour, dimensions)):
                return neighbour
        raise StopIteration
