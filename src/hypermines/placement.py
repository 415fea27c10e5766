"""
Mine placement for N-dimensional boards.

Mines are sampled uniformly without replacement, one at a time, by
picking a random rank among the cells that are still open.
"""
import logging
import random
from typing import Optional

from .board import Board


logger = logging.getLogger(__name__)

# Width of one raw draw from the generator
RAND_BITS = 31
RAND_RANGE = 1 << RAND_BITS


# ============================================================================
# Random Helpers
# ============================================================================

def randint(rng: random.Random, n: int) -> int:
    """
    Return a uniformly distributed integer in ``[0, n)``.

    Raw draws at or above the largest multiple of n that fits in the
    generator's range are rejected, so the final modulo has no bias.

    Args:
        rng: Source of raw random bits.
        n: Exclusive upper bound.

    Returns:
        Random integer in [0, n).
    """
    if n < 1:
        raise ValueError(f"Upper bound must be positive, got {n}")
    if n > RAND_RANGE:
        raise ValueError(f"Upper bound {n} exceeds generator range {RAND_RANGE}")

    end = (RAND_RANGE // n) * n
    while True:
        value = rng.getrandbits(RAND_BITS)
        if value < end:
            return value % n


# ============================================================================
# Mine Placer
# ============================================================================

class MinePlacer:
    """
    Places mines on a board.

    Each mine costs one full scan of the board, which is fine for the
    board sizes a human can play.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the placer.

        Args:
            rng: Random generator to draw from. Takes precedence over seed.
            seed: Seed for a fresh generator when rng is not given.
        """
        self.rng = rng if rng is not None else random.Random(seed)

    def seed(self, seed: Optional[int]) -> None:
        """Reseed the underlying generator."""
        self.rng.seed(seed)

    def place(self, board: Board, requested_count: int) -> int:
        """
        Try to place requested_count mines.

        Stops early once no open cell is left. Neighbour counts are not
        recomputed.

        Args:
            board: Board to place mines on.
            requested_count: Number of mines wanted.

        Returns:
            Number of mines actually placed.
        """
        placed = 0
        for _ in range(requested_count):
            open_count = sum(1 for cell in board.cells if not cell.is_mine)
            if open_count == 0:
                logger.debug(
                    "Board saturated after %d of %d mines", placed, requested_count
                )
                break

            rank = randint(self.rng, open_count) + 1
            for cell in board.cells:
                if cell.is_mine:
                    continue
                rank -= 1
                if rank == 0:
                    cell.is_mine = True
                    placed += 1
                    break

        logger.info("Placed %d mines on the board", placed)
        return placed


def randomize(
    board: Board,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> int:
    """Place up to mine_count mines on board; returns the number placed."""
    return MinePlacer(rng=rng).place(board, mine_count)
