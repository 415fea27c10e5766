"""
Random agent for Minesweeper.

Serves as a baseline by selecting random valid actions.
"""
from typing import Optional, Sequence

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Agent that selects covered cells uniformly at random.

    This provides a baseline for comparing other agents.
    """

    def __init__(
        self,
        dimensions: Sequence[int] = (4, 4, 4, 4),
        seed: Optional[int] = None,
    ) -> None:
        """
        Initialize the random agent.

        Args:
            dimensions: Size of each board axis.
            seed: Random seed for reproducibility.
        """
        super().__init__(dimensions)
        self.rng = np.random.default_rng(seed)

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select a random valid action.

        Args:
            observation: N-dimensional array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Random action index from valid actions.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        valid_indices = np.flatnonzero(valid_actions)

        if len(valid_indices) == 0:
            # No valid actions, return any action (will be invalid)
            return 0

        return int(self.rng.choice(valid_indices))
