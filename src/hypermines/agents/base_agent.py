"""
Base agent interface for Minesweeper AI.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional, Sequence

import numpy as np

from ..cell import OBS_COVERED
from ..coords import Coordinate, CoordinateCodec


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    All agents must implement the select_action method to choose
    which cell to uncover based on the current observation.
    """

    def __init__(self, dimensions: Sequence[int]) -> None:
        """
        Initialize the agent.

        Args:
            dimensions: Size of each board axis.
        """
        self.codec = CoordinateCodec(dimensions)
        self.total_cells = self.codec.size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: N-dimensional array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Flat index of the cell to uncover.
        """

    def action_to_coordinate(self, action: int) -> Coordinate:
        """Convert flat action index to a board coordinate."""
        return self.codec.index_to_coordinate(action)

    def coordinate_to_action(self, coord: Sequence[int]) -> int:
        """Convert a board coordinate to a flat action index."""
        return self.codec.coordinate_to_index(coord)

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Args:
            observation: N-dimensional array of cell states.

        Returns:
            Boolean mask where True = valid action.
        """
        # Observations index axis 0 fastest, matching flat indices
        flat_obs = observation.flatten(order="F")
        return flat_obs == OBS_COVERED

    def reset(self) -> None:
        """Reset agent state for new episode."""
