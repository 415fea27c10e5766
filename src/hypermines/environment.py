"""
Gymnasium environment wrapper for N-dimensional Minesweeper.

Provides a standard RL interface for training and evaluating agents.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board
from .cell import OBS_EXPOSED_MINE
from .layout import render_ansi
from .session import BoardConfig, GameSession


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for N-dimensional Minesweeper.

    Observation:
        Array of shape ``dimensions`` where ``obs[coord]`` is:
        - -1 = covered cell
        - -2 = flagged cell
        - -3 = wrong flag (after a loss)
        - -4 = exposed mine (after a loss)
        - 0.. = uncovered cell with neighbouring mine count

    Actions:
        Discrete action space with one action per cell. Action i
        uncovers the cell whose flat index is i.

    Rewards:
        - +1 for uncovering a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already uncovered/flagged)
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 4x4x4x4 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode

        # A count is bounded by the neighbourhood and by the other cells
        max_count = min(
            3 ** len(self.config.dimensions) - 1, self.config.total_cells - 1
        )
        self.observation_space = spaces.Box(
            low=OBS_EXPOSED_MINE,
            high=max_count,
            shape=self.config.dimensions,
            dtype=np.int32,
        )

        self.action_space = spaces.Discrete(self.config.total_cells)

        self._steps = 0

    @property
    def board(self) -> Board:
        """Board of the current episode."""
        return self.session.board

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for mine placement.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session.reset(seed=seed)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat index of the cell to uncover.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        coord = self.board.codec.index_to_coordinate(int(action))
        self._steps += 1

        reward = self._calculate_reward(coord)

        observation = self.board.get_observation()
        terminated = not self.session.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _calculate_reward(self, coord: Tuple[int, ...]) -> float:
        """
        Calculate reward for uncovering a cell.

        Args:
            coord: Cell to uncover.

        Returns:
            Reward value.
        """
        if not self.session.is_playing or not self.board.cell(coord).is_covered:
            return -0.1

        self.session.uncover(coord)

        if self.session.is_won:
            return 10.0
        if self.session.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        safe_cells = self.board.size - self.session.mines_placed
        revealed = sum(
            1 for cell in self.board.cells
            if cell.is_uncovered and not cell.is_mine
        )

        return {
            "steps": self._steps,
            "revealed": revealed,
            "total_safe": safe_cells,
            "mines": self.session.mines_placed,
            "game_state": self.session.game_state.name,
            "valid_actions": len(self.board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_ansi(self.board)
        if self.render_mode == "human":
            print(render_ansi(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        mask[self.board.get_valid_actions()] = True
        return mask
