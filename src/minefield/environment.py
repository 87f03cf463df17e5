"""
Gymnasium environment wrapper for the minefield crossing game.

Provides a standard RL interface to the scorable single-player game.
"""
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .loop import GameLoop, GameState, TurnOutcome, scorable_game


# ============================================================================
# Constants
# ============================================================================

ACTIONS = ("up", "down", "left", "right")

WIN_REWARD = 10.0
LOSS_REWARD = -10.0
MINE_REWARD = -1.0
BLOCKED_REWARD = -0.1


def _discard(_: str) -> None:
    """Output sink for games driven by the environment."""


# ============================================================================
# Crossing Environment
# ============================================================================

class CrossingEnv(gym.Env):
    """
    Gymnasium environment for the minefield crossing game.

    Observation:
        2D int8 array where:
        - 0 = empty cell (mines are hidden unless ``reveal_mines``)
        - 1 = player
        - 2 = mine

    Actions:
        Discrete(4): 0 = up, 1 = down, 2 = left, 3 = right.

    Rewards:
        - +10 for reaching the last row
        - -10 for losing the last life
        - -1 for stepping on a mine and surviving
        - -0.1 for moving off the board
        - 0 otherwise
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        lives: int = 3,
        reveal_mines: bool = False,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 5x5).
            lives: Lives per episode.
            reveal_mines: Whether observations show mine positions.
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.lives = lives
        self.reveal_mines = reveal_mines
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=0,
            high=2,
            shape=(self.config.size, self.config.size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(len(ACTIONS))

        self.game: Optional[GameLoop] = None

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)

        board = Board(self.config, rng=self.np_random)
        board.place_mines()
        self.game = scorable_game(board, self.lives, output=_discard)

        return self._get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one move.

        Args:
            action: Direction index into ``ACTIONS``.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        if self.game is None:
            raise RuntimeError("Call reset() before step()")

        outcome = self.game.step(ACTIONS[int(action)])
        reward = self._calculate_reward(outcome)

        terminated = not self.game.is_playing
        truncated = False

        return (
            self._get_observation(),
            reward,
            terminated,
            truncated,
            self._get_info(),
        )

    def _calculate_reward(self, outcome: TurnOutcome) -> float:
        """Reward for the outcome of a single move."""
        if outcome.state == GameState.WON:
            return WIN_REWARD
        if outcome.state == GameState.LOST:
            return LOSS_REWARD
        if not outcome.moved:
            return BLOCKED_REWARD
        if outcome.hit_mine:
            return MINE_REWARD
        return 0.0

    def _get_observation(self) -> np.ndarray:
        return self.game.board.get_observation(self.reveal_mines)

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "lives": self.game.lives,
            "moves": self.game.moves,
            "score": self.game.score,
            "game_state": self.game.state.name,
            "position": self.game.board.find_player_position(),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.game is None:
            return None
        if self.render_mode == "ansi":
            return self.game.board.render()
        if self.render_mode == "human":
            print(self.game.board.render())
        return None
