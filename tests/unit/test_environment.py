"""
Unit tests for CrossingEnv.

Tests the Gymnasium interface: spaces, reset/step, rewards and rendering.
"""
import numpy as np
import pytest
from minefield import Board, BoardConfig, CrossingEnv, scorable_game
from minefield.environment import (
    BLOCKED_REWARD,
    LOSS_REWARD,
    MINE_REWARD,
    WIN_REWARD,
)

UP, DOWN, LEFT, RIGHT = range(4)


@pytest.fixture
def env() -> CrossingEnv:
    """Create a default environment."""
    return CrossingEnv()


def use_board(env: CrossingEnv, board: Board, lives: int = 3) -> None:
    """Swap in a known board after reset."""
    env.game = scorable_game(board, lives, output=lambda _: None)


# ============================================================================
# Space Tests
# ============================================================================

class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space(self, env: CrossingEnv) -> None:
        assert env.action_space.n == 4

    def test_observation_space_matches_board(self) -> None:
        env = CrossingEnv(BoardConfig(7))
        assert env.observation_space.shape == (7, 7)


# ============================================================================
# Reset Tests
# ============================================================================

class TestReset:
    """Test episode reset."""

    def test_reset_returns_start_observation(self, env: CrossingEnv) -> None:
        obs, info = env.reset(seed=0)

        assert obs.shape == (5, 5)
        assert obs[0, 0] == 1
        assert env.observation_space.contains(obs)
        assert info["lives"] == 3
        assert info["moves"] == 0
        assert info["game_state"] == "PLAYING"
        assert info["position"] == (0, 0)

    def test_reset_places_hidden_mines(self, env: CrossingEnv) -> None:
        obs, _ = env.reset(seed=0)

        assert env.game.board.count_mines() == 5
        assert not np.any(obs == 2)

    def test_revealed_mines(self) -> None:
        env = CrossingEnv(reveal_mines=True)
        obs, _ = env.reset(seed=0)
        assert np.count_nonzero(obs == 2) == 5

    def test_same_seed_same_layout(self) -> None:
        first = CrossingEnv(reveal_mines=True)
        second = CrossingEnv(reveal_mines=True)
        obs_a, _ = first.reset(seed=11)
        obs_b, _ = second.reset(seed=11)
        assert np.array_equal(obs_a, obs_b)

    def test_step_before_reset_raises(self, env: CrossingEnv) -> None:
        with pytest.raises(RuntimeError, match="reset"):
            env.step(DOWN)


# ============================================================================
# Step Tests
# ============================================================================

class TestStep:
    """Test moves and rewards."""

    def test_blocked_move(self, env: CrossingEnv) -> None:
        env.reset(seed=0)
        _, reward, terminated, truncated, info = env.step(UP)

        assert reward == BLOCKED_REWARD
        assert terminated is False
        assert truncated is False
        assert info["moves"] == 0

    def test_plain_move(self, env: CrossingEnv) -> None:
        env.reset(seed=0)
        use_board(env, Board(BoardConfig(5)))

        obs, reward, terminated, _, info = env.step(RIGHT)

        assert reward == 0.0
        assert terminated is False
        assert obs[0, 1] == 1
        assert info["position"] == (0, 1)

    def test_mine_hit(self, env: CrossingEnv) -> None:
        env.reset(seed=0)
        use_board(env, Board.from_rows(["P  ", "X  ", "   "]))

        _, reward, terminated, _, info = env.step(DOWN)

        assert reward == MINE_REWARD
        assert terminated is False
        assert info["lives"] == 2

    def test_loss(self, env: CrossingEnv) -> None:
        env.reset(seed=0)
        use_board(env, Board.from_rows(["P  ", "X  ", "   "]), lives=1)

        _, reward, terminated, _, info = env.step(DOWN)

        assert reward == LOSS_REWARD
        assert terminated is True
        assert info["game_state"] == "LOST"

    def test_win_is_scored(self, env: CrossingEnv) -> None:
        env.reset(seed=0)
        use_board(env, Board(BoardConfig(3)))

        env.step(DOWN)
        _, reward, terminated, _, info = env.step(DOWN)

        assert reward == WIN_REWARD
        assert terminated is True
        assert info["score"] == 7


# ============================================================================
# Render Tests
# ============================================================================

class TestRender:
    """Test rendering modes."""

    def test_ansi_render(self) -> None:
        env = CrossingEnv(render_mode="ansi")
        env.reset(seed=0)
        assert env.render() == env.game.board.render()

    def test_human_render_prints(self, capsys) -> None:
        env = CrossingEnv(render_mode="human")
        env.reset(seed=0)
        assert env.render() is None
        assert "P" in capsys.readouterr().out

    def test_render_before_reset(self, env: CrossingEnv) -> None:
        assert env.render() is None
