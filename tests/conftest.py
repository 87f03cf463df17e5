"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import List

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minefield import Board, BoardConfig


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 5x5 board without mines."""
    return Board()


@pytest.fixture
def small_board() -> Board:
    """Create a 3x3 board without mines."""
    return Board(BoardConfig(3))


@pytest.fixture
def seeded_board() -> Board:
    """Create a 5x5 board with a fixed seed."""
    return Board(BoardConfig(5), seed=1234)


@pytest.fixture
def mined_board() -> Board:
    """
    Create a 4x4 board with a known mine layout.

        P . . .
        X . . .
        . . X .
        . . . .
    """
    return Board.from_rows(["P   ", "X   ", "  X ", "    "])


# ============================================================================
# Output Fixtures
# ============================================================================

@pytest.fixture
def output() -> List[str]:
    """Collect lines printed by a game."""
    return []
