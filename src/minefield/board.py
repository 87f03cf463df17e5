"""
Board module for the minefield crossing game.

Implements the square game grid with mine placement, player lookup,
and move validation/application.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .cell import CellContent


# ============================================================================
# Constants
# ============================================================================

PLAYER_START = (0, 0)

PLAYER_NOT_FOUND = "Player not found on the board."
INVALID_MOVE = "Invalid move."


@dataclass
class BoardConfig:
    """
    Configuration for a minefield board.

    Attributes:
        size: Number of rows and columns (the grid is square).
    """

    size: int = 5

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if self.size < 1:
            raise ValueError("Board size must be positive")

    @property
    def num_mines(self) -> int:
        """One mine per row."""
        return self.size


# ============================================================================
# Move Result
# ============================================================================

@dataclass(frozen=True)
class MoveResult:
    """
    Outcome of applying a move to the board.

    Attributes:
        ok: Whether the player was moved.
        position: Requested destination (row, col).
        previous: Content of the destination before the move (None on failure).
        error: Reason the move was rejected (None on success).
    """

    ok: bool
    position: Tuple[int, int]
    previous: Optional[CellContent] = None
    error: Optional[str] = None

    @classmethod
    def success(
        cls, position: Tuple[int, int], previous: CellContent
    ) -> "MoveResult":
        return cls(ok=True, position=position, previous=previous)

    @classmethod
    def failure(cls, position: Tuple[int, int], error: str) -> "MoveResult":
        return cls(ok=False, position=position, error=error)

    @property
    def hit_mine(self) -> bool:
        """Check if the player stepped onto a mine."""
        return self.ok and self.previous is CellContent.MINE


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minefield game board.

    Manages the grid of cells, mine placement and player movement.
    Mine layouts come from ``rng`` so they are reproducible for a fixed seed.
    """

    config: BoardConfig = field(default_factory=lambda: BoardConfig())
    seed: Optional[int] = None
    rng: Optional[np.random.Generator] = field(default=None, repr=False)
    _grid: List[List[CellContent]] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        """Set up the random source and the initial grid."""
        if self.rng is None:
            self.rng = np.random.default_rng(self.seed)
        self.initialize()

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from rendered rows, e.g. ``["P  ", " X ", "   "]``.

        Raises:
            ValueError: If the rows are not square or do not hold
                exactly one player.
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise ValueError("Rows must form a square grid")
        board = cls(BoardConfig(size))
        board._grid = [
            [CellContent.from_symbol(symbol) for symbol in row] for row in rows
        ]
        players = sum(
            1 for row in board._grid for cell in row if cell.is_player
        )
        if players != 1:
            raise ValueError(f"Expected exactly one player, found {players}")
        return board

    @property
    def size(self) -> int:
        """Number of rows (and columns)."""
        return self.config.size

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def initialize(self) -> None:
        """Reset every cell to empty and put the player at the start."""
        self._grid = [
            [CellContent.EMPTY for _ in range(self.size)]
            for _ in range(self.size)
        ]
        start_row, start_col = PLAYER_START
        self._grid[start_row][start_col] = CellContent.PLAYER

    def place_mines(self) -> None:
        """
        Place ``num_mines`` mines on random free cells.

        Cells are drawn uniformly until enough of them were free.

        Raises:
            ValueError: If there are fewer free cells than mines to place.
        """
        num_mines = self.config.num_mines
        free_cells = sum(
            1 for row in self._grid for cell in row if cell.is_empty
        )
        if free_cells < num_mines:
            raise ValueError(
                f"Cannot place {num_mines} mines on {free_cells} free cells"
            )

        mines_placed = 0
        while mines_placed < num_mines:
            row = int(self.rng.integers(self.size))
            col = int(self.rng.integers(self.size))
            if self.place_mine(row, col):
                mines_placed += 1

    def place_mine(self, row: int, col: int) -> bool:
        """
        Place a single mine.

        Returns:
            True if a mine was placed, False if the cell is out of bounds
            or already holds the player or a mine.
        """
        if not self.is_valid_move(row, col):
            return False
        if not self._grid[row][col].is_empty:
            return False
        self._grid[row][col] = CellContent.MINE
        return True

    # ========================================================================
    # Movement (Mid-level)
    # ========================================================================

    def is_valid_move(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.size and 0 <= col < self.size

    def find_player_position(self) -> Optional[Tuple[int, int]]:
        """Get the player's (row, col), or None if there is no player."""
        for row in range(self.size):
            for col in range(self.size):
                if self._grid[row][col].is_player:
                    return row, col
        return None

    def move_player(self, row: int, col: int) -> MoveResult:
        """
        Move the player to the given position.

        Stepping onto a mine is allowed; the mine is replaced by the player
        and reported through ``MoveResult.previous``.

        Args:
            row: Destination row.
            col: Destination column.

        Returns:
            Successful result with the destination's previous content, or a
            failure (board unchanged) if there is no player or the
            destination is out of bounds.
        """
        position = (row, col)
        current = self.find_player_position()
        if current is None:
            return MoveResult.failure(position, PLAYER_NOT_FOUND)
        if not self.is_valid_move(row, col):
            return MoveResult.failure(position, INVALID_MOVE)

        previous = self._grid[row][col]
        current_row, current_col = current
        self._grid[current_row][current_col] = CellContent.EMPTY
        self._grid[row][col] = CellContent.PLAYER
        return MoveResult.success(position, previous)

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    def peek_cell(self, row: int, col: int) -> Optional[CellContent]:
        """Get cell content at position, or None if invalid."""
        if not self.is_valid_move(row, col):
            return None
        return self._grid[row][col]

    def count_mines(self) -> int:
        """Count mines currently on the board."""
        return sum(1 for row in self._grid for cell in row if cell.is_mine)

    def get_observation(self, reveal_mines: bool = True) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D int8 array where:
                0 = empty (or hidden mine)
                1 = player
                2 = mine
        """
        obs = np.zeros((self.size, self.size), dtype=np.int8)
        for row in range(self.size):
            for col in range(self.size):
                obs[row, col] = self._grid[row][col].to_observation(
                    reveal_mines
                )
        return obs

    def render(self) -> str:
        """Render board as text, one line per row."""
        return "\n".join(
            "".join(cell.symbol + " " for cell in row) for row in self._grid
        )
