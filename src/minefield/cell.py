"""
Cell module for the minefield crossing game.

Represents the content of a single grid position (empty, player or mine)
together with its text symbol and observation code.
"""
from enum import Enum


# ============================================================================
# Cell Content
# ============================================================================

class CellContent(Enum):
    """
    Possible contents of a cell.

    The value of each member is the symbol used when rendering the board.
    """

    EMPTY = " "
    PLAYER = "P"
    MINE = "X"

    @property
    def symbol(self) -> str:
        """Character drawn for this content."""
        return self.value

    @property
    def is_empty(self) -> bool:
        """Check if cell is empty."""
        return self is CellContent.EMPTY

    @property
    def is_player(self) -> bool:
        """Check if cell holds the player."""
        return self is CellContent.PLAYER

    @property
    def is_mine(self) -> bool:
        """Check if cell holds a mine."""
        return self is CellContent.MINE

    def to_observation(self, reveal_mines: bool = True) -> int:
        """
        Convert content to observation value for programmatic players.

        Args:
            reveal_mines: If False, mines are reported as empty cells.

        Returns:
            0: Empty cell (or hidden mine)
            1: Player
            2: Mine
        """
        if self is CellContent.PLAYER:
            return 1
        if self is CellContent.MINE and reveal_mines:
            return 2
        return 0

    @classmethod
    def from_symbol(cls, symbol: str) -> "CellContent":
        """
        Look up content by its rendered symbol.

        Raises:
            ValueError: If the symbol is unknown.
        """
        return cls(symbol)
