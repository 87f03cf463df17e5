"""
Game loop module for the minefield crossing game.

A single turn-based state machine drives every variant of the game.
Variants differ only in their turn policy (who moves next) and scoring
policy (what a win is worth).
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Callable, Dict, Iterable, Iterator, Optional, Tuple

from .board import Board


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of a game."""

    PLAYING = auto()
    QUIT = auto()
    LOST = auto()
    WON = auto()


QUIT_TOKEN = "quit"

DIRECTIONS: Dict[str, Tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}

INVALID_TOKEN_MESSAGE = (
    "Invalid move. Please enter up, down, left, right, or quit."
)
QUIT_MESSAGE = "Game over! You quit."
MOVE_PROMPT = "enter your move (up, down, left, right, or quit): "


def parse_direction(token: str) -> Optional[Tuple[int, int]]:
    """
    Translate a move token into a (delta_row, delta_col) pair.

    Tokens are case-insensitive and surrounding whitespace is ignored.

    Returns:
        The delta, or None if the token is not a direction.
    """
    return DIRECTIONS.get(token.strip().lower())


@dataclass(frozen=True)
class TurnOutcome:
    """
    Result of a single turn.

    Attributes:
        token: Move token as read.
        state: Game state after the turn.
        moved: Whether a move was applied to the board.
        hit_mine: Whether the move landed on a mine.
        player: Player who acted (None in single-player games).
    """

    token: str
    state: GameState
    moved: bool = False
    hit_mine: bool = False
    player: Optional[int] = None


# ============================================================================
# Turn Policies
# ============================================================================

class TurnPolicy(ABC):
    """Decides who is moving and how messages are attributed."""

    @property
    @abstractmethod
    def current_player(self) -> Optional[int]:
        """Player whose turn it is, or None if there is only one."""

    @abstractmethod
    def advance(self) -> None:
        """Hand the turn over after a successful, non-final move."""

    @abstractmethod
    def prompt(self) -> str:
        """Prompt shown when reading a move."""

    @abstractmethod
    def status_prefix(self) -> str:
        """Text placed before the lives/moves status."""

    @abstractmethod
    def lost_message(self) -> str:
        """Message printed when the last life is lost."""

    @abstractmethod
    def won_message(self) -> str:
        """Message printed when the far side is reached."""


class SinglePlayerTurns(TurnPolicy):
    """One player makes every move."""

    @property
    def current_player(self) -> Optional[int]:
        return None

    def advance(self) -> None:
        pass

    def prompt(self) -> str:
        return "Enter your move (up, down, left, right, or quit): "

    def status_prefix(self) -> str:
        return ""

    def lost_message(self) -> str:
        return "Game over! You hit a mine."

    def won_message(self) -> str:
        return "Congratulations! You reached the other side."


class AlternatingTurns(TurnPolicy):
    """
    Players take turns moving the same token.

    The turn passes only after a move was actually applied.
    """

    def __init__(self, num_players: int = 2) -> None:
        if num_players < 2:
            raise ValueError("Alternating turns need at least 2 players")
        self.num_players = num_players
        self._current = 1

    @property
    def current_player(self) -> Optional[int]:
        return self._current

    def advance(self) -> None:
        self._current = (self._current % self.num_players) + 1

    def prompt(self) -> str:
        return f"Player {self._current}, {MOVE_PROMPT}"

    def status_prefix(self) -> str:
        return f"Player {self._current} - "

    def lost_message(self) -> str:
        return (
            f"Player {self._current} hit a mine. "
            f"Player {self._current} loses."
        )

    def won_message(self) -> str:
        return f"Player {self._current} reached the other side and wins!"


# ============================================================================
# Scoring Policies
# ============================================================================

class ScoringPolicy(ABC):
    """Decides what a game is worth."""

    @abstractmethod
    def score_win(self, board_size: int, moves: int) -> int:
        """Score awarded on reaching the far side."""

    @abstractmethod
    def status_suffix(self, score: int) -> str:
        """Text appended to the lives/moves status."""


class NoScoring(ScoringPolicy):
    """Games are not scored."""

    def score_win(self, board_size: int, moves: int) -> int:
        return 0

    def status_suffix(self, score: int) -> str:
        return ""


class MovesScoring(ScoringPolicy):
    """Fewer moves score higher: ``size * size - moves``."""

    def score_win(self, board_size: int, moves: int) -> int:
        return board_size * board_size - moves

    def status_suffix(self, score: int) -> str:
        return f", Score: {score}"


# ============================================================================
# Game Loop
# ============================================================================

class GameLoop:
    """
    Turn-based minefield crossing game.

    Each turn the board is rendered, a move token is read and applied.
    The game ends when the player quits, runs out of lives, or reaches
    the last row.
    """

    def __init__(
        self,
        board: Board,
        lives: int,
        turns: Optional[TurnPolicy] = None,
        scoring: Optional[ScoringPolicy] = None,
        read_move: Optional[Callable[[str], str]] = None,
        output: Optional[Callable[[str], None]] = None,
    ) -> None:
        """
        Initialize the game.

        Args:
            board: Board owned by this game.
            lives: Number of mine hits the players can absorb.
            turns: Turn policy (default: single player).
            scoring: Scoring policy (default: no scoring).
            read_move: Callable taking a prompt and returning a move token
                (default: input).
            output: Callable used for every line of text output
                (default: print).
        """
        if lives < 0:
            raise ValueError("Lives cannot be negative")

        self.board = board
        self.lives = lives
        self.moves = 0
        self.score = 0
        self.state = GameState.PLAYING
        self.turns = turns or SinglePlayerTurns()
        self.scoring = scoring or NoScoring()
        self._read_move = read_move or input
        self._output = output or print

    @property
    def current_player(self) -> Optional[int]:
        """Player whose turn it is (None in single-player games)."""
        return self.turns.current_player

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self.state == GameState.PLAYING

    # ========================================================================
    # Rendering
    # ========================================================================

    def status_line(self) -> str:
        """Lives, moves and (when scored) score of the current game."""
        return (
            f"{self.turns.status_prefix()}"
            f"Lives: {self.lives}, Moves: {self.moves}"
            f"{self.scoring.status_suffix(self.score)}"
        )

    def render(self) -> None:
        """Print the board followed by the status line."""
        self._output(self.board.render())
        self._output(self.status_line())

    # ========================================================================
    # Turn Handling
    # ========================================================================

    def step(self, token: str) -> TurnOutcome:
        """
        Apply a single move token.

        Args:
            token: One of up, down, left, right or quit (any case).

        Returns:
            Outcome of the turn.

        Raises:
            RuntimeError: If the game is already over.
        """
        if not self.is_playing:
            raise RuntimeError(f"Game is over ({self.state.name})")

        player = self.current_player
        command = token.strip().lower()

        if command == QUIT_TOKEN:
            self.state = GameState.QUIT
            self._output(QUIT_MESSAGE)
            return TurnOutcome(token, self.state, player=player)

        delta = parse_direction(command)
        if delta is None:
            self._output(INVALID_TOKEN_MESSAGE)
            return TurnOutcome(token, self.state, player=player)

        position = self.board.find_player_position()
        if position is None:
            # move_player rejects the move below
            position = (0, 0)
        new_row = position[0] + delta[0]
        new_col = position[1] + delta[1]

        result = self.board.move_player(new_row, new_col)
        if not result.ok:
            self._output(result.error)
            return TurnOutcome(token, self.state, player=player)

        self.moves += 1
        if result.hit_mine:
            self.lives -= 1

        if result.hit_mine and self.lives <= 0:
            self.state = GameState.LOST
            self._output(self.turns.lost_message())
        elif new_row == self.board.size - 1:
            self.state = GameState.WON
            self.score = self.scoring.score_win(self.board.size, self.moves)
            self._output(self.turns.won_message())
        else:
            self.turns.advance()

        return TurnOutcome(
            token,
            self.state,
            moved=True,
            hit_mine=result.hit_mine,
            player=player,
        )

    def play(self, moves: Optional[Iterable[str]] = None) -> GameState:
        """
        Place mines and run turns until the game ends.

        Args:
            moves: Optional move tokens to play instead of reading input.
                If they run out first, the game is left in progress.

        Returns:
            Final game state.
        """
        self.board.place_mines()
        tokens = iter(moves) if moves is not None else self._console_moves()

        while self.is_playing:
            self.render()
            token = next(tokens, None)
            if token is None:
                break
            self.step(token)

        return self.state

    def _console_moves(self) -> Iterator[str]:
        """Read move tokens until input ends, which counts as quitting."""
        while True:
            try:
                yield self._read_move(self.turns.prompt())
            except (EOFError, KeyboardInterrupt):
                self._output("")
                yield QUIT_TOKEN


# ============================================================================
# Game Variants
# ============================================================================

def single_player_game(board: Board, lives: int, **kwargs) -> GameLoop:
    """Create a single-player game."""
    return GameLoop(board, lives, **kwargs)


def multiplayer_game(
    board: Board, lives: int, num_players: int = 2, **kwargs
) -> GameLoop:
    """Create a game where players alternate moves and share lives."""
    return GameLoop(board, lives, turns=AlternatingTurns(num_players), **kwargs)


def scorable_game(board: Board, lives: int, **kwargs) -> GameLoop:
    """Create a single-player game scored by moves taken on a win."""
    return GameLoop(board, lives, scoring=MovesScoring(), **kwargs)
