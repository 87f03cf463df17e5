"""
Minefield crossing game module.

Provides the board, the turn-based game loop in its single-player,
multiplayer and scorable variants, and a Gymnasium environment.
"""
from .cell import CellContent
from .board import Board, BoardConfig, MoveResult
from .loop import (
    GameLoop,
    GameState,
    TurnOutcome,
    TurnPolicy,
    SinglePlayerTurns,
    AlternatingTurns,
    ScoringPolicy,
    NoScoring,
    MovesScoring,
    parse_direction,
    single_player_game,
    multiplayer_game,
    scorable_game,
)
from .environment import CrossingEnv

__all__ = [
    "CellContent",
    "Board",
    "BoardConfig",
    "MoveResult",
    "GameLoop",
    "GameState",
    "TurnOutcome",
    "TurnPolicy",
    "SinglePlayerTurns",
    "AlternatingTurns",
    "ScoringPolicy",
    "NoScoring",
    "MovesScoring",
    "parse_direction",
    "single_player_game",
    "multiplayer_game",
    "scorable_game",
    "CrossingEnv",
]
