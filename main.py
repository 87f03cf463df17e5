#!/usr/bin/env python3
"""
Minefield crossing - Main entry point.

Usage:
    python main.py [play] [--mode {all,single,multi,scorable}]
                   [--size N] [--lives L] [--seed S]
"""
import argparse
from typing import Optional

from src.minefield.board import Board, BoardConfig
from src.minefield.loop import (
    GameState,
    multiplayer_game,
    scorable_game,
    single_player_game,
)


DEFAULT_SIZE = 5
DEFAULT_LIVES = 3
MODES = ("all", "single", "multi", "scorable")


def new_board(size: int, seed: Optional[int]) -> Board:
    """Create a fresh board for one game."""
    return Board(BoardConfig(size), seed=seed)


def play_single(args: argparse.Namespace) -> GameState:
    """Play a single-player game."""
    print("=== Single player ===")
    game = single_player_game(new_board(args.size, args.seed), args.lives)
    return game.play()


def play_multi(args: argparse.Namespace) -> GameState:
    """Play a two-player game."""
    print("=== Multiplayer ===")
    game = multiplayer_game(new_board(args.size, args.seed), args.lives)
    return game.play()


def play_scorable(args: argparse.Namespace) -> GameState:
    """Play a scored game and print the final score."""
    print("=== Scorable ===")
    game = scorable_game(new_board(args.size, args.seed), args.lives)
    state = game.play()
    print(f"Final Score: {game.score}")
    return state


def play(args: argparse.Namespace) -> None:
    """Run the selected game mode(s) in sequence."""
    if args.mode in ("all", "single"):
        play_single(args)
    if args.mode in ("all", "multi"):
        play_multi(args)
    if args.mode in ("all", "scorable"):
        play_scorable(args)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Minefield crossing - reach the far side without "
        "running out of lives"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play the game")

    # Options are accepted before and after "play"; the subcommand must not
    # reset values given before it.
    for target, use_defaults in ((parser, True), (play_parser, False)):
        def default(value):
            return value if use_defaults else argparse.SUPPRESS

        target.add_argument(
            "--mode",
            choices=MODES,
            default=default("all"),
            help="Game mode(s) to play",
        )
        target.add_argument(
            "--size",
            type=int,
            default=default(DEFAULT_SIZE),
            help="Board size (NxN)",
        )
        target.add_argument(
            "--lives",
            type=int,
            default=default(DEFAULT_LIVES),
            help="Number of lives",
        )
        target.add_argument(
            "--seed",
            type=int,
            default=default(None),
            help="Seed for mine placement",
        )

    return parser


def main(argv: Optional[list] = None) -> None:
    """Parse arguments and run the game."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        play(args)
    except ValueError as e:
        parser.error(str(e))


if __name__ == "__main__":
    main()
