"""
Command-line interface for playing N×N tic-tac-toe.
"""

import argparse
import logging
import sys
from typing import List, Optional

from nxn_tictactoe.api import start_game
from nxn_tictactoe.utils.config import (
    Config,
    PLAYER_KINDS,
    DEFAULT_BOARD_SIZE,
    DEFAULT_PLAYER_1,
    DEFAULT_PLAYER_2,
)
from nxn_tictactoe.utils.factory import create_game


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Play tic-tac-toe on an N×N board"
    )
    parser.add_argument(
        "--size", "-n",
        type=int,
        default=DEFAULT_BOARD_SIZE,
        help=f"Board dimension N (default: {DEFAULT_BOARD_SIZE})",
    )
    parser.add_argument(
        "--player-1",
        dest="player_1",
        choices=list(PLAYER_KINDS.keys()),
        default=DEFAULT_PLAYER_1,
        help=f"Who plays X (default: {DEFAULT_PLAYER_1})",
    )
    parser.add_argument(
        "--player-2",
        dest="player_2",
        choices=list(PLAYER_KINDS.keys()),
        default=DEFAULT_PLAYER_2,
        help=f"Who plays O (default: {DEFAULT_PLAYER_2})",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Seed for random players",
    )
    parser.add_argument(
        "--max-illegal",
        type=int,
        default=None,
        help="Consecutive illegal moves allowed before the game is abandoned (default: unlimited)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.size < 1:
        print(f"error: --size must be at least 1, got {args.size}", file=sys.stderr)
        return 2
    if args.max_illegal is not None and args.max_illegal < 1:
        print(f"error: --max-illegal must be positive, got {args.max_illegal}", file=sys.stderr)
        return 2

    config = Config(
        board_size=args.size,
        player_1=args.player_1,
        player_2=args.player_2,
        seed=args.seed,
        max_illegal_attempts=args.max_illegal,
    )
    game = create_game(config)

    status = start_game(game, max_illegal_attempts=config.max_illegal_attempts)
    return 0 if status is not None else 130


if __name__ == "__main__":
    sys.exit(main())
