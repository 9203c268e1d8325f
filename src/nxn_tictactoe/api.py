"""
Public API for playing a game on the console.

Usage:
    from nxn_tictactoe import TicTacToe, RandomPlayer, HumanPlayer, start_game

    game = TicTacToe(3, RandomPlayer(), HumanPlayer())
    start_game(game)
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TYPE_CHECKING

from nxn_tictactoe.core.types import GameStatus, TurnResult
from nxn_tictactoe.display import board_string, result_string
from nxn_tictactoe.games.tic_tac_toe import TicTacToe

if TYPE_CHECKING:
    from nxn_tictactoe.players.base import MoveSource

logger = logging.getLogger(__name__)


def start_game(
    game: TicTacToe,
    max_illegal_attempts: Optional[int] = None,
    print_fn: Callable[..., None] = print,
) -> Optional[GameStatus]:
    """
    Play ``game`` to the end, printing the board after every move.

    Parameters
    ----------
    game : TicTacToe
        A fresh (or in-progress) game.
    max_illegal_attempts : int, optional
        Consecutive illegal candidates allowed per player before the game
        is abandoned. Unlimited when None.
    print_fn : callable
        Output sink; ``print`` by default.

    Returns
    -------
    The final GameStatus, or None if interrupted.
    """
    size = game.board.size
    print_fn(
        f"Starting {size}x{size} game: "
        f"{game.player_1.name} (X) vs {game.player_2.name} (O)"
    )
    print_fn(board_string(game.board.view()))

    def announce(player: "MoveSource", result: TurnResult) -> None:
        if result.illegal:
            print_fn(f"An illegal move was made by {player.name} at {result.position}. Try again")
        elif result.position is not None:
            print_fn(f"\n{player.name} played {result.position}")
            print_fn(board_string(game.board.view()))

    try:
        game.play(max_illegal_attempts=max_illegal_attempts, on_turn=announce)

        print_fn("\n" + "=" * 40)
        print_fn("GAME OVER")
        print_fn("=" * 40)
        print_fn(result_string(game.status, game.player_1.name, game.player_2.name))
        return game.status

    except KeyboardInterrupt:
        print_fn("\nInterrupted - game abandoned")
        return None
    except Exception:
        logger.exception("Fatal error in game loop")
        raise


__all__ = [
    "start_game",
]
