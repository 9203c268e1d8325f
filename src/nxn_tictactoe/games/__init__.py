"""
Games module - board engine and turn controller.
"""

from nxn_tictactoe.games.board import Board
from nxn_tictactoe.games.game_rules import in_bounds, open_positions
from nxn_tictactoe.games.tic_tac_toe import TicTacToe, GameOverError

__all__ = [
    "Board",
    "TicTacToe",
    "GameOverError",
    "in_bounds",
    "open_positions",
]
