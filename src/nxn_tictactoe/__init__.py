"""
nxn_tictactoe - tic-tac-toe on an N×N board.

Win detection keeps a signed running sum per row, column and diagonal,
so each move costs O(1) to record and O(N) to check.

Quick Start:
    from nxn_tictactoe import TicTacToe, RandomPlayer, ScriptedPlayer

    game = TicTacToe(4, RandomPlayer(seed=1), RandomPlayer(seed=2))
    status = game.play()

Modules:
    core     - Value types (Position, CellMark, GameStatus)
    games    - Board engine and turn controller
    players  - Move sources (human, random, scripted)
    display  - Console rendering
"""

from nxn_tictactoe.api import start_game
from nxn_tictactoe.core import (
    Position,
    CellMark,
    Phase,
    Winner,
    GameStatus,
    TurnResult,
)
from nxn_tictactoe.games import Board, TicTacToe, GameOverError
from nxn_tictactoe.players import MoveSource, HumanPlayer, RandomPlayer, ScriptedPlayer

__version__ = "1.0.0"

__all__ = [
    # Main API
    "start_game",
    "TicTacToe",
    "Board",
    "GameOverError",
    # Players
    "MoveSource",
    "HumanPlayer",
    "RandomPlayer",
    "ScriptedPlayer",
    # Types
    "Position",
    "CellMark",
    "Phase",
    "Winner",
    "GameStatus",
    "TurnResult",
]
