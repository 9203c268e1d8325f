"""
Players module - move sources that drive a game.
"""

from nxn_tictactoe.players.base import MoveSource
from nxn_tictactoe.players.human import HumanPlayer
from nxn_tictactoe.players.random_player import RandomPlayer
from nxn_tictactoe.players.scripted import ScriptedPlayer

__all__ = [
    "MoveSource",
    "HumanPlayer",
    "RandomPlayer",
    "ScriptedPlayer",
]
