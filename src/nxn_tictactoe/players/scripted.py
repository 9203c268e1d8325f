"""
Player that replays a fixed list of moves.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, Union

import numpy as np

from nxn_tictactoe.core.types import Position
from nxn_tictactoe.players.base import MoveSource


class ScriptedPlayer(MoveSource):
    """
    Returns its moves in order, one per call, whether legal or not.
    Once the script runs out it abstains (returns None).
    """

    def __init__(
        self,
        moves: Iterable[Union[Position, Tuple[int, int]]],
        name: str = "Scripted Player",
    ):
        super().__init__(name)
        self._moves: List[Position] = [Position(int(r), int(c)) for r, c in moves]
        self._next = 0

    @property
    def remaining(self) -> int:
        return len(self._moves) - self._next

    def choose_move(self, board: np.ndarray) -> Optional[Position]:
        if self._next >= len(self._moves):
            return None
        move = self._moves[self._next]
        self._next += 1
        return move
