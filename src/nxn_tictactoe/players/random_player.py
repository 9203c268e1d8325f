"""
Uniform random choice among the open cells.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from nxn_tictactoe.core.types import Position
from nxn_tictactoe.players.base import MoveSource


class RandomPlayer(MoveSource):
    """Picks any open cell with equal probability. Seedable for replays."""

    def __init__(self, name: str = "Random Player", seed: Optional[int] = None):
        super().__init__(name)
        self._rng = np.random.default_rng(seed)

    def choose_move(self, board: np.ndarray) -> Optional[Position]:
        moves = self.possible_moves(board)
        if not moves:
            return None
        return moves[int(self._rng.integers(len(moves)))]
