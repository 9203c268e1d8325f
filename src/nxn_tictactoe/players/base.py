"""
MoveSource - abstract base class for anything that can pick a move.

IMPORTANT CONTRACT:
-------------------
- Sources receive a READ-ONLY view of the grid (writeable flag cleared).
- Sources return a candidate, not a validated move. The game checks
  legality and asks again if the candidate is illegal.
- Returning None means "no move": the game ends as abandoned.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

import numpy as np

from nxn_tictactoe.core.types import Position
from nxn_tictactoe.games.game_rules import open_positions


class MoveSource(ABC):
    """A player seat's move supplier, plus the name used in announcements."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def choose_move(self, board: np.ndarray) -> Optional[Position]:
        """
        Return a candidate position for the current board, or None.

        Args:
            board: Read-only N×N int8 grid (0 empty, 1 X, 2 O).
        """
        pass

    def possible_moves(self, board: np.ndarray) -> List[Position]:
        """Open cells in row-major order."""
        return open_positions(board)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
