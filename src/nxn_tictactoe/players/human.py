"""
Interactive player reading moves from the console.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from nxn_tictactoe.core.types import Position
from nxn_tictactoe.players.base import MoveSource


class HumanPlayer(MoveSource):
    """
    Lists the open cells with an index and reads the chosen index.

    ``input_fn`` / ``print_fn`` default to the builtins and are swapped
    out in tests.
    """

    def __init__(
        self,
        name: str = "Human Player",
        input_fn: Callable[[str], str] = input,
        print_fn: Callable[..., None] = print,
    ):
        super().__init__(name)
        self._input = input_fn
        self._print = print_fn

    def choose_move(self, board: np.ndarray) -> Optional[Position]:
        moves = self.possible_moves(board)
        # Shouldn't happen: the game ends on a full board before asking
        if not moves:
            return None

        self._print(f"\nYour turn ({self.name})")
        for index, move in enumerate(moves):
            self._print(f"  {index}: {move}")

        last = len(moves) - 1
        while True:
            try:
                raw = self._input(f"Move index (0-{last}): ").strip()
            except EOFError:
                return None

            try:
                index = int(raw)
            except ValueError:
                self._print(f"Invalid input. Enter a number between 0 and {last}")
                continue

            if 0 <= index <= last:
                return moves[index]
            self._print(f"Out of range. Enter a number between 0 and {last}")
