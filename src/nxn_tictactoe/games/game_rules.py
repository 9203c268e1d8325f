"""
NumPy helpers that work on a raw board grid.

These only read the grid, so Move Sources can call them on the
read-only view they are handed.
"""

from __future__ import annotations

from typing import List

import numpy as np

from nxn_tictactoe.core.types import CellMark, Position


def in_bounds(board: np.ndarray, r: int, c: int) -> bool:
    """Return True if (r, c) is inside the board."""
    rows, cols = board.shape
    return 0 <= r < rows and 0 <= c < cols


def open_positions(board: np.ndarray) -> List[Position]:
    """
    Return every empty cell as a Position, in row-major order.

    np.argwhere already walks the grid row by row, so the ordering is
    stable for index-based choosers like the interactive player.
    """
    return [Position(int(r), int(c)) for r, c in np.argwhere(board == CellMark.EMPTY)]
