"""
Board - N×N grid with incremental line sums.

Uses int8 grid:
    0 = empty
    1 = X (player 1)
    2 = O (player 2)

Every applied mark adds its sign (+1 for X, -1 for O) to the sum of its
row, its column and any diagonal it lies on. A line is complete exactly
when its sum reaches +N or -N, so win detection scans 2N + 2 integers
instead of the grid.
"""

from __future__ import annotations

from typing import List

import numpy as np

from nxn_tictactoe.core.types import CellMark, Position
from nxn_tictactoe.games.game_rules import in_bounds, open_positions

# diag_sums indices
MAIN_DIAGONAL = 0
ANTI_DIAGONAL = 1


class Board:
    """Square board owning the grid and its row/column/diagonal sums."""

    __slots__ = ("_size", "_grid", "_row_sums", "_col_sums", "_diag_sums", "_move_count")

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)):
            raise ValueError(f"Board size must be an integer, got {size!r}")
        if size < 1:
            raise ValueError(f"Board size must be at least 1, got {size}")

        self._size = int(size)
        self._grid = np.zeros((self._size, self._size), dtype=np.int8)
        # int32: sums range over [-N, N], which overflows int8 past N = 127
        self._row_sums = np.zeros(self._size, dtype=np.int32)
        self._col_sums = np.zeros(self._size, dtype=np.int32)
        self._diag_sums = np.zeros(2, dtype=np.int32)
        self._move_count = 0

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        return self._size

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def row_sums(self) -> np.ndarray:
        return self._row_sums.copy()

    @property
    def col_sums(self) -> np.ndarray:
        return self._col_sums.copy()

    @property
    def diag_sums(self) -> np.ndarray:
        return self._diag_sums.copy()

    def view(self) -> np.ndarray:
        """Read-only view of the live grid, for rendering."""
        v = self._grid.view()
        v.flags.writeable = False
        return v

    def snapshot(self) -> np.ndarray:
        """
        Read-only copy of the grid, handed to move sources.

        A view can be made writeable again by its holder; a copy keeps any
        such write away from the grid and its sums.
        """
        g = self._grid.copy()
        g.flags.writeable = False
        return g

    def cell(self, pos: Position) -> CellMark:
        """Mark at an in-bounds position."""
        if not self.in_bounds(pos):
            raise IndexError(f"Position {pos} is outside a {self._size}x{self._size} board")
        return CellMark(int(self._grid[pos[0], pos[1]]))

    def open_positions(self) -> List[Position]:
        return open_positions(self._grid)

    # ------------------------------------------------------------------
    # Legality
    # ------------------------------------------------------------------

    def in_bounds(self, pos: Position) -> bool:
        return in_bounds(self._grid, pos[0], pos[1])

    def is_open(self, pos: Position) -> bool:
        """
        True if the cell is empty. Out-of-bounds positions are never open;
        checked first so negative indices can't wrap around the grid.
        """
        if not self.in_bounds(pos):
            return False
        return bool(self._grid[pos[0], pos[1]] == CellMark.EMPTY)

    def is_legal(self, pos: Position) -> bool:
        return self.in_bounds(pos) and self.is_open(pos)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def apply_move(self, pos: Position, mark: CellMark) -> bool:
        """
        Place ``mark`` at ``pos`` and update the line sums.

        Returns False, leaving the board untouched, if the position is not
        legal or the mark is EMPTY.
        """
        if mark == CellMark.EMPTY or not self.is_legal(pos):
            return False

        r, c = int(pos[0]), int(pos[1])
        sign = CellMark(mark).sign

        self._grid[r, c] = mark
        self._move_count += 1

        self._row_sums[r] += sign
        self._col_sums[c] += sign
        if r == c:
            self._diag_sums[MAIN_DIAGONAL] += sign
        # Not elif: the centre of an odd board is on both diagonals
        if r == self._size - 1 - c:
            self._diag_sums[ANTI_DIAGONAL] += sign

        return True

    # ------------------------------------------------------------------
    # Terminal checks
    # ------------------------------------------------------------------

    def _all_sums(self) -> np.ndarray:
        return np.concatenate((self._row_sums, self._col_sums, self._diag_sums))

    def check_win(self) -> bool:
        """True if any row, column or diagonal sum is +N or -N."""
        return bool(np.any(np.abs(self._all_sums()) == self._size))

    def winning_mark(self) -> CellMark:
        """Owner of a completed line, or EMPTY if there is none."""
        sums = self._all_sums()
        if np.any(sums == self._size):
            return CellMark.X
        if np.any(sums == -self._size):
            return CellMark.O
        return CellMark.EMPTY

    def is_full(self) -> bool:
        return self._move_count == self._size * self._size

    def __repr__(self) -> str:
        return f"Board(size={self._size}, move_count={self._move_count})"
