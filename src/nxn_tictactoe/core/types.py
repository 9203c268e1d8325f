"""
Core types shared by the board engine, turn controller and players.

- Position: (row, col) cell coordinate
- CellMark: cell content, int8-compatible encoding
- Phase / Winner / GameStatus: outcome reported after every move
- TurnResult: what a single turn attempt produced
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import NamedTuple, Optional


class Position(NamedTuple):
    """A board cell. Not validated here; the board decides legality."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"


class CellMark(IntEnum):
    """
    Cell content, stored directly in the int8 grid:
        0 = empty
        1 = X (player 1)
        2 = O (player 2)
    """

    EMPTY = 0
    X = 1
    O = 2

    @property
    def sign(self) -> int:
        """Contribution of this mark to a line sum (+1 / -1 / 0)."""
        return _SIGNS[self]

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SIGNS = {CellMark.EMPTY: 0, CellMark.X: 1, CellMark.O: -1}
_SYMBOLS = {CellMark.EMPTY: " ", CellMark.X: "X", CellMark.O: "O"}


class Phase(Enum):
    ONGOING = auto()
    GAME_OVER = auto()


class Winner(Enum):
    TIE = auto()
    PLAYER_1 = auto()
    PLAYER_2 = auto()


@dataclass(frozen=True)
class GameStatus:
    """
    Outcome value returned after each move attempt.

    A finished game with ``winner=None`` was abandoned: a player produced
    no move. That is distinct from ``Winner.TIE`` (full board, no line).
    """

    phase: Phase = Phase.ONGOING
    winner: Optional[Winner] = None

    @property
    def is_over(self) -> bool:
        return self.phase is Phase.GAME_OVER

    @property
    def is_tie(self) -> bool:
        return self.is_over and self.winner is Winner.TIE

    @property
    def is_abandoned(self) -> bool:
        return self.is_over and self.winner is None


ONGOING = GameStatus()


@dataclass(frozen=True)
class TurnResult:
    """Result of one turn attempt. ``illegal`` turns consume nothing."""

    status: GameStatus
    position: Optional[Position] = None
    illegal: bool = False
