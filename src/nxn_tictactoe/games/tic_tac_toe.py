"""
TicTacToe - turn controller for an N×N game.

Player 1 always plays X (+1 to line sums), player 2 always plays O (-1).
Marks are bound to seats at construction, so the same MoveSource object
may sit in both seats.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TYPE_CHECKING

from nxn_tictactoe.core.types import (
    ONGOING,
    CellMark,
    GameStatus,
    Phase,
    Position,
    TurnResult,
    Winner,
)
from nxn_tictactoe.games.board import Board

if TYPE_CHECKING:
    from nxn_tictactoe.players.base import MoveSource

logger = logging.getLogger(__name__)

_SEAT_MARKS = (CellMark.X, CellMark.O)
_SEAT_WINNERS = (Winner.PLAYER_1, Winner.PLAYER_2)


class GameOverError(RuntimeError):
    """Raised when a move is requested from a finished game."""


class TicTacToe:
    """
    Alternates two players over a Board and classifies each result.

    Illegal candidates are reported, never raised: the turn is not
    consumed and the same player stays active.
    """

    __slots__ = ("board", "player_1", "player_2", "_active", "_status")

    def __init__(self, size: int, player_1: "MoveSource", player_2: "MoveSource"):
        if player_1 is None or player_2 is None:
            raise ValueError("Both players must be provided")

        self.board = Board(size)
        self.player_1 = player_1
        self.player_2 = player_2
        self._active = 0  # seat index: 0 = player 1, 1 = player 2
        self._status = ONGOING

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def status(self) -> GameStatus:
        return self._status

    def is_over(self) -> bool:
        return self._status.is_over

    @property
    def active_player(self) -> "MoveSource":
        return self._seat(self._active)

    @property
    def inactive_player(self) -> "MoveSource":
        return self._seat(1 - self._active)

    @property
    def active_mark(self) -> CellMark:
        return _SEAT_MARKS[self._active]

    def _seat(self, index: int) -> "MoveSource":
        return self.player_1 if index == 0 else self.player_2

    def winner_name(self) -> Optional[str]:
        """Display name of the winning player, None for tie/abandoned/ongoing."""
        if self._status.winner is Winner.PLAYER_1:
            return self.player_1.name
        if self._status.winner is Winner.PLAYER_2:
            return self.player_2.name
        return None

    # ------------------------------------------------------------------
    # Turns
    # ------------------------------------------------------------------

    def _ensure_ongoing(self) -> None:
        if self._status.is_over:
            raise GameOverError("Game is over; no further moves are accepted")

    def play_turn(self) -> TurnResult:
        """Ask the active player for a move and apply it."""
        self._ensure_ongoing()

        player = self.active_player
        candidate = player.choose_move(self.board.snapshot())

        if candidate is None:
            self.abandon(f"{player.name} has no move")
            return TurnResult(self._status)

        return self.apply_move(candidate)

    def abandon(self, reason: str = "") -> GameStatus:
        """End the game with no winner."""
        self._ensure_ongoing()
        self._status = GameStatus(Phase.GAME_OVER, winner=None)
        logger.info("Game abandoned%s", f": {reason}" if reason else "")
        return self._status

    def apply_move(self, pos: Position) -> TurnResult:
        """
        Place the active player's mark at ``pos``.

        Returns a TurnResult with ``illegal=True`` (and nothing changed) if
        the cell is out of bounds or occupied.
        """
        self._ensure_ongoing()

        pos = Position(*pos)
        player = self.active_player
        mark = self.active_mark

        if not self.board.apply_move(pos, mark):
            logger.warning("Illegal move by %s at %s", player.name, pos)
            return TurnResult(self._status, position=pos, illegal=True)

        logger.info("%s played %s at %s", player.name, mark.symbol, pos)

        if self.board.check_win():
            self._status = GameStatus(Phase.GAME_OVER, _SEAT_WINNERS[self._active])
            logger.info("%s wins", player.name)
        elif self.board.is_full():
            self._status = GameStatus(Phase.GAME_OVER, Winner.TIE)
            logger.info("Board full; tie")
        else:
            self._active = 1 - self._active

        return TurnResult(self._status, position=pos)

    def play(
        self,
        max_illegal_attempts: Optional[int] = None,
        on_turn: Optional[Callable[["MoveSource", TurnResult], None]] = None,
    ) -> GameStatus:
        """
        Run turns until the game ends.

        An illegal candidate sends the same player back for another try.
        With ``max_illegal_attempts`` set, that many consecutive illegal
        candidates from one player abandon the game.

        ``on_turn(player, result)`` is called after every turn, before any
        abandonment for illegal moves.
        """
        illegal_streak = 0
        while not self.is_over():
            player = self.active_player
            result = self.play_turn()
            if on_turn is not None:
                on_turn(player, result)
            if not result.illegal:
                illegal_streak = 0
                continue

            illegal_streak += 1
            if max_illegal_attempts is not None and illegal_streak >= max_illegal_attempts:
                self.abandon(f"{player.name} made {illegal_streak} illegal moves in a row")

        return self._status

    def __repr__(self) -> str:
        return (
            f"TicTacToe(size={self.board.size}, player_1={self.player_1!r}, "
            f"player_2={self.player_2!r}, status={self._status})"
        )
