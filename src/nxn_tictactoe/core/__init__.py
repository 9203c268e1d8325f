"""
Core module - value types used throughout the engine.
"""

from nxn_tictactoe.core.types import (
    Position,
    CellMark,
    Phase,
    Winner,
    GameStatus,
    TurnResult,
    ONGOING,
)

__all__ = [
    "Position",
    "CellMark",
    "Phase",
    "Winner",
    "GameStatus",
    "TurnResult",
    "ONGOING",
]
