"""
Console rendering of boards and results.
"""

from __future__ import annotations

import numpy as np

from nxn_tictactoe.core.types import CellMark, GameStatus, Winner


def board_string(board: np.ndarray) -> str:
    """Box-drawing picture of an N×N grid."""
    n = board.shape[0]
    bar = "───"
    lines = ["╭" + "┬".join([bar] * n) + "╮"]
    for i in range(n):
        row = "│ " + " │ ".join(CellMark(int(board[i, j])).symbol for j in range(n)) + " │"
        lines.append(row)
        if i < n - 1:
            lines.append("├" + "┼".join([bar] * n) + "┤")
    lines.append("╰" + "┴".join([bar] * n) + "╯")
    return "\n".join(lines)


def result_string(status: GameStatus, player_1_name: str, player_2_name: str) -> str:
    if not status.is_over:
        return "Game in progress"
    if status.winner is Winner.PLAYER_1:
        return f"{player_1_name} wins!"
    if status.winner is Winner.PLAYER_2:
        return f"{player_2_name} wins!"
    if status.winner is Winner.TIE:
        return "It's a tie"
    return "Game abandoned"
