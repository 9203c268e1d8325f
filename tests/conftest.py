"""
Shared test fixtures for nxn_tictactoe tests.

Design principles:
- Scripted players wherever a game needs to be driven deterministically
- Clean imports at module level
- Minimal, focused fixtures
"""

from typing import List, Tuple

import pytest

from nxn_tictactoe.games.board import Board
from nxn_tictactoe.games.tic_tac_toe import TicTacToe
from nxn_tictactoe.players.scripted import ScriptedPlayer


def split_moves(moves: List[Tuple[int, int]]) -> Tuple[List[Tuple[int, int]], List[Tuple[int, int]]]:
    """Split an alternating move list into player 1's and player 2's scripts."""
    return moves[0::2], moves[1::2]


def scripted_game(size: int, moves: List[Tuple[int, int]]) -> TicTacToe:
    """Game whose players replay ``moves`` alternately, starting with player 1."""
    p1_moves, p2_moves = split_moves(moves)
    return TicTacToe(
        size,
        ScriptedPlayer(p1_moves, name="Alice"),
        ScriptedPlayer(p2_moves, name="Bob"),
    )


# =============================================================================
# Move Sequences (3x3)
# =============================================================================

# X wins on row 0: (0,0) X, (1,1) O, (0,1) X, (2,2) O, (0,2) X
ROW_WIN_MOVES = [(0, 0), (1, 1), (0, 1), (2, 2), (0, 2)]

# X O X / X X O / O X O - no completed line
TIE_MOVES = [(0, 0), (0, 1), (0, 2), (1, 2), (1, 0), (2, 0), (1, 1), (2, 2), (2, 1)]


# =============================================================================
# Board Fixtures
# =============================================================================

@pytest.fixture
def board() -> Board:
    """Fresh 3x3 board."""
    return Board(3)


@pytest.fixture
def board4() -> Board:
    """Fresh 4x4 board."""
    return Board(4)


# =============================================================================
# Game Fixtures
# =============================================================================

@pytest.fixture
def make_game():
    """Factory for scripted games: make_game(size, alternating_moves)."""
    return scripted_game


@pytest.fixture
def row_win_moves() -> List[Tuple[int, int]]:
    return list(ROW_WIN_MOVES)


@pytest.fixture
def tie_moves() -> List[Tuple[int, int]]:
    return list(TIE_MOVES)


@pytest.fixture
def row_win_game() -> TicTacToe:
    """3x3 game scripted so player 1 completes row 0 on move 5."""
    return scripted_game(3, ROW_WIN_MOVES)


@pytest.fixture
def tie_game() -> TicTacToe:
    """3x3 game scripted to fill the board without a line."""
    return scripted_game(3, TIE_MOVES)


@pytest.fixture
def empty_script_game() -> TicTacToe:
    """3x3 game whose players have nothing to play."""
    return TicTacToe(3, ScriptedPlayer([], name="Alice"), ScriptedPlayer([], name="Bob"))
