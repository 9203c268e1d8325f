"""
Tests for nxn_tictactoe.players

Tests the HumanPlayer, RandomPlayer and ScriptedPlayer move sources.
"""

from typing import List

import numpy as np
import pytest

from nxn_tictactoe.core.types import CellMark, Position
from nxn_tictactoe.games.board import Board
from nxn_tictactoe.players import HumanPlayer, MoveSource, RandomPlayer, ScriptedPlayer


def _inputs(*answers: str):
    """input() replacement returning canned answers, then EOF."""
    queue = list(answers)

    def fake_input(prompt: str = "") -> str:
        if not queue:
            raise EOFError
        return queue.pop(0)

    return fake_input


@pytest.fixture
def printed() -> List[str]:
    return []


@pytest.fixture
def full_view() -> np.ndarray:
    board = Board(2)
    for pos, mark in [((0, 0), CellMark.X), ((0, 1), CellMark.O),
                      ((1, 0), CellMark.X), ((1, 1), CellMark.O)]:
        board.apply_move(Position(*pos), mark)
    return board.view()


class TestMoveSource:
    """Base class tests."""

    def test_abstract(self):
        """MoveSource cannot be instantiated directly."""
        with pytest.raises(TypeError):
            MoveSource("nobody")

    def test_possible_moves(self, board: Board):
        """possible_moves lists open cells row-major."""
        board.apply_move(Position(0, 0), CellMark.X)
        player = ScriptedPlayer([])
        moves = player.possible_moves(board.view())
        assert len(moves) == 8
        assert moves[0] == (0, 1)

    def test_name_and_repr(self):
        """Name is stored and shows in repr."""
        player = RandomPlayer(name="Robo")
        assert player.name == "Robo"
        assert "Robo" in repr(player)


class TestRandomPlayer:
    """RandomPlayer tests."""

    def test_picks_open_cell(self, board: Board):
        """Choice is always an open cell."""
        board.apply_move(Position(1, 1), CellMark.X)
        player = RandomPlayer(seed=7)
        for _ in range(20):
            move = player.choose_move(board.view())
            assert board.is_legal(move)

    def test_only_open_cell(self, board: Board):
        """With one open cell, that cell is chosen."""
        mark = CellMark.X
        for r in range(3):
            for c in range(3):
                if (r, c) != (2, 1):
                    board.apply_move(Position(r, c), mark)
        assert RandomPlayer(seed=0).choose_move(board.view()) == (2, 1)

    def test_full_board_returns_none(self, full_view: np.ndarray):
        """No open cells means no move."""
        assert RandomPlayer(seed=0).choose_move(full_view) is None

    def test_seed_reproducible(self, board4: Board):
        """Same seed, same sequence."""
        a = RandomPlayer(seed=42)
        b = RandomPlayer(seed=42)
        view = board4.view()
        assert [a.choose_move(view) for _ in range(10)] == [b.choose_move(view) for _ in range(10)]

    def test_covers_cells(self, board: Board):
        """Over many draws, every open cell comes up."""
        player = RandomPlayer(seed=3)
        seen = {player.choose_move(board.view()) for _ in range(300)}
        assert seen == set(board.open_positions())


class TestScriptedPlayer:
    """ScriptedPlayer tests."""

    def test_replays_in_order(self, board: Board):
        """Moves come back in order, then None."""
        player = ScriptedPlayer([(0, 0), Position(2, 2)])
        assert player.remaining == 2
        assert player.choose_move(board.view()) == Position(0, 0)
        assert player.choose_move(board.view()) == Position(2, 2)
        assert player.remaining == 0
        assert player.choose_move(board.view()) is None

    def test_does_not_validate(self, board: Board):
        """Illegal moves are passed through for the game to reject."""
        player = ScriptedPlayer([(9, 9)])
        assert player.choose_move(board.view()) == (9, 9)


class TestHumanPlayer:
    """HumanPlayer tests."""

    def test_reads_index(self, board: Board, printed):
        """Entered index selects from the listed open cells."""
        board.apply_move(Position(0, 0), CellMark.X)
        player = HumanPlayer(input_fn=_inputs("1"), print_fn=printed.append)
        assert player.choose_move(board.view()) == Position(0, 2)

    def test_lists_options(self, board: Board, printed):
        """Each open cell is listed with its index."""
        player = HumanPlayer(name="Ann", input_fn=_inputs("0"), print_fn=printed.append)
        player.choose_move(board.view())
        assert any("Ann" in line for line in printed)
        assert "  0: (0, 0)" in printed
        assert "  8: (2, 2)" in printed

    def test_reprompts_on_bad_input(self, board: Board, printed):
        """Non-numbers and out-of-range indices are rejected until valid."""
        player = HumanPlayer(
            input_fn=_inputs("abc", "", "42", "-1", " 4 "),
            print_fn=printed.append,
        )
        assert player.choose_move(board.view()) == Position(1, 1)
        assert sum("Invalid input" in line for line in printed) == 2
        assert sum("Out of range" in line for line in printed) == 2

    def test_eof_abstains(self, board: Board, printed):
        """End of input means no move."""
        player = HumanPlayer(input_fn=_inputs(), print_fn=printed.append)
        assert player.choose_move(board.view()) is None

    def test_full_board_returns_none(self, full_view: np.ndarray, printed):
        """No open cells: no prompt, no move."""
        def no_input(prompt=""):
            raise AssertionError("should not prompt")

        player = HumanPlayer(input_fn=no_input, print_fn=printed.append)
        assert player.choose_move(full_view) is None
        assert printed == []
