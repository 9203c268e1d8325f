"""
Factory functions for creating players and games.
"""

from typing import Optional

from nxn_tictactoe.games.tic_tac_toe import TicTacToe
from nxn_tictactoe.players.base import MoveSource
from nxn_tictactoe.utils.config import SEEDED_KINDS, Config, player_class


def create_player(kind: str, name: Optional[str] = None, seed: Optional[int] = None) -> MoveSource:
    """
    Create a move source from the PLAYER_KINDS registry.

    Args:
        kind: Registry key (e.g., "random")
        name: Display name; the class default when omitted
        seed: RNG seed, used by seed-aware kinds only

    Returns:
        New MoveSource instance
    """
    cls = player_class(kind)

    kwargs = {}
    if name is not None:
        kwargs["name"] = name
    if kind in SEEDED_KINDS:
        kwargs["seed"] = seed

    return cls(**kwargs)


def create_game(config: Config) -> TicTacToe:
    """
    Create a fresh game with both seats filled from the config.

    Players are named by seat ("Player 1 (random)") so two players of the
    same kind can be told apart in announcements.
    """
    player_1 = create_player(
        config.player_1, name=f"Player 1 ({config.player_1})", seed=config.seed_for(1)
    )
    player_2 = create_player(
        config.player_2, name=f"Player 2 ({config.player_2})", seed=config.seed_for(2)
    )
    return TicTacToe(config.board_size, player_1, player_2)
