"""
Configuration and player registry.
"""

from typing import Optional

from nxn_tictactoe.players import HumanPlayer, RandomPlayer


# ---------------------------------------------------------------------------
# Player Registry
# ---------------------------------------------------------------------------

PLAYER_KINDS = {
    "human": HumanPlayer,
    "random": RandomPlayer,
}

# Seed-aware kinds take a ``seed`` keyword
SEEDED_KINDS = {"random"}


def player_class(kind: str) -> type:
    """Registered class for a player kind; ValueError lists the choices."""
    if kind not in PLAYER_KINDS:
        available = ", ".join(PLAYER_KINDS.keys())
        raise ValueError(f"Unknown player kind: {kind}. Available: {available}")
    return PLAYER_KINDS[kind]


# ---------------------------------------------------------------------------
# Default Settings
# ---------------------------------------------------------------------------

DEFAULT_BOARD_SIZE = 3
DEFAULT_PLAYER_1 = "random"
DEFAULT_PLAYER_2 = "human"


def _player_seed(seed: Optional[int], seat: int) -> Optional[int]:
    """Distinct but reproducible seed per seat, so two random players differ."""
    if seed is None:
        return None
    return seed + seat


class Config:
    """Game configuration with sensible defaults."""

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        player_1: str = DEFAULT_PLAYER_1,
        player_2: str = DEFAULT_PLAYER_2,
        seed: Optional[int] = None,
        max_illegal_attempts: Optional[int] = None,
    ):
        if board_size < 1:
            raise ValueError(f"board_size must be at least 1, got {board_size}")
        if max_illegal_attempts is not None and max_illegal_attempts < 1:
            raise ValueError(
                f"max_illegal_attempts must be positive, got {max_illegal_attempts}"
            )
        # Unknown kinds fail here, before any game is built
        player_class(player_1)
        player_class(player_2)

        self.board_size = board_size
        self.player_1 = player_1
        self.player_2 = player_2
        self.seed = seed
        self.max_illegal_attempts = max_illegal_attempts

    def seed_for(self, seat: int) -> Optional[int]:
        return _player_seed(self.seed, seat)

