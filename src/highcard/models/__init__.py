"""Models package."""

from highcard.models.player import (
    Player,
    DEFAULT_PLAYER_NAMES,
    create_default_players,
)
from highcard.models.config import (
    GameConfig,
    STANDARD_GAME_CONFIG,
    DECK_SIZE,
    MAX_CARD_VALUE,
    POINTS_PER_SCORE,
    NUM_PLAYERS,
    TOTAL_ROUNDS,
)

__all__ = [
    "Player",
    "DEFAULT_PLAYER_NAMES",
    "create_default_players",
    "GameConfig",
    "STANDARD_GAME_CONFIG",
    "DECK_SIZE",
    "MAX_CARD_VALUE",
    "POINTS_PER_SCORE",
    "NUM_PLAYERS",
    "TOTAL_ROUNDS",
]
