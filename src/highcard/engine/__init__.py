"""Engine package - game state, history and round orchestration."""

from .game_state import GameState, GameStatus
from .state_history import StateHistory
from .card_source import CardSource, RandomCardSource, SequenceCardSource
from .scoreboard import ScoreboardEntry, rank_players, ordinal
from .high_card_game import HighCardGame

__all__ = [
    "GameState",
    "GameStatus",
    "StateHistory",
    "CardSource",
    "RandomCardSource",
    "SequenceCardSource",
    "ScoreboardEntry",
    "rank_players",
    "ordinal",
    "HighCardGame",
]
