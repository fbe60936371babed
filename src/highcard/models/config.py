"""Game configuration for the high card game."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from highcard.models.player import DEFAULT_PLAYER_NAMES

DECK_SIZE = 40
MAX_CARD_VALUE = 12
POINTS_PER_SCORE = 1
NUM_PLAYERS = len(DEFAULT_PLAYER_NAMES)
TOTAL_ROUNDS = DECK_SIZE // NUM_PLAYERS


class GameConfig(BaseModel):
    """Rules and starting roster for a game.

    The deck size only determines how many rounds are played. Cards are
    drawn with replacement from [1, max_card_value] every round.
    """

    deck_size: int = DECK_SIZE
    max_card_value: int = MAX_CARD_VALUE
    points_per_score: int = POINTS_PER_SCORE
    player_names: tuple[str, ...] = Field(default=DEFAULT_PLAYER_NAMES)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_rules(self) -> "GameConfig":
        if self.deck_size < 1:
            raise ValueError(f"deck_size must be >= 1, got {self.deck_size}")
        if self.max_card_value < 1:
            raise ValueError(f"max_card_value must be >= 1, got {self.max_card_value}")
        if self.points_per_score < 0:
            raise ValueError(f"points_per_score must be >= 0, got {self.points_per_score}")
        if not self.player_names:
            raise ValueError("player_names must not be empty")
        if any(name == "" for name in self.player_names):
            raise ValueError("player names must be non-empty")
        return self

    @property
    def num_players(self) -> int:
        """Fixed roster size."""
        return len(self.player_names)

    @property
    def total_rounds(self) -> int:
        """Rounds in a full game: one card per player per round."""
        return self.deck_size // self.num_players


# 40 cards, 4 players, cards 1-12, one point per round win
STANDARD_GAME_CONFIG = GameConfig()
