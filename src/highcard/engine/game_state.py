"""Game state snapshot for the high card game."""

from enum import Enum

import yaml
from pydantic import BaseModel, ConfigDict, Field

from highcard.models.player import Player


class GameStatus(str, Enum):
    """Progress of a game, derived from the round counter."""

    READY = "READY"
    PLAYING = "PLAYING"
    FINISHED = "FINISHED"


class GameState(BaseModel):
    """Serializable snapshot of a game.

    This is both the unit of undo history and the import/export contract.
    The wire field names are players, currentRound and totalRounds.
    """

    players: list[Player] = Field(default_factory=list)
    current_round: int = Field(default=0, alias="currentRound")
    total_rounds: int = Field(default=0, alias="totalRounds")

    model_config = ConfigDict(populate_by_name=True)

    def snapshot(self) -> "GameState":
        """Return a deep copy sharing no mutable substructure with this state."""
        return self.model_copy(deep=True)

    def to_dict(self) -> dict:
        """Convert to the wire shape with camelCase field names."""
        return self.model_dump(mode="json", by_alias=True)

    @property
    def status(self) -> GameStatus:
        """Derive READY/PLAYING/FINISHED from the round counter."""
        if self.total_rounds > 0 and self.current_round >= self.total_rounds:
            return GameStatus.FINISHED
        if self.current_round > 0:
            return GameStatus.PLAYING
        return GameStatus.READY

    def total_score(self) -> int:
        """Sum of all player scores."""
        return sum(player.score for player in self.players)

    # =========================================================================
    # Text encodings
    # =========================================================================

    def to_json(self) -> str:
        """Serialize to a JSON string in the wire shape."""
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, text: str) -> "GameState":
        """Parse a JSON string produced by to_json().

        Raises:
            pydantic.ValidationError: If the text is not a valid state.
        """
        return cls.model_validate_json(text)

    def to_yaml(self) -> str:
        """Serialize to a YAML string in the wire shape."""
        return yaml.dump(self.to_dict(), default_flow_style=False, allow_unicode=True, sort_keys=False)

    @classmethod
    def from_yaml(cls, text: str) -> "GameState":
        """Parse a YAML string produced by to_yaml().

        Raises:
            ValueError: If the document is not a mapping.
            pydantic.ValidationError: If the mapping is not a valid state.
        """
        data = yaml.safe_load(text)
        if not isinstance(data, dict):
            raise ValueError(f"expected a mapping, got {type(data).__name__}")
        return cls.model_validate(data)
