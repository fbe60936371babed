"""Player model and default roster."""

from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Player(BaseModel):
    """Represents a player at the table.

    Identity is positional (index in the roster), not by name.
    Names may collide.
    """

    name: str
    card_held: Optional[int] = Field(default=None, alias="cardHeld")
    score: int = 0

    model_config = ConfigDict(populate_by_name=True)

    def to_dict(self) -> dict:
        """Convert to the wire shape ({name, cardHeld, score})."""
        return {
            "name": self.name,
            "cardHeld": self.card_held,
            "score": self.score,
        }


DEFAULT_PLAYER_NAMES: tuple[str, ...] = (
    "Player 1",
    "Player 2",
    "Player 3",
    "Player 4",
)


def create_default_players(names: tuple[str, ...] = DEFAULT_PLAYER_NAMES) -> list[Player]:
    """Build a fresh starting roster.

    Every call returns new Player objects, so callers may mutate the
    result freely without touching any shared template.

    Args:
        names: Player names in seat order.

    Returns:
        List of players with no card held and a score of zero.
    """
    return [Player(name=name) for name in names]
