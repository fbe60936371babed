"""Ranked standings for the final scoreboard."""

from typing import Sequence
from pydantic import BaseModel

from highcard.models.player import Player


def ordinal(place: int) -> str:
    """English ordinal label for a 1-based place (1st, 2nd, 11th, 22nd)."""
    if 10 <= place % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(place % 10, "th")
    return f"{place}{suffix}"


class ScoreboardEntry(BaseModel):
    """One line of the ranked scoreboard."""

    place: int  # 1-based position in the ranking
    seat: int  # index in the roster
    name: str
    score: int

    @property
    def ordinal(self) -> str:
        return ordinal(self.place)

    def __str__(self) -> str:
        return f"{self.ordinal} {self.name} ({self.score})"


def rank_players(players: Sequence[Player]) -> list[ScoreboardEntry]:
    """Rank players by score, highest first.

    Ties keep roster order and do not share a place.

    Args:
        players: Roster in seat order.

    Returns:
        Scoreboard entries in ranked order.
    """
    order = sorted(range(len(players)), key=lambda seat: -players[seat].score)
    return [
        ScoreboardEntry(
            place=place,
            seat=seat,
            name=players[seat].name,
            score=players[seat].score,
        )
        for place, seat in enumerate(order, start=1)
    ]
