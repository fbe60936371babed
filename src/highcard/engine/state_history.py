"""Undo history: a stack of pre-round state snapshots."""

from typing import Optional
from pydantic import BaseModel, Field

from highcard.engine.game_state import GameState


class StateHistory(BaseModel):
    """Stack of GameState snapshots taken before each round.

    Every entry is a deep copy. Entries never share players with the live
    state or with each other, so restoring one reproduces the pre-round
    state exactly, including the cards that were held at that point.
    """

    entries: list[GameState] = Field(default_factory=list)

    def push(self, state: GameState) -> None:
        """Record a snapshot of state."""
        self.entries.append(state.snapshot())

    def pop(self) -> Optional[GameState]:
        """Remove and return the most recent snapshot.

        Returns:
            The snapshot, or None if the history is empty.
        """
        if not self.entries:
            return None
        return self.entries.pop()

    def clear(self) -> None:
        """Drop every snapshot."""
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)

    def __bool__(self) -> bool:
        return bool(self.entries)
