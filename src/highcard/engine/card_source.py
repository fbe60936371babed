"""Card sources: where each round's card values come from.

The engine draws one value per player per round, independently and with
replacement. Swapping the source makes games reproducible:

    game = HighCardGame(seed=42)                                   # seeded RNG
    game = HighCardGame(card_source=SequenceCardSource([3, 12, 7, 12]))
"""

import random
from typing import Iterable, Optional, Protocol


class CardSource(Protocol):
    """Protocol for anything that can draw a card value."""

    def draw(self, max_value: int) -> int:
        """Return a card value in [1, max_value]."""
        ...


class RandomCardSource:
    """Uniform draws from a private random.Random instance.

    Each source owns its generator, so games never share random state.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize the source.

        Args:
            seed: Optional seed. Same seed = same sequence of draws.
        """
        self._rng = random.Random(seed)

    def draw(self, max_value: int) -> int:
        return self._rng.randint(1, max_value)


class SequenceCardSource:
    """Replays a fixed sequence of values, cycling when exhausted.

    Useful for tests and for replaying a known game.
    """

    def __init__(self, values: Iterable[int]):
        self._values = list(values)
        if not self._values:
            raise ValueError("SequenceCardSource needs at least one value")
        self._index = 0

    def draw(self, max_value: int) -> int:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        if not 1 <= value <= max_value:
            raise ValueError(f"scripted card {value} outside [1, {max_value}]")
        return value

    @property
    def draws(self) -> int:
        """Number of values drawn so far."""
        return self._index
