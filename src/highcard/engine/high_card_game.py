"""HighCardGame - the game-state engine for the high card game."""

import logging
from typing import Any, Optional, TYPE_CHECKING

from highcard.engine.card_source import CardSource, RandomCardSource
from highcard.engine.game_state import GameState, GameStatus
from highcard.engine.scoreboard import ScoreboardEntry, rank_players
from highcard.engine.state_history import StateHistory
from highcard.models import Player, GameConfig, STANDARD_GAME_CONFIG, create_default_players

# Validation imports the engine package, so it is imported lazily
if TYPE_CHECKING:
    from highcard.validation import ValidationResult

logger = logging.getLogger(__name__)


class HighCardGame:
    """Game engine - runs rounds, keeps score and undo history.

    Game Flow:
        1. Every player draws one card from [1, max_card_value]
        2. Every player holding the highest card scores points_per_score
        3. Repeat until total_rounds rounds have been played

    Every fallible operation reports failure by returning False and leaves
    the state untouched. Nothing here raises across the operation boundary.
    Callers re-read state through the accessors after each call.
    """

    def __init__(
        self,
        saved_state: Any = None,
        config: GameConfig = STANDARD_GAME_CONFIG,
        card_source: Optional[CardSource] = None,
        seed: Optional[int] = None,
    ):
        """Initialize the HighCardGame.

        Args:
            saved_state: Optional state previously returned by export_state().
                         Adopted verbatim when well-formed (history still
                         starts empty); ignored otherwise.
            config: Rules and default roster.
            card_source: Optional source of card values. Defaults to a
                         RandomCardSource seeded with seed.
            seed: Optional random seed for reproducible games. Ignored when
                  card_source is given.
        """
        self._config = config
        self._card_source: CardSource = card_source if card_source is not None else RandomCardSource(seed)
        self._history = StateHistory()
        self._state = self._initial_state()

        if saved_state is not None and not self.import_state(saved_state):
            logger.debug("Ignoring malformed saved state, starting a new game")

    def _initial_state(self) -> GameState:
        return GameState(
            players=create_default_players(self._config.player_names),
            current_round=0,
            total_rounds=self._config.total_rounds,
        )

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def players(self) -> list[Player]:
        """Copies of the current roster in seat order."""
        return [player.model_copy() for player in self._state.players]

    @property
    def current_round(self) -> int:
        return self._state.current_round

    @property
    def total_rounds(self) -> int:
        return self._config.total_rounds

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def is_complete(self) -> bool:
        """True once no more rounds can be played."""
        return self._state.current_round >= self.total_rounds

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def history_depth(self) -> int:
        return len(self._history)

    def game_state(self) -> GameState:
        """Return an independent copy of the current state."""
        return self._state.snapshot()

    def scoreboard(self) -> list[ScoreboardEntry]:
        """Players ranked by score, highest first, ties in seat order."""
        return rank_players(self._state.players)

    # =========================================================================
    # Operations
    # =========================================================================

    def rename_player(self, index: int, new_name: str) -> bool:
        """Rename the player at index.

        Args:
            index: Seat index (0-based). Negative indices are rejected.
            new_name: Replacement name; must be non-empty.

        Returns:
            True if the name was changed, False if the call was ignored.
        """
        if isinstance(index, bool) or not isinstance(index, int):
            return False
        if not 0 <= index < len(self._state.players):
            return False
        if not isinstance(new_name, str) or not new_name:
            return False
        self._state.players[index].name = new_name
        return True

    def play_round(self) -> bool:
        """Play one round: snapshot, draw, score, advance.

        All cards are drawn and checked before anything changes, so a
        failing or misbehaving card source leaves the game untouched.

        Returns:
            True if a round was played, False if the game is already complete
            or the card source did not produce a valid card for every player.
        """
        if self.is_complete:
            return False

        cards = self._draw_cards()
        if cards is None:
            return False

        self._history.push(self._state)

        for player, card in zip(self._state.players, cards):
            player.card_held = card

        winners = self._resolve_round()
        self._state.current_round += 1

        logger.debug(
            "Round %d/%d: cards=%s winners=%s",
            self._state.current_round,
            self.total_rounds,
            [player.card_held for player in self._state.players],
            winners,
        )
        return True

    def _draw_cards(self) -> Optional[list[int]]:
        """Draw one card per player from the card source.

        Returns:
            Cards in seat order, or None if a draw failed or fell outside
            [1, max_card_value].
        """
        max_value = self._config.max_card_value
        cards: list[int] = []
        for seat in range(len(self._state.players)):
            try:
                card = self._card_source.draw(max_value)
            except Exception as e:
                logger.warning("Card draw failed for player %d: %s", seat, e)
                return None
            if isinstance(card, bool) or not isinstance(card, int) or not 1 <= card <= max_value:
                logger.warning("Card source gave %r for player %d, outside [1, %d]", card, seat, max_value)
                return None
            cards.append(card)
        return cards

    def _resolve_round(self) -> list[int]:
        """Award points to every player holding the highest card.

        Returns:
            Seats of the round winners (all tied leaders).
        """
        cards = [player.card_held for player in self._state.players if player.card_held is not None]
        if not cards:
            return []
        max_card = max(cards)
        winners = [
            seat for seat, player in enumerate(self._state.players)
            if player.card_held == max_card
        ]
        for seat in winners:
            self._state.players[seat].score += self._config.points_per_score
        return winners

    def undo_last_round(self) -> bool:
        """Restore the state saved before the most recent round.

        Returns:
            True if a round was undone, False if there is no history.
        """
        previous = self._history.pop()
        if previous is None:
            return False
        self._state = previous
        logger.debug("Undid round, back to round %d", self._state.current_round)
        return True

    def run_to_completion(self) -> list[Player]:
        """Play rounds until the game is complete.

        Each round pushes its own history entry, so the run can be undone
        one round at a time.

        Returns:
            The final roster.
        """
        while self.play_round():
            pass
        return self.players

    def export_state(self) -> dict:
        """Export {players, currentRound, totalRounds} as an independent dict."""
        return self._state.to_dict()

    def import_state(self, state: Any) -> bool:
        """Adopt an externally supplied state.

        The roster is deep-copied and adopted verbatim together with the
        round counter. Roster length is not checked against the config, and
        undo history is left as it is.

        Args:
            state: A GameState, or a mapping in the export_state() shape.

        Returns:
            True if the state was adopted, False if it was malformed.
        """
        from highcard.validation import validate_state_shape

        result = validate_state_shape(state)
        if not result:
            logger.debug("Rejected state import: %s", [v.message for v in result.violations])
            return False

        if isinstance(state, GameState):
            players = [player.model_copy(deep=True) for player in state.players]
            current_round = state.current_round
        else:
            players = [Player.model_validate(entry).model_copy(deep=True) for entry in state["players"]]
            current_round = int(state["currentRound"])

        self._state = GameState(
            players=players,
            current_round=current_round,
            total_rounds=self.total_rounds,
        )
        return True

    def reset_to_initial(self) -> None:
        """Start over: default roster, round 0, empty history."""
        self._state = self._initial_state()
        self._history.clear()

    def check_consistency(self) -> "ValidationResult":
        """Validate the live state against the game invariants.

        Returns:
            ValidationResult listing any violations.
        """
        from highcard.validation import ValidationResult, validate_state_consistency

        violations = validate_state_consistency(
            self._state,
            max_card_value=self._config.max_card_value,
            points_per_score=self._config.points_per_score,
        )
        return ValidationResult.from_violations(violations)
