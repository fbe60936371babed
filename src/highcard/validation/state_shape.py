"""Import Shape Validators (IS.1-IS.5).

Rules:
- IS.1: State must not be None
- IS.2: State must be a mapping (or a GameState)
- IS.3: State must have a players list
- IS.4: currentRound must be a whole number (bool is not a number)
- IS.5: Every players entry must be readable as a Player

Roster length and round range are deliberately not checked here. An
imported roster is adopted verbatim; see state_consistency for invariants.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from highcard.engine.game_state import GameState
from highcard.models.player import Player
from .types import ValidationResult, ValidationViolation

CATEGORY = "Import Shape"


def _violation(rule_id: str, message: str, context: dict | None = None) -> ValidationViolation:
    return ValidationViolation(
        rule_id=rule_id,
        category=CATEGORY,
        message=message,
        context=context,
    )


def _is_whole_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and value.is_integer()


def validate_state_shape(state: Any) -> ValidationResult:
    """Check that state is well-formed enough to be imported.

    Accepts a GameState or a mapping in the wire shape
    ({"players": [...], "currentRound": n, "totalRounds": n}).

    Args:
        state: Candidate state from an external caller.

    Returns:
        ValidationResult; invalid results carry the first failing rule
        (and every unreadable player entry for IS.5).
    """
    if isinstance(state, GameState):
        return ValidationResult()

    # IS.1
    if state is None:
        return ValidationResult.from_violations([_violation("IS.1", "state is None")])

    # IS.2
    if not isinstance(state, Mapping):
        return ValidationResult.from_violations([_violation(
            "IS.2",
            f"state must be a mapping, got {type(state).__name__}",
        )])

    # IS.3
    players = state.get("players")
    if not isinstance(players, (list, tuple)):
        return ValidationResult.from_violations([_violation(
            "IS.3",
            "state must have a players list",
            {"players_type": type(players).__name__},
        )])

    # IS.4
    current_round = state.get("currentRound")
    if not _is_whole_number(current_round):
        return ValidationResult.from_violations([_violation(
            "IS.4",
            f"currentRound must be a whole number, got {current_round!r}",
        )])

    # IS.5
    violations: list[ValidationViolation] = []
    for index, entry in enumerate(players):
        if isinstance(entry, Player):
            continue
        try:
            Player.model_validate(entry)
        except ValidationError as e:
            violations.append(_violation(
                "IS.5",
                f"players[{index}] is not a valid player",
                {"index": index, "errors": e.error_count()},
            ))

    return ValidationResult.from_violations(violations)


__all__ = ['validate_state_shape']
