"""State Consistency Validators (SC.1-SC.7).

Rules:
- SC.1: 0 <= current_round <= total_rounds
- SC.2: Every card held lies in [1, max_card_value]
- SC.3: Scores are non-negative
- SC.4: Nobody holds a card before the first round
- SC.5: Everybody holds a card once a round has been played
- SC.6: Player names are non-empty
- SC.7: Total score cannot exceed rounds played x players x points per win
"""

from highcard.engine.game_state import GameState
from .types import ValidationViolation, ValidationSeverity

CATEGORY = "State Consistency"


def validate_state_consistency(
    state: GameState,
    max_card_value: int,
    points_per_score: int = 1,
) -> list[ValidationViolation]:
    """Validate state consistency rules SC.1-SC.7.

    Args:
        state: Game state to check
        max_card_value: Highest card value a draw can produce
        points_per_score: Points awarded to each round winner

    Returns:
        List of validation violations (empty if valid)
    """
    violations: list[ValidationViolation] = []

    # SC.1: round counter in range
    if not 0 <= state.current_round <= state.total_rounds:
        violations.append(ValidationViolation(
            rule_id="SC.1",
            category=CATEGORY,
            message=f"current_round={state.current_round} outside [0, {state.total_rounds}]",
            severity=ValidationSeverity.ERROR,
            context={"current_round": state.current_round, "total_rounds": state.total_rounds}
        ))

    for seat, player in enumerate(state.players):
        # SC.2: card range
        if player.card_held is not None and not 1 <= player.card_held <= max_card_value:
            violations.append(ValidationViolation(
                rule_id="SC.2",
                category=CATEGORY,
                message=f"Player {seat}: card {player.card_held} outside [1, {max_card_value}]",
                severity=ValidationSeverity.ERROR,
                context={"seat": seat, "card_held": player.card_held}
            ))

        # SC.3: non-negative score
        if player.score < 0:
            violations.append(ValidationViolation(
                rule_id="SC.3",
                category=CATEGORY,
                message=f"Player {seat}: negative score {player.score}",
                severity=ValidationSeverity.ERROR,
                context={"seat": seat, "score": player.score}
            ))

        # SC.4 / SC.5: hands match the round counter
        if state.current_round == 0 and player.card_held is not None:
            violations.append(ValidationViolation(
                rule_id="SC.4",
                category=CATEGORY,
                message=f"Player {seat}: holds card {player.card_held} before round 1",
                severity=ValidationSeverity.ERROR,
                context={"seat": seat, "card_held": player.card_held}
            ))
        elif state.current_round > 0 and player.card_held is None:
            violations.append(ValidationViolation(
                rule_id="SC.5",
                category=CATEGORY,
                message=f"Player {seat}: no card after {state.current_round} round(s)",
                severity=ValidationSeverity.ERROR,
                context={"seat": seat, "current_round": state.current_round}
            ))

        # SC.6: name
        if not player.name:
            violations.append(ValidationViolation(
                rule_id="SC.6",
                category=CATEGORY,
                message=f"Player {seat}: empty name",
                severity=ValidationSeverity.WARNING,
                context={"seat": seat}
            ))

    # SC.7: score bound
    max_total = max(state.current_round, 0) * len(state.players) * points_per_score
    total = state.total_score()
    if total > max_total:
        violations.append(ValidationViolation(
            rule_id="SC.7",
            category=CATEGORY,
            message=f"Total score {total} exceeds {max_total} possible after {state.current_round} round(s)",
            severity=ValidationSeverity.ERROR,
            context={"total_score": total, "max_total": max_total}
        ))

    return violations


__all__ = ['validate_state_consistency']
