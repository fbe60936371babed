"""High card validation module.

Files:
- types.py: Shared ValidationViolation, ValidationResult, ValidationSeverity
- state_shape.py: IS.1-IS.5 checks applied to externally supplied states
- state_consistency.py: SC.1-SC.7 state invariant checks
"""

from .types import ValidationResult, ValidationViolation, ValidationSeverity
from .state_shape import validate_state_shape
from .state_consistency import validate_state_consistency

__all__ = [
    "ValidationResult",
    "ValidationViolation",
    "ValidationSeverity",
    "validate_state_shape",
    "validate_state_consistency",
]
