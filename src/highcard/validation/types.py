"""Validation types shared across all validators."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel


class ValidationSeverity(str, Enum):
    """Severity level of a validation violation."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ValidationViolation(BaseModel):
    """A single rule violation detected during validation."""

    rule_id: str  # e.g., "IS.1", "SC.2"
    category: str  # e.g., "Import Shape", "State Consistency"
    message: str  # Human-readable description
    severity: ValidationSeverity = ValidationSeverity.ERROR
    context: Optional[dict] = None  # Additional context for debugging


class ValidationResult(BaseModel):
    """Result of a validation check."""

    is_valid: bool = True
    violations: list[ValidationViolation] = []

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def from_violations(cls, violations: list[ValidationViolation]) -> "ValidationResult":
        """Build a result that is valid only if no violation is an error."""
        has_error = any(v.severity == ValidationSeverity.ERROR for v in violations)
        return cls(is_valid=not has_error, violations=violations)
