"""Validation models — constraint kinds, violations, results and error types.

All validation is deterministic: same shape + same record → same result.
Malformed input is reported as violations, never raised.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class ConstraintKind(str, Enum):
    """Tag carried by every constraint and every violation it produces."""

    REQUIRED = "required"
    OBJECT = "object"
    STRING = "string"
    LENGTH = "length"
    MATCHES = "matches"
    UUID = "uuid"
    EMAIL = "email"
    URL = "url"
    NUMBER = "number"
    INTEGER = "integer"
    RANGE = "range"
    BOOLEAN = "boolean"
    DATE = "date"
    ENUM = "enum"
    ARRAY = "array"
    ARRAY_SIZE = "array_size"
    NESTED = "nested"
    UNKNOWN = "unknown"


class Violation(BaseModel):
    """A single failed constraint on one field, array element or nested field."""

    field: str  # Path such as "answers[0].questionId"; "" is the record itself
    kind: ConstraintKind
    message: str

    model_config = {"use_enum_values": True, "frozen": True}


class ValidationResult(BaseModel):
    """Outcome of one validation run — accepted value or violation list, never both."""

    shape: str
    accepted: bool
    value: Optional[dict[str, Any]] = None
    violations: list[Violation] = Field(default_factory=list)

    @classmethod
    def build(cls, shape: str, value: Optional[dict], violations: list[Violation]) -> "ValidationResult":
        """Build a result, dropping the value whenever any violation was collected."""
        if violations:
            return cls(shape=shape, accepted=False, value=None, violations=violations)
        return cls(shape=shape, accepted=True, value=value or {}, violations=[])

    def fields(self) -> set[str]:
        """Paths of every field that produced a violation."""
        return {v.field for v in self.violations}

    def raise_for_violations(self) -> dict[str, Any]:
        """Return the accepted value or raise ContractViolationError."""
        if not self.accepted:
            raise ContractViolationError(self.shape, self.violations)
        return self.value


class ShapeDefinitionError(ValueError):
    """A shape definition itself is malformed.

    Raised while shapes are being built or sealed, never while a record is
    being validated.
    """


class ContractViolationError(Exception):
    """Raised by callers that opt into exceptions for rejected records."""

    def __init__(self, shape: str, violations: list[Violation]):
        self.shape = shape
        self.violations = violations
        super().__init__(f"Request body does not satisfy '{shape}' ({len(violations)} violation(s))")

    def to_response(self) -> dict:
        return {
            "error": "validation_error",
            "message": str(self),
            "shape": self.shape,
            "violations": [v.model_dump() for v in self.violations],
        }
