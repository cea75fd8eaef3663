"""Validation Engine — admits or rejects untyped records against shape definitions.

This is the main entry point for request-body validation. It resolves the
shape (by object or registered name), walks every field and returns a
ValidationResult carrying either the accepted value or the violations.

Usage:
    engine = ValidationEngine(registry)
    result = engine.validate("bulk_move_applications", body)
    if not result.accepted:
        # Respond 400 with result.violations
"""

from typing import Any, Optional, Union

from talentgate.validators.models import ValidationResult
from talentgate.validators.registry import ShapeRegistry
from talentgate.validators.shapes import ShapeDefinition


class ValidationEngine:
    """Runs shape definitions over untyped records.

    Design principles:
        - Deterministic: same shape + same record → same result
        - Exhaustive: every violation is reported in one pass
        - Side-effect free: no logging, no I/O, no shared mutable state
        - Re-entrant: safe to call concurrently for any shape
    """

    def __init__(self, registry: Optional[ShapeRegistry] = None):
        """Initialize with the registry used to resolve shapes given by name.

        Args:
            registry: Optional registry. Without one, only shape objects are accepted.
        """
        self.registry = registry

    def resolve(self, shape: Union[ShapeDefinition, str]) -> ShapeDefinition:
        """Return the shape definition for a shape object or registered name.

        Shapes that never went through a sealed registry are checked for
        nested cycles here, once per shape, before any record is walked.

        Raises:
            KeyError: name is not registered (or no registry is configured)
            ShapeDefinitionError: the shape nests into itself
        """
        if isinstance(shape, ShapeDefinition):
            return shape.verify_acyclic()
        if self.registry is None:
            raise KeyError(shape)
        return self.registry[shape].verify_acyclic()

    def validate(
        self,
        shape: Union[ShapeDefinition, str],
        record: Any,
        strict: Optional[bool] = None,
    ) -> ValidationResult:
        """Validate a record against a shape.

        Args:
            shape: Shape definition or registered shape name
            record: Untyped input, typically a parsed JSON body
            strict: Override the unknown-key policy of the shape and every nested shape

        Returns:
            ValidationResult with the accepted value or every violation found
        """
        definition = self.resolve(shape)
        value, violations = definition.evaluate(record, strict=strict)
        return ValidationResult.build(definition.name, value, violations)

    def is_valid(self, shape: Union[ShapeDefinition, str], record: Any) -> bool:
        return self.validate(shape, record).accepted


def validate(shape: ShapeDefinition, record: Any) -> ValidationResult:
    """Validate a record against a shape object without any registry."""
    return ValidationEngine().validate(shape, record)
