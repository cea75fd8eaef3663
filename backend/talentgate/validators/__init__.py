"""Request-contract validation — shapes, constraints and the validation engine.

Usage:
    from talentgate.validators import ShapeDefinition, field, optional, IsUUID, validate

    MOVE = ShapeDefinition("move_application", field("stageId", IsUUID()))
    result = validate(MOVE, {"stageId": "not-a-uuid"})
    if not result.accepted:
        # Report result.violations to the client
"""

from talentgate.validators.constraints import (
    ArrayMaxSize,
    ArrayMinSize,
    Each,
    EachValue,
    IsArray,
    IsBoolean,
    IsDateString,
    IsEmail,
    IsEnum,
    IsIn,
    IsInt,
    IsNumber,
    IsObject,
    IsString,
    IsUrl,
    IsUUID,
    Length,
    Matches,
    Max,
    MaxLength,
    Min,
    MinLength,
    Nested,
    Range,
)
from talentgate.validators.engine import ValidationEngine, validate
from talentgate.validators.models import (
    ConstraintKind,
    ContractViolationError,
    ShapeDefinitionError,
    ValidationResult,
    Violation,
)
from talentgate.validators.registry import ShapeRegistry
from talentgate.validators.shapes import FieldDescriptor, ShapeDefinition, field, optional

__all__ = [
    "ArrayMaxSize",
    "ArrayMinSize",
    "ConstraintKind",
    "ContractViolationError",
    "Each",
    "EachValue",
    "FieldDescriptor",
    "IsArray",
    "IsBoolean",
    "IsDateString",
    "IsEmail",
    "IsEnum",
    "IsIn",
    "IsInt",
    "IsNumber",
    "IsObject",
    "IsString",
    "IsUrl",
    "IsUUID",
    "Length",
    "Matches",
    "Max",
    "MaxLength",
    "Min",
    "MinLength",
    "Nested",
    "Range",
    "ShapeDefinition",
    "ShapeDefinitionError",
    "ShapeRegistry",
    "ValidationEngine",
    "ValidationResult",
    "Violation",
    "field",
    "optional",
    "validate",
]
