"""API response models."""

from pydantic import BaseModel
from typing import Any, Literal, Optional

from talentgate.validators.models import Violation


class ConstraintInfo(BaseModel):
    """A constraint as exposed by shape introspection."""

    kind: str
    params: dict[str, Any] = {}


class FieldInfo(BaseModel):
    """One field of a shape."""

    name: str
    optional: bool
    constraints: list[ConstraintInfo] = []


class ShapeSummary(BaseModel):
    """Entry in the list of registered shapes."""

    name: str
    description: str = ""
    field_count: int
    required_fields: list[str] = []


class ShapeDetailResponse(BaseModel):
    """Full description of one shape."""

    name: str
    description: str = ""
    strict: bool = False
    fields: list[FieldInfo]


class ShapeListResponse(BaseModel):
    total: int
    shapes: list[ShapeSummary]


class AcceptedResponse(BaseModel):
    """A request body that satisfied its shape, after coercion."""

    shape: str
    accepted: Literal[True] = True
    value: dict[str, Any]


class RejectedResponse(BaseModel):
    """A request body that violated its shape."""

    error: Literal["validation_error"] = "validation_error"
    message: str
    shape: str
    violations: list[Violation]


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    shapes_registered: int
    registry_sealed: bool
    message: Optional[str] = None
