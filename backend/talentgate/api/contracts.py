"""Contracts API — list, describe and validate request bodies against registered shapes."""

import json
from typing import Any, Awaitable, Callable, Optional

from fastapi import APIRouter, Depends, Request
import structlog

from talentgate.config import get_settings
from talentgate.contracts import registry, validation_engine
from talentgate.models.responses import (
    AcceptedResponse,
    ConstraintInfo,
    FieldInfo,
    RejectedResponse,
    ShapeDetailResponse,
    ShapeListResponse,
    ShapeSummary,
)
from talentgate.validators import ShapeDefinition

logger = structlog.get_logger()

router = APIRouter()


class InvalidJSONError(Exception):
    """Request body could not be parsed as JSON."""


class UnknownShapeError(LookupError):
    """No shape is registered under the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No contract named '{name}'")


def _get_shape(name: str) -> ShapeDefinition:
    shape = registry.get(name)
    if shape is None:
        raise UnknownShapeError(name)
    return shape


def _reject_constant(token: str) -> Any:
    raise InvalidJSONError(f"{token} is not a JSON value")


async def _read_json(request: Request) -> Any:
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise InvalidJSONError(str(e)) from e


async def admit(request: Request, shape: ShapeDefinition) -> dict[str, Any]:
    """Validate the request body against a shape and return the accepted value.

    Raises:
        InvalidJSONError: body is not JSON
        ContractViolationError: body violates the shape
    """
    body = await _read_json(request)
    strict = True if get_settings().STRICT_CONTRACTS else None
    result = validation_engine.validate(shape, body, strict=strict)

    if not result.accepted:
        logger.info(
            "contract_rejected",
            shape=shape.name,
            path=request.url.path,
            violations=len(result.violations),
            fields=sorted(result.fields()),
        )
    else:
        logger.debug("contract_accepted", shape=shape.name, path=request.url.path)

    return result.raise_for_violations()


def validated_body(shape_name: Optional[str] = None) -> Callable[[Request], Awaitable[dict[str, Any]]]:
    """FastAPI dependency admitting the request body against a registered shape.

    Without ``shape_name`` the shape is taken from the route's ``{name}``
    path parameter.

    Usage:
        @router.post("/applications/bulk/move")
        async def bulk_move(body: dict = Depends(validated_body("bulk_move_applications"))):
            ...
    """
    fixed = registry[shape_name] if shape_name is not None else None

    async def dependency(request: Request) -> dict[str, Any]:
        shape = fixed if fixed is not None else _get_shape(request.path_params["name"])
        return await admit(request, shape)

    return dependency


def _describe(shape: ShapeDefinition) -> ShapeDetailResponse:
    fields = []
    for fd in shape.fields:
        constraints = []
        for c in fd.constraints:
            info = c.describe()
            kind = info.pop("kind")
            constraints.append(ConstraintInfo(kind=kind, params=info))
        fields.append(FieldInfo(name=fd.name, optional=fd.optional, constraints=constraints))
    return ShapeDetailResponse(
        name=shape.name,
        description=shape.description,
        strict=shape.strict,
        fields=fields,
    )


@router.get("/contracts", response_model=ShapeListResponse)
async def list_contracts():
    """List every registered request shape."""
    shapes = [
        ShapeSummary(
            name=shape.name,
            description=shape.description,
            field_count=len(shape.fields),
            required_fields=shape.required_fields,
        )
        for shape in registry
    ]
    return ShapeListResponse(total=len(shapes), shapes=shapes)


@router.get("/contracts/{name}", response_model=ShapeDetailResponse)
async def get_contract(name: str):
    """Describe one shape: its fields, optionality and constraints."""
    return _describe(_get_shape(name))


@router.post(
    "/contracts/{name}/validate",
    response_model=AcceptedResponse,
    responses={400: {"model": RejectedResponse}},
)
async def validate_contract(name: str, value: dict[str, Any] = Depends(validated_body())):
    """Validate a JSON body against a shape.

    Returns the accepted, coerced value, or 400 with every violation.
    """
    return AcceptedResponse(shape=name, value=value)
