"""Shape definitions — named, ordered field descriptors and their derivations.

A shape is plain constructed data: no annotations, no reflection. Derived
shapes (partial, extended) are resolved when they are built, so the field
list is fixed before any record is checked.

Usage:
    CREATE_PLAN = ShapeDefinition(
        "create_interview_plan",
        field("name", IsString(), Length(1, 255)),
        optional("jobId", IsUUID()),
    )
    UPDATE_PLAN = CREATE_PLAN.derive("update_interview_plan", partial=True)
"""

from collections.abc import Mapping
from dataclasses import dataclass, replace
from functools import cached_property
import re
from typing import Any, Optional

from talentgate.validators.base import BaseConstraint, apply_constraints, require_consistent_bounds
from talentgate.validators.models import ConstraintKind, ShapeDefinitionError, Violation

SHAPE_NAME_RE = re.compile(r"^[a-z][a-z0-9_]*$")


@dataclass(frozen=True)
class FieldDescriptor:
    """One field of a shape: its name, whether it may be absent, and its constraints."""

    name: str
    constraints: tuple[BaseConstraint, ...] = ()
    optional: bool = False

    def as_optional(self) -> "FieldDescriptor":
        return self if self.optional else replace(self, optional=True)

    def describe(self) -> dict:
        return {
            "name": self.name,
            "optional": self.optional,
            "constraints": [c.describe() for c in self.constraints],
        }


def field(name: str, *constraints, optional: bool = False) -> FieldDescriptor:
    """Build a field descriptor. Tuples of constraints (e.g. from Range) are flattened."""
    if not isinstance(name, str) or not name:
        raise ShapeDefinitionError(f"Field name must be a non-empty string, got {name!r}")

    flat: list[BaseConstraint] = []
    for c in constraints:
        if isinstance(c, tuple):
            flat.extend(c)
        else:
            flat.append(c)
    for c in flat:
        if not isinstance(c, BaseConstraint):
            raise ShapeDefinitionError(f"Field '{name}' got {c!r}, which is not a constraint")
    require_consistent_bounds(name, tuple(flat))
    return FieldDescriptor(name=name, constraints=tuple(flat), optional=optional)


def optional(name: str, *constraints) -> FieldDescriptor:
    """Shorthand for field(..., optional=True)."""
    return field(name, *constraints, optional=True)


class ShapeDefinition:
    """Immutable, named specification of the fields one request body may carry.

    Args:
        name: Stable identifier (snake_case) used by the registry and the API
        *fields: Field descriptors in declaration order
        strict: Report undeclared keys as violations instead of dropping them
        description: Human-readable purpose, for introspection
    """

    def __init__(self, name: str, *fields: FieldDescriptor, strict: bool = False, description: str = ""):
        if not isinstance(name, str) or not SHAPE_NAME_RE.match(name):
            raise ShapeDefinitionError(f"Shape name must be snake_case, got {name!r}")

        seen: set[str] = set()
        for fd in fields:
            if not isinstance(fd, FieldDescriptor):
                raise ShapeDefinitionError(f"Shape '{name}' got {fd!r}, which is not a field descriptor")
            if fd.name in seen:
                raise ShapeDefinitionError(f"Shape '{name}' declares field '{fd.name}' twice")
            seen.add(fd.name)

        self._name = name
        self._fields = tuple(fields)
        self._strict = strict
        self._description = description
        self._acyclic = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def fields(self) -> tuple[FieldDescriptor, ...]:
        return self._fields

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def description(self) -> str:
        return self._description

    @property
    def field_names(self) -> list[str]:
        return [fd.name for fd in self._fields]

    @property
    def required_fields(self) -> list[str]:
        return [fd.name for fd in self._fields if not fd.optional]

    def get(self, name: str) -> Optional[FieldDescriptor]:
        for fd in self._fields:
            if fd.name == name:
                return fd
        return None

    # ── Derivation ──

    @cached_property
    def partial(self) -> "ShapeDefinition":
        """Every field optional, constraints unchanged. Computed once per shape."""
        if all(fd.optional for fd in self._fields):
            return self
        return ShapeDefinition(
            f"{self._name}_partial",
            *(fd.as_optional() for fd in self._fields),
            strict=self._strict,
            description=self._description,
        )

    def derive(
        self,
        name: str,
        *fields: FieldDescriptor,
        partial: bool = False,
        strict: Optional[bool] = None,
        description: Optional[str] = None,
    ) -> "ShapeDefinition":
        """Build a new shape from this one.

        Inherited descriptors keep their constraints (and become optional when
        ``partial`` is set). A new descriptor whose name matches an inherited
        one replaces it in place; the rest are appended in order.
        """
        base = self.partial.fields if partial else self._fields
        overrides = {fd.name: fd for fd in fields}
        if len(overrides) != len(fields):
            raise ShapeDefinitionError(f"Shape '{name}' declares a field twice")

        merged = [overrides.pop(fd.name, fd) for fd in base]
        merged.extend(fd for fd in fields if fd.name in overrides)

        return ShapeDefinition(
            name,
            *merged,
            strict=self._strict if strict is None else strict,
            description=self._description if description is None else description,
        )

    def verify_acyclic(self) -> "ShapeDefinition":
        """Run ensure_acyclic once; later calls return immediately."""
        if not self._acyclic:
            ensure_acyclic(self)
            self._acyclic = True
        return self

    # ── Evaluation ──

    def nested_shapes(self) -> list["ShapeDefinition"]:
        """Shapes referenced directly by this shape's constraints."""
        return [shape for fd in self._fields for c in fd.constraints for shape in c.nested_shapes()]

    def evaluate(self, record: Any, prefix: str = "", strict: Optional[bool] = None) -> tuple[Any, list[Violation]]:
        """Walk the fields in declaration order and collect every violation.

        Returns the accepted (coerced) value alongside the violations; the
        value is only meaningful when the violation list is empty.
        A non-None ``strict`` overrides the unknown-key policy of this shape
        and of every shape nested under it.
        """
        if not isinstance(record, Mapping):
            label = prefix or "body"
            return record, [Violation(field=prefix, kind=ConstraintKind.OBJECT, message=f"{label} must be an object")]

        accepted: dict[str, Any] = {}
        violations: list[Violation] = []

        for fd in self._fields:
            path = _join(prefix, fd.name)

            if fd.name not in record:
                if not fd.optional:
                    violations.append(Violation(
                        field=path,
                        kind=ConstraintKind.REQUIRED,
                        message=f"{path} is required",
                    ))
                continue

            value = record[fd.name]
            if value is None:
                if fd.optional:
                    accepted[fd.name] = None
                else:
                    violations.append(Violation(
                        field=path,
                        kind=ConstraintKind.REQUIRED,
                        message=f"{path} should not be null",
                    ))
                continue

            coerced, found = apply_constraints(fd.constraints, value, path, strict=strict)
            if found:
                violations.extend(found)
            else:
                accepted[fd.name] = coerced

        if self._strict if strict is None else strict:
            declared = set(self.field_names)
            for key in record:
                if key not in declared:
                    path = _join(prefix, str(key))
                    violations.append(Violation(
                        field=path,
                        kind=ConstraintKind.UNKNOWN,
                        message=f"property {path} should not exist",
                    ))

        return accepted, violations

    def describe(self) -> dict:
        return {
            "name": self._name,
            "description": self._description,
            "strict": self._strict,
            "fields": [fd.describe() for fd in self._fields],
        }

    def __repr__(self) -> str:
        return f"ShapeDefinition({self._name!r}, fields={self.field_names!r})"


def ensure_acyclic(shape: ShapeDefinition) -> None:
    """Raise ShapeDefinitionError if nested references lead back to a shape on the path."""
    _walk(shape, [])


def _walk(shape: ShapeDefinition, stack: list[ShapeDefinition]) -> None:
    if any(s is shape for s in stack):
        cycle = " -> ".join(s.name for s in stack[stack.index(shape):] + [shape])
        raise ShapeDefinitionError(f"Cyclic nested shape reference: {cycle}")
    stack.append(shape)
    for child in shape.nested_shapes():
        _walk(child, stack)
    stack.pop()


def _join(prefix: str, name: str) -> str:
    return f"{prefix}.{name}" if prefix else name
