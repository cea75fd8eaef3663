"""Base constraint — abstract class implementing the Strategy Pattern.

Each constraint is a standalone, independently testable unit.
New constraint kinds are added without modifying the engine.
"""

from abc import ABC, abstractmethod
import math
import re
from typing import Any, Optional, Union

from talentgate.validators.models import ConstraintKind, ShapeDefinitionError, Violation

Number = Union[int, float]

_NUMERIC_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$")


class BaseConstraint(ABC):
    """Abstract base for all field constraints.

    Contract:
        - evaluate() is pure: same value → same (coerced value, violations)
        - evaluate() returns an empty violation list when the value passes
        - the coerced value is only meaningful when no violation was returned
        - parameters are checked in __init__; bad ones raise ShapeDefinitionError
    """

    @property
    @abstractmethod
    def kind(self) -> ConstraintKind:
        """Tag reported on every violation."""
        ...

    @abstractmethod
    def check(self, value: Any, path: str) -> Optional[str]:
        """Return a failure message, or None when the value passes."""
        ...

    def coerce(self, value: Any) -> Any:
        """Representation handed to later constraints and to the output."""
        return value

    def evaluate(self, value: Any, path: str, strict: Optional[bool] = None) -> tuple[Any, list[Violation]]:
        """Check the value and coerce it when it passes.

        ``strict`` overrides the unknown-key policy of nested shapes; leaf
        constraints ignore it.
        """
        message = self.check(value, path)
        if message is not None:
            return value, [self._violation(path, message)]
        return self.coerce(value), []

    def params(self) -> dict:
        """Kind-specific parameters, for introspection."""
        return {}

    def nested_shapes(self) -> list:
        """Shape definitions this constraint recurses into."""
        return []

    def bounds(self) -> tuple[Optional[Number], Optional[Number]]:
        """(lower, upper) limits this constraint places on its kind, if any."""
        return None, None

    def describe(self) -> dict:
        return {"kind": self.kind.value, **self.params()}

    def __repr__(self) -> str:
        args = ", ".join(f"{k}={v!r}" for k, v in self.params().items())
        return f"{type(self).__name__}({args})"

    # ── Helper Methods ──

    def _violation(self, path: str, message: str, kind: Optional[ConstraintKind] = None) -> Violation:
        """Convenience method to create a Violation."""
        return Violation(field=path, kind=kind or self.kind, message=message)

    @staticmethod
    def _label(path: str) -> str:
        return path or "body"

    @staticmethod
    def _parse_number(value: Any) -> Optional[Number]:
        """Parse a finite number from int, float or numeric string. Booleans are not numbers."""
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return value if math.isfinite(value) else None
        if not isinstance(value, str):
            return None

        text = value.strip()
        if not _NUMERIC_RE.match(text):
            return None
        try:
            if re.fullmatch(r"[+-]?\d+", text):
                return int(text)
            parsed = float(text)
        except ValueError:
            return None
        return parsed if math.isfinite(parsed) else None

    @staticmethod
    def _require_non_negative_int(name: str, value: Optional[int]) -> None:
        if value is None:
            return
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ShapeDefinitionError(f"{name} must be a non-negative integer, got {value!r}")

    @staticmethod
    def _require_ordered(low: Optional[Number], high: Optional[Number]) -> None:
        if low is not None and high is not None and low > high:
            raise ShapeDefinitionError(f"Minimum {low} exceeds maximum {high}")


def require_consistent_bounds(owner: str, constraints: tuple[BaseConstraint, ...]) -> None:
    """Raise ShapeDefinitionError when stacked constraints of one kind leave no valid value.

    E.g. Min(5) with Max(2), or ArrayMinSize(3) with ArrayMaxSize(1).
    """
    lowers: dict[ConstraintKind, Number] = {}
    uppers: dict[ConstraintKind, Number] = {}
    for c in constraints:
        low, high = c.bounds()
        if low is not None:
            lowers[c.kind] = max(low, lowers.get(c.kind, low))
        if high is not None:
            uppers[c.kind] = min(high, uppers.get(c.kind, high))
    for kind, low in lowers.items():
        high = uppers.get(kind)
        if high is not None and low > high:
            raise ShapeDefinitionError(
                f"'{owner}' has {kind.value} minimum {low} exceeding maximum {high}"
            )


def apply_constraints(
    constraints: tuple[BaseConstraint, ...],
    value: Any,
    path: str,
    strict: Optional[bool] = None,
) -> tuple[Any, list[Violation]]:
    """Run every constraint in order and collect all failures.

    A passing constraint hands its coerced value to the next one; a failing
    constraint leaves the value as it was. ``strict`` is handed on to
    constraints that recurse into nested shapes.
    """
    violations: list[Violation] = []
    current = value
    for constraint in constraints:
        coerced, found = constraint.evaluate(current, path, strict=strict)
        if found:
            violations.extend(found)
        else:
            current = coerced
    return current, violations
