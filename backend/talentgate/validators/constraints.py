"""Constraint primitives — type, format, range, size, membership and nesting checks.

Every constraint here is pure. Parameters are checked when the constraint is
built so that a malformed shape fails at import time, not mid-request.
"""

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
import re
from typing import Any, Callable, Optional, Union

from pydantic import EmailStr, HttpUrl, TypeAdapter, ValidationError

from talentgate.validators.base import BaseConstraint, Number, apply_constraints, require_consistent_bounds
from talentgate.validators.models import ConstraintKind, ShapeDefinitionError, Violation
from talentgate.validators.shapes import ShapeDefinition

UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)

EMAIL_ADAPTER = TypeAdapter(EmailStr)
URL_ADAPTER = TypeAdapter(HttpUrl)


# ─── Types ───


class IsString(BaseConstraint):
    kind = ConstraintKind.STRING

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, str):
            return f"{self._label(path)} must be a string"
        return None


class IsBoolean(BaseConstraint):
    kind = ConstraintKind.BOOLEAN

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, bool):
            return f"{self._label(path)} must be a boolean value"
        return None


class IsNumber(BaseConstraint):
    """Finite number. Numeric strings are accepted and coerced."""

    kind = ConstraintKind.NUMBER

    def check(self, value: Any, path: str) -> Optional[str]:
        if self._parse_number(value) is None:
            return f"{self._label(path)} must be a number"
        return None

    def coerce(self, value: Any) -> Number:
        return self._parse_number(value)


class IsInt(BaseConstraint):
    """Integer. Integral floats and integer strings are coerced to int."""

    kind = ConstraintKind.INTEGER

    def check(self, value: Any, path: str) -> Optional[str]:
        parsed = self._parse_number(value)
        if parsed is None or parsed != int(parsed):
            return f"{self._label(path)} must be an integer number"
        return None

    def coerce(self, value: Any) -> int:
        return int(self._parse_number(value))


class IsObject(BaseConstraint):
    kind = ConstraintKind.OBJECT

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, Mapping):
            return f"{self._label(path)} must be an object"
        return None

    def coerce(self, value: Any) -> dict:
        return dict(value)


class IsArray(BaseConstraint):
    kind = ConstraintKind.ARRAY

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, (list, tuple)):
            return f"{self._label(path)} must be an array"
        return None

    def coerce(self, value: Any) -> list:
        return list(value)


class IsDateString(BaseConstraint):
    """ISO-8601 date or datetime. Coerced to a datetime."""

    kind = ConstraintKind.DATE

    def check(self, value: Any, path: str) -> Optional[str]:
        if isinstance(value, datetime):
            return None
        if isinstance(value, str) and self._parse(value) is not None:
            return None
        return f"{self._label(path)} must be a valid ISO 8601 date string"

    def coerce(self, value: Any) -> datetime:
        if isinstance(value, datetime):
            return value
        return self._parse(value)

    @staticmethod
    def _parse(text: str) -> Optional[datetime]:
        text = text.strip()
        if len(text) < 10:
            return None
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None


# ─── Formats ───


class Length(BaseConstraint):
    kind = ConstraintKind.LENGTH

    def __init__(self, min: Optional[int] = None, max: Optional[int] = None):
        if min is None and max is None:
            raise ShapeDefinitionError("Length needs at least one of min or max")
        self._require_non_negative_int("min", min)
        self._require_non_negative_int("max", max)
        self._require_ordered(min, max)
        self.min = min
        self.max = max

    def check(self, value: Any, path: str) -> Optional[str]:
        label = self._label(path)
        if not isinstance(value, str):
            return f"{label} must be a string with a bounded length"
        if self.min is not None and len(value) < self.min:
            return f"{label} must be longer than or equal to {self.min} characters"
        if self.max is not None and len(value) > self.max:
            return f"{label} must be shorter than or equal to {self.max} characters"
        return None

    def params(self) -> dict:
        return {"min": self.min, "max": self.max}

    def bounds(self) -> tuple[Optional[int], Optional[int]]:
        return self.min, self.max


def MaxLength(max: int) -> Length:
    return Length(max=max)


def MinLength(min: int) -> Length:
    return Length(min=min)


class Matches(BaseConstraint):
    kind = ConstraintKind.MATCHES

    def __init__(self, pattern: str, description: str = ""):
        try:
            self.regex = re.compile(pattern)
        except re.error as e:
            raise ShapeDefinitionError(f"Invalid pattern {pattern!r}: {e}") from e
        self.pattern = pattern
        self.description = description or f"match {pattern}"

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, str) or not self.regex.search(value):
            return f"{self._label(path)} must {self.description}"
        return None

    def params(self) -> dict:
        return {"pattern": self.pattern}


class IsUUID(BaseConstraint):
    kind = ConstraintKind.UUID

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, str) or not UUID_RE.match(value):
            return f"{self._label(path)} must be a UUID"
        return None


class IsEmail(BaseConstraint):
    """Email address as pydantic's EmailStr understands it, without a display name."""

    kind = ConstraintKind.EMAIL

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, str) or not self._is_email(value):
            return f"{self._label(path)} must be an email"
        return None

    @staticmethod
    def _is_email(text: str) -> bool:
        try:
            normalized = EMAIL_ADAPTER.validate_python(text)
        except ValidationError:
            return False
        # EmailStr also takes "Name <addr>" and strips whitespace; only bare addresses pass
        return normalized.casefold() == text.casefold()


class IsUrl(BaseConstraint):
    """Absolute http(s) URL. The original string is kept, not pydantic's normalized form."""

    kind = ConstraintKind.URL

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, str) or not self._is_url(value):
            return f"{self._label(path)} must be a URL address"
        return None

    @staticmethod
    def _is_url(text: str) -> bool:
        if any(ch.isspace() for ch in text):
            return False
        try:
            URL_ADAPTER.validate_python(text)
        except ValidationError:
            return False
        return True


# ─── Ranges ───


class Min(BaseConstraint):
    kind = ConstraintKind.RANGE

    def __init__(self, minimum: Number):
        if self._parse_number(minimum) is None:
            raise ShapeDefinitionError(f"Min needs a finite number, got {minimum!r}")
        self.minimum = self._parse_number(minimum)

    def check(self, value: Any, path: str) -> Optional[str]:
        parsed = self._parse_number(value)
        if parsed is None or parsed < self.minimum:
            return f"{self._label(path)} must not be less than {self.minimum}"
        return None

    def params(self) -> dict:
        return {"min": self.minimum}

    def bounds(self) -> tuple[Optional[Number], Optional[Number]]:
        return self.minimum, None


class Max(BaseConstraint):
    kind = ConstraintKind.RANGE

    def __init__(self, maximum: Number):
        if self._parse_number(maximum) is None:
            raise ShapeDefinitionError(f"Max needs a finite number, got {maximum!r}")
        self.maximum = self._parse_number(maximum)

    def check(self, value: Any, path: str) -> Optional[str]:
        parsed = self._parse_number(value)
        if parsed is None or parsed > self.maximum:
            return f"{self._label(path)} must not be greater than {self.maximum}"
        return None

    def params(self) -> dict:
        return {"max": self.maximum}

    def bounds(self) -> tuple[Optional[Number], Optional[Number]]:
        return None, self.maximum


def Range(minimum: Number, maximum: Number) -> tuple[Min, Max]:
    """Min and Max together, checked for ordering."""
    BaseConstraint._require_ordered(minimum, maximum)
    return Min(minimum), Max(maximum)


# ─── Membership ───


class IsIn(BaseConstraint):
    kind = ConstraintKind.ENUM

    def __init__(self, values):
        values = list(values)
        if not values:
            raise ShapeDefinitionError("IsIn needs at least one allowed value")
        self.values = values

    def check(self, value: Any, path: str) -> Optional[str]:
        if isinstance(value, (list, dict)) or value not in self.values:
            allowed = ", ".join(str(v) for v in self.values)
            return f"{self._label(path)} must be one of the following values: {allowed}"
        return None

    def params(self) -> dict:
        return {"values": list(self.values)}


class IsEnum(IsIn):
    """Membership in an Enum's values. Enum members are coerced to their value."""

    def __init__(self, enum_cls: type[Enum]):
        if not (isinstance(enum_cls, type) and issubclass(enum_cls, Enum)):
            raise ShapeDefinitionError(f"IsEnum needs an Enum class, got {enum_cls!r}")
        self.enum_cls = enum_cls
        super().__init__(member.value for member in enum_cls)

    def check(self, value: Any, path: str) -> Optional[str]:
        if isinstance(value, self.enum_cls):
            return None
        return super().check(value, path)

    def coerce(self, value: Any) -> Any:
        if isinstance(value, self.enum_cls):
            return value.value
        return value


# ─── Arrays ───


class ArrayMinSize(BaseConstraint):
    kind = ConstraintKind.ARRAY_SIZE

    def __init__(self, size: int):
        self._require_non_negative_int("size", size)
        self.size = size

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, (list, tuple)) or len(value) < self.size:
            return f"{self._label(path)} must contain at least {self.size} elements"
        return None

    def params(self) -> dict:
        return {"min": self.size}

    def bounds(self) -> tuple[Optional[int], Optional[int]]:
        return self.size, None


class ArrayMaxSize(BaseConstraint):
    kind = ConstraintKind.ARRAY_SIZE

    def __init__(self, size: int):
        self._require_non_negative_int("size", size)
        self.size = size

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, (list, tuple)) or len(value) > self.size:
            return f"{self._label(path)} must contain no more than {self.size} elements"
        return None

    def params(self) -> dict:
        return {"max": self.size}

    def bounds(self) -> tuple[Optional[int], Optional[int]]:
        return None, self.size


class Each(BaseConstraint):
    """Apply constraints to every element of an array; paths are field[i]."""

    kind = ConstraintKind.ARRAY

    def __init__(self, *constraints: BaseConstraint):
        self.constraints = _flatten(constraints, "Each")

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, (list, tuple)):
            return f"{self._label(path)} must be an array"
        return None

    def evaluate(self, value: Any, path: str, strict: Optional[bool] = None) -> tuple[Any, list[Violation]]:
        message = self.check(value, path)
        if message is not None:
            return value, [self._violation(path, message)]

        accepted: list = []
        violations: list[Violation] = []
        for i, element in enumerate(value):
            coerced, found = apply_constraints(self.constraints, element, f"{path}[{i}]", strict=strict)
            violations.extend(found)
            accepted.append(coerced)
        if violations:
            return value, violations
        return accepted, []

    def params(self) -> dict:
        return {"each": [c.describe() for c in self.constraints]}

    def nested_shapes(self) -> list:
        return [shape for c in self.constraints for shape in c.nested_shapes()]


class EachValue(BaseConstraint):
    """Apply constraints to every value of an object; paths are field.key."""

    kind = ConstraintKind.OBJECT

    def __init__(self, *constraints: BaseConstraint):
        self.constraints = _flatten(constraints, "EachValue")

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, Mapping):
            return f"{self._label(path)} must be an object"
        return None

    def evaluate(self, value: Any, path: str, strict: Optional[bool] = None) -> tuple[Any, list[Violation]]:
        message = self.check(value, path)
        if message is not None:
            return value, [self._violation(path, message)]

        accepted: dict = {}
        violations: list[Violation] = []
        for key, item in value.items():
            item_path = f"{path}.{key}" if path else str(key)
            accepted[key], found = apply_constraints(self.constraints, item, item_path, strict=strict)
            violations.extend(found)
        if violations:
            return value, violations
        return accepted, []

    def params(self) -> dict:
        return {"values": [c.describe() for c in self.constraints]}

    def nested_shapes(self) -> list:
        return [shape for c in self.constraints for shape in c.nested_shapes()]


# ─── Nesting ───

ShapeRef = Union[ShapeDefinition, Callable[[], ShapeDefinition]]


class Nested(BaseConstraint):
    """Validate an object against another shape, prefixing its field paths.

    The target may be given lazily as a zero-argument callable so that shapes
    can refer to ones declared later in the module.
    """

    kind = ConstraintKind.NESTED

    def __init__(self, target: ShapeRef):
        if not isinstance(target, ShapeDefinition) and not callable(target):
            raise ShapeDefinitionError(f"Nested needs a shape definition, got {target!r}")
        self._target = target
        self._resolved: Optional[ShapeDefinition] = target if isinstance(target, ShapeDefinition) else None

    @property
    def shape(self) -> ShapeDefinition:
        if self._resolved is None:
            resolved = self._target()
            if not isinstance(resolved, ShapeDefinition):
                raise ShapeDefinitionError(f"Nested reference resolved to {resolved!r}, not a shape definition")
            self._resolved = resolved
        return self._resolved

    def check(self, value: Any, path: str) -> Optional[str]:
        if not isinstance(value, Mapping):
            return f"{self._label(path)} must be an object"
        return None

    def evaluate(self, value: Any, path: str, strict: Optional[bool] = None) -> tuple[Any, list[Violation]]:
        message = self.check(value, path)
        if message is not None:
            return value, [self._violation(path, message)]
        accepted, violations = self.shape.evaluate(value, prefix=path, strict=strict)
        if violations:
            return value, violations
        return accepted, []

    def params(self) -> dict:
        return {"shape": self.shape.name}

    def nested_shapes(self) -> list:
        return [self.shape]


def _flatten(constraints, owner: str) -> tuple[BaseConstraint, ...]:
    flat: list[BaseConstraint] = []
    for c in constraints:
        if isinstance(c, tuple):
            flat.extend(c)
        else:
            flat.append(c)
    if not flat:
        raise ShapeDefinitionError(f"{owner} needs at least one constraint")
    for c in flat:
        if not isinstance(c, BaseConstraint):
            raise ShapeDefinitionError(f"{owner} got {c!r}, which is not a constraint")
    require_consistent_bounds(owner, tuple(flat))
    return tuple(flat)
