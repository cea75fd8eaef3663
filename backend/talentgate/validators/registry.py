"""Shape registry — the named set of shape definitions an API serves.

Shapes are registered at import time and the registry is sealed once every
module has contributed its shapes. Sealing resolves lazy nested references
and rejects cyclic shape graphs, so configuration errors surface at startup.
"""

from typing import Iterator, Optional

import structlog

from talentgate.validators.models import ShapeDefinitionError
from talentgate.validators.shapes import ShapeDefinition

logger = structlog.get_logger()


class ShapeRegistry:
    """Name → ShapeDefinition mapping, read-only once sealed."""

    def __init__(self):
        self._shapes: dict[str, ShapeDefinition] = {}
        self._sealed = False

    @property
    def sealed(self) -> bool:
        return self._sealed

    def register(self, *shapes: ShapeDefinition) -> None:
        """Add shapes. Re-registering the same object is a no-op; a name clash is an error."""
        if self._sealed:
            raise ShapeDefinitionError("Cannot register shapes on a sealed registry")
        for shape in shapes:
            if not isinstance(shape, ShapeDefinition):
                raise ShapeDefinitionError(f"Expected a shape definition, got {shape!r}")
            existing = self._shapes.get(shape.name)
            if existing is not None and existing is not shape:
                raise ShapeDefinitionError(f"Shape '{shape.name}' is already registered")
            self._shapes[shape.name] = shape

    def seal(self) -> "ShapeRegistry":
        """Check every shape graph for cycles and freeze the registry."""
        if self._sealed:
            return self
        for shape in self._shapes.values():
            shape.verify_acyclic()
        self._sealed = True
        logger.info("contract_registry_sealed", shapes=len(self._shapes))
        return self

    def get(self, name: str) -> Optional[ShapeDefinition]:
        return self._shapes.get(name)

    def names(self) -> list[str]:
        return sorted(self._shapes)

    def __getitem__(self, name: str) -> ShapeDefinition:
        return self._shapes[name]

    def __contains__(self, name: object) -> bool:
        return name in self._shapes

    def __iter__(self) -> Iterator[ShapeDefinition]:
        return iter(self._shapes[name] for name in self.names())

    def __len__(self) -> int:
        return len(self._shapes)
