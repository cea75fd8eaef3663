"""Shape registry — registration, sealing and lookup.

Tests cover:
    - names are unique; re-registering the same shape is harmless
    - sealing rejects cyclic shape graphs and freezes the registry
    - iteration and names() are sorted
"""

import pytest

from talentgate.validators import (
    IsUUID,
    Nested,
    ShapeDefinition,
    ShapeDefinitionError,
    ShapeRegistry,
    field,
    optional,
)

MOVE = ShapeDefinition("move", field("stageId", IsUUID()))
ARCHIVE = ShapeDefinition("archive", optional("reason"))


def test_register_and_lookup():
    registry = ShapeRegistry()
    registry.register(MOVE, ARCHIVE)

    assert "move" in registry
    assert registry["move"] is MOVE
    assert registry.get("missing") is None
    assert len(registry) == 2


def test_unknown_name_raises_key_error():
    with pytest.raises(KeyError):
        ShapeRegistry()["move"]


def test_names_and_iteration_are_sorted():
    registry = ShapeRegistry()
    registry.register(MOVE, ARCHIVE)
    assert registry.names() == ["archive", "move"]
    assert [s.name for s in registry] == ["archive", "move"]


def test_reregistering_same_shape_is_a_no_op():
    registry = ShapeRegistry()
    registry.register(MOVE)
    registry.register(MOVE)
    assert len(registry) == 1


def test_name_clash_is_rejected():
    registry = ShapeRegistry()
    registry.register(MOVE)
    with pytest.raises(ShapeDefinitionError, match="already registered"):
        registry.register(ShapeDefinition("move", field("stageId")))


def test_non_shape_is_rejected():
    with pytest.raises(ShapeDefinitionError):
        ShapeRegistry().register("move")


# ─── Sealing ─────────────────────────────────────────────────────

def test_sealed_registry_rejects_new_shapes():
    registry = ShapeRegistry()
    registry.register(MOVE)
    assert registry.seal() is registry
    assert registry.sealed

    with pytest.raises(ShapeDefinitionError, match="sealed"):
        registry.register(ARCHIVE)


def test_seal_is_idempotent():
    registry = ShapeRegistry().seal()
    assert registry.seal().sealed


def test_seal_rejects_cycles():
    refs = {}
    parent = ShapeDefinition("parent", optional("child", Nested(lambda: refs["child"])))
    child = ShapeDefinition("child", optional("parent", Nested(lambda: refs["parent"])))
    refs.update(parent=parent, child=child)

    registry = ShapeRegistry()
    registry.register(parent, child)
    with pytest.raises(ShapeDefinitionError, match="Cyclic"):
        registry.seal()
    assert not registry.sealed
