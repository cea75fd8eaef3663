"""Shape definitions — construction checks, partial derivation and extension.

Tests cover:
    - duplicate fields, bad names and non-constraints are rejected at build time
    - stacked lower and upper bounds that leave no valid value are rejected at build time
    - partial() forces every field optional, keeps constraints, is cached and idempotent
    - derive() inherits, overrides in place and appends new fields
    - ensure_acyclic() rejects nested shapes that loop back
"""

import pytest

from talentgate.validators import (
    ArrayMaxSize,
    ArrayMinSize,
    Each,
    IsArray,
    IsNumber,
    IsString,
    IsUUID,
    Length,
    Max,
    MaxLength,
    Min,
    MinLength,
    Nested,
    ShapeDefinition,
    ShapeDefinitionError,
    field,
    optional,
)
from talentgate.validators.shapes import ensure_acyclic


def _plan_shape() -> ShapeDefinition:
    return ShapeDefinition(
        "plan",
        field("name", IsString(), Length(1, 255)),
        optional("jobId", IsUUID()),
        field("rounds", IsNumber(), Min(1)),
    )


# ─── Construction ────────────────────────────────────────────────

def test_fields_keep_declaration_order():
    shape = _plan_shape()
    assert shape.field_names == ["name", "jobId", "rounds"]
    assert shape.required_fields == ["name", "rounds"]


def test_duplicate_field_is_rejected():
    with pytest.raises(ShapeDefinitionError, match="twice"):
        ShapeDefinition("dup", field("name"), optional("name"))


def test_shape_name_must_be_snake_case():
    with pytest.raises(ShapeDefinitionError):
        ShapeDefinition("CreatePlan", field("name"))


def test_field_rejects_non_constraints():
    with pytest.raises(ShapeDefinitionError):
        field("name", str)


def test_shape_rejects_non_descriptors():
    with pytest.raises(ShapeDefinitionError):
        ShapeDefinition("plan", "name")


def test_field_flattens_constraint_tuples():
    fd = field("rating", (Min(1), Min(2)))
    assert len(fd.constraints) == 2


def test_get_returns_descriptor_or_none():
    shape = _plan_shape()
    assert shape.get("jobId").optional is True
    assert shape.get("missing") is None


# ─── Stacked bounds ──────────────────────────────────────────────

@pytest.mark.parametrize("constraints", [
    (IsNumber(), Min(5), Max(2)),
    (IsString(), MinLength(5), MaxLength(2)),
    (IsArray(), ArrayMinSize(5), ArrayMaxSize(2)),
    (IsString(), Length(1, 10), MaxLength(0)),
])
def test_inverted_stacked_bounds_are_rejected(constraints):
    with pytest.raises(ShapeDefinitionError, match="exceeding"):
        ShapeDefinition("inverted", field("x", *constraints))


def test_inverted_bounds_inside_each_are_rejected():
    with pytest.raises(ShapeDefinitionError):
        field("scores", IsArray(), Each(IsNumber(), Min(5), Max(2)))


def test_bounds_of_different_kinds_do_not_interact():
    fd = field("tags", IsArray(), ArrayMinSize(5), Each(IsString(), MaxLength(2)))
    assert len(fd.constraints) == 3


def test_equal_stacked_bounds_are_accepted():
    fd = field("rating", IsNumber(), Min(3), Max(3))
    assert len(fd.constraints) == 3


# ─── Partial derivation ──────────────────────────────────────────

def test_partial_makes_every_field_optional():
    partial = _plan_shape().partial
    assert all(fd.optional for fd in partial.fields)
    assert partial.field_names == ["name", "jobId", "rounds"]


def test_partial_preserves_constraints():
    shape = _plan_shape()
    for original, derived in zip(shape.fields, shape.partial.fields):
        assert derived.constraints is original.constraints


def test_partial_is_computed_once():
    shape = _plan_shape()
    assert shape.partial is shape.partial


def test_partial_is_idempotent():
    partial = _plan_shape().partial
    assert partial.partial is partial


def test_derive_partial_with_new_name():
    update = _plan_shape().derive("update_plan", partial=True)
    assert update.name == "update_plan"
    assert update.required_fields == []


# ─── Extension ───────────────────────────────────────────────────

def test_derive_appends_new_fields():
    shape = _plan_shape().derive("plan_with_owner", field("ownerId", IsUUID()))
    assert shape.field_names == ["name", "jobId", "rounds", "ownerId"]


def test_derive_overrides_in_place():
    shape = _plan_shape().derive("plan_loose_name", optional("name", IsString()))
    assert shape.field_names == ["name", "jobId", "rounds"]
    assert shape.get("name").optional is True
    assert len(shape.get("name").constraints) == 1


def test_derive_keeps_parent_untouched():
    parent = _plan_shape()
    parent.derive("child", field("extra"), partial=True)
    assert parent.required_fields == ["name", "rounds"]


def test_derive_inherits_strict_unless_overridden():
    strict = ShapeDefinition("strict_plan", field("name"), strict=True)
    assert strict.derive("child").strict is True
    assert strict.derive("loose_child", strict=False).strict is False


# ─── Cycles ──────────────────────────────────────────────────────

def test_acyclic_nesting_is_accepted():
    leaf = ShapeDefinition("leaf", field("id", IsUUID()))
    root = ShapeDefinition("root", field("leaf", Nested(leaf)))
    ensure_acyclic(root)


def test_cyclic_nesting_is_rejected():
    refs = {}
    a = ShapeDefinition("a", optional("b", Nested(lambda: refs["b"])))
    b = ShapeDefinition("b", optional("a", Nested(lambda: refs["a"])))
    refs.update(a=a, b=b)

    with pytest.raises(ShapeDefinitionError, match="a -> b -> a"):
        ensure_acyclic(a)


def test_self_reference_is_rejected():
    refs = {}
    node = ShapeDefinition("node", optional("child", Nested(lambda: refs["node"])))
    refs["node"] = node

    with pytest.raises(ShapeDefinitionError, match="Cyclic"):
        ensure_acyclic(node)


def test_lazy_reference_to_non_shape_is_rejected():
    shape = ShapeDefinition("broken", field("x", Nested(lambda: "not a shape")))
    with pytest.raises(ShapeDefinitionError):
        ensure_acyclic(shape)


def test_describe_lists_constraint_kinds():
    info = _plan_shape().describe()
    assert info["name"] == "plan"
    assert [c["kind"] for c in info["fields"][0]["constraints"]] == ["string", "length"]
