"""Validation Engine — field walk, violation collection, coercion and purity.

Tests cover:
    - missing required fields yield a "required" violation naming the field
    - valid records are accepted with exactly the declared fields that were present
    - every failing constraint on a field is reported, not just the first
    - nested shapes and array elements report prefixed paths
    - accepted values re-validate cleanly (idempotence)
    - strict shapes report unknown keys; default shapes drop them
    - a strict override reaches nested shapes
    - self-referencing shapes are rejected before any record is walked
"""

from datetime import datetime

import pytest

from talentgate.validators import (
    ArrayMinSize,
    ConstraintKind,
    ContractViolationError,
    Each,
    IsArray,
    IsDateString,
    IsNumber,
    IsString,
    IsUUID,
    Length,
    Matches,
    Min,
    Nested,
    ShapeDefinition,
    ShapeDefinitionError,
    ShapeRegistry,
    ValidationEngine,
    field,
    optional,
    validate,
)

ANSWER = ShapeDefinition(
    "answer",
    field("questionId", IsString(), Length(min=1)),
    field("answer"),
)

SURVEY = ShapeDefinition(
    "survey",
    field("answers", IsArray(), ArrayMinSize(1), Each(Nested(ANSWER))),
)

EVENT = ShapeDefinition(
    "event",
    field("title", IsString(), Length(1, 20)),
    field("startsAt", IsDateString()),
    optional("capacity", IsNumber(), Min(1)),
    optional("ownerId", IsUUID()),
)


def _event(**overrides) -> dict:
    record = {"title": "Onsite loop", "startsAt": "2025-02-03T15:00:00"}
    record.update(overrides)
    return record


# ─── Required fields ─────────────────────────────────────────────

def test_missing_required_field_is_reported():
    result = validate(EVENT, {"startsAt": "2025-02-03"})
    assert not result.accepted
    assert [(v.field, v.kind) for v in result.violations] == [("title", "required")]


def test_all_missing_fields_are_reported_in_one_pass():
    result = validate(EVENT, {})
    assert [v.field for v in result.violations] == ["title", "startsAt"]
    assert all(v.kind == ConstraintKind.REQUIRED for v in result.violations)


def test_null_on_required_field_is_a_required_violation():
    result = validate(EVENT, _event(title=None))
    assert result.violations[0].kind == ConstraintKind.REQUIRED


def test_absent_optional_field_is_not_a_violation():
    result = validate(EVENT, _event())
    assert result.accepted
    assert "capacity" not in result.value


def test_null_optional_field_passes_through():
    result = validate(EVENT, _event(ownerId=None))
    assert result.accepted
    assert result.value["ownerId"] is None


# ─── Acceptance ──────────────────────────────────────────────────

def test_accepted_value_has_only_declared_fields(new_id):
    owner = new_id()
    result = validate(EVENT, _event(ownerId=owner, internal="drop me"))
    assert result.accepted
    assert set(result.value) == {"title", "startsAt", "ownerId"}
    assert result.value["ownerId"] == owner


def test_rejected_result_carries_no_value():
    result = validate(EVENT, _event(capacity=0))
    assert not result.accepted
    assert result.value is None


def test_coercion_of_numbers_and_dates():
    result = validate(EVENT, _event(capacity="12"))
    assert result.value["capacity"] == 12
    assert result.value["startsAt"] == datetime(2025, 2, 3, 15, 0)


def test_coerced_number_feeds_later_constraints():
    result = validate(EVENT, _event(capacity="0"))
    assert [(v.field, v.kind) for v in result.violations] == [("capacity", "range")]


def test_accepted_value_revalidates_cleanly(new_id):
    first = validate(EVENT, _event(capacity="3", ownerId=new_id()))
    second = validate(EVENT, first.value)
    assert second.accepted
    assert second.value == first.value


# ─── Stacked constraints ─────────────────────────────────────────

def test_every_failing_constraint_on_a_field_is_reported():
    shape = ShapeDefinition(
        "code",
        field("code", Length(min=6), Matches(r"^\d+$", "contain only digits")),
    )
    result = validate(shape, {"code": "ab"})
    assert [v.kind for v in result.violations] == ["length", "matches"]
    assert {v.field for v in result.violations} == {"code"}


def test_wrong_type_fails_every_type_dependent_constraint():
    result = validate(EVENT, _event(title=42))
    assert [v.kind for v in result.violations] == ["string", "length"]


# ─── Arrays and nesting ──────────────────────────────────────────

def test_single_bad_element_yields_one_indexed_violation(new_id):
    shape = ShapeDefinition("ids", field("ids", IsArray(), Each(IsUUID())))
    result = validate(shape, {"ids": [new_id(), "bad", new_id()]})
    assert len(result.violations) == 1
    assert result.violations[0].field == "ids[1]"


def test_all_valid_elements_yield_no_violation(new_id):
    shape = ShapeDefinition("ids", field("ids", IsArray(), Each(IsUUID())))
    assert validate(shape, {"ids": [new_id(), new_id()]}).accepted


def test_nested_paths_are_prefixed():
    result = validate(SURVEY, {"answers": [
        {"questionId": "q1", "answer": 5},
        {"answer": "great"},
        {"questionId": "", "answer": ["a", "b"]},
    ]})
    assert [(v.field, v.kind) for v in result.violations] == [
        ("answers[1].questionId", "required"),
        ("answers[2].questionId", "length"),
    ]


def test_nested_element_must_be_an_object():
    result = validate(SURVEY, {"answers": ["q1"]})
    assert [(v.field, v.kind) for v in result.violations] == [("answers[0]", "nested")]


def test_nested_output_drops_undeclared_keys():
    result = validate(SURVEY, {"answers": [{"questionId": "q1", "answer": 4, "extra": True}]})
    assert result.value == {"answers": [{"questionId": "q1", "answer": 4}]}


def test_empty_array_violates_min_size():
    result = validate(SURVEY, {"answers": []})
    assert [(v.field, v.kind) for v in result.violations] == [("answers", "array_size")]


# ─── Record shape ────────────────────────────────────────────────

@pytest.mark.parametrize("record", [None, [], "text", 12])
def test_non_object_record_is_a_violation_not_an_error(record):
    result = validate(EVENT, record)
    assert [(v.field, v.kind) for v in result.violations] == [("", "object")]


def test_strict_shape_reports_unknown_keys():
    strict = EVENT.derive("strict_event", strict=True)
    result = validate(strict, _event(color="red"))
    assert [(v.field, v.kind) for v in result.violations] == [("color", "unknown")]


def test_strict_override_applies_to_top_level():
    engine = ValidationEngine()
    assert engine.validate(EVENT, _event(color="red"), strict=False).accepted
    assert not engine.validate(EVENT, _event(color="red"), strict=True).accepted


def test_strict_override_reaches_nested_shapes():
    record = {"answers": [{"questionId": "q1", "answer": 4, "extra": True}]}
    result = ValidationEngine().validate(SURVEY, record, strict=True)
    assert [(v.field, v.kind) for v in result.violations] == [("answers[0].extra", "unknown")]


def test_loose_override_relaxes_strict_nested_shapes():
    strict_answer = ANSWER.derive("strict_answer", strict=True)
    shape = ShapeDefinition("strict_survey", field("answers", IsArray(), Each(Nested(strict_answer))))
    record = {"answers": [{"questionId": "q1", "answer": 4, "extra": True}]}

    assert not validate(shape, record).accepted
    assert ValidationEngine().validate(shape, record, strict=False).accepted


# ─── Engine ──────────────────────────────────────────────────────

def test_engine_resolves_registered_names():
    registry = ShapeRegistry()
    registry.register(EVENT)
    engine = ValidationEngine(registry.seal())
    assert engine.validate("event", _event()).shape == "event"
    assert engine.is_valid("event", _event())


def test_engine_without_registry_rejects_names():
    with pytest.raises(KeyError):
        ValidationEngine().validate("event", _event())


def test_raise_for_violations():
    accepted = validate(EVENT, _event())
    assert accepted.raise_for_violations() == accepted.value

    rejected = validate(EVENT, {})
    with pytest.raises(ContractViolationError) as exc_info:
        rejected.raise_for_violations()
    assert exc_info.value.shape == "event"
    assert exc_info.value.to_response()["violations"][0]["field"] == "title"


def test_validation_does_not_mutate_input():
    record = {"answers": [{"questionId": "q1", "answer": 1, "extra": 1}]}
    validate(SURVEY, record)
    assert record == {"answers": [{"questionId": "q1", "answer": 1, "extra": 1}]}


def test_unregistered_cyclic_shape_is_rejected_before_validation():
    refs = {}
    node = ShapeDefinition("node", optional("child", Nested(lambda: refs["node"])))
    refs["node"] = node

    with pytest.raises(ShapeDefinitionError, match="Cyclic"):
        validate(node, {})
    with pytest.raises(ShapeDefinitionError, match="Cyclic"):
        ValidationEngine().validate(node, {"child": {}})


def test_acyclic_check_runs_once_per_shape():
    assert validate(SURVEY, {"answers": [{"questionId": "q", "answer": 1}]}).accepted
    assert SURVEY.verify_acyclic() is SURVEY
