from __future__ import annotations

import pytest
from pydantic import ValidationError

from tomlschema.typing.enums import FailureReason, SchemaKind
from tomlschema.typing.models import (
    ArraySchema,
    FieldSpec,
    IntegerSchema,
    MatchResult,
    StringSchema,
    TableSchema,
    ValidationFailure,
)


def test_schema_nodes_can_be_built_by_hand() -> None:
    schema = TableSchema(
        fields={"tags": FieldSpec(value_schema=ArraySchema(child=StringSchema()), default=[])},
    )

    assert schema.kind == SchemaKind.TABLE
    assert schema.fields["tags"].value_schema.kind == SchemaKind.ARRAY
    assert not schema.fields["tags"].required


def test_array_bounds_must_be_non_negative() -> None:
    with pytest.raises(ValidationError):
        ArraySchema(child=IntegerSchema(), min_len=-1)


def test_match_result_truthiness() -> None:
    failure = ValidationFailure(reason=FailureReason.MISSING_KEY, message="Missing required key 'a'", path=("a",))

    assert MatchResult.ok()
    assert not MatchResult.failed(failure)


def test_failure_render_indents_causes() -> None:
    cause = ValidationFailure(reason=FailureReason.TYPE_MISMATCH, message="Expected bool but got int 5")
    failure = ValidationFailure(
        path=("publish",),
        reason=FailureReason.NO_ALTERNATIVE,
        message="No alternative matched 5 (1 options)",
        causes=(cause,),
    )

    assert failure.render().splitlines() == [
        "publish: No alternative matched 5 (1 options) [no_alternative]",
        "  <root>: Expected bool but got int 5 [type_mismatch]",
    ]


def test_failure_serializes_to_json() -> None:
    failure = ValidationFailure(path=("a", 0), reason=FailureReason.OUT_OF_BOUNDS, message="Int 9 is outside [0, 1]")

    payload = failure.model_dump(mode="json")

    assert payload["path"] == ["a", 0]
    assert payload["reason"] == "out_of_bounds"
