"""Match parsed documents against built schemas.

Matching is pure: neither the schema nor the document is modified, nothing is
logged, and the result depends only on the two inputs. The first failure
found ends the walk.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import TYPE_CHECKING, assert_never

from tomlschema.patterns import search
from tomlschema.typing.enums import FailureReason, ValueKind
from tomlschema.typing.models import (
    AlternativeSchema,
    ArraySchema,
    BooleanSchema,
    DateSchema,
    FloatSchema,
    IntegerSchema,
    MatchResult,
    StringSchema,
    TableSchema,
    ValidationFailure,
)
from tomlschema.values import describe, value_kind

if TYPE_CHECKING:
    from tomlschema.typing.models import ExtraRule, Schema
    from tomlschema.values import Value

_Path = tuple[str | int, ...]

_EXPECTED_KIND: dict[type, ValueKind] = {
    StringSchema: ValueKind.STRING,
    IntegerSchema: ValueKind.INTEGER,
    FloatSchema: ValueKind.FLOAT,
    BooleanSchema: ValueKind.BOOLEAN,
    DateSchema: ValueKind.DATE,
    ArraySchema: ValueKind.ARRAY,
    TableSchema: ValueKind.TABLE,
}


def match_value(schema: Schema, value: Value) -> MatchResult:
    """Check whether a document value conforms to a schema.

    Args:
        schema (Schema): Built schema tree.
        value (Value): Parsed document (or any sub-value of one).

    Raises:
        UnsupportedValueError: If the document holds objects outside the value model.

    Returns:
        MatchResult: Success, or the first failure with its document path.
    """
    failure = find_failure(schema, value)
    if failure is None:
        return MatchResult.ok()
    return MatchResult.failed(failure)


def is_valid(schema: Schema, value: Value) -> bool:
    """Return whether `value` conforms to `schema`."""
    return find_failure(schema, value) is None


def find_failure(schema: Schema, value: Value, path: _Path = ()) -> ValidationFailure | None:
    """Return the first failure of `value` against `schema`, or None.

    Args:
        schema (Schema): Schema node.
        value (Value): Document value.
        path (_Path): Location of `value` in the document.

    Returns:
        ValidationFailure | None: First failure found.
    """
    if isinstance(schema, AlternativeSchema):
        return _match_alternative(schema, value, path)

    expected = _EXPECTED_KIND[type(schema)]
    actual = value_kind(value, path=path)
    if actual is not expected:
        return ValidationFailure(
            path=path,
            reason=FailureReason.TYPE_MISMATCH,
            message=f"Expected {expected.value} but got {actual.value} {describe(value)}",
        )

    if isinstance(schema, StringSchema):
        return _match_string(schema, value, path)
    if isinstance(schema, IntegerSchema):
        return _match_integer(schema, value, path)
    if isinstance(schema, FloatSchema):
        return _match_float(schema, value, path)
    if isinstance(schema, (BooleanSchema, DateSchema)):
        return None
    if isinstance(schema, ArraySchema):
        return _match_array(schema, value, path)
    if isinstance(schema, TableSchema):
        return _match_table(schema, value, path)
    assert_never(schema)


def _match_string(schema: StringSchema, value: str, path: _Path) -> ValidationFailure | None:
    if search(schema.pattern, value):
        return None
    return ValidationFailure(
        path=path,
        reason=FailureReason.PATTERN_MISMATCH,
        message=f"Regex {schema.pattern.pattern!r} does not match {describe(value)}",
    )


def _match_integer(schema: IntegerSchema, value: int, path: _Path) -> ValidationFailure | None:
    if schema.min <= value <= schema.max:
        return None
    return ValidationFailure(
        path=path,
        reason=FailureReason.OUT_OF_BOUNDS,
        message=f"Int {value} is outside [{schema.min}, {schema.max}]",
    )


def _match_float(schema: FloatSchema, value: float, path: _Path) -> ValidationFailure | None:
    if math.isnan(value):
        if schema.nan_ok:
            return None
        return ValidationFailure(path=path, reason=FailureReason.NAN_NOT_ALLOWED, message="Float nan is not allowed")
    if schema.min <= value <= schema.max:
        return None
    return ValidationFailure(
        path=path,
        reason=FailureReason.OUT_OF_BOUNDS,
        message=f"Float {value} is outside [{schema.min}, {schema.max}]",
    )


def _match_array(schema: ArraySchema, value: list[Value], path: _Path) -> ValidationFailure | None:
    count = len(value)
    if not schema.min_len <= count <= schema.max_len:
        return ValidationFailure(
            path=path,
            reason=FailureReason.ARRAY_LENGTH,
            message=f"Array length {count} is outside [{schema.min_len}, {schema.max_len}]",
        )
    for index, element in enumerate(value):
        failure = find_failure(schema.child, element, (*path, index))
        if failure is not None:
            return failure
    return None


def _match_table(schema: TableSchema, value: Mapping[str, Value], path: _Path) -> ValidationFailure | None:
    consumed: set[str] = set()

    for name, spec in schema.fields.items():
        if name not in value:
            if spec.required:
                return ValidationFailure(
                    path=(*path, name),
                    reason=FailureReason.MISSING_KEY,
                    message=f"Missing required key '{name}'",
                )
            continue
        consumed.add(name)
        failure = find_failure(spec.value_schema, value[name], (*path, name))
        if failure is not None:
            return failure

    extras_found = 0
    for key, item in value.items():
        if key in consumed:
            continue
        rule = governing_rule(schema, key)
        if rule is None:
            return ValidationFailure(
                path=(*path, key),
                reason=FailureReason.UNEXPECTED_KEY,
                message=f"Unexpected key '{key}'",
            )
        failure = find_failure(rule.value_schema, item, (*path, key))
        if failure is not None:
            return failure
        extras_found += 1

    if extras_found < schema.min_extras:
        return ValidationFailure(
            path=path,
            reason=FailureReason.EXTRAS_COUNT,
            message=f"Too few extra keys: {extras_found} < {schema.min_extras}",
        )
    if extras_found > schema.max_extras:
        return ValidationFailure(
            path=path,
            reason=FailureReason.EXTRAS_COUNT,
            message=f"Too many extra keys: {extras_found} > {schema.max_extras}",
        )
    return None


def governing_rule(schema: TableSchema, key: str) -> ExtraRule | None:
    """Return the first extras rule whose key pattern is found in `key`.

    Args:
        schema (TableSchema): Table schema.
        key (str): Document key not claimed by an explicit field.

    Returns:
        ExtraRule | None: Rule governing the key, in declaration order.
    """
    for rule in schema.extras:
        if search(rule.key, key):
            return rule
    return None


def _match_alternative(schema: AlternativeSchema, value: Value, path: _Path) -> ValidationFailure | None:
    causes: list[ValidationFailure] = []
    for option in schema.options:
        failure = find_failure(option, value, path)
        if failure is None:
            return None
        causes.append(failure)
    return ValidationFailure(
        path=path,
        reason=FailureReason.NO_ALTERNATIVE,
        message=f"No alternative matched {describe(value)} ({len(schema.options)} options)",
        causes=tuple(causes),
    )
