"""Fill absent defaulted fields into a copy of a matching document."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from tomlschema.exceptions import DocumentValidationError
from tomlschema.matcher import find_failure, governing_rule
from tomlschema.typing.models import AlternativeSchema, ArraySchema, TableSchema

if TYPE_CHECKING:
    from tomlschema.typing.models import Schema
    from tomlschema.values import Value


def complete(schema: Schema, value: Value) -> Value:
    """Return a copy of `value` with every absent defaulted field filled in.

    The input document is left untouched. Defaults are inserted as written in
    the schema source and are not validated.

    Args:
        schema (Schema): Built schema tree.
        value (Value): Parsed document.

    Raises:
        DocumentValidationError: If `value` does not match `schema`.

    Returns:
        Value: Completed document.
    """
    failure = find_failure(schema, value)
    if failure is not None:
        raise DocumentValidationError(failure=failure)
    return _complete(schema, value)


def _complete(schema: Schema, value: Value) -> Value:
    if isinstance(schema, TableSchema):
        completed: dict[str, Value] = {}
        for key, item in value.items():
            spec = schema.fields.get(key)
            if spec is not None:
                completed[key] = _complete(spec.value_schema, item)
                continue
            rule = governing_rule(schema, key)
            completed[key] = _complete(rule.value_schema, item) if rule is not None else copy.deepcopy(item)
        for name, spec in schema.fields.items():
            if name not in completed and not spec.required:
                completed[name] = copy.deepcopy(spec.default)
        return completed

    if isinstance(schema, ArraySchema):
        return [_complete(schema.child, element) for element in value]

    if isinstance(schema, AlternativeSchema):
        for option in schema.options:
            if find_failure(option, value) is None:
                return _complete(option, value)

    return copy.deepcopy(value)
