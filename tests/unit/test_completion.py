from __future__ import annotations

import pytest

from tomlschema.completion import complete
from tomlschema.exceptions import DocumentValidationError
from tomlschema.typing.enums import FailureReason


def test_complete_fills_absent_defaults_without_mutating_input(toml_schema) -> None:
    schema = toml_schema(
        """
        name = {type = 'string'}
        tags = {type = 'array', child = {type = 'string'}, default = ['a']}
        publish = {type = 'bool', default = true}
        """,
    )
    document = {"name": "demo"}

    completed = complete(schema, document)

    assert completed == {"name": "demo", "tags": ["a"], "publish": True}
    assert document == {"name": "demo"}


def test_complete_copies_defaults(toml_schema) -> None:
    schema = toml_schema("tags = {type = 'array', child = {type = 'string'}, default = []}")

    first = complete(schema, {})
    first["tags"].append("mutated")

    assert schema.fields["tags"].default == []
    assert complete(schema, {}) == {"tags": []}


def test_complete_recurses_into_nested_tables_and_arrays(toml_schema) -> None:
    schema = toml_schema(
        """
        [servers]
        type = 'array'
        child = {host = {type = 'string'}, port = {type = 'int', default = 22}}
        """,
    )

    completed = complete(schema, {"servers": [{"host": "a"}, {"host": "b", "port": 2222}]})

    assert completed == {"servers": [{"host": "a", "port": 22}, {"host": "b", "port": 2222}]}


def test_complete_uses_first_matching_alternative(toml_schema) -> None:
    schema = toml_schema(
        """
        [dep]
        type = 'alternative'
        options = [
            {type = 'string'},
            {version = {type = 'string'}, optional = {type = 'bool', default = false}},
        ]
        """,
    )

    assert complete(schema, {"dep": "1.0"}) == {"dep": "1.0"}
    assert complete(schema, {"dep": {"version": "1.0"}}) == {"dep": {"version": "1.0", "optional": False}}


def test_complete_recurses_into_extras(toml_schema) -> None:
    schema = toml_schema(
        """
        max = 10
        [[extras]]
        key = '.*'
        schema = {enabled = {type = 'bool', default = true}}
        """,
    )

    assert complete(schema, {"a": {}, "b": {"enabled": False}}) == {"a": {"enabled": True}, "b": {"enabled": False}}


def test_complete_raises_on_invalid_document(toml_schema) -> None:
    schema = toml_schema("name = {type = 'string'}")

    with pytest.raises(DocumentValidationError) as exc_info:
        complete(schema, {"name": 1})

    assert exc_info.value.failure.reason == FailureReason.TYPE_MISMATCH
    assert "name" in str(exc_info.value)
