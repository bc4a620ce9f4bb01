from __future__ import annotations

import pytest

from tomlschema.exceptions import DocumentLoadError, SchemaBuildError
from tomlschema.schema_store import SchemaStore
from tomlschema.typing.models import IntegerSchema


def test_fingerprint_is_stable() -> None:
    assert SchemaStore.fingerprint("type = 'int'") == SchemaStore.fingerprint("type = 'int'")
    assert SchemaStore.fingerprint("type = 'int'") != SchemaStore.fingerprint("type = 'bool'")


def test_load_builds_once_per_source(write_toml, mocker) -> None:
    build = mocker.patch("tomlschema.schema_store.build_schema", return_value=IntegerSchema())
    first_path = write_toml("a.toml", "type = 'int'")
    copy_path = write_toml("b.toml", "type = 'int'")
    store = SchemaStore()

    first = store.load(first_path)
    second = store.load(copy_path)

    assert first is second
    assert build.call_count == 1
    assert len(store) == 1


def test_edited_source_is_rebuilt(write_toml) -> None:
    path = write_toml("schema.toml", "type = 'int'")
    store = SchemaStore()
    store.load(path)

    path.write_text("type = 'int'\nmin = 1", encoding="utf-8")
    schema = store.load(path)

    assert schema.min == 1
    assert len(store) == 2
    store.clear()
    assert len(store) == 0


def test_strict_store_rejects_unknown_keys(write_toml) -> None:
    path = write_toml("schema.toml", "type = 'int'\nminimum = 1")

    with pytest.raises(SchemaBuildError, match="Unexpected key"):
        SchemaStore(strict=True).load(path)


def test_load_reports_missing_and_invalid_files(tmp_path, write_toml) -> None:
    store = SchemaStore()

    with pytest.raises(DocumentLoadError, match="unable to read file"):
        store.load(tmp_path / "missing.toml")
    with pytest.raises(DocumentLoadError, match="invalid TOML"):
        store.load(write_toml("broken.toml", "type = "))


def test_list_schemas(tmp_path, write_toml) -> None:
    b = write_toml("b.toml", "type = 'int'")
    a = write_toml("a.toml", "type = 'int'")
    write_toml("notes.txt", "ignored")

    assert SchemaStore.list_schemas(tmp_path) == [a, b]


def test_list_schemas_requires_a_directory(tmp_path) -> None:
    with pytest.raises(DocumentLoadError, match="does not exist"):
        SchemaStore.list_schemas(tmp_path / "missing")
