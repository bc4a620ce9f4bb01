"""Build schema trees from parsed schema sources."""

from __future__ import annotations

import math
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from tomlschema.exceptions import SchemaBuildError, format_path
from tomlschema.logging import get_logger
from tomlschema.patterns import MATCH_ANYTHING, compile_pattern
from tomlschema.typing.enums import SchemaKind
from tomlschema.typing.models import (
    INT64_MAX,
    INT64_MIN,
    MAX_COUNT,
    AlternativeSchema,
    ArraySchema,
    BooleanSchema,
    DateSchema,
    ExtraRule,
    FieldSpec,
    FloatSchema,
    IntegerSchema,
    Schema,
    StringSchema,
    TableSchema,
)

if TYPE_CHECKING:
    from tomlschema.typing.protocol import PatternCompiler
    from tomlschema.values import Value

logger = get_logger(__name__)

ESCAPE_PREFIX = "$"
TABLE_CONTROL_KEYS = frozenset({"type", "default", "extras", "min", "max"})

_Path = tuple[str | int, ...]
_Built = tuple[Schema, Any]


def field_name(raw_key: str) -> str:
    """Return the document key declared by a raw table-schema key.

    Exactly one leading `$` is stripped, so `$type` declares `type` and `$$x`
    declares `$x`.

    Args:
        raw_key (str): Key as written in the schema source.

    Returns:
        str: Document key.
    """
    return raw_key.removeprefix(ESCAPE_PREFIX)


def build_schema(
    raw: Mapping[str, Value],
    *,
    strict: bool = False,
    compile_pattern: PatternCompiler = compile_pattern,
) -> Schema:
    """Build a schema tree from a parsed schema source.

    Args:
        raw (Mapping[str, Value]): Parsed schema source (root table).
        strict (bool): Treat unknown configuration keys as errors instead of warnings.
        compile_pattern (PatternCompiler): Regular expression provider.

    Raises:
        SchemaBuildError: On the first structural problem in the source.

    Returns:
        Schema: Immutable schema tree.
    """
    return SchemaBuilder(strict=strict, compile_pattern=compile_pattern).build(raw)


class SchemaBuilder:
    """Recursive schema builder.

    The builder holds only configuration; it can be reused for any number of
    schema sources.
    """

    def __init__(self, *, strict: bool = False, compile_pattern: PatternCompiler = compile_pattern) -> None:
        self.strict = strict
        self._compile = compile_pattern
        self._handlers: dict[SchemaKind, Callable[[Mapping[str, Value], _Path], Schema]] = {
            SchemaKind.STRING: self._build_string,
            SchemaKind.INTEGER: self._build_integer,
            SchemaKind.FLOAT: self._build_float,
            SchemaKind.BOOLEAN: self._build_boolean,
            SchemaKind.DATE: self._build_date,
            SchemaKind.ARRAY: self._build_array,
            SchemaKind.TABLE: self._build_table,
            SchemaKind.ALTERNATIVE: self._build_alternative,
        }

    def build(self, raw: Mapping[str, Value]) -> Schema:
        """Build the root schema.

        Args:
            raw (Mapping[str, Value]): Parsed schema source.

        Returns:
            Schema: Schema tree.
        """
        schema, default = self.build_node(raw, ())
        if default is not None:
            logger.warning("Ignoring default at schema root", extra={"default": default})
        return schema

    def build_node(self, raw: Value, path: _Path) -> _Built:
        """Build a schema node and return it with its optional default value.

        Args:
            raw (Value): Schema-shaped table.
            path (_Path): Location of `raw` in the schema source.

        Raises:
            SchemaBuildError: If `raw` is not a valid schema.

        Returns:
            tuple[Schema, Any]: Built node and its `default` (None when absent).
        """
        if not isinstance(raw, Mapping):
            raise SchemaBuildError(message=f"Schema must be a table, got {type(raw).__name__}", path=path)

        kind = self._kind(raw, path)
        schema = self._handlers[kind](raw, path)
        return schema, raw.get("default")

    def _kind(self, raw: Mapping[str, Value], path: _Path) -> SchemaKind:
        type_value = raw.get("type")
        if type_value is None:
            return SchemaKind.TABLE
        if not isinstance(type_value, str):
            raise SchemaBuildError(
                message=f"Schema type must be a string, got {type(type_value).__name__}",
                path=(*path, "type"),
            )
        try:
            return SchemaKind(type_value)
        except ValueError:
            supported = ", ".join(kind.value for kind in SchemaKind)
            raise SchemaBuildError(
                message=f"Unknown schema type '{type_value}'. Expected one of: {supported}",
                path=(*path, "type"),
            ) from None

    # Scalars

    def _build_string(self, raw: Mapping[str, Value], path: _Path) -> Schema:
        self._check_keys(raw, path, SchemaKind.STRING, {"regex"})
        pattern = MATCH_ANYTHING
        if "regex" in raw:
            source = raw["regex"]
            if not isinstance(source, str):
                raise SchemaBuildError(
                    message=f"String regex must be a string, got {type(source).__name__}",
                    path=(*path, "regex"),
                )
            pattern = self._compile(source, path=(*path, "regex"))
        return StringSchema(pattern=pattern)

    def _build_integer(self, raw: Mapping[str, Value], path: _Path) -> Schema:
        self._check_keys(raw, path, SchemaKind.INTEGER, {"min", "max"})
        return IntegerSchema(
            min=_int_option(raw, "min", path, default=INT64_MIN),
            max=_int_option(raw, "max", path, default=INT64_MAX),
        )

    def _build_float(self, raw: Mapping[str, Value], path: _Path) -> Schema:
        self._check_keys(raw, path, SchemaKind.FLOAT, {"min", "max", "nan_ok"})
        nan_ok = raw.get("nan_ok", False)
        if not isinstance(nan_ok, bool):
            raise SchemaBuildError(
                message=f"Float nan_ok must be a boolean, got {type(nan_ok).__name__}",
                path=(*path, "nan_ok"),
            )
        return FloatSchema(
            min=_float_option(raw, "min", path, default=-math.inf),
            max=_float_option(raw, "max", path, default=math.inf),
            nan_ok=nan_ok,
        )

    def _build_boolean(self, raw: Mapping[str, Value], path: _Path) -> Schema:
        self._check_keys(raw, path, SchemaKind.BOOLEAN, set())
        return BooleanSchema()

    def _build_date(self, raw: Mapping[str, Value], path: _Path) -> Schema:
        self._check_keys(raw, path, SchemaKind.DATE, set())
        return DateSchema()

    # Containers

    def _build_array(self, raw: Mapping[str, Value], path: _Path) -> Schema:
        self._check_keys(raw, path, SchemaKind.ARRAY, {"child", "min", "max"})
        if "child" not in raw:
            raise SchemaBuildError(message="Array schema requires a 'child' key", path=path)
        child = self._build_nested(raw["child"], (*path, "child"), "array child")
        return ArraySchema(
            child=child,
            min_len=_count_option(raw, "min", path, default=0),
            max_len=_count_option(raw, "max", path, default=MAX_COUNT),
        )

    def _build_table(self, raw: Mapping[str, Value], path: _Path) -> Schema:
        fields: dict[str, FieldSpec] = {}
        for raw_key, raw_value in raw.items():
            if raw_key in TABLE_CONTROL_KEYS:
                continue
            name = field_name(raw_key)
            if name in fields:
                raise SchemaBuildError(message=f"Duplicate field '{name}'", path=(*path, raw_key))
            field_schema, default = self.build_node(raw_value, (*path, raw_key))
            fields[name] = FieldSpec(value_schema=field_schema, default=default)

        return TableSchema(
            fields=fields,
            extras=self._build_extras(raw.get("extras", []), (*path, "extras")),
            min_extras=_count_option(raw, "min", path, default=0),
            max_extras=_count_option(raw, "max", path, default=0),
        )

    def _build_extras(self, raw_extras: Value, path: _Path) -> tuple[ExtraRule, ...]:
        if not isinstance(raw_extras, list):
            raise SchemaBuildError(
                message=f"Table extras must be an array, got {type(raw_extras).__name__}",
                path=path,
            )

        rules: list[ExtraRule] = []
        for index, entry in enumerate(raw_extras):
            entry_path = (*path, index)
            if not isinstance(entry, Mapping):
                raise SchemaBuildError(
                    message=f"Extras entry must be a table, got {type(entry).__name__}",
                    path=entry_path,
                )
            self._check_keys(entry, entry_path, "extras entry", {"key", "schema"}, allow_common=False)
            if "key" not in entry:
                raise SchemaBuildError(message="Extras entry requires a 'key' pattern", path=entry_path)
            if "schema" not in entry:
                raise SchemaBuildError(message="Extras entry requires a 'schema' table", path=entry_path)
            key_source = entry["key"]
            if not isinstance(key_source, str):
                raise SchemaBuildError(
                    message=f"Extras key must be a string, got {type(key_source).__name__}",
                    path=(*entry_path, "key"),
                )
            rules.append(
                ExtraRule(
                    key=self._compile(key_source, path=(*entry_path, "key")),
                    value_schema=self._build_nested(entry["schema"], (*entry_path, "schema"), "extras schema"),
                ),
            )
        return tuple(rules)

    def _build_alternative(self, raw: Mapping[str, Value], path: _Path) -> Schema:
        self._check_keys(raw, path, SchemaKind.ALTERNATIVE, {"options"})
        if "options" not in raw:
            raise SchemaBuildError(message="Alternative schema requires an 'options' key", path=path)
        raw_options = raw["options"]
        if not isinstance(raw_options, list):
            raise SchemaBuildError(
                message=f"Alternative options must be an array, got {type(raw_options).__name__}",
                path=(*path, "options"),
            )
        if not raw_options:
            logger.warning("Alternative schema has no options and matches nothing", extra={"path": format_path(path)})
        options = tuple(
            self._build_nested(option, (*path, "options", index), "alternative option")
            for index, option in enumerate(raw_options)
        )
        return AlternativeSchema(options=options)

    # Helpers

    def _build_nested(self, raw: Value, path: _Path, position: str) -> Schema:
        """Build a sub-schema in a position where `default` has no meaning."""
        schema, default = self.build_node(raw, path)
        if default is not None:
            logger.warning(
                f"Ignoring default in {position}",
                extra={"path": format_path(path), "default": default},
            )
        return schema

    def _check_keys(
        self,
        raw: Mapping[str, Value],
        path: _Path,
        kind: SchemaKind | str,
        allowed: set[str],
        *,
        allow_common: bool = True,
    ) -> None:
        """Warn about (or, when strict, reject) keys a schema kind does not consume."""
        known = allowed | {"type", "default"} if allow_common else allowed
        for key in raw:
            if key in known:
                continue
            if self.strict:
                raise SchemaBuildError(message=f"Unexpected key '{key}' in {kind} schema", path=(*path, key))
            logger.warning(
                "Ignoring unexpected schema key",
                extra={"key": key, "kind": str(kind), "path": format_path(path)},
            )


def _int_option(raw: Mapping[str, Value], key: str, path: _Path, *, default: int) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaBuildError(message=f"Int {key} must be an integer, got {type(value).__name__}", path=(*path, key))
    if not INT64_MIN <= value <= INT64_MAX:
        raise SchemaBuildError(message=f"Int {key} {value} is outside the 64-bit range", path=(*path, key))
    return value


def _float_option(raw: Mapping[str, Value], key: str, path: _Path, *, default: float) -> float:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaBuildError(message=f"Float {key} must be a number, got {type(value).__name__}", path=(*path, key))
    return float(value)


def _count_option(raw: Mapping[str, Value], key: str, path: _Path, *, default: int) -> int:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise SchemaBuildError(message=f"{key} must be a non-negative integer, got {value!r}", path=(*path, key))
    return value
