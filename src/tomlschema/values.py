"""Adapter between parsed documents and the value kinds schemas talk about.

Documents are the plain trees produced by `tomllib`: strings, integers,
floats, booleans, `datetime` objects, lists and dicts.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Mapping
from typing import Any, TypeAlias

from tomlschema.exceptions import UnsupportedValueError
from tomlschema.typing.enums import ValueKind

Value: TypeAlias = Any

_DESCRIBE_LIMIT = 60


def value_kind(value: Value, *, path: tuple[str | int, ...] = ()) -> ValueKind:
    """Classify a document value.

    Args:
        value (Value): Document value.
        path (tuple[str | int, ...]): Location of the value, for error reporting.

    Raises:
        UnsupportedValueError: If the value is not part of the document value model.

    Returns:
        ValueKind: Kind of the value.
    """
    # bool is a subclass of int and must be tested first.
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, int):
        return ValueKind.INTEGER
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return ValueKind.DATE
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.TABLE
    raise UnsupportedValueError(value_type=type(value).__name__, path=path)


def describe(value: Value) -> str:
    """Return a short representation of a value for diagnostics."""
    text = repr(value)
    if len(text) > _DESCRIBE_LIMIT:
        text = text[: _DESCRIBE_LIMIT - 3] + "..."
    return text
