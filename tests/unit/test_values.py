from __future__ import annotations

import datetime as dt

import pytest

from tomlschema.exceptions import UnsupportedValueError
from tomlschema.typing.enums import ValueKind
from tomlschema.values import describe, value_kind


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("text", ValueKind.STRING),
        (3, ValueKind.INTEGER),
        (True, ValueKind.BOOLEAN),
        (2.5, ValueKind.FLOAT),
        (dt.date(2020, 1, 1), ValueKind.DATE),
        (dt.datetime(2020, 1, 1, 8, 0), ValueKind.DATE),
        (dt.time(8, 0), ValueKind.DATE),
        ([1, 2], ValueKind.ARRAY),
        ((1, 2), ValueKind.ARRAY),
        ({"a": 1}, ValueKind.TABLE),
    ],
)
def test_value_kind(value: object, expected: ValueKind) -> None:
    assert value_kind(value) == expected


def test_value_kind_rejects_values_outside_the_model() -> None:
    with pytest.raises(UnsupportedValueError, match="unsupported value of type 'NoneType'"):
        value_kind(None, path=("a", 0))


def test_describe_truncates_long_values() -> None:
    text = describe("x" * 200)

    assert len(text) == 60
    assert text.endswith("...")
