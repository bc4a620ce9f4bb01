"""Core domain model exports."""

from tomlschema.typing.models.match import MatchResult, ValidationFailure
from tomlschema.typing.models.schema import (
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

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "MAX_COUNT",
    "AlternativeSchema",
    "ArraySchema",
    "BooleanSchema",
    "DateSchema",
    "ExtraRule",
    "FieldSpec",
    "FloatSchema",
    "IntegerSchema",
    "MatchResult",
    "Schema",
    "StringSchema",
    "TableSchema",
    "ValidationFailure",
]
