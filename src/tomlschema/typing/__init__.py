"""Typing-centric domain modules."""

from tomlschema.typing.enums import FailureReason, SchemaKind, ValueKind
from tomlschema.typing.models import (
    AlternativeSchema,
    ArraySchema,
    BooleanSchema,
    DateSchema,
    ExtraRule,
    FieldSpec,
    FloatSchema,
    IntegerSchema,
    MatchResult,
    Schema,
    StringSchema,
    TableSchema,
    ValidationFailure,
)
from tomlschema.typing.protocol import PatternCompiler

__all__ = [
    "AlternativeSchema",
    "ArraySchema",
    "BooleanSchema",
    "DateSchema",
    "ExtraRule",
    "FailureReason",
    "FieldSpec",
    "FloatSchema",
    "IntegerSchema",
    "MatchResult",
    "PatternCompiler",
    "Schema",
    "SchemaKind",
    "StringSchema",
    "TableSchema",
    "ValidationFailure",
    "ValueKind",
]
