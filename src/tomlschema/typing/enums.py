"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class SchemaKind(_EnumMixin):
    """Schema variants, spelled as in the `type` key of a schema source."""

    STRING = "string"
    INTEGER = "int"
    FLOAT = "float"
    BOOLEAN = "bool"
    DATE = "date"
    ARRAY = "array"
    TABLE = "table"
    ALTERNATIVE = "alternative"


class ValueKind(_EnumMixin):
    """Kinds of values found in a parsed document."""

    STRING = "string"
    INTEGER = "int"
    FLOAT = "float"
    BOOLEAN = "bool"
    DATE = "date"
    ARRAY = "array"
    TABLE = "table"


class FailureReason(_EnumMixin):
    """Why a document did not match a schema."""

    TYPE_MISMATCH = "type_mismatch"
    OUT_OF_BOUNDS = "out_of_bounds"
    NAN_NOT_ALLOWED = "nan_not_allowed"
    PATTERN_MISMATCH = "pattern_mismatch"
    ARRAY_LENGTH = "array_length"
    MISSING_KEY = "missing_key"
    UNEXPECTED_KEY = "unexpected_key"
    EXTRAS_COUNT = "extras_count"
    NO_ALTERNATIVE = "no_alternative"
