"""Schema-centric domain models.

A built schema is a finite, acyclic tree of frozen models. Every container node
exclusively owns its children, so a tree can be shared read-only between
validations without copying.
"""

from __future__ import annotations

import math
import re
import sys
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from tomlschema.patterns import MATCH_ANYTHING
from tomlschema.typing.enums import SchemaKind

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
MAX_COUNT = sys.maxsize


class _SchemaNode(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class StringSchema(_SchemaNode):
    """String scalar whose text must contain a match of `pattern`."""

    kind: Literal[SchemaKind.STRING] = SchemaKind.STRING
    pattern: re.Pattern[str] = MATCH_ANYTHING


class IntegerSchema(_SchemaNode):
    """64-bit signed integer within an inclusive range."""

    kind: Literal[SchemaKind.INTEGER] = SchemaKind.INTEGER
    min: int = INT64_MIN
    max: int = INT64_MAX


class FloatSchema(_SchemaNode):
    """Float within an inclusive range, optionally accepting NaN."""

    kind: Literal[SchemaKind.FLOAT] = SchemaKind.FLOAT
    min: float = -math.inf
    max: float = math.inf
    nan_ok: bool = False


class BooleanSchema(_SchemaNode):
    """Boolean scalar."""

    kind: Literal[SchemaKind.BOOLEAN] = SchemaKind.BOOLEAN


class DateSchema(_SchemaNode):
    """Date, time or date-time scalar."""

    kind: Literal[SchemaKind.DATE] = SchemaKind.DATE


class ArraySchema(_SchemaNode):
    """Array whose length is bounded and whose elements all match `child`."""

    kind: Literal[SchemaKind.ARRAY] = SchemaKind.ARRAY
    child: Schema
    min_len: int = Field(default=0, ge=0)
    max_len: int = Field(default=MAX_COUNT, ge=0)


class FieldSpec(_SchemaNode):
    """Explicitly named table entry.

    A field with a default is optional; the default itself is never checked
    against `value_schema`.
    """

    value_schema: Schema
    default: Any = None

    @property
    def required(self) -> bool:
        """Return whether the field must be present in the document."""
        return self.default is None


class ExtraRule(_SchemaNode):
    """Pattern-keyed rule for table keys not claimed by an explicit field."""

    key: re.Pattern[str]
    value_schema: Schema


class TableSchema(_SchemaNode):
    """Table with explicit fields and pattern-governed extra keys."""

    kind: Literal[SchemaKind.TABLE] = SchemaKind.TABLE
    fields: dict[str, FieldSpec] = Field(default_factory=dict)
    extras: tuple[ExtraRule, ...] = ()
    min_extras: int = Field(default=0, ge=0)
    max_extras: int = Field(default=0, ge=0)


class AlternativeSchema(_SchemaNode):
    """Matches a value accepted by at least one of `options`."""

    kind: Literal[SchemaKind.ALTERNATIVE] = SchemaKind.ALTERNATIVE
    options: tuple[Schema, ...] = ()


Schema = Annotated[
    StringSchema
    | IntegerSchema
    | FloatSchema
    | BooleanSchema
    | DateSchema
    | ArraySchema
    | TableSchema
    | AlternativeSchema,
    Field(discriminator="kind"),
]

ArraySchema.model_rebuild()
FieldSpec.model_rebuild()
ExtraRule.model_rebuild()
TableSchema.model_rebuild()
AlternativeSchema.model_rebuild()
