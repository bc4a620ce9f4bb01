"""Matching result models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from tomlschema.exceptions import format_path
from tomlschema.typing.enums import FailureReason


class ValidationFailure(BaseModel):
    """First point at which a document diverged from its schema."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: tuple[str | int, ...] = ()
    reason: FailureReason
    message: str
    causes: tuple[ValidationFailure, ...] = Field(
        default=(),
        description="Per-option failures when no alternative matched.",
    )

    @property
    def location(self) -> str:
        """Return the dotted document path of the failure."""
        return format_path(self.path)

    def render(self, indent: int = 0) -> str:
        """Render the failure and its causes as indented text.

        Args:
            indent (int): Indentation depth of the first line.

        Returns:
            str: Human readable report.
        """
        pad = "  " * indent
        lines = [f"{pad}{self.location}: {self.message} [{self.reason.value}]"]
        lines.extend(cause.render(indent + 1) for cause in self.causes)
        return "\n".join(lines)


class MatchResult(BaseModel):
    """Schema matching output."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    matched: bool
    failure: ValidationFailure | None = None

    @classmethod
    def ok(cls) -> MatchResult:
        """Return a successful result."""
        return cls(matched=True)

    @classmethod
    def failed(cls, failure: ValidationFailure) -> MatchResult:
        """Return a failed result carrying `failure`."""
        return cls(matched=False, failure=failure)

    def __bool__(self) -> bool:
        """Return whether the document matched."""
        return self.matched
