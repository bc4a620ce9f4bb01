"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from tomlschema.typing.models import ValidationFailure


def format_path(path: tuple[str | int, ...]) -> str:
    """Render a key/index path as a dotted string.

    Args:
        path: Keys (tables) and indices (arrays) from the root.

    Returns:
        str: Dotted path, `<root>` for the empty path.
    """
    if not path:
        return "<root>"
    rendered = ""
    for part in path:
        if isinstance(part, int):
            rendered += f"[{part}]"
        elif rendered:
            rendered += f".{part}"
        else:
            rendered = part
    return rendered


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass(frozen=True)
class SchemaBuildError(PackageError):
    """Raised when a schema source is malformed."""

    message: str
    path: tuple[str | int, ...] = field(default=())

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{format_path(self.path)}: {self.message}"


@dataclass(frozen=True)
class DocumentLoadError(PackageError):
    """Raised when a schema or document file cannot be read or parsed."""

    path: Path
    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.path}: {self.message}"


@dataclass(frozen=True)
class DocumentValidationError(PackageError):
    """Raised by helpers that require a document to match its schema."""

    failure: ValidationFailure

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Document does not match schema: {self.failure.render()}"


@dataclass(frozen=True)
class UnsupportedValueError(PackageError):
    """Raised when a document contains a Python object outside the value model."""

    value_type: str
    path: tuple[str | int, ...] = field(default=())

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{format_path(self.path)}: unsupported value of type '{self.value_type}'"
