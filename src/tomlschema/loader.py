"""Read schema sources and documents from TOML files."""

from __future__ import annotations

import tomllib
from typing import TYPE_CHECKING, Any

from tomlschema.builder import build_schema
from tomlschema.exceptions import DocumentLoadError

if TYPE_CHECKING:
    from pathlib import Path

    from tomlschema.typing.models import Schema


def parse_toml(text: str, *, path: Path) -> dict[str, Any]:
    """Parse TOML text into a value tree.

    Args:
        text (str): TOML source.
        path (Path): Origin of the text, for error reporting.

    Raises:
        DocumentLoadError: If the text is not valid TOML.

    Returns:
        dict[str, Any]: Root table.
    """
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise DocumentLoadError(path=path, message=f"invalid TOML: {exc}") from exc


def read_text(path: Path) -> str:
    """Read a UTF-8 file, wrapping I/O errors in `DocumentLoadError`."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentLoadError(path=path, message=f"unable to read file: {exc}") from exc


def load_toml(path: Path) -> dict[str, Any]:
    """Load a TOML file into a value tree.

    Args:
        path (Path): TOML file.

    Raises:
        DocumentLoadError: If the file cannot be read or parsed.

    Returns:
        dict[str, Any]: Root table.
    """
    return parse_toml(read_text(path), path=path)


def load_schema(path: Path, *, strict: bool = False) -> Schema:
    """Load and build a schema from a TOML file.

    Args:
        path (Path): Schema source file.
        strict (bool): Reject unknown configuration keys.

    Raises:
        DocumentLoadError: If the file cannot be read or parsed.
        SchemaBuildError: If the schema source is malformed.

    Returns:
        Schema: Built schema tree.
    """
    return build_schema(load_toml(path), strict=strict)
