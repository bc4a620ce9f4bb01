"""In-memory cache of built schemas."""

from __future__ import annotations

import hashlib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from tomlschema.builder import build_schema
from tomlschema.exceptions import DocumentLoadError
from tomlschema.loader import parse_toml, read_text
from tomlschema.logging import get_logger
from tomlschema.typing.models import Schema  # noqa: TC001

logger = get_logger(__name__)

SCHEMA_SUFFIX = ".toml"


class SchemaStore(BaseModel):
    """Builds each distinct schema source once and reuses the tree.

    Entries are keyed by the SHA-256 of the source text, so an edited file is
    rebuilt while an unchanged file (or an identical copy) is served from cache.
    """

    model_config = ConfigDict(extra="forbid")

    strict: bool = Field(default=False, description="Reject unknown configuration keys.")
    _schemas: dict[str, Schema] = PrivateAttr(default_factory=dict)

    @staticmethod
    def fingerprint(text: str) -> str:
        """Compute stable schema source fingerprint.

        Args:
            text (str): Schema source text.

        Returns:
            str: SHA-256 hex digest.
        """
        return hashlib.sha256(text.encode("utf-8")).hexdigest()

    def load(self, path: Path) -> Schema:
        """Return the schema built from a TOML file, building it on first use.

        Args:
            path (Path): Schema source file.

        Raises:
            DocumentLoadError: If the file cannot be read or parsed.
            SchemaBuildError: If the schema source is malformed.

        Returns:
            Schema: Built schema tree.
        """
        return self.load_text(read_text(path), path=path)

    def load_text(self, text: str, *, path: Path) -> Schema:
        """Return the schema built from TOML text, building it on first use.

        Args:
            text (str): Schema source text.
            path (Path): Origin of the text, for error reporting.

        Returns:
            Schema: Built schema tree.
        """
        key = self.fingerprint(text)
        cached = self._schemas.get(key)
        if cached is not None:
            return cached

        schema = build_schema(parse_toml(text, path=path), strict=self.strict)
        self._schemas[key] = schema
        logger.info("Schema built", extra={"schema_path": str(path), "fingerprint": key[:12]})
        return schema

    def clear(self) -> None:
        """Drop every cached schema."""
        self._schemas.clear()

    def __len__(self) -> int:
        """Return the number of cached schemas."""
        return len(self._schemas)

    @staticmethod
    def list_schemas(root: Path) -> list[Path]:
        """List schema source files in a directory.

        Args:
            root (Path): Directory to scan (not recursive).

        Raises:
            DocumentLoadError: If `root` is not a directory.

        Returns:
            list[Path]: Sorted schema files.
        """
        if not isinstance(root, Path) or not root.is_dir():
            raise DocumentLoadError(path=Path(root), message="schema directory does not exist")
        return sorted(path for path in root.glob(f"*{SCHEMA_SUFFIX}") if path.is_file())
