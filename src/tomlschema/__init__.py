"""tomlschema package."""

from tomlschema.builder import SchemaBuilder, build_schema
from tomlschema.completion import complete
from tomlschema.exceptions import (
    DocumentLoadError,
    DocumentValidationError,
    PackageError,
    SchemaBuildError,
    SettingsError,
    UnsupportedValueError,
)
from tomlschema.loader import load_schema, load_toml
from tomlschema.logging import configure_logging, get_logger
from tomlschema.matcher import is_valid, match_value
from tomlschema.schema_store import SchemaStore
from tomlschema.settings import Settings, get_settings
from tomlschema.typing.models import MatchResult, Schema, ValidationFailure

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("tomlschema")

__all__ = [
    "DocumentLoadError",
    "DocumentValidationError",
    "MatchResult",
    "PackageError",
    "Schema",
    "SchemaBuildError",
    "SchemaBuilder",
    "SchemaStore",
    "Settings",
    "SettingsError",
    "UnsupportedValueError",
    "ValidationFailure",
    "__version__",
    "build_schema",
    "complete",
    "configure_logging",
    "get_logger",
    "get_settings",
    "is_valid",
    "load_schema",
    "load_toml",
    "logger",
    "match_value",
]
