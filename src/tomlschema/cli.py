"""CLI entry point for tomlschema."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from tomlschema import __version__
from tomlschema.exceptions import DocumentLoadError, PackageError
from tomlschema.loader import load_toml
from tomlschema.logging import configure_logging, get_logger
from tomlschema.matcher import match_value
from tomlschema.schema_store import SchemaStore
from tomlschema.settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Sequence

    from tomlschema.typing.models import MatchResult, Schema

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_SCHEMA_ERROR = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line parser.

    Returns:
        argparse.ArgumentParser: The configured argument parser.
    """
    parser = argparse.ArgumentParser(prog="tomlschema", description="Validate TOML documents against TOML schemas")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command")

    check_parser = subparsers.add_parser("check", help="Validate documents against a schema")
    check_parser.add_argument("--schema", required=True, type=Path, dest="schema_path")
    check_parser.add_argument("documents", nargs="+", type=Path)
    check_parser.add_argument("--strict", action=argparse.BooleanOptionalAction, default=None)
    check_parser.add_argument("--json", action="store_true", dest="as_json")

    lint_parser = subparsers.add_parser("lint", help="Check that a schema source builds")
    lint_parser.add_argument("schema_path", type=Path)
    lint_parser.add_argument("--strict", action=argparse.BooleanOptionalAction, default=None)

    return parser


def _load_schema(store: SchemaStore, schema_path: Path) -> Schema | None:
    """Build the schema, reporting problems on stderr.

    Args:
        store (SchemaStore): Schema cache.
        schema_path (Path): Schema source file.

    Returns:
        Schema | None: Built schema, or None when it could not be built.
    """
    try:
        return store.load(schema_path)
    except PackageError as exc:
        logger.error("Schema could not be built", extra={"schema_path": str(schema_path), "error": str(exc)})
        print(f"error: {exc}", file=sys.stderr)  # noqa: T201
        return None


def _report(document_path: Path, result: MatchResult, *, as_json: bool) -> None:
    """Print the outcome for one document on stdout."""
    if as_json:
        payload = {
            "document": str(document_path),
            "matched": result.matched,
            "failure": result.failure.model_dump(mode="json") if result.failure else None,
        }
        print(json.dumps(payload, sort_keys=True))  # noqa: T201
        return
    if result.failure is None:
        print(f"OK {document_path}")  # noqa: T201
        return
    print(f"FAIL {document_path}")  # noqa: T201
    print(result.failure.render(indent=1))  # noqa: T201


def _run_check(args: argparse.Namespace, *, strict: bool) -> int:
    """Validate every document given on the command line.

    Args:
        args (argparse.Namespace): Parsed CLI args.
        strict (bool): Reject unknown schema configuration keys.

    Returns:
        int: Exit code.
    """
    schema = _load_schema(SchemaStore(strict=strict), args.schema_path)
    if schema is None:
        return EXIT_SCHEMA_ERROR

    exit_code = EXIT_OK
    for document_path in args.documents:
        try:
            document = load_toml(document_path)
        except DocumentLoadError as exc:
            logger.error("Document could not be loaded", extra={"document": str(document_path), "error": str(exc)})
            print(f"error: {exc}", file=sys.stderr)  # noqa: T201
            exit_code = EXIT_INVALID
            continue

        result = match_value(schema, document)
        _report(document_path, result, as_json=args.as_json)
        if not result.matched:
            exit_code = EXIT_INVALID

    logger.info("Validation finished", extra={"documents": len(args.documents), "exit_code": exit_code})
    return exit_code


def _run_lint(args: argparse.Namespace, *, strict: bool) -> int:
    """Build a schema source without validating any document."""
    if _load_schema(SchemaStore(strict=strict), args.schema_path) is None:
        return EXIT_SCHEMA_ERROR
    print(f"OK {args.schema_path}")  # noqa: T201
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI.

    Args:
        argv (Sequence[str] | None): Arguments, defaults to `sys.argv[1:]`.

    Returns:
        int: Exit code (0 valid, 1 invalid document, 2 schema error, 130 interrupted).
    """
    settings = get_settings()
    configure_logging(settings=settings)

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command not in {"check", "lint"}:
        parser.print_help()
        return EXIT_OK

    strict = settings.strict_schemas if args.strict is None else args.strict
    try:
        if args.command == "check":
            return _run_check(args, strict=strict)
        return _run_lint(args, strict=strict)
    except KeyboardInterrupt:
        logger.info("Validation aborted by user")
        return EXIT_INTERRUPTED
    except Exception:
        logger.exception("Unexpected error during validation")
        return EXIT_INVALID


if __name__ == "__main__":
    raise SystemExit(main())
