"""Regular expression provider for string and extras-key patterns."""

from __future__ import annotations

import re

from tomlschema.exceptions import SchemaBuildError

# The empty pattern is found in every string, including "".
MATCH_ANYTHING: re.Pattern[str] = re.compile("")


def compile_pattern(pattern: str, *, path: tuple[str | int, ...] = ()) -> re.Pattern[str]:
    """Compile a schema pattern.

    Patterns use search semantics: a string matches when the pattern is found
    anywhere in it. Use `^` and `$` to require a full match.

    Args:
        pattern (str): Regular expression source.
        path (tuple[str | int, ...]): Location of the pattern in the schema source.

    Raises:
        SchemaBuildError: If the pattern is not a valid regular expression.

    Returns:
        re.Pattern[str]: Compiled pattern.
    """
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise SchemaBuildError(message=f"Invalid regex {pattern!r}: {exc}", path=path) from exc


def search(pattern: re.Pattern[str], text: str) -> bool:
    """Return whether `pattern` is found anywhere in `text`."""
    return pattern.search(text) is not None
