"""Collaborator interfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    import re


class PatternCompiler(Protocol):
    """Compiles the regular expressions found in a schema source."""

    def __call__(self, pattern: str, *, path: tuple[str | int, ...] = ()) -> re.Pattern[str]:
        """Compile `pattern`.

        Args:
            pattern: Regular expression source.
            path: Location of the pattern in the schema source.

        Raises:
            SchemaBuildError: If the pattern is invalid.

        Returns:
            re.Pattern[str]: Compiled pattern with search semantics.
        """
