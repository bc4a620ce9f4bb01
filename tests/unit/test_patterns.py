from __future__ import annotations

import pytest

from tomlschema.exceptions import SchemaBuildError
from tomlschema.patterns import MATCH_ANYTHING, compile_pattern, search


def test_match_anything_matches_every_string() -> None:
    assert search(MATCH_ANYTHING, "")
    assert search(MATCH_ANYTHING, "anything at all")


def test_search_has_substring_semantics() -> None:
    pattern = compile_pattern("b")

    assert search(pattern, "abc")
    assert not search(compile_pattern("^b$"), "abc")


def test_invalid_pattern_reports_schema_path() -> None:
    with pytest.raises(SchemaBuildError) as exc_info:
        compile_pattern("a(", path=("name", "regex"))

    assert exc_info.value.path == ("name", "regex")
    assert "Invalid regex 'a('" in exc_info.value.message
