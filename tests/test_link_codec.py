"""Tests for issue-link token recognition and injection."""

import pytest

from linear_todos.engine.scanning import (
    extract_issue_id,
    find_link_tokens,
    inject_issue_id,
    is_valid_issue_id,
    locate_marker,
)


class TestExtract:
    def test_token_before_marker(self):
        assert extract_issue_id("// [ABC-123] TODO: fix this") == "ABC-123"

    def test_token_anywhere_on_line(self):
        assert extract_issue_id("TODO: see [OPS-9] for details") == "OPS-9"

    @pytest.mark.parametrize(
        "line", ["TODO: fix", "[abc-1] TODO", "[ABC-] TODO", "[-12] TODO", "ABC-12 TODO"]
    )
    def test_no_token(self, line):
        assert extract_issue_id(line) is None

    def test_token_ranges(self):
        assert find_link_tokens("[A-1] x [B-22]") == [(0, 5), (8, 14)]


class TestInject:
    def test_prefixes_keyword_and_keeps_colon(self):
        assert inject_issue_id("// TODO: add validation", "TODO", "ABC-42") == (
            "// [ABC-42] TODO: add validation"
        )

    def test_keeps_keyword_case_and_spacing(self):
        assert inject_issue_id("#  todo   spaced", "TODO", "X-1") == "#  [X-1] todo   spaced"

    def test_keyword_missing_is_noop(self):
        assert inject_issue_id("// nothing here", "TODO", "ABC-1") == "// nothing here"

    def test_word_bounded(self):
        assert inject_issue_id("TODOS and TODO", "TODO", "A-1") == "TODOS and [A-1] TODO"

    @pytest.mark.parametrize(
        ("line", "pattern"),
        [
            ("// TODO: fix", "TODO"),
            ("\t# FIXME later", "FIXME"),
            ("/* HACK */", "HACK"),
            ("XXX", "XXX"),
            ("  bug: crash", "BUG"),
        ],
    )
    def test_round_trip(self, line, pattern):
        assert extract_issue_id(inject_issue_id(line, pattern, "ENG-77")) == "ENG-77"

    def test_locate_marker_skips_link_token(self):
        span = locate_marker("[BUG-3] BUG: crash", "BUG")
        assert (span.start, span.end) == (8, 12)


def test_issue_id_validation():
    assert is_valid_issue_id("ABC-123")
    assert not is_valid_issue_id("abc-123")
    assert not is_valid_issue_id("ABC123")
    assert not is_valid_issue_id("")
