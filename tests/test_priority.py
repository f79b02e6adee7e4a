"""Tests for priority classification."""

import pytest

from linear_todos.engine.scanning import classify_priority
from linear_todos.models import Priority


@pytest.mark.parametrize(
    ("pattern", "text", "expected"),
    [
        ("BUG", "fix this", Priority.HIGH),
        ("FIXME", "// FIXME: later", Priority.HIGH),
        ("fixme", "lower-case keyword", Priority.HIGH),
        ("XXX", "minor cleanup", Priority.LOW),
        ("TODO", "improve later", Priority.MEDIUM),
        ("TODO", "URGENT fix", Priority.HIGH),
        ("TODO", "this is critical", Priority.HIGH),
        ("HACK", "remove asap", Priority.HIGH),
        ("TODO", "check this!!!", Priority.HIGH),
        ("TODO", "nice to have: dark mode", Priority.LOW),
        ("HACK", "Optional refactor", Priority.LOW),
        ("XXX", "urgent but weird", Priority.HIGH),
        ("HACK", "works for now", Priority.MEDIUM),
    ],
)
def test_classify_priority(pattern, text, expected):
    assert classify_priority(pattern, text) == expected


def test_high_hint_beats_low_keyword_and_hint():
    assert classify_priority("XXX", "MINOR but CRITICAL") == Priority.HIGH


def test_two_exclamation_marks_are_not_high():
    assert classify_priority("TODO", "check this!!") == Priority.MEDIUM


def test_total_over_unknown_keywords():
    assert classify_priority("NOTE", "") == Priority.MEDIUM
