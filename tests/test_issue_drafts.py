"""Tests for issue drafts generated from TODOs."""

import pytest

from linear_todos.models import IssueImpact, Priority
from linear_todos.services import (
    build_issue_draft,
    clean_todo_text,
    default_impact,
    generate_issue_description,
    generate_issue_title,
    impact_to_tracker_priority,
    tracker_priority_label,
)

SAMPLE_DOC = "src/services/user_service.ts"


@pytest.fixture
def auth_todo(sample_index):
    return sample_index.find_on_line(SAMPLE_DOC, 5)


class TestCleanText:
    def test_strips_comment_and_marker(self, auth_todo):
        assert clean_todo_text(auth_todo) == "Implement proper authentication validation"

    def test_strips_link_token(self, sample_index):
        linked = sample_index.find_on_line(SAMPLE_DOC, 13)
        assert clean_todo_text(linked) == "Remove password from user interface"

    def test_marker_only(self, index):
        item = index.scan("a.py", ["# TODO:"])[0]
        assert clean_todo_text(item) == ""


class TestTitle:
    def test_title_has_short_location(self, auth_todo):
        assert generate_issue_title(auth_todo) == (
            "Implement proper authentication validation • user_service.ts:6"
        )

    def test_long_title_is_truncated(self, index):
        item = index.scan("pkg/mod.py", ["# TODO: " + "word " * 40])[0]
        title = generate_issue_title(item, max_length=80)
        assert len(title) <= 80
        assert title.endswith("... • mod.py:1")

    def test_empty_description_falls_back_to_pattern(self, index):
        item = index.scan("a.py", ["# fixme"], patterns=["FIXME"])[0]
        assert generate_issue_title(item) == "FIXME item • a.py:1"


class TestDescription:
    def test_location_and_fenced_context(self, auth_todo):
        description = generate_issue_description(auth_todo)
        lines = description.splitlines()
        assert lines[0] == f"**Location:** `{SAMPLE_DOC}:6`"
        assert "```ts" in lines
        assert lines[-1] == "```"
        assert ">>> \t// TODO: Implement proper authentication validation" in lines

    def test_extensionless_file(self, index):
        item = index.scan("Makefile", ["# TODO: targets"])[0]
        assert "```text" in generate_issue_description(item).splitlines()


class TestPriorityMapping:
    @pytest.mark.parametrize(
        ("impact", "expected"),
        [(IssueImpact.HIGH, 2), (IssueImpact.MEDIUM, 3), (IssueImpact.LOW, 4)],
    )
    def test_impact_to_tracker_priority(self, impact, expected):
        assert impact_to_tracker_priority(impact) == expected

    def test_default_impact_follows_priority(self):
        assert default_impact(Priority.HIGH) == IssueImpact.HIGH
        assert default_impact(Priority.LOW) == IssueImpact.LOW

    @pytest.mark.parametrize(
        ("priority", "label"),
        [
            (1, "Urgent"),
            (2, "High"),
            (3, "Medium"),
            (4, "Low"),
            (0, "No Priority"),
            (None, "No Priority"),
        ],
    )
    def test_tracker_priority_label(self, priority, label):
        assert tracker_priority_label(priority) == label


def test_build_issue_draft(sample_index):
    fixme = sample_index.find_on_line(SAMPLE_DOC, 7)
    draft = build_issue_draft(fixme, team_id="team-1")
    assert draft.impact == IssueImpact.HIGH
    assert draft.priority == 2
    assert draft.team_id == "team-1"
    assert draft.title.startswith("This is a security vulnerability")

    low = build_issue_draft(fixme, impact=IssueImpact.LOW)
    assert low.priority == 4
