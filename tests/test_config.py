"""Tests for environment-driven settings."""

from fastapi.testclient import TestClient

from linear_todos.config import DEFAULT_TODO_PATTERNS, Settings
from linear_todos.server import create_app


def test_defaults(monkeypatch):
    monkeypatch.delenv("LINEAR_TODOS_TODO_PATTERNS", raising=False)
    settings = Settings()
    assert settings.todo_patterns == list(DEFAULT_TODO_PATTERNS)
    assert settings.context_radius == 2
    assert settings.team_id is None


def test_patterns_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv("LINEAR_TODOS_TODO_PATTERNS", "TODO, NOTE ,,REVIEW")
    assert Settings().todo_patterns == ["TODO", "NOTE", "REVIEW"]


def test_patterns_from_json_env(monkeypatch):
    monkeypatch.setenv("LINEAR_TODOS_TODO_PATTERNS", '["FIXME", "BUG"]')
    assert Settings().todo_patterns == ["FIXME", "BUG"]


def test_empty_patterns_env(monkeypatch):
    monkeypatch.setenv("LINEAR_TODOS_TODO_PATTERNS", "")
    assert Settings().todo_patterns == []


def test_cors_origins_list():
    assert Settings(cors_allowed_origins="*").cors_origins_list == ["*"]
    assert Settings(cors_allowed_origins="https://a.dev, https://b.dev").cors_origins_list == [
        "https://a.dev",
        "https://b.dev",
    ]


def test_malformed_json_patterns_find_nothing(monkeypatch):
    monkeypatch.setenv("LINEAR_TODOS_TODO_PATTERNS", "[TODO")
    assert Settings().todo_patterns == []


def test_non_string_pattern_entries_are_dropped(monkeypatch):
    monkeypatch.setenv("LINEAR_TODOS_TODO_PATTERNS", '["TODO", 3, null, "BUG"]')
    assert Settings().todo_patterns == ["TODO", "BUG"]


def test_empty_or_non_list_patterns_find_nothing(monkeypatch):
    monkeypatch.setenv("LINEAR_TODOS_TODO_PATTERNS", "[]")
    assert Settings().todo_patterns == []
    assert Settings(todo_patterns={"TODO": 1}).todo_patterns == []


def test_server_starts_with_malformed_patterns(monkeypatch):
    monkeypatch.setenv("LINEAR_TODOS_TODO_PATTERNS", "[TODO")
    with TestClient(create_app(Settings())) as client:
        response = client.post(
            "/v1/documents/scan", json={"document_id": "a.py", "lines": ["# TODO: x"]}
        )
    assert response.json()["count"] == 0
