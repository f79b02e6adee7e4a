"""Shared fixtures for the Linear TODOs test suite."""

import pytest

from linear_todos.engine import TodoIndex

SCENARIO_LINES = [
    "// TODO: add validation",
    "// normal code",
    "// FIXME: urgent null check!!!",
]

SAMPLE_TS = [
    "// Sample TypeScript file",
    "",
    "export class UserService {",
    "\tprivate users: User[] = [];",
    "",
    "\t// TODO: Implement proper authentication validation",
    "\tasync authenticateUser(username: string, password: string): Promise<boolean> {",
    "\t\t// FIXME: This is a security vulnerability - passwords should be hashed!",
    "\t\treturn false;",
    "\t}",
    "",
    "\t// HACK: Temporary workaround for user creation",
    "\t// XXX: This method needs optimization for large datasets",
    "\t// [ENG-12] TODO: Remove password from user interface",
    "}",
]


@pytest.fixture
def index() -> TodoIndex:
    return TodoIndex()


@pytest.fixture
def scenario_index(index: TodoIndex) -> TodoIndex:
    index.scan("src/app.ts", SCENARIO_LINES)
    return index


@pytest.fixture
def sample_index(index: TodoIndex) -> TodoIndex:
    index.scan("src/services/user_service.ts", SAMPLE_TS)
    return index
