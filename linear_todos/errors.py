"""Exceptions raised by the TODO engine.

Expected absences (no TODO at a position, already-linked items, empty marker
configuration) are reported through return values, never through these.
"""


class LinearTodosError(Exception):
    """Base class for engine errors."""


class InvariantViolation(LinearTodosError):
    """An internal consistency rule was broken (a defect, not a runtime condition)."""


class InvalidIssueIdError(LinearTodosError, ValueError):
    """Issue identifier is not in KEY-NUMBER form and could never be re-extracted."""

    def __init__(self, issue_id: str):
        self.issue_id = issue_id
        super().__init__(f"Invalid issue id '{issue_id}': expected KEY-NUMBER, e.g. ABC-123")
