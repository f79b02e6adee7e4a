"""Pydantic models for Linear TODOs.

This module re-exports all models. Import from submodules directly for
narrower imports:

    from linear_todos.models.enums import Priority
    from linear_todos.models.todos import TodoItem
"""

# ============ ENUMS ============
from .enums import IssueImpact, LinkStatus, Priority

# ============ HEALTH MODELS ============
from .health import HealthResponse

# ============ ISSUE MODELS ============
from .issues import IssueDraft, TrackerIssue, TrackerLabel, TrackerTeam

# ============ LINK MODELS ============
from .links import LinkResult, PendingLink

# ============ TODO MODELS ============
from .todos import MarkerMatch, Span, TodoItem, TodoSummary

__all__ = [
    # Enums
    "IssueImpact",
    "LinkStatus",
    "Priority",
    # Health
    "HealthResponse",
    # Issues
    "IssueDraft",
    "TrackerIssue",
    "TrackerLabel",
    "TrackerTeam",
    # Links
    "LinkResult",
    "PendingLink",
    # TODOs
    "MarkerMatch",
    "Span",
    "TodoItem",
    "TodoSummary",
]
