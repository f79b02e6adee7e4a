"""Enumeration types for Linear TODOs."""

from enum import StrEnum


class Priority(StrEnum):
    """Priority inferred from a TODO's keyword and text."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class LinkStatus(StrEnum):
    """Outcome of requesting a link between a TODO and a tracker issue."""

    PENDING = "pending"  # Rewrite computed, waiting for the host to apply it
    ALREADY_LINKED = "already_linked"  # Line already carries an issue token
    PATTERN_NOT_FOUND = "pattern_not_found"  # Keyword no longer on the line
    NOT_INDEXED = "not_indexed"  # Document or item not in the index
    LINKED = "linked"  # Edit applied and cache updated
    STALE = "stale"  # Edit applied but the cache changed before confirmation
    CANCELLED = "cancelled"  # No issue was created


class IssueImpact(StrEnum):
    """Business impact chosen when filing an issue from a TODO."""

    HIGH = "high"  # Critical issue affecting functionality or security
    MEDIUM = "medium"  # Standard improvement or technical debt
    LOW = "low"  # Minor enhancement or polish
