"""Scanning engine for TODO markers.

This package provides the per-line building blocks used by the TODO index:
- Marker detection (word-bounded, case-insensitive keyword matching)
- Priority classification from keyword and free-text hints
- Issue-link token recognition and injection

Usage:
    from linear_todos.engine.scanning import (
        classify_priority,
        extract_issue_id,
        find_markers,
        inject_issue_id,
    )
"""

from .constants import (
    CONTEXT_LINE_PREFIX,
    CONTEXT_TARGET_PREFIX,
    DEFAULT_CONTEXT_RADIUS,
    DEFAULT_TODO_PATTERNS,
    HIGH_PRIORITY_MARKERS,
    HIGH_PRIORITY_PATTERNS,
    LINK_TOKEN_RE,
    LOW_PRIORITY_MARKERS,
    LOW_PRIORITY_PATTERNS,
)
from .link_codec import (
    extract_issue_id,
    format_link_token,
    inject_issue_id,
    is_valid_issue_id,
    locate_marker,
)
from .patterns import compile_marker_pattern, find_link_tokens
from .priority import classify_priority
from .scanner import find_markers, has_marker, normalize_patterns

__all__ = [
    # Constants
    "CONTEXT_LINE_PREFIX",
    "CONTEXT_TARGET_PREFIX",
    "DEFAULT_CONTEXT_RADIUS",
    "DEFAULT_TODO_PATTERNS",
    "HIGH_PRIORITY_MARKERS",
    "HIGH_PRIORITY_PATTERNS",
    "LINK_TOKEN_RE",
    "LOW_PRIORITY_MARKERS",
    "LOW_PRIORITY_PATTERNS",
    # Patterns
    "compile_marker_pattern",
    "find_link_tokens",
    # Scanner
    "find_markers",
    "has_marker",
    "normalize_patterns",
    # Priority
    "classify_priority",
    # Link codec
    "extract_issue_id",
    "format_link_token",
    "inject_issue_id",
    "is_valid_issue_id",
    "locate_marker",
]
