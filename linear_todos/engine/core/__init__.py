"""Engine core module.

This module contains core utilities and data structures for the TODO engine:
- Document cache entries
- Line splitting
- Context snippets
"""

from .context import context_bounds, extract_context
from .document import DocumentIndex, split_lines

__all__ = [
    # Document structures
    "DocumentIndex",
    "split_lines",
    # Context utilities
    "context_bounds",
    "extract_context",
]
