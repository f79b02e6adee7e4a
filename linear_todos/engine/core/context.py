"""Context snippets around a line.

Snippets are independent of marker detection and work for any line index.
"""

from collections.abc import Sequence

from ..scanning.constants import (
    CONTEXT_LINE_PREFIX,
    CONTEXT_TARGET_PREFIX,
    DEFAULT_CONTEXT_RADIUS,
)


def context_bounds(line_count: int, line_number: int, radius: int) -> tuple[int, int]:
    """Inclusive ``(first, last)`` line indices of the snippet, clamped to the document."""
    first = max(0, line_number - radius)
    last = min(line_count - 1, line_number + radius)
    return first, last


def extract_context(
    lines: Sequence[str],
    line_number: int,
    radius: int = DEFAULT_CONTEXT_RADIUS,
) -> str:
    """Build a monospace-aligned snippet centred on a line.

    The target line is prefixed with ``">>> "`` and the others with four
    spaces. Near the start or end of the document fewer lines are returned.

    Args:
        lines: All lines of the document
        line_number: Target line (0-indexed)
        radius: Lines to include before and after the target

    Returns:
        Newline-joined snippet, or "" if the line index is out of range
    """
    if not 0 <= line_number < len(lines):
        return ""

    first, last = context_bounds(len(lines), line_number, max(0, radius))
    snippet = []
    for i in range(first, last + 1):
        prefix = CONTEXT_TARGET_PREFIX if i == line_number else CONTEXT_LINE_PREFIX
        snippet.append(f"{prefix}{lines[i]}")
    return "\n".join(snippet)
