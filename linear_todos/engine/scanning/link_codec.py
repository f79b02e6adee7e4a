"""Embedded issue-link tokens.

A TODO is linked to a tracker issue by a ``[KEY-NUMBER]`` token written in
the source line just before the marker keyword::

    // [ABC-123] TODO: fix this

The token is persisted in user files, so its format must stay stable.
"""

import logging

from ...models import Span
from .constants import ISSUE_ID_RE, LINK_TOKEN_RE
from .patterns import compile_marker_pattern, find_link_tokens, inside_link_token

logger = logging.getLogger(__name__)


def is_valid_issue_id(issue_id: str) -> bool:
    """Check that an identifier has the KEY-NUMBER form, e.g. ``ABC-123``."""
    return bool(issue_id) and ISSUE_ID_RE.match(issue_id) is not None


def format_link_token(issue_id: str) -> str:
    return f"[{issue_id}]"


def extract_issue_id(line_text: str) -> str | None:
    """Extract the embedded issue id from a line.

    Recognition is independent of where on the line the token sits.

    Args:
        line_text: Line text (raw or trimmed)

    Returns:
        The ``KEY-NUMBER`` identifier, or None if the line carries no token
    """
    match = LINK_TOKEN_RE.search(line_text)
    return match.group(1) if match else None


def locate_marker(line_text: str, pattern: str) -> Span | None:
    """Find the first word-bounded occurrence of a keyword outside link tokens."""
    tokens = find_link_tokens(line_text)
    for m in compile_marker_pattern(pattern).finditer(line_text):
        if not inside_link_token(m.start(), tokens):
            return Span(start=m.start(), end=m.end())
    return None


def inject_issue_id(line_text: str, pattern: str, issue_id: str) -> str:
    """Insert ``[issue_id] `` right before the marker keyword.

    The keyword's case, colon and spacing are left exactly as written, so
    ``// TODO: fix`` becomes ``// [ABC-123] TODO: fix``.

    Args:
        line_text: The raw line text
        pattern: Marker keyword to prefix
        issue_id: Identifier to embed

    Returns:
        The rewritten line, or the input unchanged if the keyword is absent
    """
    span = locate_marker(line_text, pattern)
    if span is None:
        logger.debug(f"Marker '{pattern}' not found, line left unchanged")
        return line_text
    prefix = f"{format_link_token(issue_id)} "
    return f"{line_text[:span.start]}{prefix}{line_text[span.start:]}"
