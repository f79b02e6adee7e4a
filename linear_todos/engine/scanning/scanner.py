"""Marker scanning for single lines of source text.

A marker is a configured keyword (TODO, FIXME, ...) matched case-insensitively
and word-bounded, optionally followed by a colon. The span covers only the
keyword token (plus colon); the rest of the line is the TODO's text.
"""

import logging
from collections.abc import Iterable

from ...models import MarkerMatch, Span
from .patterns import compile_marker_pattern, find_link_tokens, inside_link_token

logger = logging.getLogger(__name__)


def normalize_patterns(patterns: Iterable[str] | None) -> list[str]:
    """Clean a configured keyword list.

    Non-string and blank entries are dropped, surrounding whitespace is
    stripped, and case-insensitive duplicates keep their first spelling.

    Args:
        patterns: Keywords as configured (may be None or malformed)

    Returns:
        Usable keywords in configured order
    """
    if patterns is None:
        return []
    if isinstance(patterns, str):
        patterns = [patterns]

    seen: set[str] = set()
    cleaned: list[str] = []
    for raw in patterns:
        if not isinstance(raw, str):
            logger.warning(f"Ignoring non-string marker pattern: {raw!r}")
            continue
        keyword = raw.strip()
        if not keyword:
            continue
        folded = keyword.casefold()
        if folded in seen:
            continue
        seen.add(folded)
        cleaned.append(keyword)
    return cleaned


def find_markers(line_text: str, patterns: Iterable[str] | None) -> list[MarkerMatch]:
    """Find marker occurrences on one line.

    Each keyword is searched once, so a keyword contributes at most its first
    occurrence; distinct keywords on the same line each produce a match.
    Occurrences inside an embedded link token such as ``[BUG-12]`` are skipped.

    Args:
        line_text: The raw line text
        patterns: Configured marker keywords

    Returns:
        Matches ordered by start column
    """
    keywords = normalize_patterns(patterns)
    if not keywords or not line_text:
        return []

    tokens = find_link_tokens(line_text)
    matches: list[MarkerMatch] = []
    taken: set[int] = set()

    for keyword in keywords:
        for m in compile_marker_pattern(keyword).finditer(line_text):
            start, end = m.span()
            if inside_link_token(start, tokens):
                continue
            if start in taken:
                break
            taken.add(start)
            matches.append(MarkerMatch(pattern=keyword, span=Span(start=start, end=end)))
            break

    matches.sort(key=lambda match: match.span.start)
    return matches


def has_marker(line_text: str, patterns: Iterable[str] | None) -> bool:
    """Check whether a line contains any configured marker."""
    return bool(find_markers(line_text, patterns))
