"""Regex helpers shared by the scanner and the link codec."""

import re
from functools import lru_cache

from .constants import LINK_TOKEN_RE, WORD_CHAR_CLASS


@lru_cache(maxsize=256)
def compile_marker_pattern(keyword: str) -> re.Pattern[str]:
    """Compile the word-bounded, case-insensitive regex for a keyword.

    Lookarounds are used instead of ``\\b`` so that keywords containing
    non-word characters still anchor correctly.

    Args:
        keyword: Marker keyword, e.g. "TODO"

    Returns:
        Compiled pattern matching the keyword and an optional trailing colon
    """
    return re.compile(
        rf"(?<!{WORD_CHAR_CLASS}){re.escape(keyword)}(?!{WORD_CHAR_CLASS}):?",
        re.IGNORECASE,
    )


def find_link_tokens(line_text: str) -> list[tuple[int, int]]:
    """Return ``(start, end)`` ranges of every ``[KEY-NUMBER]`` token on a line."""
    return [m.span() for m in LINK_TOKEN_RE.finditer(line_text)]


def inside_link_token(column: int, tokens: list[tuple[int, int]]) -> bool:
    return any(start <= column < end for start, end in tokens)
