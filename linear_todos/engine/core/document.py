"""Document data structures for the TODO engine.

This module contains the per-document cache entry kept by the TODO index.
"""

import re
from dataclasses import dataclass, field

from ...models import TodoItem

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass
class DocumentIndex:
    """Cached scan result for one document.

    Replaced wholesale on every rescan; only a confirmed link mutates it.

    Attributes:
        path: Logical path identifying the document
        lines: Line texts as of the last scan (updated by confirmed links)
        items: TODOs ordered by (line_number, span.start)
        patterns: Marker keywords the scan used
    """

    path: str
    lines: list[str] = field(default_factory=list)
    items: list[TodoItem] = field(default_factory=list)
    patterns: list[str] = field(default_factory=list)

    def line_text(self, line_number: int) -> str | None:
        if 0 <= line_number < len(self.lines):
            return self.lines[line_number]
        return None


def split_lines(text: str) -> list[str]:
    """Split a document body into lines the way editors number them.

    A trailing line break yields a final empty line, matching editor line
    counts; an empty document has a single empty line.
    """
    return _LINE_BREAK_RE.split(text)
