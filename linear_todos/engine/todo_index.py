"""Per-document TODO index.

The index owns the mapping from logical document path to its ordered TODOs.
Every scan is a full rescan that replaces the document's entry wholesale.
Linking is two-phase: ``link`` computes a rewrite without touching the cache,
the host applies it to the real document, and ``confirm_link`` then brings
the cached entry in line with the edited text.
"""

import logging
from collections.abc import Iterable, Sequence

from ..errors import InvalidIssueIdError, InvariantViolation
from ..models import LinkResult, LinkStatus, PendingLink, Priority, TodoItem, TodoSummary
from .core import DocumentIndex, extract_context, split_lines
from .scanning import (
    DEFAULT_CONTEXT_RADIUS,
    DEFAULT_TODO_PATTERNS,
    classify_priority,
    extract_issue_id,
    find_markers,
    format_link_token,
    inject_issue_id,
    is_valid_issue_id,
    locate_marker,
    normalize_patterns,
)

logger = logging.getLogger(__name__)


class TodoIndex:
    """Scan, cache and query TODOs per document.

    Construct one instance and pass it to every caller; it keeps no global
    state. All methods are synchronous and never perform I/O.
    """

    def __init__(
        self,
        default_patterns: Iterable[str] | None = None,
        context_radius: int = DEFAULT_CONTEXT_RADIUS,
    ) -> None:
        if default_patterns is None:
            default_patterns = DEFAULT_TODO_PATTERNS
        self.default_patterns = normalize_patterns(default_patterns)
        self.context_radius = max(0, context_radius)
        self._documents: dict[str, DocumentIndex] = {}

    @classmethod
    def from_settings(cls, settings) -> "TodoIndex":
        """Build an index from a ``Settings`` object (todo_patterns, context_radius)."""
        return cls(
            default_patterns=settings.todo_patterns,
            context_radius=settings.context_radius,
        )

    # ============ SCANNING ============

    def scan(
        self,
        document_id: str,
        lines: Sequence[str] | str,
        patterns: Iterable[str] | None = None,
    ) -> list[TodoItem]:
        """Scan a whole document and replace its cached entry.

        Args:
            document_id: Logical path of the document
            lines: The document's lines (or its full text)
            patterns: Marker keywords; None uses the index defaults, an empty
                collection finds nothing

        Returns:
            TODOs ordered by (line_number, span.start)
        """
        if isinstance(lines, str):
            lines = split_lines(lines)
        lines = list(lines)
        keywords = self.default_patterns if patterns is None else normalize_patterns(patterns)

        items: list[TodoItem] = []
        for line_number, line_text in enumerate(lines):
            matches = find_markers(line_text, keywords)
            if not matches:
                continue

            text = line_text.strip()
            context = extract_context(lines, line_number, self.context_radius)
            issue_id = extract_issue_id(text)

            for match in matches:
                if match.span.end > len(line_text):
                    raise InvariantViolation(
                        f"{document_id}:{line_number + 1}: span {match.span.start}-"
                        f"{match.span.end} exceeds line length {len(line_text)}"
                    )
                items.append(
                    TodoItem(
                        text=text,
                        pattern=match.pattern,
                        line_number=line_number,
                        span=match.span,
                        file=document_id,
                        priority=classify_priority(match.pattern, text),
                        context=context,
                        linked_issue_id=issue_id,
                    )
                )

        self._documents[document_id] = DocumentIndex(
            path=document_id,
            lines=lines,
            items=items,
            patterns=keywords,
        )
        logger.debug(f"Scanned {document_id}: {len(items)} TODOs in {len(lines)} lines")
        return list(items)

    # ============ QUERIES ============

    def get(self, document_id: str) -> list[TodoItem]:
        """Return the last scan result, or [] if the document was never scanned."""
        doc = self._documents.get(document_id)
        return list(doc.items) if doc else []

    def find_at(self, document_id: str, line: int, column: int) -> TodoItem | None:
        """Return the first TODO on ``line`` whose span contains ``column``."""
        for item in self.get(document_id):
            if item.line_number == line and item.span.contains(column):
                return item
        return None

    def find_on_line(self, document_id: str, line: int) -> TodoItem | None:
        """Return the first TODO on ``line``, ignoring the column."""
        for item in self.get(document_id):
            if item.line_number == line:
                return item
        return None

    def count(self, document_id: str) -> int:
        doc = self._documents.get(document_id)
        return len(doc.items) if doc else 0

    def summary(self, document_id: str) -> TodoSummary:
        """Count cached TODOs by link state and priority."""
        items = self.get(document_id)
        by_priority = {p: 0 for p in Priority}
        for item in items:
            by_priority[item.priority] += 1
        linked = sum(1 for item in items if item.is_linked)
        return TodoSummary(
            document_id=document_id,
            total=len(items),
            linked=linked,
            unlinked=len(items) - linked,
            by_priority=by_priority,
        )

    def lines(self, document_id: str) -> list[str]:
        """Line texts the cached entry was built from."""
        doc = self._documents.get(document_id)
        return list(doc.lines) if doc else []

    def documents(self) -> list[str]:
        return list(self._documents)

    def forget(self, document_id: str) -> bool:
        """Drop a document's cached entry (e.g. when it is closed)."""
        return self._documents.pop(document_id, None) is not None

    # ============ LINKING ============

    def link(self, document_id: str, item: TodoItem, issue_id: str) -> LinkResult:
        """Compute the rewrite that embeds ``issue_id`` in the TODO's line.

        Nothing is cached here. The caller applies ``result.pending`` to the
        real document and then calls ``confirm_link``. Linking an item that is
        already linked is a no-op reported as ``ALREADY_LINKED``.

        Args:
            document_id: Logical path of the document
            item: The TODO to link (as returned by a query)
            issue_id: Tracker identifier in KEY-NUMBER form

        Returns:
            LinkResult with a PendingLink when an edit is needed

        Raises:
            InvalidIssueIdError: If ``issue_id`` is not in KEY-NUMBER form
        """
        if not is_valid_issue_id(issue_id):
            raise InvalidIssueIdError(issue_id)

        if item.linked_issue_id:
            return _already_linked(item.linked_issue_id)

        doc = self._documents.get(document_id)
        cached = None
        if doc is not None and item.file == document_id:
            cached = self._cached_counterpart(doc, item)
        if doc is None or cached is None:
            return LinkResult(
                status=LinkStatus.NOT_INDEXED,
                message=f"No cached TODO at {document_id}:{item.line_number + 1}",
            )
        if cached.linked_issue_id:
            return _already_linked(cached.linked_issue_id)

        line_text = doc.lines[cached.line_number]
        existing = extract_issue_id(line_text)
        if existing:
            return _already_linked(existing)

        new_text = inject_issue_id(line_text, cached.pattern, issue_id)
        new_span = locate_marker(new_text, cached.pattern)
        if new_text == line_text or new_span is None:
            return LinkResult(
                status=LinkStatus.PATTERN_NOT_FOUND,
                message=f"'{cached.pattern}' not found on line {cached.line_number + 1}",
            )

        pending = PendingLink(
            document_id=document_id,
            issue_id=issue_id,
            line_number=cached.line_number,
            replace_end=len(line_text),
            old_text=line_text,
            new_text=new_text,
            new_span=new_span,
            pattern=cached.pattern,
            item_start=cached.span.start,
        )
        logger.debug(
            f"Pending link {pending.id}: {document_id}:{cached.line_number + 1} → {issue_id}"
        )
        return LinkResult(
            status=LinkStatus.PENDING,
            pending=pending,
            linked_issue_id=issue_id,
            message=f"Apply edit to link {cached.pattern} to {issue_id}",
        )

    def confirm_link(self, pending: PendingLink) -> TodoItem | None:
        """Update the cache after the host applied a pending link edit.

        Every TODO on the rewritten line gets the new text and issue id (the
        token belongs to the line), spans after the insertion point shift, and
        context snippets that include the line are rebuilt.

        Args:
            pending: The PendingLink returned by ``link``

        Returns:
            The updated TODO, or None if the cached entry no longer matches the
            text the edit was computed from (rescanned, forgotten or confirmed)
        """
        if not self.is_current(pending):
            logger.warning(
                f"Stale link confirmation {pending.id} for "
                f"{pending.document_id}:{pending.line_number + 1}, cache left unchanged"
            )
            return None

        doc = self._documents[pending.document_id]
        doc.lines[pending.line_number] = pending.new_text
        offset = len(format_link_token(pending.issue_id)) + 1
        new_text = pending.new_text.strip()
        linked_issue_id = extract_issue_id(new_text)

        updated: TodoItem | None = None
        items: list[TodoItem] = []
        for item in doc.items:
            update: dict = {}
            if item.line_number == pending.line_number:
                if _same_marker(item, pending.line_number, pending.pattern):
                    span = pending.new_span
                elif item.span.start >= pending.item_start:
                    span = item.span.shifted(offset)
                else:
                    span = item.span
                update.update(text=new_text, span=span, linked_issue_id=linked_issue_id)
            if abs(item.line_number - pending.line_number) <= self.context_radius:
                update["context"] = extract_context(
                    doc.lines, item.line_number, self.context_radius
                )
            if update:
                item = item.model_copy(update=update)
            if _same_marker(item, pending.line_number, pending.pattern):
                updated = item
            items.append(item)
        doc.items = items

        logger.info(
            f"Linked {pending.pattern} at {pending.document_id}:{pending.line_number + 1} "
            f"to {pending.issue_id}"
        )
        return updated

    def is_current(self, pending: PendingLink) -> bool:
        """Whether the cached line still holds the text ``pending`` was computed from."""
        doc = self._documents.get(pending.document_id)
        return doc is not None and doc.line_text(pending.line_number) == pending.old_text

    @staticmethod
    def _cached_counterpart(doc: DocumentIndex, item: TodoItem) -> TodoItem | None:
        # A keyword matches at most once per line, so (line, keyword) is unique
        for cached in doc.items:
            if _same_marker(cached, item.line_number, item.pattern):
                return cached
        return None


def _same_marker(item: TodoItem, line_number: int, pattern: str) -> bool:
    return item.line_number == line_number and item.pattern.casefold() == pattern.casefold()


def _already_linked(issue_id: str) -> LinkResult:
    return LinkResult(
        status=LinkStatus.ALREADY_LINKED,
        linked_issue_id=issue_id,
        message=f"TODO is already linked to {issue_id}",
    )
