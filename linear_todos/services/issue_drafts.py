"""Issue drafts generated from TODOs.

Builds the title, markdown body and tracker priority for an issue filed from
a TODO. Pure functions; the tracker client sends the resulting IssueDraft.
"""

import logging
import posixpath
import re

from ..engine.scanning import locate_marker
from ..models import IssueDraft, IssueImpact, Priority, TodoItem

logger = logging.getLogger(__name__)

DEFAULT_MAX_TITLE_LENGTH = 80
TITLE_SEPARATOR = " • "
ELLIPSIS = "..."

# Tracker priority numbers: 1 = Urgent, 2 = High, 3 = Medium, 4 = Low, 0 = none
IMPACT_TO_TRACKER_PRIORITY: dict[IssueImpact, int] = {
    IssueImpact.HIGH: 2,
    IssueImpact.MEDIUM: 3,
    IssueImpact.LOW: 4,
}

TRACKER_PRIORITY_LABELS: dict[int, str] = {
    1: "Urgent",
    2: "High",
    3: "Medium",
    4: "Low",
}

_LEADING_SEPARATORS_RE = re.compile(r"^[\s:\-]+")


def clean_todo_text(item: TodoItem) -> str:
    """Strip everything up to and including the marker keyword from the TODO text.

    ``// [ABC-1] TODO: fix auth`` becomes ``fix auth``.
    """
    span = locate_marker(item.text, item.pattern)
    remainder = item.text[span.end:] if span else item.text
    return _LEADING_SEPARATORS_RE.sub("", remainder).strip()


def short_file_name(file_path: str) -> str:
    return posixpath.basename(file_path.replace("\\", "/")) or file_path


def file_language(file_path: str) -> str:
    """Fence language for a file, taken from its extension ("text" if none)."""
    name = short_file_name(file_path)
    if "." not in name.lstrip("."):
        return "text"
    return name.rsplit(".", 1)[-1] or "text"


def generate_issue_title(item: TodoItem, max_length: int = DEFAULT_MAX_TITLE_LENGTH) -> str:
    """Build ``"<description> • <file>:<line>"`` within ``max_length`` characters.

    The description is truncated with an ellipsis; the location is kept intact.
    """
    location = f"{short_file_name(item.file)}:{item.line_number + 1}"
    description = clean_todo_text(item) or f"{item.pattern.upper()} item"

    available = max_length - len(location) - len(TITLE_SEPARATOR)
    if len(description) > available:
        cut = max(0, available - len(ELLIPSIS))
        description = description[:cut].rstrip() + ELLIPSIS

    return f"{description}{TITLE_SEPARATOR}{location}"


def generate_issue_description(item: TodoItem) -> str:
    """Build the markdown body: location line plus the fenced context snippet."""
    lines = [
        f"**Location:** `{item.file}:{item.line_number + 1}`",
        "",
        f"**Priority:** {item.priority.value}",
        "",
        f"```{file_language(item.file)}",
        item.context or item.text,
        "```",
    ]
    return "\n".join(lines)


def default_impact(priority: Priority) -> IssueImpact:
    """Impact suggested for a TODO's inferred priority."""
    return IssueImpact(priority.value)


def impact_to_tracker_priority(impact: IssueImpact) -> int:
    return IMPACT_TO_TRACKER_PRIORITY.get(impact, 3)


def tracker_priority_label(priority: int | None) -> str:
    """Human-readable label for a tracker priority number."""
    if priority is None:
        return "No Priority"
    return TRACKER_PRIORITY_LABELS.get(priority, "No Priority")


def build_issue_draft(
    item: TodoItem,
    impact: IssueImpact | None = None,
    team_id: str | None = None,
    max_title_length: int = DEFAULT_MAX_TITLE_LENGTH,
) -> IssueDraft:
    """Assemble the issue payload for a TODO.

    Args:
        item: The TODO being filed
        impact: Chosen impact; defaults to one derived from the TODO's priority
        team_id: Target team, None to let the tracker pick its default
        max_title_length: Title length limit

    Returns:
        IssueDraft ready for a tracker client
    """
    impact = impact or default_impact(item.priority)
    draft = IssueDraft(
        title=generate_issue_title(item, max_title_length),
        description=generate_issue_description(item),
        impact=impact,
        priority=impact_to_tracker_priority(impact),
        team_id=team_id,
    )
    logger.debug(f"Issue draft for {item.file}:{item.line_number + 1}: {draft.title}")
    return draft
