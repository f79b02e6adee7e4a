"""Create a tracker issue for a TODO and link it in the source text.

The tracker client and the host editor sit outside this package; they are
reached through the ``IssueTracker`` protocol and an ``apply_edit`` callback.
The cache is only updated once the host reports the edit as applied.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Protocol

from ..engine import TodoIndex
from ..engine.scanning import is_valid_issue_id
from ..models import (
    IssueDraft,
    IssueImpact,
    LinkResult,
    LinkStatus,
    PendingLink,
    TodoItem,
    TrackerIssue,
)
from .issue_drafts import build_issue_draft

logger = logging.getLogger(__name__)

ApplyEdit = Callable[[PendingLink], Awaitable[bool]]


class IssueTracker(Protocol):
    """Remote issue tracker client."""

    async def create_issue(self, draft: IssueDraft) -> TrackerIssue | None:
        """Create an issue; None means the user cancelled or nothing was created."""
        ...


class IssueCreationError(Exception):
    """The tracker returned an issue that cannot be linked."""


async def create_and_link(
    index: TodoIndex,
    tracker: IssueTracker,
    document_id: str,
    item: TodoItem,
    apply_edit: ApplyEdit,
    impact: IssueImpact | None = None,
    team_id: str | None = None,
) -> LinkResult:
    """File an issue for a TODO and embed its id in the TODO's line.

    Steps: skip already-linked TODOs, create the issue, compute the pending
    rewrite, await the host's edit, and confirm it in the index only when the
    host reports success.

    Args:
        index: The TODO index holding the document
        tracker: Issue tracker client
        document_id: Logical path of the document
        item: The TODO to file
        apply_edit: Host callback applying a PendingLink, returns True on success
        impact: Business impact, defaults from the TODO's priority
        team_id: Target team

    Returns:
        LinkResult; LINKED on success, PENDING when the host did not apply the edit,
        STALE when the document was rescanned before the edit could be confirmed

    Raises:
        IssueCreationError: If the tracker returned an id that is not KEY-NUMBER
    """
    if item.linked_issue_id:
        logger.info(f"TODO at {document_id}:{item.line_number + 1} already linked")
        return LinkResult(
            status=LinkStatus.ALREADY_LINKED,
            linked_issue_id=item.linked_issue_id,
            message=f"TODO is already linked to {item.linked_issue_id}",
        )

    draft = build_issue_draft(item, impact=impact, team_id=team_id)
    logger.info(f"Creating issue for TODO at {document_id}:{item.line_number + 1}: {draft.title}")
    issue = await tracker.create_issue(draft)
    if issue is None:
        logger.info("Issue creation returned no issue")
        return LinkResult(status=LinkStatus.CANCELLED, message="No issue was created")

    if not is_valid_issue_id(issue.id):
        raise IssueCreationError(f"Tracker returned unlinkable issue id '{issue.id}'")

    result = index.link(document_id, item, issue.id)
    if not result.needs_edit:
        return result

    applied = await apply_edit(result.pending)
    if not applied:
        logger.warning(f"Host did not apply link edit for {issue.id}; cache left unlinked")
        return result.model_copy(update={"message": f"Created {issue.id}, edit not applied"})

    if index.confirm_link(result.pending) is None:
        logger.warning(f"Document changed before {issue.id} was confirmed; rescan to pick it up")
        return result.model_copy(
            update={"status": LinkStatus.STALE, "message": f"Created {issue.id}, cache is stale"}
        )

    logger.info(f"Created and linked {issue.id} - {issue.title}")
    return result.model_copy(
        update={"status": LinkStatus.LINKED, "message": f"Created and linked {issue.id}"}
    )
