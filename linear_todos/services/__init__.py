"""Services built on the TODO engine.

- issue_drafts: issue title/body/priority generation for a TODO
- issue_linker: create-issue-then-link workflow against a tracker protocol
"""

from .issue_drafts import (
    build_issue_draft,
    clean_todo_text,
    default_impact,
    generate_issue_description,
    generate_issue_title,
    impact_to_tracker_priority,
    tracker_priority_label,
)
from .issue_linker import IssueCreationError, IssueTracker, create_and_link

__all__ = [
    # Drafts
    "build_issue_draft",
    "clean_todo_text",
    "default_impact",
    "generate_issue_description",
    "generate_issue_title",
    "impact_to_tracker_priority",
    "tracker_priority_label",
    # Linking workflow
    "IssueCreationError",
    "IssueTracker",
    "create_and_link",
]
