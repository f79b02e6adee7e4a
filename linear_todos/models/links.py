"""Link-rewrite models.

Linking is two-phase: ``TodoIndex.link`` returns a ``PendingLink`` describing
the text edit, the host applies it to the real document, and only then does
``TodoIndex.confirm_link`` update the cached item.
"""

from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from .enums import LinkStatus
from .todos import Span


class PendingLink(BaseModel):
    """A computed line rewrite waiting to be applied by the host."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid4().hex, description="Pending edit id")
    document_id: str = Field(..., description="Logical document path")
    issue_id: str = Field(..., description="Issue id being embedded")
    line_number: int = Field(..., ge=0, description="Line to rewrite")
    replace_start: int = Field(default=0, ge=0, description="Start column of replaced range")
    replace_end: int = Field(..., ge=0, description="End column of replaced range (old line)")
    old_text: str = Field(..., description="Line text before the edit")
    new_text: str = Field(..., description="Line text after the edit")
    new_span: Span = Field(..., description="Marker span on the rewritten line")
    pattern: str = Field(..., description="Marker keyword of the item")
    item_start: int = Field(..., ge=0, description="Marker start column before the edit")


class LinkResult(BaseModel):
    """Result of ``TodoIndex.link``."""

    status: LinkStatus = Field(..., description="What happened")
    pending: PendingLink | None = Field(default=None, description="Edit to apply, if any")
    linked_issue_id: str | None = Field(
        default=None, description="Issue id now (or already) on the line"
    )
    message: str = Field(default="", description="Human-readable status message")

    @property
    def needs_edit(self) -> bool:
        return self.status == LinkStatus.PENDING and self.pending is not None
