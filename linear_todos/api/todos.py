"""TODO index API endpoints.

Exposes the TODO index to a remote host (an editor plugin or CI job) that
owns the documents. Document ids are logical paths, so they travel as query
parameters or body fields rather than path segments.

Linking mirrors the in-process two-phase protocol: ``POST /link`` returns a
pending edit, the host applies it to its document, then
``POST /link/{pending_id}/confirm`` updates the index.

Base URL: /v1/documents
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response
from pydantic import BaseModel, Field, model_validator

from ..config import Settings
from ..engine import TodoIndex
from ..models import (
    IssueDraft,
    IssueImpact,
    LinkResult,
    LinkStatus,
    PendingLink,
    TodoItem,
    TodoSummary,
)
from ..services.issue_drafts import build_issue_draft

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/v1/documents", tags=["TODOs"])

ISSUE_ID_PATTERN = r"^[A-Z]+-\d+$"


# ============ PYDANTIC MODELS ============


class ScanRequest(BaseModel):
    """Request body for scanning a document."""

    document_id: str = Field(..., min_length=1, description="Logical document path")
    lines: list[str] | None = Field(default=None, description="Document lines")
    text: str | None = Field(default=None, description="Full document text")
    patterns: list[str] | None = Field(
        default=None, description="Marker keywords, omitted for the configured defaults"
    )

    @model_validator(mode="after")
    def _one_body(self) -> "ScanRequest":
        if (self.lines is None) == (self.text is None):
            raise ValueError("provide exactly one of 'lines' or 'text'")
        return self


class TodoListResponse(BaseModel):
    """Cached TODOs of one document."""

    document_id: str
    count: int = Field(..., ge=0)
    items: list[TodoItem] = Field(default_factory=list)


class LinkRequest(BaseModel):
    """Request body for linking the TODO at a position to an issue."""

    document_id: str = Field(..., min_length=1)
    line: int = Field(..., ge=0, description="Line (0-indexed)")
    column: int | None = Field(
        default=None, ge=0, description="Column; omitted to take the first TODO on the line"
    )
    issue_id: str = Field(..., pattern=ISSUE_ID_PATTERN, description="Issue id, e.g. ABC-123")


class ConfirmLinkResponse(BaseModel):
    """Result of confirming a pending link."""

    status: LinkStatus
    item: TodoItem


# ============ DEPENDENCIES ============


def get_index(request: Request) -> TodoIndex:
    return request.app.state.todo_index


def get_pending_links(request: Request) -> dict[str, PendingLink]:
    return request.app.state.pending_links


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


IndexDep = Annotated[TodoIndex, Depends(get_index)]
PendingDep = Annotated[dict[str, PendingLink], Depends(get_pending_links)]
SettingsDep = Annotated[Settings, Depends(get_settings)]
DocumentIdQuery = Annotated[str, Query(min_length=1, description="Logical document path")]


def _todo_at(index: TodoIndex, document_id: str, line: int, column: int | None) -> TodoItem:
    """Exact-position lookup falling back to the first TODO on the line."""
    item = None
    if column is not None:
        item = index.find_at(document_id, line, column)
    if item is None:
        item = index.find_on_line(document_id, line)
    if item is None:
        raise HTTPException(status_code=404, detail=f"No TODO at {document_id}:{line + 1}")
    return item


def _prune_pending_links(
    index: TodoIndex, pending_links: dict[str, PendingLink], document_id: str
) -> None:
    """Drop pending links for a document that can no longer be confirmed."""
    stale = [
        pending_id
        for pending_id, pending in pending_links.items()
        if pending.document_id == document_id and not index.is_current(pending)
    ]
    for pending_id in stale:
        del pending_links[pending_id]
    if stale:
        logger.info(f"Dropped {len(stale)} stale pending links for {document_id}")


# ============ SCAN & QUERY ENDPOINTS ============


@router.post("/scan", response_model=TodoListResponse)
async def scan_document(
    body: ScanRequest, index: IndexDep, pending_links: PendingDep
) -> TodoListResponse:
    """Rescan a document and replace its cached TODOs."""
    source = body.lines if body.lines is not None else body.text
    items = index.scan(body.document_id, source, body.patterns)
    _prune_pending_links(index, pending_links, body.document_id)
    return TodoListResponse(document_id=body.document_id, count=len(items), items=items)


@router.get("/todos", response_model=TodoListResponse)
async def list_todos(document_id: DocumentIdQuery, index: IndexDep) -> TodoListResponse:
    """Cached TODOs for a document (never triggers a scan)."""
    items = index.get(document_id)
    return TodoListResponse(document_id=document_id, count=len(items), items=items)


@router.get("/todos/at", response_model=TodoItem)
async def todo_at_position(
    document_id: DocumentIdQuery,
    index: IndexDep,
    line: Annotated[int, Query(ge=0)],
    column: Annotated[int, Query(ge=0)],
) -> TodoItem:
    """TODO whose marker span contains the position."""
    item = index.find_at(document_id, line, column)
    if item is None:
        raise HTTPException(
            status_code=404, detail=f"No TODO at {document_id}:{line + 1}:{column + 1}"
        )
    return item


@router.get("/todos/line", response_model=TodoItem)
async def todo_on_line(
    document_id: DocumentIdQuery,
    index: IndexDep,
    line: Annotated[int, Query(ge=0)],
) -> TodoItem:
    """First TODO on a line."""
    item = index.find_on_line(document_id, line)
    if item is None:
        raise HTTPException(status_code=404, detail=f"No TODO on {document_id}:{line + 1}")
    return item


@router.get("/summary", response_model=TodoSummary)
async def todo_summary(document_id: DocumentIdQuery, index: IndexDep) -> TodoSummary:
    return index.summary(document_id)


@router.delete("", status_code=204)
async def forget_document(
    document_id: DocumentIdQuery, index: IndexDep, pending_links: PendingDep
) -> Response:
    """Drop a document and its pending links from the index (document closed)."""
    if not index.forget(document_id):
        raise HTTPException(status_code=404, detail=f"Document '{document_id}' is not indexed")
    _prune_pending_links(index, pending_links, document_id)
    return Response(status_code=204)


# ============ LINK ENDPOINTS ============


@router.post("/link", response_model=LinkResult)
async def request_link(
    body: LinkRequest,
    index: IndexDep,
    pending_links: PendingDep,
    app_settings: SettingsDep,
) -> LinkResult:
    """Compute the rewrite linking a TODO to an issue.

    Returns the pending edit for the host to apply; 409 if already linked.
    """
    item = _todo_at(index, body.document_id, body.line, body.column)
    result = index.link(body.document_id, item, body.issue_id)

    if result.status == LinkStatus.ALREADY_LINKED:
        raise HTTPException(status_code=409, detail=result.message)
    if result.status != LinkStatus.PENDING or result.pending is None:
        raise HTTPException(status_code=422, detail=result.message)

    while len(pending_links) >= app_settings.max_pending_links:
        evicted = pending_links.pop(next(iter(pending_links)))
        logger.warning(f"Evicted unconfirmed pending link {evicted.id} for {evicted.document_id}")
    pending_links[result.pending.id] = result.pending
    return result


@router.post("/link/{pending_id}/confirm", response_model=ConfirmLinkResponse)
async def confirm_link(
    pending_id: str, index: IndexDep, pending_links: PendingDep
) -> ConfirmLinkResponse:
    """Confirm that the host applied a pending link edit."""
    pending = pending_links.pop(pending_id, None)
    if pending is None:
        raise HTTPException(status_code=404, detail=f"Pending link '{pending_id}' not found")

    item = index.confirm_link(pending)
    if item is None:
        raise HTTPException(
            status_code=409,
            detail=f"Document '{pending.document_id}' changed since the link was requested",
        )
    return ConfirmLinkResponse(status=LinkStatus.LINKED, item=item)


@router.delete("/link/{pending_id}", status_code=204)
async def discard_link(pending_id: str, pending_links: PendingDep) -> Response:
    """Discard a pending link whose edit the host could not apply."""
    if pending_links.pop(pending_id, None) is None:
        raise HTTPException(status_code=404, detail=f"Pending link '{pending_id}' not found")
    logger.info(f"Discarded pending link {pending_id}")
    return Response(status_code=204)


# ============ ISSUE DRAFT ENDPOINT ============


@router.get("/issue-draft", response_model=IssueDraft)
async def issue_draft(
    document_id: DocumentIdQuery,
    index: IndexDep,
    app_settings: SettingsDep,
    line: Annotated[int, Query(ge=0)],
    column: Annotated[int | None, Query(ge=0)] = None,
    impact: IssueImpact | None = None,
) -> IssueDraft:
    """Issue title, body and priority for the TODO at a position."""
    item = _todo_at(index, document_id, line, column)
    return build_issue_draft(
        item,
        impact=impact,
        team_id=app_settings.team_id,
        max_title_length=app_settings.max_title_length,
    )
