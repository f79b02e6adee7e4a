"""Issue tracker models (the remote client's side of the boundary)."""

from datetime import datetime

from pydantic import BaseModel, Field

from .enums import IssueImpact


class IssueDraft(BaseModel):
    """Issue payload generated from a TODO, ready for a tracker client."""

    title: str = Field(..., min_length=1, description="Issue title")
    description: str = Field(..., description="Markdown issue body")
    impact: IssueImpact = Field(..., description="Chosen business impact")
    priority: int = Field(..., ge=0, le=4, description="Tracker priority number")
    team_id: str | None = Field(default=None, description="Target team, None for default")


class TrackerTeam(BaseModel):
    """A team in the issue tracker."""

    id: str
    name: str
    key: str


class TrackerLabel(BaseModel):
    name: str
    color: str


class TrackerIssue(BaseModel):
    """An issue as returned by the tracker client."""

    id: str = Field(..., description="Human-readable identifier, e.g. ENG-42")
    title: str = Field(..., description="Issue title")
    description: str | None = Field(default=None, description="Issue body")
    url: str = Field(..., description="Web URL of the issue")
    state_name: str = Field(default="Unknown", description="Workflow state name")
    state_type: str = Field(default="Unknown", description="Workflow state type")
    assignee_name: str | None = Field(default=None, description="Assignee display name")
    priority: int | None = Field(default=None, description="Tracker priority number")
    labels: list[TrackerLabel] = Field(default_factory=list, description="Issue labels")
    created_at: datetime | None = Field(default=None, description="Creation time")
    updated_at: datetime | None = Field(default=None, description="Last update time")
