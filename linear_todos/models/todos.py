"""TODO occurrence models."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import Priority


class Span(BaseModel):
    """Half-open character range ``[start, end)`` on a single line."""

    model_config = ConfigDict(frozen=True)

    start: int = Field(..., ge=0, description="First column covered (0-indexed)")
    end: int = Field(..., ge=1, description="Column just past the range")

    @model_validator(mode="after")
    def _non_empty(self) -> "Span":
        if self.end <= self.start:
            raise ValueError(f"span [{self.start}, {self.end}) is empty")
        return self

    def contains(self, column: int) -> bool:
        return self.start <= column < self.end

    def shifted(self, offset: int) -> "Span":
        return Span(start=self.start + offset, end=self.end + offset)

    @property
    def length(self) -> int:
        return self.end - self.start


class MarkerMatch(BaseModel):
    """A marker keyword found on one line."""

    model_config = ConfigDict(frozen=True)

    pattern: str = Field(..., description="Configured keyword that matched")
    span: Span = Field(..., description="Keyword token plus optional trailing colon")


class TodoItem(BaseModel):
    """One detected TODO occurrence.

    Instances are frozen: callers get read views, and the index swaps in a
    new instance when a link is confirmed.
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(..., description="Trimmed line content at detection time")
    pattern: str = Field(..., description="Matched marker keyword")
    line_number: int = Field(..., ge=0, description="Line index (0-indexed)")
    span: Span = Field(..., description="Range of the marker token on the line")
    file: str = Field(..., description="Logical path of the owning document")
    priority: Priority = Field(..., description="Inferred priority")
    context: str = Field(default="", description="Snippet of surrounding lines")
    linked_issue_id: str | None = Field(default=None, description="Embedded tracker issue id")

    @property
    def is_linked(self) -> bool:
        return self.linked_issue_id is not None

    @property
    def sort_key(self) -> tuple[int, int]:
        return (self.line_number, self.span.start)


class TodoSummary(BaseModel):
    """Counts for one document's cached TODOs."""

    document_id: str = Field(..., description="Logical document path")
    total: int = Field(default=0, ge=0, description="Number of TODOs")
    linked: int = Field(default=0, ge=0, description="TODOs carrying an issue id")
    unlinked: int = Field(default=0, ge=0, description="TODOs without an issue id")
    by_priority: dict[Priority, int] = Field(
        default_factory=lambda: {p: 0 for p in Priority},
        description="Count per priority",
    )
