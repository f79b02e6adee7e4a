"""Service health models."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response of the /health endpoint."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Package version")
    timestamp: datetime = Field(..., description="Server time (UTC)")
    documents_indexed: int = Field(default=0, ge=0, description="Documents in the index")
