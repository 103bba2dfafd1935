"""
Job domain schemas.

Detached, read-only view of a committed job record.

Dependencies: pydantic
System role: Job read contract
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from jobtrack.boundary.db.models.job_model import JobState


class JobRecord(BaseModel):
    """Snapshot of a job as read inside one transaction."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: str
    name: str | None = None
    state: JobState
    message: str | None = None
    progress: float = Field(description="Fraction complete (0.0-1.0), not range checked")
    created_at: datetime
    updated_at: datetime
