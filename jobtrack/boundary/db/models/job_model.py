"""
Job ORM model.

Tracks the descriptive fields of a background job: name, lifecycle state,
free-text message and fractional progress. Rows are created and removed by
job submission and retention machinery; the status updater only edits them.

Dependencies: sqlalchemy, jobtrack.boundary.db.base
System role: Persistent job record
"""

import enum

from sqlalchemy import Enum, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobtrack.boundary.db.base import Base, StringIdMixin, TimestampMixin


class JobState(str, enum.Enum):
    """
    Job lifecycle states.

    PENDING: Job submitted, not yet picked up
    RUNNING: Job being processed
    DONE: Job finished; progress is always 1.0 in this state
    ERROR: Job failed; message usually carries the reason
    """

    PENDING = "pending"
    RUNNING = "running"
    DONE = "done"
    ERROR = "error"


class JobModel(Base, StringIdMixin, TimestampMixin):
    """
    Job ORM model.

    Attributes:
        id: Opaque string primary key
        name: Human-readable label (optional)
        state: Lifecycle state enum (PENDING/RUNNING/DONE/ERROR)
        message: Free-text annotation; overwritten on every state change
        progress: Fraction complete, conceptually 0.0-1.0 (not range checked)
        version: Optimistic concurrency counter, bumped on every UPDATE
        created_at: Creation timestamp (UTC)
        updated_at: Last update timestamp (UTC)

    Concurrency:
        version is the mapper's version_id_col. An UPDATE issued from a stale
        read matches zero rows and the flush raises StaleDataError.
    """

    __tablename__ = "jobs"

    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )

    state: Mapped[JobState] = mapped_column(
        Enum(JobState, native_enum=False, values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=JobState.PENDING,
    )

    message: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    progress: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        default=0.0,
        doc="Fraction complete (0.0-1.0)",
    )

    version: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
    )

    __mapper_args__ = {"version_id_col": version}

    def __repr__(self) -> str:
        return (
            f"JobModel(id={self.id!r}, name={self.name!r}, state={self.state!r}, "
            f"progress={self.progress!r})"
        )
