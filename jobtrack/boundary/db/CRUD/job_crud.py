"""
Job CRUD operations.

Creation, lookup and removal of job rows for the submission and retention
machinery. Field updates on existing jobs go through JobStatusUpdater.

Dependencies: sqlalchemy, jobtrack.boundary.db.models.job_model
System role: Job persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.orm import Session

from jobtrack.boundary.db.CRUD.base_crud import BaseCRUD
from jobtrack.boundary.db.models.job_model import JobModel, JobState


class JobCRUD(BaseCRUD[JobModel]):
    """CRUD operations for JobModel."""

    def __init__(self) -> None:
        """Initialize JobCRUD with JobModel."""
        super().__init__(JobModel)

    def create_job(
        self,
        session: Session,
        name: str | None = None,
        job_id: str | None = None,
    ) -> JobModel:
        """
        Create a pending job with zero progress.

        Args:
            session: Database session
            name: Optional label
            job_id: Explicit id; generated when omitted

        Returns:
            JobModel: Flushed (not committed) job
        """
        fields: dict = {
            "name": name,
            "state": JobState.PENDING,
            "message": None,
            "progress": 0.0,
        }
        if job_id is not None:
            fields["id"] = job_id
        return self.create(session, **fields)

    def get_by_state(
        self,
        session: Session,
        state: JobState,
        limit: int | None = None,
    ) -> Sequence[JobModel]:
        """
        Retrieve jobs by lifecycle state.

        Args:
            session: Database session
            state: State to filter by
            limit: Maximum number of jobs to return

        Returns:
            Sequence of JobModels with matching state
        """
        stmt = select(JobModel).where(JobModel.state == state)
        if limit is not None:
            stmt = stmt.limit(limit)
        return session.execute(stmt).scalars().all()


job_crud = JobCRUD()
