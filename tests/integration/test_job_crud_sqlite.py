"""
Test suite for JobCRUD database operations.

Tests job creation, lookup by id and state, and deletion against SQLite.

System role: Verification of job persistence layer
"""

import pytest

from jobtrack.boundary.db.CRUD.job_crud import JobCRUD
from jobtrack.boundary.db.models.job_model import JobModel, JobState


@pytest.fixture
def job_crud() -> JobCRUD:
    """Provide JobCRUD instance for testing."""
    return JobCRUD()


class TestJobCRUDInit:
    """Test suite for JobCRUD initialization."""

    def test_init_should_set_model_to_job_model(self) -> None:
        """Test JobCRUD initializes with JobModel."""
        crud = JobCRUD()

        assert crud.model == JobModel


class TestJobCRUDCreateJob:
    """Test suite for JobCRUD.create_job() method."""

    def test_create_job_should_start_pending_with_zero_progress(
        self, job_crud: JobCRUD, session_factory
    ) -> None:
        """Test new jobs get default lifecycle fields and a generated id."""
        with session_factory() as session:
            job = job_crud.create_job(session, name="ingest")
            session.commit()

        assert job.id
        assert job.name == "ingest"
        assert job.state == JobState.PENDING
        assert job.message is None
        assert job.progress == 0.0
        assert job.version == 1
        assert job.created_at is not None

    def test_create_job_should_use_explicit_id(
        self, job_crud: JobCRUD, session_factory
    ) -> None:
        """Test caller-supplied id is kept."""
        with session_factory() as session:
            job_crud.create_job(session, job_id="J7")
            session.commit()

        with session_factory() as session:
            assert job_crud.exists(session, "J7")


class TestJobCRUDQueries:
    """Test suite for JobCRUD read and delete methods."""

    def test_get_by_state_should_filter_and_limit(
        self, job_crud: JobCRUD, session_factory, seed_job
    ) -> None:
        """Test state filter returns only matching jobs, honouring limit."""
        seed_job("A", state=JobState.RUNNING)
        seed_job("B", state=JobState.RUNNING)
        seed_job("C")

        with session_factory() as session:
            running = job_crud.get_by_state(session, JobState.RUNNING)
            limited = job_crud.get_by_state(session, JobState.RUNNING, limit=1)
            pending = job_crud.get_by_state(session, JobState.PENDING)

        assert {job.id for job in running} == {"A", "B"}
        assert len(limited) == 1
        assert [job.id for job in pending] == ["C"]

    def test_get_by_id_should_return_none_when_not_found(
        self, job_crud: JobCRUD, session_factory
    ) -> None:
        """Test missing id returns None."""
        with session_factory() as session:
            assert job_crud.get_by_id(session, "missing") is None

    def test_get_all_should_paginate(
        self, job_crud: JobCRUD, session_factory, seed_job
    ) -> None:
        """Test limit and offset are applied."""
        for job_id in ("A", "B", "C"):
            seed_job(job_id)

        with session_factory() as session:
            assert len(job_crud.get_all(session)) == 3
            assert len(job_crud.get_all(session, limit=2)) == 2
            assert len(job_crud.get_all(session, offset=2)) == 1

    def test_delete_by_id_should_report_whether_row_existed(
        self, job_crud: JobCRUD, session_factory, seed_job
    ) -> None:
        """Test delete returns True once, then False."""
        seed_job("J1")

        with session_factory() as session:
            assert job_crud.delete_by_id(session, "J1") is True
            session.commit()

        with session_factory() as session:
            assert job_crud.delete_by_id(session, "J1") is False
            assert not job_crud.exists(session, "J1")
