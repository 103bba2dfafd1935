"""
Shared test fixtures and configuration for entire test suite.

Provides: SQLite-backed job store, transaction provider, updater, job seeding
Dependencies: pytest, sqlalchemy
System role: Test infrastructure and fixture management
"""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine

from jobtrack.application.services.job_status_updater import JobStatusUpdater
from jobtrack.boundary.db.base import Base
from jobtrack.boundary.db.connection import get_session_factory
from jobtrack.boundary.db.CRUD.job_crud import job_crud
from jobtrack.boundary.db.models.job_model import JobModel, JobState
from jobtrack.boundary.db.transaction import SQLAlchemyTransactionProvider

UPDATER_LOGGER = "tests.job_status_updater"


@pytest.fixture
def engine(tmp_path: Path):
    """
    Create file-backed SQLite engine with all tables.

    A file database gives each session its own connection, so concurrent
    transactions behave like they would against a server database.

    Yields:
        Engine: Test engine, disposed after the test
    """
    engine = create_engine(f"sqlite:///{tmp_path / 'jobs.db'}")
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    """Provide session factory bound to the test engine."""
    return get_session_factory(engine)


@pytest.fixture
def provider(session_factory) -> SQLAlchemyTransactionProvider:
    """Provide SQLAlchemy transaction provider over the test database."""
    return SQLAlchemyTransactionProvider(session_factory)


@pytest.fixture
def updater_logger() -> logging.Logger:
    """Provide the diagnostics logger injected into updaters under test."""
    return logging.getLogger(UPDATER_LOGGER)


@pytest.fixture
def updater(provider, updater_logger) -> JobStatusUpdater:
    """Provide JobStatusUpdater over the test database."""
    return JobStatusUpdater(provider, logger=updater_logger)


@pytest.fixture
def seed_job(session_factory):
    """
    Factory fixture inserting a committed job.

    Returns:
        Callable: seed(job_id="J1", name="", **fields) -> job_id
    """

    def _seed(job_id: str = "J1", name: str | None = "", **fields) -> str:
        with session_factory() as session:
            job = job_crud.create_job(session, name=name, job_id=job_id)
            for field, value in fields.items():
                setattr(job, field, value)
            session.commit()
        return job_id

    return _seed


@pytest.fixture
def job_model() -> JobModel:
    """Provide detached JobModel in its initial state."""
    job = JobModel()
    job.id = "J1"
    job.name = ""
    job.state = JobState.PENDING
    job.message = None
    job.progress = 0.0
    return job


@pytest.fixture
def mock_transaction(job_model: JobModel) -> MagicMock:
    """Provide mock JobTransaction returning job_model from get_job."""
    tx = MagicMock()
    tx.__enter__.return_value = tx
    tx.__exit__.return_value = False
    tx.get_job.return_value = job_model
    return tx


@pytest.fixture
def mock_provider(mock_transaction: MagicMock) -> MagicMock:
    """Provide mock TransactionProvider handing out mock_transaction."""
    provider = MagicMock()
    provider.new_transaction.return_value = mock_transaction
    return provider
