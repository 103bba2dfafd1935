"""
Job store transactions.

Defines the transaction provider contract used by the status updater and its
SQLAlchemy implementation. A transaction fetches jobs by id and commits;
leaving the `with` block without a commit rolls everything back.

Driver exceptions are translated into the closed JobStoreError hierarchy
here, so callers never see SQLAlchemy types.

Dependencies: sqlalchemy, jobtrack.core.exceptions
System role: Unit-of-work boundary for job mutations
"""

from types import TracebackType
from typing import Protocol, runtime_checkable

from sqlalchemy.exc import DBAPIError, NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.orm.exc import StaleDataError

from jobtrack.boundary.db.connection import get_session_factory
from jobtrack.boundary.db.models.job_model import JobModel
from jobtrack.core.exceptions import (
    CommitConflictError,
    JobLookupError,
    JobStoreError,
    StoreUnavailableError,
)
from jobtrack.observability import get_logger

logger = get_logger(__name__)

# Postgres serialization_failure / deadlock_detected
_CONFLICT_SQLSTATES = {"40001", "40P01"}
_CONFLICT_MESSAGES = ("database is locked", "could not serialize access")


@runtime_checkable
class JobTransaction(Protocol):
    """Scoped unit of work over the job store."""

    def get_job(self, job_id: str) -> JobModel: ...

    def commit(self) -> None: ...

    def __enter__(self) -> "JobTransaction": ...

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None: ...


@runtime_checkable
class TransactionProvider(Protocol):
    """Source of independent job store transactions."""

    def new_transaction(self) -> JobTransaction: ...


def _is_conflict(exc: DBAPIError) -> bool:
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate in _CONFLICT_SQLSTATES:
        return True
    text = str(orig).lower()
    return any(marker in text for marker in _CONFLICT_MESSAGES)


def translate_store_error(exc: SQLAlchemyError, job_id: str | None = None) -> JobStoreError:
    """
    Map a SQLAlchemy failure onto the job store error kinds.

    Args:
        exc: Exception raised by the session or driver
        job_id: Job the failing operation targeted

    Returns:
        JobStoreError: JobLookupError, CommitConflictError or StoreUnavailableError
    """
    details = {"error_type": type(exc).__name__}
    if isinstance(exc, NoResultFound):
        return JobLookupError(job_id or "<unknown>", details=details)
    if isinstance(exc, StaleDataError):
        return CommitConflictError(
            f"Job {job_id} was modified by a concurrent transaction",
            job_id=job_id,
            details=details,
        )
    if isinstance(exc, DBAPIError) and _is_conflict(exc):
        return CommitConflictError(
            f"Transaction on job {job_id} conflicted with another writer",
            job_id=job_id,
            details=details,
        )
    return StoreUnavailableError(
        f"Job store failure: {exc}",
        job_id=job_id,
        details=details,
    )


class SQLAlchemyJobTransaction:
    """JobTransaction backed by a single SQLAlchemy Session."""

    def __init__(self, session: Session) -> None:
        """
        Initialize transaction around an open session.

        Args:
            session: Session owned by this transaction; closed on exit
        """
        self.session = session
        self._job_id: str | None = None
        self._committed = False

    def get_job(self, job_id: str) -> JobModel:
        """
        Fetch a job by id within this transaction.

        Args:
            job_id: Job id

        Returns:
            JobModel: Session-bound job; attribute changes are written on commit

        Raises:
            JobLookupError: No job with this id
            StoreUnavailableError: Query failed
        """
        self._job_id = job_id
        try:
            job = self.session.get(JobModel, job_id)
        except SQLAlchemyError as e:
            raise translate_store_error(e, job_id) from e

        if job is None:
            raise JobLookupError(job_id)
        return job

    def commit(self) -> None:
        """
        Flush pending changes and commit.

        Raises:
            CommitConflictError: A concurrent transaction modified the same job
            StoreUnavailableError: Commit failed for any other store reason
        """
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            raise translate_store_error(e, self._job_id) from e
        self._committed = True

    def rollback(self) -> None:
        """Discard all pending changes."""
        self.session.rollback()

    def __enter__(self) -> "SQLAlchemyJobTransaction":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        try:
            if not self._committed:
                self.rollback()
        except SQLAlchemyError as e:
            if exc is None:
                raise translate_store_error(e, self._job_id) from e
            # Keep the exception already propagating
            logger.debug(
                f"{__name__}:__exit__ - rollback failed: {type(e).__name__}: {e}",
                extra={"job_id": self._job_id},
            )
        finally:
            self.session.close()


class SQLAlchemyTransactionProvider:
    """TransactionProvider opening one session per transaction."""

    def __init__(self, session_factory: sessionmaker | None = None) -> None:
        """
        Initialize provider.

        Args:
            session_factory: Session factory; defaults to get_session_factory()
        """
        self.session_factory = session_factory or get_session_factory()

    def new_transaction(self) -> SQLAlchemyJobTransaction:
        """
        Begin a new independent transaction.

        Returns:
            SQLAlchemyJobTransaction: Use as a context manager
        """
        return SQLAlchemyJobTransaction(self.session_factory())
