"""
Job status updater.

Edits a job's name, lifecycle state, message and progress. Every call runs
in its own transaction obtained from the injected TransactionProvider:
fetch the job, mutate it, commit. Store failures are logged at DEBUG on the
injected logger and re-raised unchanged. Nothing is retried here; callers
that want retry-with-backoff wrap these calls themselves.

Dependencies: jobtrack.boundary.db, jobtrack.core.exceptions, jobtrack.observability
System role: Transactional job field updates for job drivers
"""

import logging

from jobtrack.boundary.db.models.job_model import JobState
from jobtrack.boundary.db.transaction import SQLAlchemyTransactionProvider, TransactionProvider
from jobtrack.core.exceptions import JobStoreError
from jobtrack.models.job import JobRecord
from jobtrack.observability import get_logger, log_exception_with_context


class JobStatusUpdater:
    """
    Transactional setters for job fields.

    Any state may follow any other state. The single rule enforced here is
    that setting DONE also sets progress to 1.0 in the same commit.
    """

    def __init__(
        self,
        provider: TransactionProvider | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        """
        Initialize updater.

        Args:
            provider: Transaction source; defaults to a SQLAlchemy provider
                built from application settings
            logger: Diagnostics sink for store failures
        """
        self.provider = provider or SQLAlchemyTransactionProvider()
        self.logger = logger or get_logger(__name__)

    def rename(self, job_id: str, name: str) -> None:
        """
        Set a job's name.

        Args:
            job_id: Existing job id
            name: New label, stored as given

        Raises:
            JobStoreError: Lookup, conflict or store failure (logged first)
        """
        try:
            with self.provider.new_transaction() as tx:
                job = tx.get_job(job_id)
                job.name = name
                tx.commit()
        except JobStoreError as e:
            self._log_failure("rename", job_id, e)
            raise

    def set_state(
        self,
        job_id: str,
        state: JobState | str,
        message: str | None = None,
    ) -> None:
        """
        Set a job's state and message.

        The message is always overwritten; omitting it clears any previous
        message. Setting DONE forces progress to 1.0.

        Args:
            job_id: Existing job id
            state: New lifecycle state (enum member or its value)
            message: Optional annotation

        Raises:
            ValueError: state is not a JobState value
            JobStoreError: Lookup, conflict or store failure (logged first)
        """
        state = JobState(state)
        try:
            with self.provider.new_transaction() as tx:
                job = tx.get_job(job_id)
                job.state = state
                job.message = message

                if state is JobState.DONE:
                    job.progress = 1.0

                tx.commit()
        except JobStoreError as e:
            self._log_failure("set_state", job_id, e, state=state.value)
            raise

    def set_progress(self, job_id: str, progress: float) -> None:
        """
        Set a job's progress. State and message are left alone.

        Args:
            job_id: Existing job id
            progress: Fraction complete, stored verbatim (no range check)

        Raises:
            JobStoreError: Lookup, conflict or store failure (logged first)
        """
        try:
            with self.provider.new_transaction() as tx:
                job = tx.get_job(job_id)
                job.progress = progress
                tx.commit()
        except JobStoreError as e:
            self._log_failure("set_progress", job_id, e, progress=progress)
            raise

    def mark_running(self, job_id: str, message: str | None = None) -> None:
        """Set state RUNNING."""
        self.set_state(job_id, JobState.RUNNING, message)

    def mark_done(self, job_id: str, message: str | None = None) -> None:
        """Set state DONE (progress becomes 1.0)."""
        self.set_state(job_id, JobState.DONE, message)

    def mark_error(self, job_id: str, message: str) -> None:
        """Set state ERROR with the failure reason as message."""
        self.set_state(job_id, JobState.ERROR, message)

    def get_job(self, job_id: str) -> JobRecord:
        """
        Read the committed job record.

        Args:
            job_id: Existing job id

        Returns:
            JobRecord: Detached snapshot

        Raises:
            JobStoreError: Lookup or store failure (logged first)
        """
        try:
            with self.provider.new_transaction() as tx:
                return JobRecord.model_validate(tx.get_job(job_id))
        except JobStoreError as e:
            self._log_failure("get_job", job_id, e)
            raise

    def _log_failure(
        self,
        operation: str,
        job_id: str,
        exc: JobStoreError,
        **context,
    ) -> None:
        log_exception_with_context(
            self.logger,
            f"{__name__}:{operation} - {type(exc).__name__}: {exc}",
            exc,
            level=logging.DEBUG,
            job_id=job_id,
            error_kind=exc.kind.value,
            **context,
        )
