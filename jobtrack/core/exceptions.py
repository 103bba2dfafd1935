"""
Exception hierarchy for the job store.

Every failure raised by the transaction layer is one of three kinds:
the job could not be found, the commit lost a concurrent race, or the store
itself is unreachable. The underlying driver exception is kept as __cause__.

Dependencies: None (pure domain layer)
System role: Closed error taxonomy at the updater boundary
"""

import enum
from typing import Any


class StoreErrorKind(str, enum.Enum):
    """
    Closed set of job store failure kinds.

    LOOKUP_FAILURE: Job id does not resolve to a record in the transaction
    COMMIT_CONFLICT: Commit rejected because of a concurrent modification
    STORE_UNAVAILABLE: Connectivity or infrastructure failure
    """

    LOOKUP_FAILURE = "lookup_failure"
    COMMIT_CONFLICT = "commit_conflict"
    STORE_UNAVAILABLE = "store_unavailable"


class JobStoreError(Exception):
    """Base exception for all job store failures."""

    kind: StoreErrorKind = StoreErrorKind.STORE_UNAVAILABLE

    def __init__(
        self,
        message: str,
        job_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize store error with message and optional context.

        Args:
            message: Human-readable error message
            job_id: Job the failing operation targeted, if known
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.job_id = job_id
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class JobLookupError(JobStoreError):
    """Raised when a job id does not resolve to a record."""

    kind = StoreErrorKind.LOOKUP_FAILURE

    def __init__(self, job_id: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"Job {job_id} not found", job_id=job_id, details=details)


class CommitConflictError(JobStoreError):
    """Raised when a commit loses to a concurrent modification of the same job."""

    kind = StoreErrorKind.COMMIT_CONFLICT


class StoreUnavailableError(JobStoreError):
    """Raised on connectivity or infrastructure failure in the job store."""

    kind = StoreErrorKind.STORE_UNAVAILABLE
