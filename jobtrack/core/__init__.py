"""
Core domain module.

Contains the exception hierarchy shared by the job store boundary and the
status updater.
"""

from jobtrack.core.exceptions import (
    CommitConflictError,
    JobLookupError,
    JobStoreError,
    StoreErrorKind,
    StoreUnavailableError,
)

__all__ = [
    "CommitConflictError",
    "JobLookupError",
    "JobStoreError",
    "StoreErrorKind",
    "StoreUnavailableError",
]
