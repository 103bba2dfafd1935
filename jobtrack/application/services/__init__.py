"""Service orchestrators."""

from .job_status_updater import JobStatusUpdater

__all__ = [
    "JobStatusUpdater",
]
