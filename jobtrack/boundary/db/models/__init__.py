"""
Database models package.

Exports:
  - JobModel, JobState: Job ORM model and lifecycle enum

Dependencies: sqlalchemy, jobtrack.boundary.db.base
System role: Database model definitions for domain entities
"""

from jobtrack.boundary.db.models.job_model import JobModel, JobState

__all__ = [
    "JobModel",
    "JobState",
]
