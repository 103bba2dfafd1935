"""Pydantic schemas for job records."""

from jobtrack.models.job import JobRecord

__all__ = ["JobRecord"]
