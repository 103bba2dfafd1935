"""
CRUD operations for database models.

Usage:
    from jobtrack.boundary.db.CRUD import job_crud

    with SessionFactory() as session:
        job = job_crud.create_job(session, name="build")
        session.commit()
"""

from jobtrack.boundary.db.CRUD.base_crud import BaseCRUD
from jobtrack.boundary.db.CRUD.job_crud import JobCRUD, job_crud

__all__ = [
    "BaseCRUD",
    "JobCRUD",
    "job_crud",
]
