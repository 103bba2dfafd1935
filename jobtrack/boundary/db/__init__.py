"""
Database boundary layer: ORM models, CRUD operations, transactions and
connection management.

Exports:
  - Base, StringIdMixin, TimestampMixin: Model building blocks
  - get_engine(), get_session_factory(): Connection management
  - JobModel, JobState: Job entity and lifecycle enum
  - JobTransaction, TransactionProvider: Transaction contracts
  - SQLAlchemyTransactionProvider: Session-backed provider
  - JobCRUD, job_crud: Job creation and lookup

Dependencies: sqlalchemy, jobtrack.configs
System role: Database adapter for persistent job tracking
"""

from jobtrack.boundary.db.base import Base, StringIdMixin, TimestampMixin
from jobtrack.boundary.db.connection import get_engine, get_session_factory
from jobtrack.boundary.db.models.job_model import JobModel, JobState
from jobtrack.boundary.db.transaction import (
    JobTransaction,
    SQLAlchemyJobTransaction,
    SQLAlchemyTransactionProvider,
    TransactionProvider,
    translate_store_error,
)
from jobtrack.boundary.db.CRUD import BaseCRUD, JobCRUD, job_crud

__all__ = [
    # Base classes
    "Base",
    "StringIdMixin",
    "TimestampMixin",
    # Connection
    "get_engine",
    "get_session_factory",
    # Models
    "JobModel",
    "JobState",
    # Transactions
    "JobTransaction",
    "SQLAlchemyJobTransaction",
    "SQLAlchemyTransactionProvider",
    "TransactionProvider",
    "translate_store_error",
    # CRUD
    "BaseCRUD",
    "JobCRUD",
    "job_crud",
]
