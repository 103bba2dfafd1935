"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, jobtrack.configs
System role: Database schema initialization

Usage:
    python -m jobtrack.boundary.db.create_tables
"""

from sqlalchemy import Engine

from jobtrack.boundary.db.base import Base
from jobtrack.boundary.db.connection import get_engine
from jobtrack.observability import configure_logging, get_logger

# Import all models to register them with Base.metadata
from jobtrack.boundary.db.models.job_model import JobModel  # noqa: F401

logger = get_logger(__name__)


def create_all_tables(engine: Engine | None = None) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: existing tables are left unchanged.

    Args:
        engine: Target engine; defaults to get_engine()

    Raises:
        SQLAlchemyError: If database connection fails or table creation fails
    """
    if engine is None:
        engine = get_engine()

    Base.metadata.create_all(bind=engine)
    logger.info(f"{__name__}:create_all_tables - Tables created on {engine.url!r}")


if __name__ == "__main__":
    configure_logging()
    create_all_tables()
