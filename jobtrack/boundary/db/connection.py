"""
Database connection management.

Provides SQLAlchemy engine and session factory for the job store.

Dependencies: sqlalchemy, jobtrack.configs
System role: Database connection lifecycle management
"""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import sessionmaker

from jobtrack.configs import get_settings
from jobtrack.configs.database import DatabaseSettings


def get_engine(db_config: DatabaseSettings | None = None) -> Engine:
    """
    Create SQLAlchemy engine with connection pooling and health checks.

    Pool sizing from settings is applied to server databases only; SQLite
    uses SQLAlchemy's default pool for its URL.

    Args:
        db_config: Database settings; defaults to get_settings().database

    Returns:
        Engine: Configured SQLAlchemy engine

    Raises:
        ArgumentError: If database URL is invalid or engine creation fails
    """
    if db_config is None:
        db_config = get_settings().database

    return create_engine(db_config.url, **db_config.engine_options)


def get_session_factory(engine: Engine | None = None) -> sessionmaker:
    """
    Create session factory for database operations.

    autoflush is off so nothing reaches the database before an explicit
    commit. expire_on_commit is off so committed objects stay readable
    after their session is closed.

    Args:
        engine: Engine to bind; defaults to get_engine()

    Returns:
        sessionmaker: Session factory configured for manual transaction control

    Usage:
        SessionFactory = get_session_factory()
        with SessionFactory() as session:
            session.add(obj)
            session.commit()
    """
    if engine is None:
        engine = get_engine()
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
