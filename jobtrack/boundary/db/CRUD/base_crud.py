"""
Base CRUD operations for SQLAlchemy models.

Provides generic Create, Read, Delete operations that can be
inherited and extended by model-specific CRUD classes. Callers own the
session and decide when to commit.

Dependencies: sqlalchemy
System role: Foundation for all database CRUD operations
"""

from typing import Generic, Sequence, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from jobtrack.boundary.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseCRUD(Generic[ModelT]):
    """
    Generic base class for CRUD operations.

    Type Parameters:
        ModelT: SQLAlchemy model class inheriting from Base

    Attributes:
        model: The SQLAlchemy model class to operate on
    """

    def __init__(self, model: type[ModelT]) -> None:
        """
        Initialize CRUD with target model.

        Args:
            model: SQLAlchemy model class for database operations
        """
        self.model = model

    def create(self, session: Session, **kwargs) -> ModelT:
        """
        Create a new record in the database.

        Args:
            session: Database session
            **kwargs: Model field values

        Returns:
            Created model instance with generated ID and timestamps
        """
        instance = self.model(**kwargs)
        session.add(instance)
        session.flush()
        session.refresh(instance)
        return instance

    def get_by_id(self, session: Session, id: str) -> ModelT | None:
        """
        Retrieve a single record by primary key.

        Args:
            session: Database session
            id: Primary key

        Returns:
            Model instance if found, None otherwise
        """
        stmt = select(self.model).where(self.model.id == id)
        return session.execute(stmt).scalar_one_or_none()

    def get_all(
        self,
        session: Session,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ModelT]:
        """
        Retrieve all records with optional pagination.

        Args:
            session: Database session
            limit: Maximum number of records to return (None for all)
            offset: Number of records to skip

        Returns:
            Sequence of model instances
        """
        stmt = select(self.model).offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        return session.execute(stmt).scalars().all()

    def delete_by_id(self, session: Session, id: str) -> bool:
        """
        Delete a record by primary key.

        Args:
            session: Database session
            id: Primary key

        Returns:
            True if record was deleted, False if not found
        """
        stmt = delete(self.model).where(self.model.id == id)
        result = session.execute(stmt)
        return result.rowcount > 0

    def exists(self, session: Session, id: str) -> bool:
        """
        Check if a record exists by primary key.

        Args:
            session: Database session
            id: Primary key

        Returns:
            True if record exists, False otherwise
        """
        stmt = select(self.model.id).where(self.model.id == id)
        return session.execute(stmt).scalar_one_or_none() is not None
