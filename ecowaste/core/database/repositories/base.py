"""
Base repository interfaces and utilities.

This module provides the foundational repository patterns and interfaces
used across all repository implementations in the centralized database layer.
Built with async SQLAlchemy; sessions are SQLModel ``AsyncSession`` instances.
"""

from __future__ import annotations

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlmodel import SQLModel, select
from sqlmodel.ext.asyncio.session import AsyncSession

# Generic type for SQLModel entities
EntityType = TypeVar("EntityType", bound=SQLModel)


class AsyncBaseRepository(Generic[EntityType]):
    """Base async repository with common CRUD operations using SQLModel.

    Records are never deleted by the application, so there is no ``delete``.
    """

    # Column used to order ``list`` results; subclasses override as needed.
    default_order_by: Optional[str] = None
    default_descending: bool = True

    def __init__(self, session: AsyncSession, model: Type[EntityType]) -> None:
        """Initialize repository with async database session and SQLModel entity class.

        Args:
            session: Async SQLModel Session for database operations
            model: SQLModel entity class for this repository
        """
        self.session = session
        self.model = model

    async def create(self, entity: EntityType) -> EntityType:
        """Create a new entity record.

        Args:
            entity: SQLModel instance to persist

        Returns:
            Persisted entity with generated fields populated
        """
        self.session.add(entity)
        await self._commit()
        await self.session.refresh(entity)
        return entity

    async def _commit(self) -> None:
        """Commit the session, rolling it back when the database rejects the writes.

        Raises:
            IntegrityError: On a constraint violation, after the rollback
        """
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise

    async def get_by_id(self, entity_id: str | int) -> Optional[EntityType]:
        """Get entity by its primary identifier.

        Always reloads from the database so counters changed by SQL
        expressions are current.

        Args:
            entity_id: Primary key value

        Returns:
            Entity instance or None if not found
        """
        return await self.session.get(self.model, entity_id, populate_existing=True)

    async def update(self, entity: EntityType) -> EntityType:
        """Update an existing entity record.

        Args:
            entity: SQLModel instance with updated fields

        Returns:
            Updated entity instance
        """
        self.session.add(entity)
        await self._commit()
        await self.session.refresh(entity)
        return entity

    async def list(
        self, limit: Optional[int] = None, offset: Optional[int] = None, filters: Optional[Dict[str, Any]] = None
    ) -> List[EntityType]:
        """List entities with optional pagination and filtering.

        Args:
            limit: Maximum number of records to return
            offset: Number of records to skip
            filters: Dictionary of field filters

        Returns:
            List of entity instances
        """
        stmt = select(self.model)
        if self.default_order_by:
            column = getattr(self.model, self.default_order_by)
            stmt = stmt.order_by(column.desc() if self.default_descending else column.asc())

        if filters:
            stmt = AsyncQueryBuilder.apply_filters(stmt, self.model, filters)

        stmt = AsyncQueryBuilder.apply_pagination(stmt, limit, offset)

        result = await self.session.exec(stmt)
        return list(result.all())


class AsyncQueryBuilder:
    """Utility class for building async SQLModel-based database queries."""

    @staticmethod
    def apply_filters(stmt, model: Type[EntityType], filters: Dict[str, Any]):
        """Apply equality filters to a SQLModel select statement.

        Args:
            stmt: SQLModel select statement
            model: SQLModel entity class
            filters: Dictionary of field filters; ``None`` values and unknown fields are ignored

        Returns:
            Modified select statement with filters applied
        """
        for key, value in filters.items():
            if value is not None and hasattr(model, key):
                stmt = stmt.where(getattr(model, key) == value)
        return stmt

    @staticmethod
    def apply_pagination(stmt, limit: Optional[int], offset: Optional[int]):
        """Apply pagination to a SQLModel select statement.

        Args:
            stmt: SQLModel select statement
            limit: Maximum number of records
            offset: Number of records to skip

        Returns:
            Modified select statement with pagination applied
        """
        if limit is not None:
            stmt = stmt.limit(limit)
        if offset is not None:
            stmt = stmt.offset(offset)
        return stmt


def dialect_insert(session: AsyncSession, model: Type[SQLModel]):
    """Build an ``INSERT`` that supports ``ON CONFLICT`` for the session's backend.

    PostgreSQL and SQLite both provide ``on_conflict_do_nothing`` and
    ``on_conflict_do_update`` through their dialect-specific insert constructs.

    Args:
        session: Session whose bound engine decides the dialect
        model: Table entity to insert into

    Returns:
        Dialect-specific ``Insert`` against the entity's table
    """
    table = model.__table__  # type: ignore[attr-defined]
    if session.get_bind().dialect.name == "sqlite":
        return sqlite.insert(table)
    return postgresql.insert(table)
