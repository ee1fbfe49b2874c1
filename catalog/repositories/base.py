"""
Base repository with common CRUD operations.

The Repository pattern separates data access logic from business logic.
Repositories encapsulate all database operations for a specific entity
and log and roll back on database errors before re-raising them.

Example:
    ```python
    from catalog.repositories.base import BaseRepository
    from catalog.models.book import Book


    class BookRepository(BaseRepository[Book]):
        def __init__(self, session: AsyncSession):
            super().__init__(session, Book)
    ```
"""

from typing import Any, Generic, Type, TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.logging import logger

T = TypeVar("T")


class BaseRepository(Generic[T]):
    """
    Base repository providing common CRUD operations.

    Type Parameters:
        T: The SQLModel type this repository manages.

    Attributes:
        session: The database session for executing queries.
        model: The SQLModel class this repository manages.
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        """
        Initialize repository with session and model.

        Args:
            session: Database session for executing queries.
            model: The SQLModel class to manage.
        """
        self.session = session
        self.model = model

    def _filtered(self, **filters: Any):
        stmt = select(self.model)
        for key, value in filters.items():
            if value is not None:
                stmt = stmt.where(getattr(self.model, key) == value)
        return stmt

    async def get_by_id(self, id: int) -> T | None:
        """
        Get entity by primary key ID.

        Args:
            id: Primary key value.

        Returns:
            Entity if found, None otherwise.
        """
        return await self.session.get(self.model, id)

    async def get_all(self, order_by: Any = None, **filters: Any) -> list[T]:
        """
        Get all entities matching the provided filters.

        Args:
            order_by: Optional column (or column expression such as
                ``Author.family_name.desc()``) to sort by.
            **filters: Field name and value pairs to filter by.
                Example: get_all(author_id=3)

        Returns:
            List of entities matching all filters.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        try:
            stmt = self._filtered(**filters)
            if order_by is not None:
                stmt = stmt.order_by(order_by)
            result = await self.session.exec(stmt)
            return list(result.all())
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving {self.model.__name__}: {e}")
            raise

    async def create(self, entity: T) -> T:
        """
        Create new entity in database.

        Args:
            entity: The entity instance to create.

        Returns:
            The created entity with generated fields populated.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error creating {self.model.__name__}: {e}")
            raise

    async def update(self, entity: T) -> T:
        """
        Update existing entity in database.

        Args:
            entity: The entity instance with updated values.

        Returns:
            The updated entity.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            self.session.add(entity)
            await self.session.flush()
            await self.session.refresh(entity)
            return entity
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error updating {self.model.__name__}: {e}")
            raise

    async def delete(self, entity: T) -> None:
        """
        Delete entity from database.

        Args:
            entity: The entity instance to delete.

        Raises:
            SQLAlchemyError: If database operation fails.
        """
        try:
            await self.session.delete(entity)
            await self.session.flush()
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.error(f"Error deleting {self.model.__name__}: {e}")
            raise

    async def exists(self, **filters: Any) -> bool:
        """
        Check if entity exists matching the provided filters.

        Args:
            **filters: Field name and value pairs to filter by.

        Returns:
            True if at least one entity matches, False otherwise.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        try:
            result = await self.session.exec(self._filtered(**filters))
            return result.first() is not None
        except SQLAlchemyError as e:
            logger.error(
                f"Error checking existence of {self.model.__name__}: {e}"
            )
            raise
