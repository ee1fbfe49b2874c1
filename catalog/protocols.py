"""
Protocol classes for structural subtyping.

`Repository[T]` is the contract the commands depend on for data access.
Any class implementing these methods can be injected, which is how the
tests substitute in-memory mocks for the database-backed repositories.
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class Repository(Protocol[T]):
    """
    Protocol for repository pattern.

    Type Parameters:
        T: The entity type this repository manages.
    """

    async def get_by_id(self, id: int) -> T | None:
        """Get entity by primary key ID, None if absent."""
        ...

    async def get_all(self, order_by: Any = None, **filters: Any) -> list[T]:
        """
        Get all entities matching the provided filters.

        Args:
            order_by: Optional column (or column expression) to sort by.
            **filters: Field name and value pairs to filter by.

        Returns:
            List of entities matching all filters.
        """
        ...

    async def create(self, entity: T) -> T:
        """Persist a new entity and return it with generated fields set."""
        ...

    async def update(self, entity: T) -> T:
        """Persist changes made to an existing entity."""
        ...

    async def delete(self, entity: T) -> None:
        """Remove an entity."""
        ...

    async def exists(self, **filters: Any) -> bool:
        """True if at least one entity matches the filters."""
        ...
