"""
Repository for Author entity with catalog-specific query methods.

Example:
    ```python
    from catalog.repositories.author_repository import AuthorRepository
    from catalog.storage.db import async_session

    async with async_session() as session:
        repo = AuthorRepository(session)
        authors = await repo.list_by_family_name()
    ```
"""

from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.models.author import Author
from catalog.repositories.base import BaseRepository


class AuthorRepository(BaseRepository[Author]):
    """
    Repository for Author entity operations.

    Provides CRUD operations inherited from BaseRepository plus the
    ordering used by the author list page.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session, Author)

    async def list_by_family_name(self) -> list[Author]:
        """
        Get all authors ordered by family name, ascending.

        Returns:
            Every author, first name plays no part in the ordering.
        """
        return await self.get_all(order_by=Author.family_name)
