"""
Repository for Book entity.

The author pages only need a book's title and summary, so
`get_by_author()` loads just those columns (plus the primary key).
"""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import load_only
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.logging import logger
from catalog.models.book import Book
from catalog.repositories.base import BaseRepository


class BookRepository(BaseRepository[Book]):
    """Repository for Book entity operations."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, Book)

    async def get_by_author(self, author_id: int) -> list[Book]:
        """
        Get the books referencing an author.

        Args:
            author_id: Identifier of the author.

        Returns:
            Books written by the author with title and summary loaded.

        Raises:
            SQLAlchemyError: If database query fails.
        """
        stmt = (
            select(Book)
            .where(Book.author_id == author_id)
            .options(load_only(Book.title, Book.summary))  # type: ignore[arg-type]
        )
        try:
            result = await self.session.exec(stmt)
            return list(result.all())
        except SQLAlchemyError as e:
            logger.error(f"Error retrieving books of author {author_id}: {e}")
            raise
