"""
Base model for all database tables with async relationship support.

This module provides the BaseModel class that all SQLModel table models
inherit from. It includes SQLAlchemy's AsyncAttrs mixin so lazy-loaded
attributes can be awaited in async contexts instead of raising
MissingGreenlet.
"""

from sqlalchemy.ext.asyncio import AsyncAttrs
from sqlmodel import SQLModel


class BaseModel(SQLModel, AsyncAttrs):  # type: ignore[misc]
    """
    Base model for all database tables with async relationship support.

    Example:
        ```python
        class Book(BaseModel, table=True):
            id: int | None = Field(default=None, primary_key=True)
            title: str
            author_id: int = Field(foreign_key="author.id")
        ```

    Note:
        Queries for related rows go through repositories (see
        catalog/repositories) rather than ORM relationships, so that the
        two reads a page needs can run concurrently on separate sessions.
    """

    pass
