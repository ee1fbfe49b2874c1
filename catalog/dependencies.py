"""
Dependency injection configuration for FastAPI.

Handlers receive repositories through these annotated dependencies,
which tests replace via ``app.dependency_overrides``.

The book repository asks for its own session (``use_cache=False``) so
that an author and their books can be read concurrently.

Example:
    ```python
    @router.get("/author/{author_id}")
    async def author_detail(
        author_id: int, authors: AuthorRepoDep, books: BookRepoDep
    ) -> HTMLResponse:
        ...
    ```
"""

from typing import Annotated

from fastapi import Depends
from sqlmodel.ext.asyncio.session import AsyncSession

from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository
from catalog.storage.db import get_session

# ============================================================================
# Database Session Dependencies
# ============================================================================

# Committed or rolled back when the handler returns, before the response is sent
SessionDep = Annotated[AsyncSession, Depends(get_session, scope="function")]

# A second, independent session for reads that run alongside SessionDep
SeparateSessionDep = Annotated[
    AsyncSession, Depends(get_session, use_cache=False, scope="function")
]


# ============================================================================
# Repository Dependencies
# ============================================================================


def get_author_repository(session: SessionDep) -> AuthorRepository:
    """
    Get Author repository bound to the request session.

    Args:
        session: Database session (injected).

    Returns:
        AuthorRepository instance.
    """
    return AuthorRepository(session)


def get_book_repository(session: SeparateSessionDep) -> BookRepository:
    """
    Get Book repository bound to its own session.

    Args:
        session: Database session (injected, not shared with authors).

    Returns:
        BookRepository instance.
    """
    return BookRepository(session)


AuthorRepoDep = Annotated[AuthorRepository, Depends(get_author_repository)]
BookRepoDep = Annotated[BookRepository, Depends(get_book_repository)]
