"""
Commands for Author business operations.

Each command backs one (or two) of the author pages. Pages that show an
author together with their books load both concurrently from two
repositories; see `load_author_with_books()`.

Example:
    ```python
    @router.get("/author/{author_id}")
    async def author_detail(author_id: int, authors: AuthorRepoDep, books: BookRepoDep):
        detail = await GetAuthorDetailCommand(authors, books).execute(author_id)
        ...
    ```
"""

import asyncio
from dataclasses import dataclass, field

from pydantic import BaseModel, Field
from sqlalchemy.exc import IntegrityError

from catalog.commands.base import BaseCommand
from catalog.exceptions import NotFoundError
from catalog.forms.author import FORM_FIELDS, AuthorCreateForm, AuthorUpdateForm
from catalog.logging import logger
from catalog.models.author import Author
from catalog.models.book import Book
from catalog.protocols import Repository
from catalog.repositories.author_repository import AuthorRepository
from catalog.repositories.book_repository import BookRepository

AUTHOR_NOT_FOUND = "Author not found"


# ============================================================================
# Input/Output Models
# ============================================================================


class UpdateAuthorInput(BaseModel):  # type: ignore[misc]
    """Input model for updating an author."""

    id: int = Field(..., description="Author ID to update")
    form: AuthorUpdateForm


@dataclass
class AuthorWithBooks:
    """An author (None when absent) and the books referencing it."""

    author: Author | None
    books: list[Book] = field(default_factory=list)


@dataclass
class DeleteAuthorResult:
    """
    Outcome of a delete attempt.

    `deleted` is False when books still reference the author; `author`
    and `books` then hold the state to show on the confirmation page.
    """

    deleted: bool
    author: Author | None
    books: list[Book] = field(default_factory=list)


async def load_author_with_books(
    author_repository: Repository[Author],
    book_repository: BookRepository,
    author_id: int,
) -> AuthorWithBooks:
    """
    Fetch an author and the books referencing it concurrently.

    The two repositories must use separate sessions, since a session
    cannot run two statements at once.
    """
    author, books = await asyncio.gather(
        author_repository.get_by_id(author_id),
        book_repository.get_by_author(author_id),
    )
    return AuthorWithBooks(author=author, books=books)


# ============================================================================
# Commands
# ============================================================================


class ListAuthorsCommand(BaseCommand[None, list[Author]]):
    """Command to list every author ordered by family name."""

    def __init__(self, repository: AuthorRepository):
        self.repository = repository

    async def execute(self, input_data: None = None) -> list[Author]:
        return await self.repository.list_by_family_name()


class GetAuthorDetailCommand(BaseCommand[int, AuthorWithBooks]):
    """
    Command to load an author and their books for the detail page.

    Raises NotFoundError instead of returning an empty result, so the
    detail page is never rendered for a missing author.
    """

    def __init__(
        self,
        author_repository: Repository[Author],
        book_repository: BookRepository,
    ):
        self.author_repository = author_repository
        self.book_repository = book_repository

    async def execute(self, author_id: int) -> AuthorWithBooks:
        """
        Args:
            author_id: Identifier of the author.

        Returns:
            The author with the books referencing it.

        Raises:
            NotFoundError: If the author does not exist.
        """
        detail = await load_author_with_books(
            self.author_repository, self.book_repository, author_id
        )
        if detail.author is None:
            raise NotFoundError(AUTHOR_NOT_FOUND)
        return detail


class GetAuthorCommand(BaseCommand[int, Author]):
    """Command to load an author to pre-fill the update form."""

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, author_id: int) -> Author:
        author = await self.repository.get_by_id(author_id)
        if author is None:
            raise NotFoundError(AUTHOR_NOT_FOUND)
        return author


class CreateAuthorCommand(BaseCommand[AuthorCreateForm, Author]):
    """Command to persist a new author from a validated form."""

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, input_data: AuthorCreateForm) -> Author:
        """
        Args:
            input_data: Form that passed validation.

        Returns:
            Created author with generated ID.
        """
        author = Author(**input_data.model_dump(include=set(FORM_FIELDS)))
        author = await self.repository.create(author)
        logger.info(f"Created author {author.id} ({author.name})")
        return author


class UpdateAuthorCommand(BaseCommand[UpdateAuthorInput, Author]):
    """
    Command to overwrite the editable fields of an existing author.

    Only first_name, family_name, date_of_birth and date_of_death are
    written; the identifier is preserved.
    """

    def __init__(self, repository: Repository[Author]):
        self.repository = repository

    async def execute(self, input_data: UpdateAuthorInput) -> Author:
        """
        Args:
            input_data: Author ID and the validated form.

        Returns:
            Updated author.

        Raises:
            NotFoundError: If the author does not exist.
        """
        author = await self.repository.get_by_id(input_data.id)
        if author is None:
            raise NotFoundError(AUTHOR_NOT_FOUND)

        for name in FORM_FIELDS:
            setattr(author, name, getattr(input_data.form, name))

        author = await self.repository.update(author)
        logger.info(f"Updated author {author.id}")
        return author


class GetAuthorForDeleteCommand(BaseCommand[int, AuthorWithBooks]):
    """Command to load the delete confirmation page; a missing author is not an error."""

    def __init__(
        self,
        author_repository: Repository[Author],
        book_repository: BookRepository,
    ):
        self.author_repository = author_repository
        self.book_repository = book_repository

    async def execute(self, author_id: int) -> AuthorWithBooks:
        return await load_author_with_books(
            self.author_repository, self.book_repository, author_id
        )


class DeleteAuthorCommand(BaseCommand[int, DeleteAuthorResult]):
    """
    Command to delete an author that no book references.

    The reference check re-reads the books right before deleting. A book
    inserted between the check and the delete makes the database refuse
    the delete (foreign key); that is reported as a blocked delete with
    freshly loaded books.
    """

    def __init__(
        self,
        author_repository: Repository[Author],
        book_repository: BookRepository,
    ):
        self.author_repository = author_repository
        self.book_repository = book_repository

    async def execute(self, author_id: int) -> DeleteAuthorResult:
        """
        Args:
            author_id: Identifier of the author to delete.

        Returns:
            DeleteAuthorResult; `deleted` is False when books reference
            the author or when the author is already gone.
        """
        loaded = await load_author_with_books(
            self.author_repository, self.book_repository, author_id
        )
        if loaded.author is None:
            return DeleteAuthorResult(deleted=False, author=None)

        if loaded.books:
            logger.info(
                f"Author {author_id} still has {len(loaded.books)} book(s), not deleting"
            )
            return DeleteAuthorResult(
                deleted=False, author=loaded.author, books=loaded.books
            )

        try:
            await self.author_repository.delete(loaded.author)
        except IntegrityError:
            logger.warning(
                f"Author {author_id} gained a book before it could be deleted"
            )
            reloaded = await load_author_with_books(
                self.author_repository, self.book_repository, author_id
            )
            return DeleteAuthorResult(
                deleted=False, author=reloaded.author, books=reloaded.books
            )

        logger.info(f"Deleted author {author_id}")
        return DeleteAuthorResult(deleted=True, author=loaded.author)
