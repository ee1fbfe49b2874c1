from sqlmodel import Field

from catalog.models.base import BaseModel


class Book(BaseModel, table=True):
    """
    SQLModel representing a book in the catalog.

    The author controller only reads books: it lists the books written by
    an author and refuses to delete an author who still has any.

    Attributes:
        id: Primary key identifier for the book
        title: Book title
        summary: Short description shown on the author pages
        isbn: ISBN13
        author_id: Reference to the author who wrote the book
    """

    __table_args__ = {"extend_existing": True}  # for pydoc

    id: int | None = Field(default=None, primary_key=True)
    title: str
    summary: str
    isbn: str = ""
    author_id: int = Field(foreign_key="author.id", index=True)
