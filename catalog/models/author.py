from datetime import date

from sqlmodel import Field

from catalog.constants import (
    AUTHOR_NAME_MAX_LENGTH,
    CATALOG_PREFIX,
    DISPLAY_DATE_FORMAT,
)
from catalog.models.base import BaseModel


def _format_date(value: date | None) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT) if value else ""


class Author(BaseModel, table=True):
    """
    SQLModel representing an author in the catalog.

    This is a plain data model without Active Record methods; use
    AuthorRepository for all database operations. Presentation values
    (name, url, lifespan) are derived properties and are not stored.

    Attributes:
        id: Primary key identifier for the author
        first_name: Given name
        family_name: Family name, used to order the author list
        date_of_birth: Optional date of birth
        date_of_death: Optional date of death
    """

    __table_args__ = {"extend_existing": True}  # for pydoc

    id: int | None = Field(default=None, primary_key=True)
    first_name: str = Field(max_length=AUTHOR_NAME_MAX_LENGTH)
    family_name: str = Field(max_length=AUTHOR_NAME_MAX_LENGTH, index=True)
    date_of_birth: date | None = None
    date_of_death: date | None = None

    @property
    def name(self) -> str:
        """Full name as "family_name, first_name", empty if either is missing."""
        if self.first_name and self.family_name:
            return f"{self.family_name}, {self.first_name}"
        return ""

    @property
    def url(self) -> str:
        """URL of the author detail page."""
        return f"{CATALOG_PREFIX}/author/{self.id}"

    @property
    def date_of_birth_formatted(self) -> str:
        return _format_date(self.date_of_birth)

    @property
    def date_of_death_formatted(self) -> str:
        return _format_date(self.date_of_death)

    @property
    def lifespan(self) -> str:
        """Birth and death dates joined for display, e.g. "Oct 14, 1983 - "."""
        return f"{self.date_of_birth_formatted} - {self.date_of_death_formatted}"

    @property
    def date_of_birth_iso(self) -> str:
        """YYYY-MM-DD value for the form's date input."""
        return self.date_of_birth.isoformat() if self.date_of_birth else ""

    @property
    def date_of_death_iso(self) -> str:
        return self.date_of_death.isoformat() if self.date_of_death else ""
