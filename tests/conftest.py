"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for repositories, sample authors
and books, and an HTTP client whose repositories are mocked.
"""

import os
import tempfile
from datetime import date

import pytest

# Set required environment variables for testing before importing app modules
os.environ.setdefault("DB_USER", "test-user")
os.environ.setdefault("DB_PASSWORD", "test-password")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault(
    "LOG_FILE_PATH",
    os.path.join(tempfile.gettempdir(), "catalog-test-errors.log"),
)

from fastapi.testclient import TestClient

from catalog import application
from catalog.dependencies import get_author_repository, get_book_repository
from catalog.models.author import Author
from catalog.models.book import Book
from tests.mocks.repository_mocks import (
    create_mock_author_repository,
    create_mock_book_repository,
)


@pytest.fixture
def author():
    """
    Provides a stored author.

    Returns:
        Author: Author with id 1, born 1920, died 1992
    """
    return Author(
        id=1,
        first_name="Isaac",
        family_name="Asimov",
        date_of_birth=date(1920, 1, 2),
        date_of_death=date(1992, 4, 6),
    )


@pytest.fixture
def books():
    """
    Provides books referencing the author fixture.

    Returns:
        list[Book]: Two books by author 1
    """
    return [
        Book(id=1, title="Foundation", summary="Psychohistory.", author_id=1),
        Book(id=2, title="I, Robot", summary="Three laws.", author_id=1),
    ]


@pytest.fixture
def author_repo():
    """Mocked AuthorRepository (see tests/mocks/repository_mocks.py)."""
    return create_mock_author_repository()


@pytest.fixture
def book_repo():
    """Mocked BookRepository (see tests/mocks/repository_mocks.py)."""
    return create_mock_book_repository()


@pytest.fixture
def app(author_repo, book_repo):
    """
    Create the application with mocked repositories.

    The lifespan is not entered, so no database connection is attempted.

    Yields:
        FastAPI: Application with dependency overrides installed.
    """
    test_app = application()
    test_app.dependency_overrides[get_author_repository] = lambda: author_repo
    test_app.dependency_overrides[get_book_repository] = lambda: book_repo
    yield test_app
    test_app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """
    Create a test client that does not follow redirects.

    Args:
        app: FastAPI application fixture.

    Returns:
        TestClient: FastAPI test client instance.
    """
    return TestClient(app, follow_redirects=False)
