"""
Tests for the author pages.

The pages are exercised through the FastAPI test client with the
repositories replaced by mocks (see conftest.py), so every handler runs
end to end: routing, form parsing, validation, commands and templates.
"""

from datetime import date

from catalog.models.author import Author


class TestAuthorListPage:
    """Tests for GET /catalog/authors."""

    def test_lists_authors_in_repository_order(self, client, author_repo):
        """Test that authors appear in family-name order with links and lifespans."""
        author_repo.list_by_family_name.return_value = [
            Author(id=2, first_name="Zeta", family_name="A"),
            Author(
                id=1,
                first_name="Alpha",
                family_name="B",
                date_of_birth=date(1920, 1, 2),
            ),
        ]

        response = client.get("/catalog/authors")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        body = response.text
        assert "Author List" in body
        assert body.index("A, Zeta") < body.index("B, Alpha")
        assert 'href="/catalog/author/2"' in body
        assert "Jan 02, 1920 - " in body

    def test_empty_list(self, client):
        response = client.get("/catalog/authors")

        assert response.status_code == 200
        assert "There are no authors." in response.text

    def test_root_redirects_to_list(self, client):
        response = client.get("/")

        assert response.status_code == 302
        assert response.headers["location"] == "/catalog/authors"


class TestAuthorDetailPage:
    """Tests for GET /catalog/author/{id}."""

    def test_shows_author_and_books(self, client, author_repo, book_repo, author, books):
        author_repo.get_by_id.return_value = author
        book_repo.get_by_author.return_value = books

        response = client.get("/catalog/author/1")

        assert response.status_code == 200
        body = response.text
        assert "Author: Asimov, Isaac" in body
        assert "Jan 02, 1920 - Apr 06, 1992" in body
        assert "Foundation" in body
        assert "Three laws." in body
        assert 'href="/catalog/author/1/delete"' in body
        assert 'href="/catalog/author/1/update"' in body

    def test_author_without_books(self, client, author_repo, author):
        author_repo.get_by_id.return_value = author

        response = client.get("/catalog/author/1")

        assert response.status_code == 200
        assert "This author has no books." in response.text

    def test_missing_author(self, client):
        response = client.get("/catalog/author/999")

        assert response.status_code == 404
        assert "Author not found" in response.text

    def test_non_numeric_id(self, client, author_repo):
        response = client.get("/catalog/author/abc")

        assert response.status_code == 404
        assert "Page not found" in response.text
        author_repo.get_by_id.assert_not_awaited()


class TestAuthorCreatePage:
    """Tests for GET and POST /catalog/author/create."""

    def test_empty_form(self, client):
        response = client.get("/catalog/author/create")

        assert response.status_code == 200
        body = response.text
        assert "Create Author" in body
        assert 'name="first_name"' in body
        assert 'name="date_of_death"' in body

    def test_create_redirects_to_new_author(self, client, author_repo):
        """Test that a valid submission stores the author and redirects to it."""
        response = client.post(
            "/catalog/author/create",
            data={
                "first_name": " Ann ",
                "family_name": "Leckie",
                "date_of_birth": "1966-03-02",
                "date_of_death": "",
            },
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/catalog/author/1"
        created = author_repo.create.call_args.args[0]
        assert created.first_name == "Ann"
        assert created.date_of_birth == date(1966, 3, 2)
        assert created.date_of_death is None

    def test_invalid_submission_rerenders_form(self, client, author_repo):
        """Test that errors are shown with the submitted values and nothing is stored."""
        response = client.post(
            "/catalog/author/create",
            data={
                "first_name": "A",
                "family_name": "Leckie",
                "date_of_birth": "yesterday",
            },
        )

        assert response.status_code == 200
        body = response.text
        assert "First name must be specified." in body
        assert "Invalid date of birth" in body
        assert 'value="Leckie"' in body
        assert 'value="yesterday"' in body
        author_repo.create.assert_not_awaited()

    def test_submitted_markup_is_escaped(self, client, author_repo):
        response = client.post(
            "/catalog/author/create",
            data={"first_name": "<script>alert(1)</script>", "family_name": "X"},
        )

        assert response.status_code == 200
        body = response.text
        assert "<script>alert(1)</script>" not in body
        assert "&lt;script&gt;" in body
        assert "First name has non-alphanumeric character." in body
        assert "Family name must be specified." in body
        author_repo.create.assert_not_awaited()


class TestAuthorUpdatePage:
    """Tests for GET and POST /catalog/author/{id}/update."""

    def test_form_is_prefilled(self, client, author_repo, author):
        author_repo.get_by_id.return_value = author

        response = client.get("/catalog/author/1/update")

        assert response.status_code == 200
        body = response.text
        assert "Update Author" in body
        assert 'value="Isaac"' in body
        assert 'value="Asimov"' in body
        assert 'value="1920-01-02"' in body
        assert 'value="1992-04-06"' in body

    def test_form_for_missing_author(self, client):
        response = client.get("/catalog/author/7/update")

        assert response.status_code == 404
        assert "Author not found" in response.text

    def test_update_redirects_to_author(self, client, author_repo, author):
        """Test that a valid submission overwrites the author and redirects."""
        author_repo.get_by_id.return_value = author

        response = client.post(
            "/catalog/author/1/update",
            data={
                "first_name": "Isaak",
                "family_name": "Ozimov",
                "date_of_birth": "1919-10-04",
            },
        )

        assert response.status_code == 303
        assert response.headers["location"] == "/catalog/author/1"
        updated = author_repo.update.call_args.args[0]
        assert updated.id == 1
        assert updated.first_name == "Isaak"
        assert updated.family_name == "Ozimov"
        assert updated.date_of_birth == date(1919, 10, 4)
        assert updated.date_of_death is None

    def test_invalid_submission_rerenders_form(self, client, author_repo, author):
        author_repo.get_by_id.return_value = author

        response = client.post(
            "/catalog/author/1/update",
            data={"first_name": "Al", "family_name": "Gore"},
        )

        assert response.status_code == 200
        body = response.text
        assert "First name must be specified" in body
        assert 'value="Al"' in body
        author_repo.update.assert_not_awaited()

    def test_update_missing_author(self, client, author_repo):
        response = client.post(
            "/catalog/author/8/update",
            data={"first_name": "Ann", "family_name": "Leckie"},
        )

        assert response.status_code == 404
        author_repo.update.assert_not_awaited()


class TestAuthorDeletePage:
    """Tests for GET and POST /catalog/author/{id}/delete."""

    def test_confirmation_without_books(self, client, author_repo, author):
        author_repo.get_by_id.return_value = author

        response = client.get("/catalog/author/1/delete")

        assert response.status_code == 200
        body = response.text
        assert "Do you really want to delete this Author?" in body
        assert 'method="POST"' in body

    def test_confirmation_lists_books(self, client, author_repo, book_repo, author, books):
        author_repo.get_by_id.return_value = author
        book_repo.get_by_author.return_value = books

        response = client.get("/catalog/author/1/delete")

        assert response.status_code == 200
        body = response.text
        assert "Delete the following books before attempting to delete this author." in body
        assert "Foundation" in body
        assert "Do you really want to delete this Author?" not in body

    def test_confirmation_for_missing_author_redirects(self, client):
        response = client.get("/catalog/author/5/delete")

        assert response.status_code == 302
        assert response.headers["location"] == "/catalog/authors"

    def test_delete_redirects_to_list(self, client, author_repo, author):
        author_repo.get_by_id.return_value = author

        response = client.post("/catalog/author/1/delete")

        assert response.status_code == 303
        assert response.headers["location"] == "/catalog/authors"
        author_repo.delete.assert_awaited_once_with(author)

    def test_delete_blocked_by_books(self, client, author_repo, book_repo, author, books):
        """Test that an author with books is kept and the books are listed."""
        author_repo.get_by_id.return_value = author
        book_repo.get_by_author.return_value = books

        response = client.post("/catalog/author/1/delete")

        assert response.status_code == 200
        assert "Delete the following books" in response.text
        assert "I, Robot" in response.text
        author_repo.delete.assert_not_awaited()

    def test_delete_missing_author_redirects(self, client, author_repo):
        response = client.post("/catalog/author/5/delete")

        assert response.status_code == 303
        assert response.headers["location"] == "/catalog/authors"
        author_repo.delete.assert_not_awaited()
