"""
Author pages: list, detail, create, update and delete.

Every handler renders a Jinja2 template or redirects. Business logic
lives in catalog.commands.author_commands; not-found and database errors
are raised and rendered by the application exception handlers.

Routes:
    GET  /catalog/authors                   author list
    GET  /catalog/author/create             empty author form
    POST /catalog/author/create             create author
    GET  /catalog/author/{author_id}        author detail with books
    GET  /catalog/author/{author_id}/update pre-filled author form
    POST /catalog/author/{author_id}/update update author
    GET  /catalog/author/{author_id}/delete delete confirmation
    POST /catalog/author/{author_id}/delete delete author
"""

from typing import Any

from fastapi import APIRouter, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from catalog.commands.author_commands import (
    CreateAuthorCommand,
    DeleteAuthorCommand,
    GetAuthorCommand,
    GetAuthorDetailCommand,
    GetAuthorForDeleteCommand,
    ListAuthorsCommand,
    UpdateAuthorCommand,
    UpdateAuthorInput,
)
from catalog.constants import AUTHOR_LIST_URL, CATALOG_PREFIX
from catalog.dependencies import AuthorRepoDep, BookRepoDep
from catalog.forms.author import (
    AuthorCreateForm,
    AuthorUpdateForm,
    validate_author_form,
)
from catalog.templating import templates

router = APIRouter(
    prefix=CATALOG_PREFIX,
    tags=["authors"],
    default_response_class=HTMLResponse,
)


def render(request: Request, name: str, **context: Any) -> HTMLResponse:
    return templates.TemplateResponse(request, name, context)


@router.get("/authors", summary="List authors")
async def author_list(request: Request, repo: AuthorRepoDep) -> HTMLResponse:
    """Display all authors ordered by family name."""
    authors = await ListAuthorsCommand(repo).execute()
    return render(
        request, "author_list.html", title="Author List", author_list=authors
    )


@router.get("/author/create", summary="Author create form")
async def author_create_get(request: Request) -> HTMLResponse:
    return render(request, "author_form.html", title="Create Author")


@router.post("/author/create", summary="Create author")
async def author_create_post(request: Request, repo: AuthorRepoDep) -> Response:
    """
    Create an author from the submitted form.

    Invalid submissions re-render the form with the submitted values and
    the error messages; nothing is stored. Valid submissions redirect to
    the new author's page.
    """
    result = validate_author_form(AuthorCreateForm, await request.form())
    if not result.is_empty():
        return render(
            request,
            "author_form.html",
            title="Create Author",
            author=result.values,
            errors=result.errors,
        )

    author = await CreateAuthorCommand(repo).execute(result.cleaned)
    return RedirectResponse(author.url, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/author/{author_id}", summary="Author detail")
async def author_detail(
    request: Request,
    author_id: int,
    authors: AuthorRepoDep,
    books: BookRepoDep,
) -> HTMLResponse:
    """
    Display an author and the books they wrote.

    Raises:
        NotFoundError: If the author does not exist (rendered as 404).
    """
    detail = await GetAuthorDetailCommand(authors, books).execute(author_id)
    return render(
        request,
        "author_detail.html",
        title="Author Detail",
        author=detail.author,
        author_books=detail.books,
    )


@router.get("/author/{author_id}/delete", summary="Author delete confirmation")
async def author_delete_get(
    request: Request,
    author_id: int,
    authors: AuthorRepoDep,
    books: BookRepoDep,
) -> Response:
    """
    Display the delete confirmation page.

    A missing author redirects to the author list instead of failing.
    """
    loaded = await GetAuthorForDeleteCommand(authors, books).execute(author_id)
    if loaded.author is None:
        return RedirectResponse(AUTHOR_LIST_URL, status_code=status.HTTP_302_FOUND)

    return render(
        request,
        "author_delete.html",
        title="Delete Author",
        author=loaded.author,
        author_books=loaded.books,
    )


@router.post("/author/{author_id}/delete", summary="Delete author")
async def author_delete_post(
    request: Request,
    author_id: int,
    authors: AuthorRepoDep,
    books: BookRepoDep,
) -> Response:
    """
    Delete an author unless books still reference them.

    A blocked delete re-renders the confirmation page listing the books
    that have to be deleted first.
    """
    result = await DeleteAuthorCommand(authors, books).execute(author_id)
    if result.deleted or result.author is None:
        return RedirectResponse(
            AUTHOR_LIST_URL, status_code=status.HTTP_303_SEE_OTHER
        )

    return render(
        request,
        "author_delete.html",
        title="Delete Author",
        author=result.author,
        author_books=result.books,
    )


@router.get("/author/{author_id}/update", summary="Author update form")
async def author_update_get(
    request: Request, author_id: int, repo: AuthorRepoDep
) -> HTMLResponse:
    """
    Display the author form pre-filled with the stored values.

    Raises:
        NotFoundError: If the author does not exist (rendered as 404).
    """
    author = await GetAuthorCommand(repo).execute(author_id)
    return render(request, "author_form.html", title="Update Author", author=author)


@router.post("/author/{author_id}/update", summary="Update author")
async def author_update_post(
    request: Request, author_id: int, repo: AuthorRepoDep
) -> Response:
    """
    Overwrite an author's fields from the submitted form.

    Invalid submissions re-render the form with the submitted values and
    the error messages; valid ones redirect to the author's page.
    """
    result = validate_author_form(AuthorUpdateForm, await request.form())
    if not result.is_empty():
        return render(
            request,
            "author_form.html",
            title="Update Author",
            author={**result.values, "id": author_id},
            errors=result.errors,
        )

    author = await UpdateAuthorCommand(repo).execute(
        UpdateAuthorInput(id=author_id, form=result.cleaned)
    )
    return RedirectResponse(author.url, status_code=status.HTTP_303_SEE_OTHER)
