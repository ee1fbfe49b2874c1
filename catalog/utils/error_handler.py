"""
Application exception handlers rendering the HTML error page.

Handlers raise domain errors (AppException subclasses) or let database
errors propagate; the functions here turn them into ``error.html``
responses with the matching status code, so page handlers carry no
try/except blocks.
"""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from catalog.exceptions import AppException
from catalog.logging import logger
from catalog.settings import app_settings
from catalog.templating import templates

GENERIC_ERROR_MESSAGE = "Something went wrong"
PAGE_NOT_FOUND_MESSAGE = "Page not found"


def render_error(
    request: Request,
    status_code: int,
    message: str,
    exc: Exception | None = None,
) -> HTMLResponse:
    """
    Render the error page.

    Args:
        request: The request that failed.
        status_code: HTTP status of the response.
        message: Message shown to the user.
        exc: Exception whose details are shown in development.

    Returns:
        HTMLResponse rendered from error.html.
    """
    detail = None
    if exc is not None and app_settings.show_error_details:
        detail = f"{type(exc).__name__}: {exc}"

    return templates.TemplateResponse(
        request,
        "error.html",
        {
            "title": f"Error {status_code}",
            "message": message,
            "status_code": status_code,
            "detail": detail,
        },
        status_code=status_code,
    )


async def app_exception_handler(
    request: Request, exc: AppException
) -> HTMLResponse:
    """Render AppException with its own status code and message."""
    logger.warning(
        f"AppException on {request.url.path}: {exc.message}",
        extra={"exception_type": type(exc).__name__},
    )
    return render_error(request, exc.http_status, exc.message, exc)


async def database_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> HTMLResponse:
    """Render store failures as a generic 500 page."""
    logger.error(
        f"Database error on {request.url.path}: {exc}",
        exc_info=exc,
    )
    return render_error(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        GENERIC_ERROR_MESSAGE,
        exc,
    )


async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> HTMLResponse:
    """Render framework HTTP errors (unknown route, wrong method)."""
    message = (
        PAGE_NOT_FOUND_MESSAGE
        if exc.status_code == status.HTTP_404_NOT_FOUND
        else str(exc.detail)
    )
    response = render_error(request, exc.status_code, message)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> HTMLResponse:
    """
    Render path parameter errors as not found.

    The only parameters parsed by FastAPI are identifiers in the URL,
    so a malformed one addresses a page that does not exist.
    """
    logger.info(f"Invalid request parameters on {request.url.path}")
    return render_error(
        request, status.HTTP_404_NOT_FOUND, PAGE_NOT_FOUND_MESSAGE, exc
    )


def register_exception_handlers(app: FastAPI) -> None:
    """
    Attach the HTML error handlers to an application.

    Args:
        app: FastAPI application.
    """
    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(
        RequestValidationError, request_validation_handler
    )
