# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager

from fastapi import FastAPI

from catalog.logging import logger
from catalog.middlewares.request_context import RequestContextMiddleware
from catalog.routing import collect_subrouters
from catalog.settings import app_settings
from catalog.storage.db import engine, wait_and_init_db
from catalog.utils.error_handler import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager for startup and shutdown.

    Startup waits for the database to accept connections; shutdown
    disposes of the connection pool.
    """
    logger.info("Application startup: initializing resources")

    await wait_and_init_db()

    yield  # Application runs here

    logger.info("Application shutdown: cleaning up resources")
    await engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    - Lifespan: waits for the database on startup
    - Routers: every module in catalog/api/http (see collect_subrouters)
    - Middleware: RequestContextMiddleware (correlation IDs, access log)
    - Exception handlers: HTML error pages for AppException, database
      errors and framework HTTP errors
    """
    app = FastAPI(
        title=app_settings.APP_TITLE,
        description="Local library catalog: authors and their books",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(collect_subrouters())

    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)

    return app


app = application()  # Need for fastapi cli / uvicorn catalog:app
