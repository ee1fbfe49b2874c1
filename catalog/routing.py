import os
import pkgutil
from importlib import import_module

from fastapi import APIRouter

from catalog.logging import logger

# Track registered modules to prevent duplicate logging
_registered_http_modules: set[str] = set()


def collect_subrouters() -> APIRouter:
    """
    Collect the routers of every module in ``catalog/api/http``.

    Each module exposes a module-level ``router``; adding a page module
    there is enough to have it served.

    Returns:
        APIRouter including all page routers.
    """
    main_router: APIRouter = APIRouter()

    app_dir = os.path.dirname(__file__)
    app_name = os.path.basename(app_dir)

    for _, module, _ in pkgutil.iter_modules([f"{app_dir}/api/http"]):
        api = import_module(f".{module}", package=f"{app_name}.api.http")

        main_router.include_router(api.router)

        # Only log on first registration
        if module not in _registered_http_modules:
            logger.info(f'Register "{module}" api')
            _registered_http_modules.add(module)

    return main_router
