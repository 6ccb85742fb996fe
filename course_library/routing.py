import os
import pkgutil
from importlib import import_module

from fastapi import APIRouter

from course_library.logging import logger

API_PREFIX = "/api"

# Track registered modules to prevent duplicate logging
_registered_http_modules: set[str] = set()


def collect_subrouters() -> APIRouter:
    """
    Collects and registers all HTTP routers of the application.

    Every module in the `api/http` directory is imported and its `router`
    is included in the main `APIRouter`, mounted under API_PREFIX.
    """
    main_router: APIRouter = APIRouter(prefix=API_PREFIX)

    # Get project dir
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
