"""
Main entrypoint for the Expense Tracker API.

This module assembles the FastAPI application: logging, CORS, the
per‑application stores, error handlers and the versioned router.
``create_app`` builds a fresh application; a default instance is
created at import time as ``app`` so it can be served directly::

    uvicorn expense_tracker_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import StoreError
from .core.logging_config import setup_logging
from .services import ExpenseStore, UserStore

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Every call builds new, empty stores with id counters starting at 1,
    so separate applications never share records.

    Parameters
    ----------
    settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    user_store = UserStore()
    app.state.user_store = user_store
    app.state.expense_store = ExpenseStore(user_store)

    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(v1_router, prefix=settings.api_prefix)
    return app


async def store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    """Render ``InvalidInput`` / ``NotFound`` as ``{"error": message}``."""
    logger.info("%s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report undecodable request bodies as 400 in the service's error shape."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else str(first.get("msg"))
    else:
        message = "Invalid request"
    logger.info("%s %s -> 400 %s", request.method, request.url.path, message)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


app = create_app()
