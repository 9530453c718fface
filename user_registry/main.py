from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from user_registry.errors import BadRequestError, InternalError, NotFoundError, RegistryError, error_body
from user_registry.logging_config import configure_logging
from user_registry.routers.users import router as users_router
from user_registry.settings import Settings, get_settings
from user_registry.user_store import InMemoryUserStore

logger = logging.getLogger("user_registry")

APP_VERSION = "1.0.0"


def _error_response(err: type[RegistryError] | RegistryError) -> JSONResponse:
    return JSONResponse(error_body(err), status_code=err.status_code)


async def registry_error_handler(request: Request, exc: RegistryError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    else:
        logger.info("%s %s -> %s (%s)", request.method, request.url.path, exc.status_code, exc)
    return _error_response(exc)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # Unknown paths (404) and known paths with another method (405) look the same.
    if exc.status_code in (404, 405):
        return _error_response(NotFoundError)
    if exc.status_code == 400:
        return _error_response(BadRequestError)
    if exc.status_code >= 500:
        return _error_response(InternalError)
    return JSONResponse({"error": str(exc.detail).lower()}, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("%s %s -> 400 (undecodable body: %d error(s))", request.method, request.url.path, len(exc.errors()))
    return _error_response(BadRequestError)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error handling %s %s", request.method, request.url.path)
    return _error_response(InternalError)


def create_app(*, store: InMemoryUserStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the registry application.

    Each call gets its own store unless one is passed in, so tests never share
    state with each other or with the module-level ``app``.
    """
    if settings is None:
        settings = get_settings()
    if store is None:
        store = InMemoryUserStore.seeded() if settings.seed else InMemoryUserStore()

    # Both /users and /users/ are real routes; no redirect between them.
    app = FastAPI(title="User Registry", version=APP_VERSION, redirect_slashes=False)
    app.state.store = store
    app.state.settings = settings

    app.include_router(users_router)

    app.exception_handler(RegistryError)(registry_error_handler)
    app.exception_handler(StarletteHTTPException)(http_error_handler)
    app.exception_handler(RequestValidationError)(validation_error_handler)
    app.exception_handler(Exception)(unhandled_error_handler)

    logger.debug("Created app with %d seeded user(s)", store.count())
    return app


configure_logging(get_settings().log_level)

app = create_app()
