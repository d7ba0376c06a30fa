import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

import staff_portal.models  # noqa: F401
from staff_portal.core.config import Settings
from staff_portal.core.db import build_engine, build_session_factory
from staff_portal.core.errors import RouteNotMatched, StaffPortalError
from staff_portal.routers import staff as staff_router

logger = logging.getLogger(__name__)


def _error_response(exc: StaffPortalError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail, "code": exc.code},
        headers=exc.headers,
    )


async def handle_portal_error(request: Request, exc: StaffPortalError) -> JSONResponse:
    # Logged where raised; store failures carry their traceback there.
    return _error_response(exc)


async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        not_matched = RouteNotMatched(
            request.method,
            request.url.path,
            path_matched=exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED,
        )
        return _error_response(not_matched)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail}, headers=exc.headers)


def create_app(settings: Settings) -> FastAPI:
    """Build the application around an explicit settings value.

    The engine and session factory are created here, once per process, and
    handed to requests through ``app.state``.
    """

    app = FastAPI(
        title="Staff Portal",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        redirect_slashes=False,
    )
    engine = build_engine(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_exception_handler(StaffPortalError, handle_portal_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_error)

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        logger.info("request_received", extra={"method": request.method, "path": request.url.path})
        return await call_next(request)

    app.include_router(staff_router.router)
    return app
