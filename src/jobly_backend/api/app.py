"""Factory for constructing the FastAPI application."""

from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from jobly_backend.api.dependencies import authenticate_jwt
from jobly_backend.api.routers import auth_router, companies_router, jobs_router, users_router
from jobly_backend.logging_config import setup_logging
from jobly_backend.settings import get_settings
from jobly_backend.shared import AppError

logger = logging.getLogger(__name__)


def _error_response(message: str | list[str], status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"error": {"message": message, "status": status_code}},
    )


def _format_validation_error(error: dict) -> str:
    location = ".".join(str(part) for part in error["loc"] if part != "body")
    return f"{location}: {error['msg']}" if location else error["msg"]


async def app_error_handler(_request: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=int(exc.status_code), content=exc.to_payload())


async def validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report schema violations as 400 with one message per failure."""
    messages = [_format_validation_error(error) for error in exc.errors()]
    return _error_response(messages, status.HTTP_400_BAD_REQUEST)


async def http_error_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error_response(str(exc.detail), exc.status_code)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        type(exc).__name__,
        exc_info=exc,
    )
    return _error_response("Internal Server Error", status.HTTP_500_INTERNAL_SERVER_ERROR)


def install_error_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"error": {"message", "status"}}``."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)


def create_api() -> FastAPI:
    """Instantiate and configure the FastAPI application."""
    config = get_settings()
    setup_logging(config.log_level, json_logs=config.json_logs)

    app = FastAPI(title="Jobly API", dependencies=[Depends(authenticate_jwt)])
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    install_error_handlers(app)
    app.include_router(auth_router)
    app.include_router(companies_router)
    app.include_router(jobs_router)
    app.include_router(users_router)
    return app
