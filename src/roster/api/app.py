"""FastAPI application setup."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from roster import __version__
from roster.api.models import APIResponse
from roster.api.routes import courses, students
from roster.config import RosterConfig, load_config
from roster.logging import get_logger
from roster.registry import (
    CourseDoesNotExistError,
    RegistryError,
    StudentRegistry,
    StudentStore,
    UserDoesNotExistError,
)

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

logger = get_logger("api")


def build_registry(config: RosterConfig) -> StudentRegistry:
    """Construct a registry over the store named by the configuration."""
    principal = config.default_principal
    return StudentRegistry(StudentStore(config.db_path), identity=lambda: principal)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager.

    Opens the registry at startup unless one was supplied to create_app, and
    closes the one it opened at shutdown.
    """
    owned = app.state.registry is None
    if owned:
        app.state.registry = build_registry(app.state.config)
        logger.info("Opened student store at %s", app.state.config.db_path)

    yield

    if owned:
        app.state.registry.close()
        app.state.registry = None
        logger.info("Closed student store")


def _error_response(status_code: int, exc: RegistryError) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=exc.message, kind=exc.kind).model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Translate registry errors into API responses."""

    @app.exception_handler(UserDoesNotExistError)
    async def user_not_found_handler(
        _request: Request, exc: UserDoesNotExistError
    ) -> JSONResponse:
        return _error_response(status.HTTP_404_NOT_FOUND, exc)

    @app.exception_handler(CourseDoesNotExistError)
    async def course_not_found_handler(
        _request: Request, exc: CourseDoesNotExistError
    ) -> JSONResponse:
        return _error_response(status.HTTP_400_BAD_REQUEST, exc)

    @app.exception_handler(RegistryError)
    async def registry_error_handler(_request: Request, exc: RegistryError) -> JSONResponse:
        logger.error("Unhandled registry error: %s", exc)
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, exc)


def create_app(
    config: RosterConfig | None = None,
    registry: StudentRegistry | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Runtime configuration. Defaults to environment-derived settings.
        registry: A pre-built registry to serve instead of opening one from config.
    """
    app = FastAPI(
        title="Roster API",
        description="REST API for Roster - student record registry",
        version=__version__,
        lifespan=lifespan,
    )

    app.state.config = config if config is not None else load_config()
    app.state.registry = registry

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.include_router(students.router, prefix="/api/v1")
    app.include_router(courses.router, prefix="/api/v1")

    return app


# Default app instance
app = create_app()
