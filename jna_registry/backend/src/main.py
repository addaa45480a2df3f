"""Entrypoint for the FastAPI application."""

import os
from dotenv import load_dotenv

# Load .env locally only (the hosting platform injects env vars)
env_path = os.path.join(os.path.dirname(__file__), "../.env")
if os.path.exists(env_path):
    load_dotenv(dotenv_path=os.path.abspath(env_path))

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import health, register, search
from .core.config import Settings, get_settings
from .core.errors import GENERIC_ERROR_MESSAGE, RegistryError
from .core.logging import configure_logging
from .db import Database
from .services.resolver import CascadingResolver

LOGGER = structlog.get_logger(__name__)

INVALID_JSON_MESSAGE = "Format JSON invalide"
INVALID_REQUEST_MESSAGE = "Requête invalide"
HTTP_MESSAGES = {
    status.HTTP_404_NOT_FOUND: "Ressource introuvable",
    status.HTTP_405_METHOD_NOT_ALLOWED: "Méthode non autorisée",
}


def _failure(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "message": message},
        headers=headers,
    )


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(RegistryError)
    async def handle_registry_error(request: Request, exc: RegistryError) -> JSONResponse:
        if exc.status_code >= 500:
            LOGGER.error(
                "request_failed",
                path=request.url.path,
                error_type=type(exc).__name__,
                detail=exc.detail,
            )
        return _failure(exc.status_code, exc.message)

    @app.exception_handler(SQLAlchemyError)
    async def handle_database_error(request: Request, exc: SQLAlchemyError) -> JSONResponse:
        LOGGER.error("database_error", path=request.url.path, detail=str(exc))
        return _failure(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        if any(error.get("type") == "json_invalid" for error in errors):
            return _failure(status.HTTP_400_BAD_REQUEST, INVALID_JSON_MESSAGE)
        return _failure(status.HTTP_400_BAD_REQUEST, INVALID_REQUEST_MESSAGE)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        message = HTTP_MESSAGES.get(exc.status_code, str(exc.detail))
        return _failure(exc.status_code, message, headers=getattr(exc, "headers", None))


def create_app(
    settings: Settings | None = None,
    database: Database | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    database = database or Database.from_settings(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if settings.create_ledger_on_startup:
            try:
                database.create_ledger()
            except SQLAlchemyError as exc:
                LOGGER.error("ledger_creation_failed", error=str(exc))
        yield
        database.dispose()

    app = FastAPI(title="JNA Registry", version="0.1.0", lifespan=lifespan)
    app.state.settings = settings
    app.state.database = database
    app.state.resolver = CascadingResolver.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    _register_exception_handlers(app)

    app.include_router(search.router)
    app.include_router(register.router)
    app.include_router(health.router, prefix="/api")

    if settings.static_dir:
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app


app = create_app()


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
