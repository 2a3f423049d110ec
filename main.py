"""
Daily Diet FastAPI Application
Main entry point: builds the app, owns the database lifecycle and wires middleware.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging
import uvicorn
from contextlib import asynccontextmanager
import anyio
from typing import Optional

from api.routes import users, meals, health
from api.middleware import (
    RequestLoggingMiddleware,
    validation_exception_handler,
    http_exception_handler,
    service_exception_handler,
    general_exception_handler,
)
from app.config import Settings, settings as default_settings
from app.exceptions import DailyDietError
from domain.models import Database

_logger = logging.getLogger("dailydiet.main")


def configure_logging(settings: Settings) -> None:
    """Setup logging with configured level and format"""
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )


def _build_lifespan(settings: Settings, database: Database):
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Startup: open the database and create the schema, retrying while the
        server is not reachable. Shutdown: dispose of the engine.
        """
        _logger.info(f"Starting {settings.app_name} in {settings.environment.value} mode")

        for attempt in range(1, settings.db_init_attempts + 1):
            try:
                # Blocking DB work runs in a thread to keep the event loop free
                await anyio.to_thread.run_sync(database.init_schema)
                _logger.info("Database initialization succeeded")
                break
            except Exception as exc:
                _logger.warning(
                    "Database init attempt %d/%d failed: %s",
                    attempt,
                    settings.db_init_attempts,
                    exc,
                )
                if attempt < settings.db_init_attempts:
                    await anyio.sleep(settings.db_init_delay_sec)
                else:
                    _logger.error(
                        "Database initialization failed after %d attempts", attempt
                    )
                    raise

        try:
            yield
        finally:
            _logger.info(f"Shutting down {settings.app_name}")
            database.close()

    return lifespan


def create_app(
    settings: Optional[Settings] = None, database: Optional[Database] = None
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        settings: configuration; defaults to the environment-loaded settings
        database: store handle; defaults to one built from settings.database_url

    Returns:
        Configured FastAPI app with the database installed on app.state
    """
    settings = settings or default_settings
    database = database or Database(settings.database_url, echo=settings.db_echo)

    app = FastAPI(
        title=settings.api_title,
        version=settings.app_version,
        description=settings.api_description,
        lifespan=_build_lifespan(settings, database),
        debug=settings.debug,
        openapi_url=(
            f"{settings.api_prefix}/openapi.json" if not settings.is_production() else None
        ),
        docs_url=f"{settings.api_prefix}/docs" if not settings.is_production() else None,
        redoc_url=f"{settings.api_prefix}/redoc" if not settings.is_production() else None,
    )
    app.state.settings = settings
    app.state.database = database

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )
    app.add_middleware(RequestLoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(DailyDietError, service_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    app.include_router(users.router, prefix=settings.api_prefix)
    app.include_router(meals.router, prefix=settings.api_prefix)
    app.include_router(health.router, prefix=settings.api_prefix)

    return app


configure_logging(default_settings)
app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=default_settings.host,
        port=default_settings.port,
        reload=default_settings.is_development(),
        log_level=default_settings.log_level.lower(),
    )
