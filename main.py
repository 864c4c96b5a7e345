import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from tinyurl_app.config import Settings, settings
from tinyurl_app.database.connection import Database
from tinyurl_app.database.migrations import run_migrations
from tinyurl_app.logging_config import configure_logging
from tinyurl_app.middleware import RequestLoggingMiddleware
from tinyurl_app.api.v1 import health, links, redirect
from tinyurl_app.web import pages

logger = logging.getLogger("tinyurl_app")


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies are client errors like any other invalid input
    errors = exc.errors()
    message = errors[0]["msg"] if errors else "Invalid request"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": f"Invalid request: {message}"},
    )


def create_app(app_settings: Settings = settings, database: Optional[Database] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The Database handle is opened (and the schema migrated) in the
    lifespan startup phase, before any request is accepted, and closed
    on shutdown.
    """
    configure_logging(app_settings.log_level)

    if database is None:
        database = Database(app_settings.database_url, ssl=app_settings.db_ssl)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s %s", app_settings.app_name, app_settings.app_version)
        database.open()
        if app_settings.auto_migrate:
            run_migrations(database)
        app.state.started_at = time.monotonic()
        yield
        logger.info("Shutting down %s", app_settings.app_name)
        database.close()

    app = FastAPI(
        title=app_settings.app_name,
        version=app_settings.app_version,
        description="A URL shortener service with click analytics",
        debug=app_settings.debug,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    app.state.database = database
    app.state.started_at = time.monotonic()

    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    ######## Include routers (the redirect catch-all goes last)
    app.include_router(health.router)
    app.include_router(pages.router)
    app.include_router(links.router, prefix="/api")
    app.include_router(redirect.router)

    return app


app = create_app()


def run():
    logger.info("Server listening on %s:%s", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, access_log=False)


if __name__ == "__main__":
    run()
