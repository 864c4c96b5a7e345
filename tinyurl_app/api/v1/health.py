import logging
import os
import platform
import time

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from tinyurl_app.config import Settings
from tinyurl_app.database.connection import Database, get_database
from tinyurl_app.dependencies import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


@router.get("/healthz")
def health_check(
    request: Request,
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings)
):
    """Liveness plus a database round-trip"""
    try:
        database.ping()
    except SQLAlchemyError as e:
        logger.error("Health check DB error: %s", e)
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"ok": False, "db": "unreachable", "error": str(e)},
        )

    return {
        "ok": True,
        "db": "connected",
        "uptime_seconds": round(time.monotonic() - request.app.state.started_at, 3),
        "system": {
            "python": platform.python_version(),
            "platform": platform.platform(),
            "pid": os.getpid(),
            "environment": settings.environment,
        },
    }


@router.get("/dbtest")
def db_test(database: Database = Depends(get_database)):
    """Returns the database server's current time"""
    try:
        now = database.now()
    except SQLAlchemyError as e:
        logger.error("DB test error: %s", e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": str(e)},
        )

    return {"success": True, "now": now}
