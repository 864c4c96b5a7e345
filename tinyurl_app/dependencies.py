"""
FastAPI dependencies for dependency injection.

The Database handle lives on app.state (opened in the lifespan); each
request gets its own session from it, and services are built around
that session.
"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session

from tinyurl_app.config import Settings
from tinyurl_app.database.connection import get_db
from tinyurl_app.services.redirect_service import RedirectService
from tinyurl_app.services.short_code_factory import ShortCodeFactory
from tinyurl_app.services.url_service import LinkService


def get_settings(request: Request) -> Settings:
    """Settings the running app was created with"""
    return request.app.state.settings


def get_link_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
) -> LinkService:
    """
    Get LinkService with its session and code generator injected.

    Controllers depend on the service, the service depends on the session
    and on the settings the app was created with.
    """
    strategy = ShortCodeFactory.create_strategy(app_settings=settings)
    return LinkService(db=db, short_code_strategy=strategy)


def get_redirect_service(db: Session = Depends(get_db)) -> RedirectService:
    return RedirectService(db=db)
