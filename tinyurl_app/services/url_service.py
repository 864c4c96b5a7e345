import logging
from typing import List, Optional, Tuple

from sqlalchemy import func, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tinyurl_app.errors import ErrorKind, Result
from tinyurl_app.models import ClickLog, URL
from tinyurl_app.services.short_code_factory import ShortCodeFactory
from tinyurl_app.services.short_code_strategies import ShortCodeStrategy
from tinyurl_app.services.validators import (
    is_valid_custom_code,
    is_valid_url,
    normalize_custom_code,
)

logger = logging.getLogger(__name__)


def store_failure(db: Session, action: str, exc: SQLAlchemyError) -> Result:
    """Roll back the session and turn a database error into a STORE result"""
    db.rollback()
    logger.exception("Store error while trying to %s", action)
    message = str(getattr(exc, "orig", None) or exc)
    return Result.failure(ErrorKind.STORE, message)


class LinkService:
    """
    Link service: create, list, inspect and delete short URLs.

    The database session is injected, so tests can pass their own and
    the HTTP layer gets one per request. Every operation returns a Result
    instead of raising; the routes map the error kind to a status code.
    """

    def __init__(
        self,
        db: Session,
        short_code_strategy: Optional[ShortCodeStrategy] = None
    ):
        """
        Initialize link service with dependencies.

        Args:
            db: Database session
            short_code_strategy: Generator for codes when no custom code
                is given (defaults to the configured strategy)
        """
        self.db = db
        self.short_code_strategy = short_code_strategy or ShortCodeFactory.create_strategy()

    def _find_by_short_code(self, short_code: str) -> Optional[URL]:
        return self.db.query(URL).filter(URL.short_code == short_code).first()

    def create_short_url(
        self,
        original_url: Optional[str],
        custom_code: Optional[str] = None
    ) -> Result[URL]:
        """Create a new short URL

        Process:
        1. Validate the original URL
        2. Use the trimmed custom code if given, otherwise generate one
        3. Reject the code if it is already taken
        4. Insert with click_count = 0

        A concurrent insert of the same code is caught by the unique
        constraint and reported as the same conflict.
        """
        valid, message = is_valid_url(original_url)
        if not valid:
            logger.info("Rejected create request: %s", message)
            return Result.failure(ErrorKind.VALIDATION, message)

        custom_code = normalize_custom_code(custom_code)
        if custom_code is not None:
            valid, message = is_valid_custom_code(custom_code)
            if not valid:
                logger.info("Rejected custom code %r: %s", custom_code, message)
                return Result.failure(ErrorKind.VALIDATION, message)
            short_code = custom_code
        else:
            short_code = self.short_code_strategy.generate()

        conflict = Result.failure(ErrorKind.CONFLICT, f"Short code '{short_code}' already exists")

        try:
            if self._find_by_short_code(short_code) is not None:
                logger.warning("Short code already in use: %s", short_code)
                return conflict

            url = URL(short_code=short_code, original_url=original_url.strip(), click_count=0)
            self.db.add(url)
            self.db.commit()
            self.db.refresh(url)
        except IntegrityError:
            self.db.rollback()
            logger.warning("Unique constraint rejected short code %s", short_code)
            return conflict
        except SQLAlchemyError as e:
            return store_failure(self.db, "create a short URL", e)

        logger.info("Created short code %s -> %s", url.short_code, url.original_url[:80])
        return Result.success(url)

    def list_urls(self, search: Optional[str] = None) -> Result[List[URL]]:
        """All mappings whose code or URL contains `search` (case-insensitive), newest first"""
        try:
            query = self.db.query(URL)
            if search:
                term = search.lower()
                query = query.filter(or_(
                    func.lower(URL.short_code).contains(term, autoescape=True),
                    func.lower(URL.original_url).contains(term, autoescape=True),
                ))
            urls = query.order_by(URL.created_at.desc(), URL.id.desc()).all()
        except SQLAlchemyError as e:
            return store_failure(self.db, "list short URLs", e)

        return Result.success(urls)

    def get_url_with_clicks(self, short_code: str) -> Result[Tuple[URL, List[ClickLog]]]:
        """Mapping plus its click logs, newest click first"""
        try:
            url = self._find_by_short_code(short_code)
            if url is None:
                return Result.failure(ErrorKind.NOT_FOUND, "Short URL not found")

            click_logs = (
                self.db.query(ClickLog)
                .filter(ClickLog.url_id == url.id)
                .order_by(ClickLog.click_time.desc(), ClickLog.id.desc())
                .all()
            )
        except SQLAlchemyError as e:
            return store_failure(self.db, "load a short URL", e)

        return Result.success((url, click_logs))

    def delete_url(self, short_code: str) -> Result[str]:
        """Hard delete; click logs go with the mapping."""
        try:
            url = self._find_by_short_code(short_code)
            if url is None:
                return Result.failure(ErrorKind.NOT_FOUND, "Short URL not found")

            self.db.delete(url)
            self.db.commit()
        except SQLAlchemyError as e:
            return store_failure(self.db, "delete a short URL", e)

        logger.info("Deleted short code %s", short_code)
        return Result.success(short_code)
