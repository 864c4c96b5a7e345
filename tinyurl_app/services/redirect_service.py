import logging

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tinyurl_app.errors import ErrorKind, Result
from tinyurl_app.models import ClickLog, URL
from tinyurl_app.schemas.click import ClickEvent
from tinyurl_app.services.url_service import store_failure

logger = logging.getLogger(__name__)


class RedirectService:
    """
    Resolves short codes for the redirect route and records the click.

    Flow per request: Lookup -> Update -> Log -> Redirect.
    The counter update and the click log insert share one transaction,
    so a failed log insert leaves the counter untouched.
    """

    def __init__(self, db: Session):
        self.db = db

    def resolve(self, short_code: str, click: ClickEvent) -> Result[str]:
        """
        Look up the destination for `short_code` and record `click`.

        Returns:
            Result holding the original URL, NOT_FOUND for unknown codes
            (nothing is written), or STORE if either write fails.
        """
        try:
            # Step 1: Lookup
            url = self.db.query(URL).filter(URL.short_code == short_code).first()
            if url is None:
                logger.info("Redirect for unknown short code %s", short_code)
                return Result.failure(ErrorKind.NOT_FOUND, "Short URL not found")

            url_id = url.id
            destination = url.original_url

            # Step 2: Update aggregate counters (increment evaluated in SQL)
            self.db.execute(
                update(URL)
                .where(URL.id == url_id)
                .values(
                    click_count=URL.click_count + 1,
                    last_clicked_at=click.timestamp,
                )
            )

            # Step 3: Log the click
            self.db.add(ClickLog(
                url_id=url_id,
                click_time=click.timestamp,
                user_agent=click.user_agent,
                ip_address=click.ip_address,
            ))

            self.db.commit()
        except SQLAlchemyError as e:
            return store_failure(self.db, f"record a click on {short_code}", e)

        logger.info("Redirecting %s -> %s", short_code, destination[:80])
        # Step 4: the route issues the 302
        return Result.success(destination)
