"""
Schema migration step.

Creating tables is a separate lifecycle phase, run before the service
accepts requests. It is idempotent: existing tables are left alone.

    python -m tinyurl_app.database.migrations
"""

import logging

from tinyurl_app.database.connection import Base, Database

logger = logging.getLogger(__name__)


def run_migrations(database: Database) -> None:
    # Import models to ensure they're registered with Base
    import tinyurl_app.models  # noqa: F401

    database.open()
    Base.metadata.create_all(bind=database.engine)
    logger.info("Database schema ready (tables: %s)", ", ".join(sorted(Base.metadata.tables)))


def main() -> None:
    from tinyurl_app.config import settings
    from tinyurl_app.logging_config import configure_logging

    configure_logging(settings.log_level)
    database = Database(settings.database_url, ssl=settings.db_ssl)
    try:
        run_migrations(database)
    finally:
        database.close()


if __name__ == "__main__":
    main()
