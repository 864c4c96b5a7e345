"""
Database handle for the URL shortener.

The engine and session factory are owned by a Database instance that the
application opens at startup and closes at shutdown. Nothing here is a
module-level connection: routes reach the handle through app.state.
"""

import logging
from typing import Iterator, Optional

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    # SQLite ignores ON DELETE CASCADE unless this pragma is set per connection
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Explicitly constructed store handle.

    Wraps a pooled SQLAlchemy engine and a session factory. Call open()
    before use and close() when the service stops.
    """

    def __init__(self, url: str, ssl: bool = False):
        self.url = url
        self.ssl = ssl
        self.engine: Optional[Engine] = None
        self.SessionLocal: Optional[sessionmaker] = None

    @property
    def is_open(self) -> bool:
        return self.engine is not None

    def open(self) -> "Database":
        if self.is_open:
            return self

        url = make_url(self.url)
        engine_kwargs = {"pool_pre_ping": True}
        connect_args = {}

        if url.get_backend_name() == "sqlite":
            connect_args["check_same_thread"] = False  # needed for SQLite + FastAPI
            if url.database in (None, "", ":memory:"):
                # One shared connection, otherwise every checkout sees an empty database
                engine_kwargs["poolclass"] = StaticPool
        elif self.ssl:
            connect_args["sslmode"] = "require"

        self.engine = create_engine(url, connect_args=connect_args, **engine_kwargs)
        if url.get_backend_name() == "sqlite":
            event.listen(self.engine, "connect", _enable_sqlite_foreign_keys)

        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        logger.info("Database engine created for %s", url.render_as_string(hide_password=True))
        return self

    def close(self) -> None:
        if not self.is_open:
            return
        self.engine.dispose()
        self.engine = None
        self.SessionLocal = None
        logger.info("Database engine disposed")

    def session(self) -> Session:
        if not self.is_open:
            raise RuntimeError("Database is not open")
        return self.SessionLocal()

    def ping(self) -> None:
        """Round-trip a no-op query. Raises SQLAlchemyError when unreachable."""
        with self.engine.connect() as conn:
            conn.execute(text("SELECT 1"))

    def now(self):
        """Current time according to the database server"""
        with self.engine.connect() as conn:
            return conn.execute(text("SELECT CURRENT_TIMESTAMP")).scalar()


def get_database(request: Request) -> Database:
    return request.app.state.database


def get_db(request: Request) -> Iterator[Session]:
    """Yield one session per request from the application's Database"""
    db = get_database(request).session()
    try:
        yield db
    finally:
        db.close()
