from datetime import datetime, timezone

from sqlalchemy import BigInteger, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from tinyurl_app.database.connection import Base


def utcnow() -> datetime:
    """Naive UTC timestamp, matching TIMESTAMP WITHOUT TIME ZONE columns"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class URL(Base):
    """
    Mapping from a short code to the original URL.

    Holds aggregate click data (click_count, last_clicked_at); the
    per-click detail lives in ClickLog rows owned by this mapping.
    """
    __tablename__ = "urls"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # Unique index: redirect lookup key, and the guard against concurrent creates
    short_code = Column(String(16), unique=True, nullable=False, index=True)
    original_url = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=utcnow)
    last_clicked_at = Column(DateTime, nullable=True)
    click_count = Column(BigInteger, nullable=False, default=0)
    title = Column(Text, nullable=True)

    click_logs = relationship(
        "ClickLog",
        back_populates="url",
        cascade="all, delete-orphan",
    )

    def __repr__(self):
        return f"<URL {self.short_code} -> {self.original_url}>"
