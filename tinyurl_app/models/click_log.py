from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, Text
from sqlalchemy.orm import relationship

from tinyurl_app.database.connection import Base
from tinyurl_app.models.url import utcnow


class ClickLog(Base):
    """One row per successful redirect. Never updated after insert."""
    __tablename__ = "click_logs"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    url_id = Column(Integer, ForeignKey("urls.id", ondelete="CASCADE"), nullable=False)
    click_time = Column(DateTime, nullable=False, default=utcnow)
    user_agent = Column(Text, nullable=True)
    ip_address = Column(Text, nullable=True)

    url = relationship("URL", back_populates="click_logs")

    __table_args__ = (
        Index("ix_click_logs_url_id_click_time", "url_id", "click_time"),
    )

    def __repr__(self):
        return f"<ClickLog {self.id} for url {self.url_id}>"
