"""
Click data models.
"""

from pydantic import BaseModel, Field, ConfigDict
from datetime import datetime
from typing import Optional

from tinyurl_app.models.url import utcnow


class ClickEvent(BaseModel):
    """
    Request metadata captured when a visitor follows a short URL.

    Built by the redirect route and written as a click log row.
    User agent and IP are stored as-is, without parsing.
    """

    short_code: str = Field(..., description="The short code that was accessed")
    timestamp: datetime = Field(default_factory=utcnow, description="When the click occurred (UTC)")
    ip_address: Optional[str] = Field(None, description="Client IP address")
    user_agent: Optional[str] = Field(None, description="User agent string")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "short_code": "a1b2c3",
                "timestamp": "2025-10-29T10:30:00",
                "ip_address": "192.168.1.1",
                "user_agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) Chrome/120.0",
            }
        }
    )


class ClickLogResponse(BaseModel):
    id: int
    url_id: int
    click_time: datetime
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)
