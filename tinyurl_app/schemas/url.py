from pydantic import BaseModel, Field, ConfigDict
from typing import List, Optional
from datetime import datetime
from tinyurl_app.schemas.click import ClickLogResponse


def build_short_url(base_url: str, short_code: str) -> str:
    """Externally visible short URL for a code"""
    return f"{base_url.rstrip('/')}/{short_code}"


class URLCreate(BaseModel):
    """Create request body.

    Both fields are optional at the schema level so that a missing or
    malformed URL is reported by the service as a validation error.
    """
    original_url: Optional[str] = Field(None, alias="originalUrl", description="The original URL to be shortened")
    custom_code: Optional[str] = Field(None, alias="customCode", description="Optional 6-8 character alphanumeric code")

    model_config = ConfigDict(populate_by_name=True)


class URLResponse(BaseModel):
    """Mapping row as returned by the API (ORM mode)"""
    id: int
    short_code: str
    original_url: str
    created_at: datetime
    click_count: int
    last_clicked_at: Optional[datetime] = None
    title: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class URLCreateResponse(BaseModel):
    short_url: str = Field(..., alias="shortUrl")
    data: URLResponse

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_url(cls, url, base_url: str) -> "URLCreateResponse":
        return cls(short_url=build_short_url(base_url, url.short_code), data=URLResponse.model_validate(url))


class URLDetailResponse(BaseModel):
    url: URLResponse
    click_logs: List[ClickLogResponse]

    @classmethod
    def from_url(cls, url, click_logs) -> "URLDetailResponse":
        return cls(
            url=URLResponse.model_validate(url),
            click_logs=[ClickLogResponse.model_validate(log) for log in click_logs],
        )


class MessageResponse(BaseModel):
    message: str
