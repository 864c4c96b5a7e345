from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from tinyurl_app.config import Settings
from tinyurl_app.dependencies import get_link_service, get_settings
from tinyurl_app.errors import unwrap
from tinyurl_app.schemas.url import (
    MessageResponse,
    URLCreate,
    URLCreateResponse,
    URLDetailResponse,
    URLResponse,
)
from tinyurl_app.services.url_service import LinkService

router = APIRouter(prefix="/links", tags=["links"])


@router.post("", response_model=URLCreateResponse, status_code=status.HTTP_201_CREATED)
def create_short_url(
    url_data: URLCreate,
    url_service: LinkService = Depends(get_link_service),
    settings: Settings = Depends(get_settings)
):
    """Create a new short URL, optionally with a custom code"""
    url = unwrap(url_service.create_short_url(url_data.original_url, url_data.custom_code))
    return URLCreateResponse.from_url(url, settings.base_url)


@router.get("", response_model=List[URLResponse])
def list_urls(
    search: Optional[str] = Query(None, description="Case-insensitive substring of code or URL"),
    url_service: LinkService = Depends(get_link_service)
):
    """List short URLs, newest first"""
    return unwrap(url_service.list_urls(search))


@router.get("/{short_code}", response_model=URLDetailResponse)
def get_url_info(
    short_code: str,
    url_service: LinkService = Depends(get_link_service)
):
    """Get a short URL together with its click log"""
    url, click_logs = unwrap(url_service.get_url_with_clicks(short_code))
    return URLDetailResponse.from_url(url, click_logs)


@router.delete("/{short_code}", response_model=MessageResponse)
def delete_url(
    short_code: str,
    url_service: LinkService = Depends(get_link_service)
):
    """Delete a short URL and its click log"""
    deleted = unwrap(url_service.delete_url(short_code))
    return MessageResponse(message=f"Short URL '{deleted}' deleted")
