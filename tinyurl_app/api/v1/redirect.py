from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse

from tinyurl_app.errors import ErrorKind, unwrap
from tinyurl_app.schemas.click import ClickEvent
from tinyurl_app.services.redirect_service import RedirectService
from tinyurl_app.dependencies import get_redirect_service

router = APIRouter(tags=["redirect"])

NOT_FOUND_PAGE = "/404"


@router.get("/{short_code}", include_in_schema=False)
def redirect_to_original_url(
    short_code: str,
    request: Request,
    redirect_service: RedirectService = Depends(get_redirect_service)
):
    """
    Redirect to the original URL.

    The click is recorded (counter, timestamp, log row) before the 302
    is sent; unknown codes are sent to the not-found page instead.
    """
    click = ClickEvent(
        short_code=short_code,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )

    result = redirect_service.resolve(short_code, click)
    if not result.ok and result.error.kind == ErrorKind.NOT_FOUND:
        return RedirectResponse(url=NOT_FOUND_PAGE, status_code=status.HTTP_302_FOUND)

    return RedirectResponse(url=unwrap(result), status_code=status.HTTP_302_FOUND)
