"""Validation of user-supplied URLs and custom short codes."""

import re
from typing import Annotated, Optional, Tuple

from pydantic import AnyUrl, TypeAdapter, UrlConstraints, ValidationError

CUSTOM_CODE_PATTERN = re.compile(r"[A-Za-z0-9]{6,8}")

# Fixed routes that would shadow a short code of the same name
RESERVED_CODES = frozenset({"healthz", "dbtest"})

# Like HttpUrl, but without its 2083 character cap
WebUrl = Annotated[AnyUrl, UrlConstraints(allowed_schemes=["http", "https"], host_required=True)]

_web_url = TypeAdapter(WebUrl)


def is_valid_url(url: Optional[str]) -> Tuple[bool, str]:
    """Validate an original URL.

    Only absolute http(s) URLs with a host are accepted.

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str) or not url.strip():
        return False, "originalUrl is required"

    try:
        _web_url.validate_python(url.strip())
    except ValidationError:
        return False, "originalUrl must be a valid http(s) URL"

    return True, ""


def normalize_custom_code(custom_code: Optional[str]) -> Optional[str]:
    """Trim a custom code; blank codes count as not supplied."""
    if custom_code is None:
        return None
    custom_code = custom_code.strip()
    return custom_code or None


def is_valid_custom_code(custom_code: str) -> Tuple[bool, str]:
    """Validate an already trimmed custom code against 6-8 alphanumerics."""
    if not CUSTOM_CODE_PATTERN.fullmatch(custom_code):
        return False, "customCode must be 6-8 alphanumeric characters"
    if custom_code in RESERVED_CODES:
        return False, f"customCode '{custom_code}' is reserved"
    return True, ""
