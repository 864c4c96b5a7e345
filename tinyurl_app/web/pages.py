"""Static HTML pages: landing page, dashboard and the not-found page."""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

router = APIRouter(tags=["pages"])


@router.get("/", include_in_schema=False)
def serve_index():
    return FileResponse(STATIC_DIR / "index.html")


@router.get("/dashboard", include_in_schema=False)
def serve_dashboard():
    return FileResponse(STATIC_DIR / "dashboard.html")


@router.get("/404", include_in_schema=False)
def serve_not_found():
    # Redirect target for unknown short codes; the page itself loads fine
    return FileResponse(STATIC_DIR / "404.html")
