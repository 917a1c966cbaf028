from datetime import UTC, datetime
from pathlib import Path
from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from gallery.config import Settings
from gallery.deps import get_settings, get_storage
from gallery.images import collect_gallery
from gallery.storage import ObjectStorage

templates = Jinja2Templates(directory=Path(__file__).parent.parent / "templates")

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
    storage: Annotated[ObjectStorage, Depends(get_storage)],
) -> HTMLResponse:
    """
    Render the gallery page for every image currently in the bucket.
    """
    images = collect_gallery(storage, settings)
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "page": settings.page,
            "images": images,
            "year": datetime.now(UTC).year,
        },
    )
