"""
Plant Catalog Backend - Landing Page Route
===========================================

What:  Serves STATIC_DIR/index.html at GET /.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from plant_catalog.config import settings

router = APIRouter(tags=["Landing"])


@router.get("/", include_in_schema=False)
async def landing_page() -> FileResponse:
    return FileResponse(
        path=str(Path(settings.static_dir) / "index.html"),
        media_type="text/html",
    )
