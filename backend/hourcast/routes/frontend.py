"""Catch-all route delivering the browser front-end."""
from pathlib import Path

from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse, RedirectResponse, Response

from hourcast.config import Settings
from hourcast.dependencies import get_settings

router = APIRouter(tags=["frontend"])


@router.get("/{full_path:path}", include_in_schema=False)
async def serve_frontend(full_path: str, settings: Settings = Depends(get_settings)):
    """Bundled build in production, dev server redirect otherwise."""
    if not settings.is_production:
        return RedirectResponse(settings.FRONTEND_DEV_URL, status_code=302)

    build_dir = Path(settings.FRONTEND_BUILD_DIR).resolve()
    if full_path:
        asset = (build_dir / full_path).resolve()
        if asset.is_file() and build_dir in asset.parents:
            return FileResponse(asset)

    index = build_dir / "index.html"
    if not index.is_file():
        return Response("front-end build not found", status_code=404)
    return FileResponse(index)
