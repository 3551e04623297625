"""Upload and catalog API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Response, UploadFile
from fastapi.responses import FileResponse

from hourcast.dependencies import get_blobs, get_catalog, get_upload_service
from hourcast.errors import InvalidInput
from hourcast.schemas.file import FileResponse as FileResponseSchema
from hourcast.services import BlobStore, CatalogService, UploadService

router = APIRouter(tags=["files"])

PERSISTENCE_WARNING_HEADER = "X-Persistence-Warning"


@router.post("/api/upload", response_model=FileResponseSchema)
async def upload_file(
    response: Response,
    audio: Optional[UploadFile] = File(None),
    title: Optional[str] = Form(None),
    artist: Optional[str] = Form(None),
    uploads: UploadService = Depends(get_upload_service),
):
    """Store an audio file and record its title/artist."""
    if audio is None or not audio.filename:
        raise InvalidInput("no file uploaded")

    result = await uploads.accept(audio, title=title, artist=artist)
    if result.warning is not None:
        response.headers[PERSISTENCE_WARNING_HEADER] = "metadata-not-persisted"

    body = FileResponseSchema.from_record(result.record)
    # Echo exactly what the uploader sent, not the catalog fallbacks
    return body.model_copy(update={"title": title, "artist": artist})


@router.get("/api/files", response_model=list[FileResponseSchema])
async def list_files(catalog: CatalogService = Depends(get_catalog)):
    """List every stored file with its metadata."""
    records = await catalog.list_files()
    return [FileResponseSchema.from_record(r) for r in records]


@router.get("/uploads/{filename}")
async def serve_upload(filename: str, blobs: BlobStore = Depends(get_blobs)):
    """Raw bytes of a stored file."""
    path = blobs.path_for(filename)
    if path is None:
        return Response(status_code=404)
    return FileResponse(path)
