"""FastAPI dependencies handing the per-app service objects to routes.

Usage in routes:
    from hourcast.dependencies import get_catalog

    @router.get("/files")
    async def list_files(catalog: CatalogService = Depends(get_catalog)):
        return await catalog.list_files()
"""
from fastapi import Request

from hourcast.config import Settings
from hourcast.services import (
    BlobStore, CatalogService, ScheduleService, Services, UploadService,
)


def get_services(request: Request) -> Services:
    return request.app.state.services


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_blobs(request: Request) -> BlobStore:
    return get_services(request).blobs


def get_catalog(request: Request) -> CatalogService:
    return get_services(request).catalog


def get_schedule_service(request: Request) -> ScheduleService:
    return get_services(request).schedule


def get_upload_service(request: Request) -> UploadService:
    return get_services(request).uploads
