"""Service objects, built once per application and shared by all requests."""
from dataclasses import dataclass

from hourcast.config import Settings
from hourcast.services.catalog import CatalogService
from hourcast.services.file_storage import BlobStore
from hourcast.services.metadata_store import MetadataStore
from hourcast.services.schedule_service import ScheduleService
from hourcast.services.uploads import UploadService


@dataclass
class Services:
    blobs: BlobStore
    metadata: MetadataStore
    catalog: CatalogService
    schedule: ScheduleService
    uploads: UploadService


def build_services(settings: Settings) -> Services:
    """Create the upload directory, load metadata, and wire the services together."""
    blobs = BlobStore(settings.UPLOAD_DIR)
    blobs.ensure_ready()
    metadata = MetadataStore(settings.METADATA_PATH)
    metadata.load()
    return Services(
        blobs=blobs,
        metadata=metadata,
        catalog=CatalogService(blobs, metadata),
        schedule=ScheduleService(blobs, require_existing_files=settings.STRICT_SCHEDULE_REFERENCES),
        uploads=UploadService(
            blobs,
            metadata,
            allowed_types=settings.allowed_audio_types,
            max_bytes=settings.MAX_UPLOAD_BYTES,
        ),
    )


__all__ = [
    "Services", "build_services",
    "BlobStore", "MetadataStore", "CatalogService", "ScheduleService", "UploadService",
]
