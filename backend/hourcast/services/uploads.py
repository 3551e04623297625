"""Upload flow: MIME check, blob write, metadata record."""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Iterable, Optional

from fastapi import UploadFile

from hourcast.errors import PersistenceWarning, UnsupportedMediaType
from hourcast.models.file_record import FileRecord, MetadataEntry
from hourcast.services.file_storage import BlobStore
from hourcast.services.metadata_store import MetadataStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UploadResult:
    record: FileRecord
    warning: Optional[PersistenceWarning] = None


class UploadService:

    def __init__(
        self,
        blobs: BlobStore,
        metadata: MetadataStore,
        allowed_types: Iterable[str],
        max_bytes: Optional[int] = None,
    ):
        self.blobs = blobs
        self.metadata = metadata
        self.allowed_types = frozenset(allowed_types)
        self.max_bytes = max_bytes

    async def accept(
        self,
        upload: UploadFile,
        title: Optional[str] = None,
        artist: Optional[str] = None,
    ) -> UploadResult:
        """Store an uploaded audio file and record its metadata.

        Raises UnsupportedMediaType before anything is written. A failed
        metadata write does not fail the upload; it is returned on the
        result as ``warning``.
        """
        mime_type = (upload.content_type or "").split(";")[0].strip().lower()
        if mime_type not in self.allowed_types:
            logger.warning("Rejected upload %r with type %r", upload.filename, upload.content_type)
            raise UnsupportedMediaType(
                "invalid file type. allowed types: " + ", ".join(sorted(self.allowed_types))
            )

        original_name = upload.filename or ""
        blob = await self.blobs.save(upload, original_name, max_bytes=self.max_bytes)
        entry = MetadataEntry(title=title, artist=artist, original_name=original_name)
        warning = await self.metadata.record(blob.identifier, entry)

        logger.info("Stored %s (%d bytes) from %r", blob.identifier, blob.size_bytes, original_name)
        record = FileRecord.compose(
            blob.identifier,
            size_bytes=blob.size_bytes,
            uploaded_at=datetime.now(timezone.utc),
            metadata=entry,
        )
        return UploadResult(record=record, warning=warning)
