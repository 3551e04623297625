"""Blob Store: uploaded audio bytes on the local filesystem.

Blobs are addressed by a generated filename inside ``UPLOAD_DIR``. Size and
upload time are never tracked separately; they come from the filesystem on
every ``stat`` call.
"""
import logging
import time
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import aiofiles
import aiofiles.os
from fastapi import UploadFile

from hourcast.errors import StorageUnavailable, UploadTooLarge

logger = logging.getLogger(__name__)

CHUNK_SIZE = 1024 * 1024

# Used when the uploader's filename carries no extension
MIME_EXTENSIONS = {
    "audio/mpeg": ".mp3",
    "audio/wav": ".wav",
    "audio/ogg": ".ogg",
}


@dataclass(frozen=True)
class BlobInfo:
    identifier: str
    size_bytes: int
    modified_at: datetime


def generate_identifier(original_name: str, mime_type: Optional[str] = None) -> str:
    """Collision-resistant blob name that keeps the original extension.

    The millisecond prefix keeps names roughly chronological; the uuid4
    fragment keeps two uploads in the same millisecond apart.
    """
    ext = Path(original_name).suffix.lower()
    if not ext and mime_type:
        ext = MIME_EXTENSIONS.get(mime_type, "")
    return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:12]}{ext}"


class BlobStore:
    """Handles blob read/write under a single local directory."""

    def __init__(self, base_path: str | Path):
        self.base_path = Path(base_path)

    def ensure_ready(self) -> None:
        """Create the upload directory if missing."""
        try:
            self.base_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageUnavailable(f"cannot create upload directory: {e}") from e

    async def save(
        self,
        upload: UploadFile,
        original_name: str,
        max_bytes: Optional[int] = None,
    ) -> BlobInfo:
        """Stream an upload to disk in chunks. Returns the stored blob's info.

        The partially written blob is removed if the size limit is exceeded
        or the write fails.
        """
        identifier = generate_identifier(original_name, upload.content_type)
        target = self.base_path / identifier
        written = 0
        try:
            async with aiofiles.open(target, "wb") as f:
                while chunk := await upload.read(CHUNK_SIZE):
                    written += len(chunk)
                    if max_bytes is not None and written > max_bytes:
                        raise UploadTooLarge(
                            f"file too large. maximum size is {max_bytes} bytes"
                        )
                    await f.write(chunk)
        except UploadTooLarge:
            await self._discard(target)
            raise
        except OSError as e:
            await self._discard(target)
            raise StorageUnavailable(f"error writing uploaded file: {e}") from e

        return BlobInfo(
            identifier=identifier,
            size_bytes=written,
            modified_at=datetime.now(timezone.utc),
        )

    async def list_identifiers(self) -> list[str]:
        """Blob names in directory-listing order (not sorted)."""
        try:
            names = await aiofiles.os.listdir(self.base_path)
        except OSError as e:
            logger.error("Cannot enumerate upload directory %s: %s", self.base_path, e)
            raise StorageUnavailable("error reading files directory") from e
        return list(names)

    async def stat(self, identifier: str) -> BlobInfo:
        """Live size/mtime lookup. FileNotFoundError if the blob is gone."""
        st = await aiofiles.os.stat(self.base_path / identifier)
        return BlobInfo(
            identifier=identifier,
            size_bytes=st.st_size,
            modified_at=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        )

    def path_for(self, identifier: str) -> Optional[Path]:
        """Resolve a blob to a file path, or None if missing or outside the store."""
        base = self.base_path.resolve()
        candidate = (base / identifier).resolve()
        if candidate.parent != base or not candidate.is_file():
            return None
        return candidate

    def exists(self, identifier: str) -> bool:
        return self.path_for(identifier) is not None

    async def _discard(self, target: Path) -> None:
        try:
            await aiofiles.os.remove(target)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.error("Could not remove partial upload %s: %s", target, e)
