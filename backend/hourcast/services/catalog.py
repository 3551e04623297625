"""Catalog Service: Blob Store listing joined with Metadata Store entries."""
import logging

from hourcast.errors import StorageUnavailable
from hourcast.models.file_record import FileRecord
from hourcast.services.file_storage import BlobStore
from hourcast.services.metadata_store import MetadataStore

logger = logging.getLogger(__name__)


class CatalogService:

    def __init__(self, blobs: BlobStore, metadata: MetadataStore):
        self.blobs = blobs
        self.metadata = metadata

    async def list_files(self) -> list[FileRecord]:
        """All stored files in listing order, each stat'ed at call time.

        A blob removed between the listing and its stat is left out, since
        it no longer exists. Any other I/O failure fails the whole call.
        """
        records = []
        for identifier in await self.blobs.list_identifiers():
            try:
                info = await self.blobs.stat(identifier)
            except FileNotFoundError:
                continue
            except OSError as e:
                logger.error("Cannot stat %s: %s", identifier, e)
                raise StorageUnavailable("error reading files directory") from e
            records.append(
                FileRecord.compose(
                    identifier,
                    size_bytes=info.size_bytes,
                    uploaded_at=info.modified_at,
                    metadata=self.metadata.get(identifier),
                )
            )
        return records
