"""File request/response schemas."""
from datetime import datetime
from typing import Optional

from hourcast.models.file_record import FileRecord
from hourcast.schemas.base import CamelModel


class FileResponse(CamelModel):
    filename: str
    title: Optional[str] = None
    artist: Optional[str] = None
    size: int
    upload_date: datetime

    @classmethod
    def from_record(cls, record: FileRecord) -> "FileResponse":
        return cls(
            filename=record.identifier,
            title=record.title,
            artist=record.artist,
            size=record.size_bytes,
            upload_date=record.uploaded_at,
        )
