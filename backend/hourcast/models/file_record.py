"""FileRecord - catalog view of one stored blob plus its metadata."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class MetadataEntry:
    """Descriptive fields recorded at upload time. Never mutated afterwards."""

    title: Optional[str] = None
    artist: Optional[str] = None
    original_name: Optional[str] = None

    def to_document(self) -> dict:
        return {
            "title": self.title,
            "artist": self.artist,
            "originalName": self.original_name,
        }

    @classmethod
    def from_document(cls, data: dict) -> "MetadataEntry":
        """Non-string values are treated as absent."""
        return cls(
            title=_text(data.get("title")),
            artist=_text(data.get("artist")),
            original_name=_text(data.get("originalName")),
        )


@dataclass(frozen=True)
class FileRecord:
    identifier: str
    title: str
    artist: str
    size_bytes: int
    uploaded_at: datetime
    original_name: Optional[str] = None

    @classmethod
    def compose(
        cls,
        identifier: str,
        size_bytes: int,
        uploaded_at: datetime,
        metadata: Optional[MetadataEntry] = None,
    ) -> "FileRecord":
        """Build a record, falling back to identifier/empty string for blank metadata."""
        metadata = metadata or MetadataEntry()
        return cls(
            identifier=identifier,
            title=metadata.title or identifier,
            artist=metadata.artist or "",
            size_bytes=size_bytes,
            uploaded_at=uploaded_at,
            original_name=metadata.original_name,
        )


def _text(value) -> Optional[str]:
    return value if isinstance(value, str) else None
