"""Error taxonomy shared by services and routes.

Services raise these; the handler registered in ``hourcast.main`` turns each
into a JSON ``{"error": ..., "code": ...}`` body with the matching status.
"""
from dataclasses import dataclass


class HourcastError(Exception):
    """Base for errors that map onto an HTTP response."""

    status_code = 500
    code = "internal_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(HourcastError):
    """Malformed request body or missing field."""

    status_code = 400
    code = "invalid_input"


class UploadTooLarge(InvalidInput):
    status_code = 413
    code = "upload_too_large"


class UnsupportedMediaType(HourcastError):
    """Uploaded file's MIME type is not in the allow-list."""

    status_code = 400
    code = "unsupported_media_type"


class InvalidSchedule(HourcastError):
    """Candidate schedule broke a validation rule. Nothing was changed."""

    status_code = 400
    code = "invalid_schedule"


class StorageUnavailable(HourcastError):
    """Upload directory or file I/O failed."""

    status_code = 500
    code = "storage_unavailable"


@dataclass(frozen=True)
class PersistenceWarning:
    """Metadata was accepted in memory but the durable write failed.

    Returned, never raised: the operation that triggered the write has
    already succeeded.
    """

    path: str
    reason: str

    def __str__(self) -> str:
        return f"metadata not persisted to {self.path}: {self.reason}"
