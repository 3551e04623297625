"""Shared Pydantic schemas."""
from typing import Optional

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    detail: Optional[str] = None
