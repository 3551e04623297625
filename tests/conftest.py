"""Shared pytest fixtures for the hourcast test suite."""
from __future__ import annotations

import io

import pytest
from fastapi import UploadFile
from fastapi.testclient import TestClient
from starlette.datastructures import Headers

from hourcast.config import Settings
from hourcast.main import create_app
from hourcast.services.file_storage import BlobStore
from hourcast.services.metadata_store import MetadataStore


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing every path at the test's temp directory."""
    return Settings(
        _env_file=None,
        UPLOAD_DIR=str(tmp_path / "uploads"),
        METADATA_PATH=str(tmp_path / "metadata.json"),
        FRONTEND_BUILD_DIR=str(tmp_path / "build"),
    )


@pytest.fixture
def client(settings):
    """Fresh application and test client; entering it runs the lifespan."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def blob_store(tmp_path) -> BlobStore:
    store = BlobStore(tmp_path / "uploads")
    store.ensure_ready()
    return store


@pytest.fixture
def metadata_store(tmp_path) -> MetadataStore:
    return MetadataStore(tmp_path / "metadata.json")


def make_upload(data: bytes, filename: str = "song.mp3", content_type: str = "audio/mpeg") -> UploadFile:
    return UploadFile(
        file=io.BytesIO(data),
        filename=filename,
        headers=Headers({"content-type": content_type}),
    )


def full_day(**assignments: str) -> list[dict]:
    """24 slots in hour order; keyword ``h5="a.mp3"`` assigns hour 5."""
    return [
        {"hour": hour, "filename": assignments.get(f"h{hour}")}
        for hour in range(24)
    ]
