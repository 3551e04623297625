import os

import pytest

from hourcast.errors import StorageUnavailable
from hourcast.models.file_record import MetadataEntry
from hourcast.services.catalog import CatalogService
from hourcast.services.file_storage import BlobStore


@pytest.fixture
def catalog(blob_store, metadata_store) -> CatalogService:
    return CatalogService(blob_store, metadata_store)


async def test_lists_every_blob_with_metadata(catalog, blob_store, metadata_store):
    (blob_store.base_path / "1.mp3").write_bytes(b"abc")
    (blob_store.base_path / "2.wav").write_bytes(b"abcdef")
    await metadata_store.record("1.mp3", MetadataEntry("Dawn", "Birds", "dawn.mp3"))

    records = {r.identifier: r for r in await catalog.list_files()}

    assert set(records) == {"1.mp3", "2.wav"}
    assert records["1.mp3"].title == "Dawn"
    assert records["1.mp3"].artist == "Birds"
    assert records["1.mp3"].size_bytes == 3
    assert records["2.wav"].title == "2.wav"
    assert records["2.wav"].artist == ""
    assert records["2.wav"].size_bytes == 6


async def test_blank_metadata_falls_back(catalog, blob_store, metadata_store):
    (blob_store.base_path / "3.ogg").write_bytes(b"o")
    await metadata_store.record("3.ogg", MetadataEntry(title="", artist=None))
    [record] = await catalog.list_files()
    assert record.title == "3.ogg"
    assert record.artist == ""


async def test_metadata_without_blob_not_listed(catalog, metadata_store):
    await metadata_store.record("gone.mp3", MetadataEntry("Gone"))
    assert await catalog.list_files() == []


async def test_stats_are_read_live(catalog, blob_store):
    path = blob_store.base_path / "grow.mp3"
    path.write_bytes(b"12")
    os.utime(path, (1_600_000_000, 1_600_000_000))
    [first] = await catalog.list_files()

    path.write_bytes(b"12345")
    [second] = await catalog.list_files()

    assert first.size_bytes == 2
    assert first.uploaded_at.timestamp() == 1_600_000_000
    assert second.size_bytes == 5


async def test_unreadable_directory_raises(tmp_path, metadata_store):
    catalog = CatalogService(BlobStore(tmp_path / "absent"), metadata_store)
    with pytest.raises(StorageUnavailable):
        await catalog.list_files()


async def test_non_string_metadata_falls_back(blob_store, metadata_store):
    (blob_store.base_path / "1.mp3").write_bytes(b"abc")
    metadata_store.path.write_text(
        '{"1.mp3": {"title": 123, "artist": {"name": "x"}, "originalName": "one.mp3"}}'
    )
    metadata_store.load()

    [record] = await CatalogService(blob_store, metadata_store).list_files()

    assert record.title == "1.mp3"
    assert record.artist == ""
    assert record.original_name == "one.mp3"
