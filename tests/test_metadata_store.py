import json

from hourcast.errors import PersistenceWarning
from hourcast.models.file_record import MetadataEntry
from hourcast.services.metadata_store import MetadataStore


async def test_record_rewrites_whole_document(metadata_store):
    await metadata_store.record("1.mp3", MetadataEntry("One", "A", "one.mp3"))
    warning = await metadata_store.record("2.ogg", MetadataEntry("Two", "B", "two.ogg"))

    assert warning is None
    document = json.loads(metadata_store.path.read_text())
    assert document == {
        "1.mp3": {"title": "One", "artist": "A", "originalName": "one.mp3"},
        "2.ogg": {"title": "Two", "artist": "B", "originalName": "two.ogg"},
    }


async def test_load_restores_entries(metadata_store):
    await metadata_store.record("1.mp3", MetadataEntry("One", "A", "one.mp3"))

    reloaded = MetadataStore(metadata_store.path)
    reloaded.load()
    assert reloaded.get("1.mp3") == MetadataEntry("One", "A", "one.mp3")
    assert len(reloaded) == 1


def test_missing_document_starts_empty(metadata_store):
    metadata_store.load()
    assert len(metadata_store) == 0


def test_corrupt_document_starts_empty(metadata_store, caplog):
    metadata_store.path.write_text("{not json")
    metadata_store.load()
    assert len(metadata_store) == 0
    assert "Error loading metadata" in caplog.text


def test_non_object_document_starts_empty(metadata_store):
    metadata_store.path.write_text("[1, 2, 3]")
    metadata_store.load()
    assert len(metadata_store) == 0


async def test_failed_write_keeps_entry_and_returns_warning(tmp_path, caplog):
    store = MetadataStore(tmp_path / "no-such-dir" / "metadata.json")

    warning = await store.record("1.mp3", MetadataEntry("One", "A", "one.mp3"))

    assert isinstance(warning, PersistenceWarning)
    assert warning.path.endswith("metadata.json")
    assert "1.mp3" in store
    assert store.get("1.mp3").title == "One"
    assert "Error saving metadata" in caplog.text


async def test_no_temp_file_left_behind(metadata_store):
    await metadata_store.record("1.mp3", MetadataEntry("One"))
    assert [p.name for p in metadata_store.path.parent.iterdir()] == ["metadata.json"]
