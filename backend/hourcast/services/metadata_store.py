"""Metadata Store: identifier -> {title, artist, originalName}.

The whole mapping lives in memory and is rewritten to one JSON document on
every ``record`` call. The in-memory update happens first and is kept even
when the write fails; the failure comes back as a ``PersistenceWarning``.
"""
import asyncio
import json
import logging
import os
from pathlib import Path
from typing import Optional

import aiofiles
import aiofiles.os

from hourcast.errors import PersistenceWarning
from hourcast.models.file_record import MetadataEntry

logger = logging.getLogger(__name__)


class MetadataStore:

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._entries: dict[str, MetadataEntry] = {}
        self._write_lock = asyncio.Lock()

    def load(self) -> None:
        """Read the document if present. Errors are logged and leave the store empty."""
        if not self.path.exists():
            logger.info("No metadata document at %s, starting empty", self.path)
            return
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            if not isinstance(data, dict):
                raise ValueError(f"expected a JSON object, got {type(data).__name__}")
            self._entries = {
                identifier: MetadataEntry.from_document(entry if isinstance(entry, dict) else {})
                for identifier, entry in data.items()
            }
        except (OSError, ValueError) as e:
            logger.error("Error loading metadata from %s: %s", self.path, e)
            self._entries = {}
            return
        logger.info("Loaded metadata for %d file(s)", len(self._entries))

    def get(self, identifier: str) -> Optional[MetadataEntry]:
        return self._entries.get(identifier)

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def snapshot(self) -> dict[str, MetadataEntry]:
        return dict(self._entries)

    async def record(self, identifier: str, entry: MetadataEntry) -> Optional[PersistenceWarning]:
        """Add an entry and rewrite the document.

        Returns None when the write landed, otherwise a PersistenceWarning.
        The entry stays in memory either way.
        """
        self._entries[identifier] = entry
        return await self.persist()

    async def persist(self) -> Optional[PersistenceWarning]:
        """Write the full mapping via a temp file and atomic rename."""
        async with self._write_lock:
            document = {k: v.to_document() for k, v in self._entries.items()}
            payload = json.dumps(document, indent=2)
            tmp_path = self.path.with_name(self.path.name + ".tmp")
            try:
                async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
                    await f.write(payload)
                await aiofiles.os.replace(tmp_path, self.path)
            except OSError as e:
                warning = PersistenceWarning(path=str(self.path), reason=str(e))
                logger.error("Error saving metadata: %s", warning)
                if os.path.exists(tmp_path):
                    try:
                        os.remove(tmp_path)
                    except OSError:
                        logger.debug("Could not remove %s", tmp_path)
                return warning
        return None
