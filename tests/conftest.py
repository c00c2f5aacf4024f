from __future__ import annotations

from pathlib import Path
import sys
import uuid
from datetime import datetime, timezone
from typing import Optional

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from cookbook import create_app
from cookbook.config import Settings
from cookbook.models import Entry, parse_entry_id
from cookbook.service import EntryService
from cookbook.storage import StoreError


class InMemoryEntryStorage:
    """Simple storage backend used for tests."""

    def __init__(self) -> None:
        self._entries: list[Entry] = []
        self.fail_reads = False
        self.fail_writes = False

    def list_entries(self):
        if self.fail_reads:
            raise StoreError("connection refused")
        return sorted(
            self._entries,
            key=lambda entry: entry.created_at or datetime.min.replace(tzinfo=timezone.utc),
        )

    def add_entry(self, *, title: str, text: str, image_url: Optional[str]) -> Entry:
        if self.fail_writes:
            raise StoreError("connection refused")
        now = datetime.now(timezone.utc)
        entry = Entry(
            id=uuid.uuid4().hex[:20],
            title=title,
            text=text,
            image_url=image_url,
            created_at=now,
            updated_at=now,
        )
        self._entries.append(entry)
        return entry

    def delete_entry(self, entry_id: str) -> None:
        entry_id = parse_entry_id(entry_id)
        if self.fail_writes:
            raise StoreError("connection refused")
        self._entries = [entry for entry in self._entries if entry.id != entry_id]


TEST_SETTINGS = Settings(secret_key="test-secret")


@pytest.fixture
def storage() -> InMemoryEntryStorage:
    return InMemoryEntryStorage()


@pytest.fixture
def service(storage) -> EntryService:
    return EntryService(storage)


@pytest.fixture
def app(storage):
    app = create_app(storage=storage, settings=TEST_SETTINGS)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
