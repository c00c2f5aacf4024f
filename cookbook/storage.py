from __future__ import annotations

from typing import Iterable, Optional, Protocol

from .models import Entry


class StoreError(RuntimeError):
    """Raised when the persistence layer cannot complete an operation."""


class EntryRepository(Protocol):
    """Protocol describing the behaviour required by the entry service."""

    def list_entries(self) -> Iterable[Entry]:
        """Return all stored entries ordered oldest first."""

    def add_entry(self, *, title: str, text: str, image_url: Optional[str]) -> Entry:
        """Persist a new entry and return the stored instance."""

    def delete_entry(self, entry_id: str) -> None:
        """Remove an entry. Deleting a missing entry is not an error."""


__all__ = ["EntryRepository", "StoreError"]
