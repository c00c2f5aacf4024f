"""Entry service: validation and routing between callers and the store."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .models import Entry, parse_entry_id
from .storage import EntryRepository

logger = logging.getLogger(__name__)

TITLE_REQUIRED = "please fill out title field."
DESCRIPTION_AND_IMAGE_REQUIRED = "please add description and or image."


class ValidationError(ValueError):
    """Raised when a new entry is missing required fields."""


class EntryService:
    """Operations exposed over the entry store.

    The repository handle is passed in explicitly so that the web layer and
    the tests decide which backend is used.
    """

    def __init__(self, repository: EntryRepository) -> None:
        self._repository = repository

    def health(self) -> Dict[str, str]:
        return {"status": "ok"}

    def list_entries(self) -> List[Entry]:
        return list(self._repository.list_entries())

    def create_entry(
        self,
        title: Optional[str],
        text: Optional[str],
        image_url: Optional[str],
    ) -> Entry:
        """Validate and persist a new entry.

        The title is checked first. Text and image URL are then both required;
        an entry with only one of them is rejected.
        """

        title = (title or "").strip()
        text = (text or "").strip()
        image_url = (image_url or "").strip()

        if not title:
            raise ValidationError(TITLE_REQUIRED)
        if not text or not image_url:
            raise ValidationError(DESCRIPTION_AND_IMAGE_REQUIRED)

        entry = self._repository.add_entry(title=title, text=text, image_url=image_url)
        logger.info("Created entry %s (%r)", entry.id, entry.title)
        return entry

    def delete_entry(self, entry_id: str) -> None:
        entry_id = parse_entry_id(entry_id)
        self._repository.delete_entry(entry_id)
        logger.info("Deleted entry %s", entry_id)


__all__ = [
    "EntryService",
    "ValidationError",
    "TITLE_REQUIRED",
    "DESCRIPTION_AND_IMAGE_REQUIRED",
]
