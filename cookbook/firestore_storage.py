from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional

from google.api_core import exceptions as gcloud_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import firestore

from .config import Settings
from .models import Entry, parse_entry_id
from .storage import EntryRepository, StoreError

logger = logging.getLogger(__name__)

_BACKEND_ERRORS = (gcloud_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError)


class FirestoreEntryStorage(EntryRepository):
    """Entry storage backed by a Firestore collection."""

    def __init__(
        self,
        *,
        client: Optional[firestore.Client] = None,
        project: Optional[str] = None,
        collection_name: str = "entries",
    ) -> None:
        self._collection_name = collection_name
        self._firestore_client = client if client is not None else firestore.Client(project=project)
        self._collection = self._firestore_client.collection(collection_name)

    @classmethod
    def from_settings(cls, settings: Settings) -> "FirestoreEntryStorage":
        """Build a storage instance from application settings."""

        return cls(project=settings.gcp_project, collection_name=settings.entries_collection)

    def list_entries(self) -> List[Entry]:
        query = self._collection.order_by("created_at", direction=firestore.Query.ASCENDING)
        try:
            return [self._doc_to_entry(doc.id, doc.to_dict() or {}) for doc in query.stream()]
        except _BACKEND_ERRORS as exc:
            logger.exception("Listing entries from '%s' failed", self._collection_name)
            raise StoreError(str(exc)) from exc

    def add_entry(self, *, title: str, text: str, image_url: Optional[str]) -> Entry:
        doc = {
            "title": title,
            "text": text,
            "image_url": image_url,
            "created_at": firestore.SERVER_TIMESTAMP,
            "updated_at": firestore.SERVER_TIMESTAMP,
        }

        try:
            doc_ref = self._collection.document()
            doc_ref.set(doc)
            snapshot = doc_ref.get()
        except _BACKEND_ERRORS as exc:
            logger.exception("Saving entry to '%s' failed", self._collection_name)
            raise StoreError(str(exc)) from exc

        data = snapshot.to_dict() or {}
        return self._doc_to_entry(snapshot.id, data)

    def delete_entry(self, entry_id: str) -> None:
        entry_id = parse_entry_id(entry_id)
        try:
            # Firestore treats deleting a missing document as a no-op.
            self._collection.document(entry_id).delete()
        except _BACKEND_ERRORS as exc:
            logger.exception("Deleting entry '%s' failed", entry_id)
            raise StoreError(str(exc)) from exc

    def _doc_to_entry(self, doc_id: str, data: dict) -> Entry:
        return Entry(
            id=doc_id,
            title=data.get("title", ""),
            text=data.get("text", ""),
            image_url=data.get("image_url"),
            created_at=_as_datetime(data.get("created_at")),
            updated_at=_as_datetime(data.get("updated_at")),
        )


def _as_datetime(value: object) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    return None


__all__ = ["FirestoreEntryStorage"]
