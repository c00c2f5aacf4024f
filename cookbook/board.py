"""Page state for the single-page recipe view.

A :class:`Board` is built for every request. It loads the connectivity status
and the entry list once, then applies a submission or deletion to that local
copy without fetching the list again.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

from werkzeug.datastructures import FileStorage

from .image_upload import CloudinaryUploader, ImageUploadError, allowed_image
from .models import Entry, InvalidEntryId
from .service import EntryService, ValidationError
from .storage import StoreError

logger = logging.getLogger(__name__)

STATUS_CHECKING = "checking"
STATUS_OK = "ok"
STATUS_ERROR = "error"

LOAD_FAILED = "Failed to load messages"
TITLE_MISSING = "Title is required."
TEXT_MISSING = "Text is required."
UNSUPPORTED_IMAGE = "Unsupported image format. Allowed formats: PNG, JPG, JPEG, GIF, WEBP."
UPLOAD_FAILED = "Image could not be uploaded."
SAVE_FAILED = "Could not save recipe."
DELETE_FAILED = "Could not delete recipe."


@dataclass
class EntryForm:
    title: str = ""
    text: str = ""
    image_url: str = ""

    def clear(self) -> None:
        self.title = ""
        self.text = ""
        self.image_url = ""


class Board:
    def __init__(
        self,
        service: EntryService,
        uploader: Optional[CloudinaryUploader] = None,
    ) -> None:
        self.service = service
        self.uploader = uploader
        self.status = STATUS_CHECKING
        self.entries: List[Entry] = []
        self.form = EntryForm()
        self.error = ""
        self.notice = ""

    def load(self) -> None:
        self.status = self.service.health().get("status", STATUS_ERROR)

        try:
            self.entries = self.service.list_entries()
        except StoreError:
            self.entries = []
            self.error = LOAD_FAILED

    def submit(
        self,
        title: str,
        text: str,
        image_url: str = "",
        image_file: Optional[FileStorage] = None,
    ) -> Optional[Entry]:
        """Create an entry from the form values.

        Returns the created entry, or ``None`` with :attr:`error` set and the
        form left populated.
        """

        self.error = ""
        self.form = EntryForm(title=title or "", text=text or "", image_url=image_url or "")

        if not self.form.title.strip():
            self.error = TITLE_MISSING
            return None
        if not self.form.text.strip():
            self.error = TEXT_MISSING
            return None

        final_image_url = self.form.image_url.strip()
        if not final_image_url and image_file is not None and image_file.filename:
            if not allowed_image(image_file.filename):
                self.error = UNSUPPORTED_IMAGE
                return None
            try:
                final_image_url = self._upload(image_file)
            except ImageUploadError:
                self.error = UPLOAD_FAILED
                return None

        try:
            entry = self.service.create_entry(
                self.form.title.strip(), self.form.text.strip(), final_image_url
            )
        except (ValidationError, StoreError) as exc:
            self.error = str(exc) or SAVE_FAILED
            return None

        self.entries.append(entry)
        self.form.clear()
        return entry

    def remove(self, entry_id: str) -> bool:
        try:
            self.service.delete_entry(entry_id)
        except (InvalidEntryId, StoreError):
            logger.warning("Deleting entry %r failed", entry_id)
            self.load()
            self.error = DELETE_FAILED
            return False

        self.entries = [entry for entry in self.entries if entry.id != entry_id]
        return True

    def _upload(self, image_file: FileStorage) -> str:
        if self.uploader is None:
            logger.warning("Image upload requested but no image host is configured")
            raise ImageUploadError("Upload failed")
        return self.uploader.upload(image_file)


__all__ = ["Board", "EntryForm", "STATUS_CHECKING", "STATUS_OK", "STATUS_ERROR"]
