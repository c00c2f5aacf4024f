import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

ENTRY_ID_PATTERN = re.compile(r"^[A-Za-z0-9]{20}$")


class InvalidEntryId(ValueError):
    """Raised when a value cannot be used as an entry identifier."""


@dataclass
class Entry:
    """Domain object representing a stored recipe entry."""

    id: str
    title: str
    text: str
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON wire representation of the entry."""

        return {
            "_id": self.id,
            "title": self.title,
            "text": self.text,
            "imageUrl": self.image_url,
            "createdAt": _isoformat(self.created_at),
            "updatedAt": _isoformat(self.updated_at),
        }


def parse_entry_id(raw: Any) -> str:
    """Return ``raw`` as an entry id or raise :class:`InvalidEntryId`."""

    if not isinstance(raw, str) or not ENTRY_ID_PATTERN.match(raw):
        raise InvalidEntryId(f"Invalid id: {raw!r}")
    return raw


def _isoformat(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.isoformat()


__all__ = ["Entry", "InvalidEntryId", "parse_entry_id", "ENTRY_ID_PATTERN"]
