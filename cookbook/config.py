import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Runtime configuration sourced from the process environment."""

    gcp_project: Optional[str] = None
    entries_collection: str = "entries"
    port: int = 8080
    secret_key: str = "development-secret-change-me"
    cloudinary_cloud_name: Optional[str] = None
    cloudinary_upload_preset: str = "unsigned_preset"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            gcp_project=os.environ.get("GCP_PROJECT"),
            entries_collection=os.environ.get("ENTRIES_COLLECTION", "entries"),
            port=int(os.environ.get("PORT", "8080")),
            secret_key=os.environ.get("FLASK_SECRET_KEY", "development-secret-change-me"),
            cloudinary_cloud_name=os.environ.get("CLOUDINARY_CLOUD_NAME") or None,
            cloudinary_upload_preset=os.environ.get("CLOUDINARY_UPLOAD_PRESET", "unsigned_preset"),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )


__all__ = ["Settings"]
