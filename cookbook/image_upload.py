from __future__ import annotations

import logging
from typing import Optional

import httpx
from werkzeug.datastructures import FileStorage

logger = logging.getLogger(__name__)

UPLOAD_URL = "https://api.cloudinary.com/v1_1/{cloud_name}/image/upload"
ALLOWED_IMAGE_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp"}


class ImageUploadError(RuntimeError):
    """Raised when the image host rejects or never receives an upload."""


class CloudinaryUploader:
    """Uploads images to Cloudinary with an unsigned upload preset.

    Only the resulting ``secure_url`` leaves this class; the raw file is
    never handed to the entry service.
    """

    def __init__(
        self,
        cloud_name: str,
        upload_preset: str,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.cloud_name = cloud_name
        self.upload_preset = upload_preset
        self.client = httpx.Client(timeout=30) if client is None else client

    @property
    def url(self) -> str:
        return UPLOAD_URL.format(cloud_name=self.cloud_name)

    def upload(self, image: FileStorage) -> str:
        image.stream.seek(0)
        files = {
            "file": (
                image.filename or "upload",
                image.stream,
                image.mimetype or "application/octet-stream",
            )
        }
        try:
            resp = self.client.post(
                self.url, data={"upload_preset": self.upload_preset}, files=files
            )
        except httpx.HTTPError as exc:
            logger.warning("Image upload to %s failed: %s", self.url, exc)
            raise ImageUploadError("Upload failed") from exc

        if not resp.is_success:
            logger.warning("Image upload rejected with HTTP %s", resp.status_code)
            raise ImageUploadError("Upload failed")

        try:
            body = resp.json()
        except ValueError as exc:
            raise ImageUploadError("Upload failed") from exc
        secure_url = body.get("secure_url") if isinstance(body, dict) else None
        if not secure_url:
            raise ImageUploadError("Upload failed")
        return secure_url


def allowed_image(filename: Optional[str]) -> bool:
    if not filename or "." not in filename:
        return False
    ext = filename.rsplit(".", 1)[1].lower()
    return ext in ALLOWED_IMAGE_EXTENSIONS


__all__ = ["CloudinaryUploader", "ImageUploadError", "allowed_image", "ALLOWED_IMAGE_EXTENSIONS"]
