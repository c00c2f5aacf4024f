from typing import Optional

from flask import Flask
from werkzeug.exceptions import MethodNotAllowed, NotFound

from . import api, views
from .config import Settings
from .firestore_storage import FirestoreEntryStorage
from .image_upload import CloudinaryUploader
from .models import Entry
from .service import EntryService
from .storage import EntryRepository


def create_app(
    storage: Optional[EntryRepository] = None,
    settings: Optional[Settings] = None,
    uploader: Optional[CloudinaryUploader] = None,
) -> Flask:
    """Create and configure the Flask application.

    Parameters
    ----------
    storage:
        Optional entry repository. When ``None`` the application will use
        :class:`FirestoreEntryStorage` configured from ``settings``.
    settings:
        Optional runtime configuration. Defaults to :meth:`Settings.from_env`.
    uploader:
        Optional image uploader. When ``None`` one is built if a Cloudinary
        cloud name is configured; otherwise file uploads are refused.
    """

    settings = settings or Settings.from_env()

    app = Flask(__name__)
    app.config.setdefault("MAX_CONTENT_LENGTH", 16 * 1024 * 1024)
    app.secret_key = settings.secret_key

    if storage is None:
        storage = FirestoreEntryStorage.from_settings(settings)

    if uploader is None and settings.cloudinary_cloud_name:
        uploader = CloudinaryUploader(
            settings.cloudinary_cloud_name, settings.cloudinary_upload_preset
        )

    app.config["SETTINGS"] = settings
    app.config["ENTRY_STORAGE"] = storage
    app.config["ENTRY_SERVICE"] = EntryService(storage)
    app.config["IMAGE_UPLOADER"] = uploader

    app.register_blueprint(api.bp)
    app.register_blueprint(views.bp)

    app.register_error_handler(NotFound, views.page_fallback)
    app.register_error_handler(MethodNotAllowed, views.page_fallback)

    return app


__all__ = ["create_app", "Entry"]
