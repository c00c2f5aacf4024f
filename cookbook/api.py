"""JSON API over the entry service, mounted under ``/api``."""

from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, current_app, jsonify, request
from flask.typing import ResponseReturnValue

from .models import InvalidEntryId
from .service import EntryService, ValidationError
from .storage import StoreError

logger = logging.getLogger(__name__)

bp = Blueprint("api", __name__, url_prefix="/api")


def _service() -> EntryService:
    return current_app.config["ENTRY_SERVICE"]


def _text_field(payload: dict, name: str) -> str:
    value = payload.get(name)
    return value if isinstance(value, str) else ""


@bp.get("/health")
def health() -> ResponseReturnValue:
    return jsonify(_service().health())


@bp.get("/messages")
def list_messages() -> ResponseReturnValue:
    try:
        entries = _service().list_entries()
    except StoreError:
        logger.exception("Failed to load messages")
        return jsonify(error="Failed to load messages"), 500
    return jsonify([entry.to_dict() for entry in entries]), 200


@bp.post("/messages")
def create_message() -> ResponseReturnValue:
    payload: Any = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = {}

    try:
        entry = _service().create_entry(
            _text_field(payload, "title"),
            _text_field(payload, "text"),
            _text_field(payload, "imageUrl"),
        )
    except (ValidationError, StoreError) as exc:
        return jsonify(error=str(exc)), 400
    return jsonify(entry.to_dict()), 201


@bp.delete("/messages/<entry_id>")
def delete_message(entry_id: str) -> ResponseReturnValue:
    try:
        _service().delete_entry(entry_id)
    except (InvalidEntryId, StoreError):
        return jsonify(error="Invalid id"), 400
    return "", 204


__all__ = ["bp"]
