from __future__ import annotations

import uuid

from flask import Blueprint, current_app, render_template, request, session

from .board import Board

bp = Blueprint("views", __name__)

SUBMITTED_TOKENS_KEY = "submitted_tokens"
MAX_REMEMBERED_TOKENS = 20
ALREADY_SUBMITTED = "This recipe was already submitted."


def _board() -> Board:
    board = Board(
        current_app.config["ENTRY_SERVICE"],
        uploader=current_app.config.get("IMAGE_UPLOADER"),
    )
    board.load()
    return board


def render_board(board: Board, status_code: int = 200):
    return (
        render_template(
            "index.html",
            board=board,
            submission_token=uuid.uuid4().hex,
            title="The Cook Book",
        ),
        status_code,
    )


def _token_used(token: str) -> bool:
    return bool(token) and token in session.get(SUBMITTED_TOKENS_KEY, [])


def _remember_token(token: str) -> None:
    if not token:
        return
    tokens = list(session.get(SUBMITTED_TOKENS_KEY, []))
    tokens.append(token)
    session[SUBMITTED_TOKENS_KEY] = tokens[-MAX_REMEMBERED_TOKENS:]


@bp.get("/")
def index():
    return render_board(_board())


@bp.post("/")
def submit_entry():
    board = _board()
    token = request.form.get("submission_token", "")

    if _token_used(token):
        board.notice = ALREADY_SUBMITTED
        return render_board(board)

    entry = board.submit(
        request.form.get("title", ""),
        request.form.get("text", ""),
        image_url=request.form.get("image_url", ""),
        image_file=request.files.get("image"),
    )
    if entry is None:
        return render_board(board, 400)

    _remember_token(token)
    board.notice = f"Recipe '{entry.title}' saved."
    return render_board(board)


@bp.post("/entries/<entry_id>/delete")
def delete_entry(entry_id: str):
    board = _board()
    if board.remove(entry_id):
        board.notice = "Recipe deleted."
        return render_board(board)
    return render_board(board, 400)


def page_fallback(error):
    """Render the single page for any unmatched non-API route."""

    return render_board(_board())


__all__ = ["bp", "page_fallback", "render_board"]
