"""Directory browsing endpoint."""
import mimetypes
from pathlib import Path

import structlog
from fastapi import APIRouter, Query, Request
from fastapi.responses import FileResponse, PlainTextResponse, Response
from fastapi.templating import Jinja2Templates

from videobrowser.browse import BrowseConfig, BrowseError, Category, FileView, browse

logger = structlog.get_logger()

router = APIRouter(tags=["browse"])

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _stream_file(view: FileView) -> FileResponse:
    """Send a media or archive file as raw bytes."""
    if view.category is Category.ARCHIVE:
        media_type = "application/zip"
    else:
        media_type, _ = mimetypes.guess_type(view.name)

    return FileResponse(
        view.resolved_path,
        media_type=media_type or "application/octet-stream",
        filename=view.name,
        content_disposition_type=view.disposition,
    )


@router.api_route(
    "/",
    methods=["GET", "HEAD"],
    summary="Browse the root directory",
    description=(
        "Lists a directory, renders a text file, or streams a media or "
        "archive file. All paths are confined to the configured root."
    ),
    response_class=Response,
    responses={
        403: {"description": "Path escapes the root"},
        404: {"description": "Path does not exist"},
        500: {"description": "Listing or read failure"},
    },
)
def browse_path(
    request: Request,
    path: str = Query(default="", description="Path relative to the root"),
) -> Response:
    """Serve one browse request.

    Args:
        request: Incoming HTTP request.
        path: Client path relative to the root; empty means the root.

    Returns:
        HTML page for directories and text files, raw bytes for media
        and archives, or a plain-text error.
    """
    config: BrowseConfig = request.app.state.browse_config

    try:
        view = browse(config, path)
    except BrowseError as e:
        return PlainTextResponse(e.message, status_code=e.status_code)

    if isinstance(view, FileView) and view.is_streamed:
        return _stream_file(view)

    return templates.TemplateResponse(
        request,
        "browse.html",
        {"view": view, "is_file_view": isinstance(view, FileView)},
    )
