"""Turns one browse query into a view model or a terminal HTTP failure."""
import os
import stat

import structlog

from videobrowser.browse.classify import Category, classify
from videobrowser.browse.paths import (
    ROOT_MARKER,
    SecurityError,
    clean_relative,
    parent_of,
    resolve_path,
)
from videobrowser.browse.schemas import BrowseConfig, DirectoryView, FileView
from videobrowser.browse.walker import FileSystemError, list_directory, order_entries

logger = structlog.get_logger()

LISTING_DEPTH = 1


class BrowseError(Exception):
    """Terminal failure of a browse request.

    Attributes:
        status_code: HTTP status the boundary layer responds with.
        message: Plain-text body; never includes filesystem paths.
    """

    status_code = 500
    message = "Internal error"

    def __init__(self, message: str | None = None) -> None:
        """Initialize browse error.

        Args:
            message: Replacement for the class default body, if given.
        """
        if message is not None:
            self.message = message
        super().__init__(self.message)


class Forbidden(BrowseError):
    """Raised when the client path escapes the root boundary."""

    status_code = 403
    message = "Access denied"


class NotFound(BrowseError):
    """Raised when a confined path does not exist or cannot be served."""

    status_code = 404
    message = "Not found"


class InternalError(BrowseError):
    """Raised when stat, listing or reading fails on a confined path."""

    status_code = 500
    message = "Internal error"


def _read_preview(config: BrowseConfig, view: FileView) -> FileView:
    """Fill the text fields of a file view, honoring the preview cap.

    Args:
        config: Core configuration holding the preview cap.
        view: Classified text view without content.

    Returns:
        A copy of ``view`` with content, or flagged too large or binary.

    Raises:
        InternalError: If the file cannot be read.
    """
    if view.size > config.preview_max_bytes:
        logger.info("preview_too_large", path=view.current_path, size=view.size)
        return view.model_copy(update={"too_large": True})

    try:
        with open(view.resolved_path, "rb") as f:
            raw = f.read(config.preview_max_bytes + 1)
    except OSError as e:
        logger.warning("file_read_failed", path=view.current_path, error=e.strerror)
        raise InternalError("Could not read file") from e

    # The file grew between stat and read.
    if len(raw) > config.preview_max_bytes:
        return view.model_copy(update={"too_large": True})

    if b"\0" in raw:
        return view.model_copy(update={"is_binary": True})

    return view.model_copy(
        update={"content": raw.decode("utf-8", errors="replace")}
    )


def browse(config: BrowseConfig, raw_path: str | None) -> DirectoryView | FileView:
    """Build the view model for one browse request.

    Args:
        config: Core configuration with the root boundary.
        raw_path: Value of the ``path`` query parameter; empty or missing
            means the root.

    Returns:
        A DirectoryView with ordered entries, or a FileView classified for
        streaming or text rendering.

    Raises:
        Forbidden: The path resolves outside the root.
        NotFound: The path does not exist or is not a regular file or
            directory.
        InternalError: Listing or reading failed.
    """
    relative = raw_path or ROOT_MARKER

    try:
        full = resolve_path(config.root, relative, config.follow_symlinks)
    except SecurityError as e:
        logger.warning("browse_forbidden", reason=str(e))
        raise Forbidden() from e

    try:
        info = full.stat()
    except (FileNotFoundError, NotADirectoryError) as e:
        raise NotFound() from e
    except OSError as e:
        logger.error("browse_stat_failed", path=relative, error=e.strerror)
        raise InternalError() from e

    current = clean_relative(relative)
    parent = parent_of(current)

    if stat.S_ISDIR(info.st_mode):
        try:
            entries = list_directory(
                config.root,
                current,
                LISTING_DEPTH,
                max_depth=config.max_depth,
                follow_symlinks=config.follow_symlinks,
            )
        except SecurityError as e:
            raise Forbidden() from e
        except FileSystemError as e:
            logger.warning("listing_failed", path=e.path, code=e.code)
            raise InternalError("Error reading directory") from e

        return DirectoryView(
            current_path=current,
            parent_path=parent,
            entries=order_entries(entries),
        )

    if not stat.S_ISREG(info.st_mode):
        raise NotFound()

    name = os.path.basename(full)
    category = classify(name)
    view = FileView(
        current_path=current,
        parent_path=parent,
        name=name,
        category=category,
        resolved_path=full,
        size=info.st_size,
    )

    if category is Category.TEXT:
        return _read_preview(config, view)

    return view
