"""Single-level directory listing for the browse endpoint."""

import errno
import os
import posixpath
from collections.abc import Iterable
from pathlib import Path

import structlog

from videobrowser.browse.paths import (
    ROOT_MARKER,
    SecurityError,
    clean_relative,
    resolve_path,
)
from videobrowser.browse.schemas import Entry, EntryKind

logger = structlog.get_logger()

MAX_DEPTH = 4


class FileSystemError(Exception):
    """Raised when reading a confined path fails."""

    def __init__(self, message: str, path: str, code: str | None = None) -> None:
        """Initialize filesystem error.

        Args:
            message: Error description.
            path: Client path that caused the error.
            code: Optional errno name (e.g., EACCES).
        """
        super().__init__(message)
        self.path = path
        self.code = code


def _child_path(relative: str, name: str) -> str:
    cleaned = clean_relative(relative)
    if cleaned == ROOT_MARKER:
        return name
    return posixpath.join(cleaned, name)


def _entry_kind(
    root: Path,
    entry: os.DirEntry[str],
    child_rel: str,
    follow_symlinks: bool,
) -> EntryKind | None:
    """Classify a directory entry, or None to leave it out of the listing."""
    if not entry.is_symlink():
        if entry.is_dir(follow_symlinks=False):
            return EntryKind.DIRECTORY
        return EntryKind.FILE

    if not follow_symlinks:
        return None

    try:
        resolve_path(root, child_rel, follow_symlinks=True)
    except SecurityError:
        logger.debug("listing_symlink_skipped", name=entry.name)
        return None

    # Looping or unstat-able link targets raise here rather than in scandir.
    try:
        is_dir = entry.is_dir()
    except OSError as e:
        logger.debug(
            "listing_symlink_skipped",
            name=entry.name,
            code=errno.errorcode.get(e.errno) if e.errno else None,
        )
        return None

    return EntryKind.DIRECTORY if is_dir else EntryKind.FILE


def list_directory(
    root: Path,
    relative: str,
    depth: int,
    max_depth: int = MAX_DEPTH,
    follow_symlinks: bool = True,
) -> list[Entry]:
    """List the immediate children of a directory inside the root.

    Deeper levels are never walked here; clients request them one level
    at a time. A ``depth`` past ``max_depth`` yields an empty listing.

    Args:
        root: The root boundary directory.
        relative: Client path of the directory to list.
        depth: Depth of this listing below the request.
        max_depth: Largest depth that still produces entries.
        follow_symlinks: Whether symlinks inside the root are listed.

    Returns:
        Entries in filesystem order.

    Raises:
        SecurityError: If ``relative`` resolves outside the root.
        FileSystemError: If the directory cannot be enumerated.
    """
    if depth > max_depth:
        return []

    full = resolve_path(root, relative, follow_symlinks=follow_symlinks)

    try:
        with os.scandir(full) as it:
            children = list(it)
    except PermissionError as e:
        raise FileSystemError(
            "Permission denied", relative, "EACCES"
        ) from e
    except OSError as e:
        raise FileSystemError(
            f"Failed to list directory: {e.strerror}",
            relative,
            errno.errorcode.get(e.errno) if e.errno else None,
        ) from e

    result: list[Entry] = []
    for child in children:
        child_rel = _child_path(relative, child.name)
        kind = _entry_kind(root, child, child_rel, follow_symlinks)
        if kind is None:
            continue
        result.append(Entry(name=child.name, path=child_rel, type=kind))
    return result


def order_entries(entries: Iterable[Entry]) -> list[Entry]:
    """Sort directories before files, each group by case-insensitive name."""
    return sorted(
        entries,
        key=lambda e: (0 if e.type is EntryKind.DIRECTORY else 1, e.name.lower()),
    )
