"""Confined directory browsing core."""

from videobrowser.browse.classify import Category, classify
from videobrowser.browse.paths import (
    ROOT_MARKER,
    SecurityError,
    clean_relative,
    parent_of,
    resolve_path,
)
from videobrowser.browse.schemas import (
    BrowseConfig,
    DirectoryView,
    Entry,
    EntryKind,
    FileView,
)
from videobrowser.browse.service import (
    BrowseError,
    Forbidden,
    InternalError,
    NotFound,
    browse,
)
from videobrowser.browse.walker import FileSystemError, list_directory, order_entries

__all__ = [
    "ROOT_MARKER",
    "BrowseConfig",
    "BrowseError",
    "Category",
    "DirectoryView",
    "Entry",
    "EntryKind",
    "FileSystemError",
    "FileView",
    "Forbidden",
    "InternalError",
    "NotFound",
    "SecurityError",
    "browse",
    "classify",
    "clean_relative",
    "list_directory",
    "order_entries",
    "parent_of",
    "resolve_path",
]
