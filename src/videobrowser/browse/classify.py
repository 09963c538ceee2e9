"""Filename-based content classification."""
from enum import Enum


class Category(str, Enum):
    """How a file is delivered to the client."""

    IMAGE = "image"
    VIDEO = "video"
    ARCHIVE = "archive"
    TEXT = "text"


EXTENSION_CATEGORIES: dict[str, Category] = {
    ".png": Category.IMAGE,
    ".jpg": Category.IMAGE,
    ".jpeg": Category.IMAGE,
    ".gif": Category.IMAGE,
    ".bmp": Category.IMAGE,
    ".mp4": Category.VIDEO,
    ".webm": Category.VIDEO,
    ".ogg": Category.VIDEO,
    ".zip": Category.ARCHIVE,
}


def extension_of(name: str) -> str:
    """Return the lowercased extension of a file name, dot included.

    The extension is everything from the last ``.`` of the base name, so a
    bare ``.png`` counts as a PNG. Names without a dot have no extension.
    """
    base = name.rsplit("/", 1)[-1]
    index = base.rfind(".")
    if index < 0:
        return ""
    return base[index:].lower()


def classify(name: str) -> Category:
    """Map a file name to its delivery category.

    Args:
        name: File name or path; only the base name is inspected.

    Returns:
        The matching category, or ``Category.TEXT`` for anything unknown.
    """
    return EXTENSION_CATEGORIES.get(extension_of(name), Category.TEXT)
