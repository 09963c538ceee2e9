"""Security-first path resolution confined to a single root directory."""
import os
import posixpath
from pathlib import Path

ROOT_MARKER = "."


class SecurityError(Exception):
    """Raised when a client path would leave the root boundary."""

    def __init__(self, message: str, path: str) -> None:
        """Initialize security error.

        Args:
            message: Error description.
            path: The offending client-supplied path.
        """
        super().__init__(message)
        self.path = path


def _is_within(candidate: str, root: str) -> bool:
    """Check containment on whole path segments.

    A root of ``/data`` contains ``/data`` and ``/data/x`` but not
    ``/database``.
    """
    if candidate == root:
        return True
    prefix = root if root.endswith(os.sep) else root + os.sep
    return candidate.startswith(prefix)


def clean_relative(relative: str) -> str:
    """Normalize a client path to its rooted, slash-separated form.

    Args:
        relative: Raw client path. Leading slashes are treated as the root.

    Returns:
        Normalized path without a leading slash, or ``"."`` for the root.
    """
    return posixpath.normpath(relative.lstrip("/") or ROOT_MARKER)


def resolve_path(root: Path, relative: str, follow_symlinks: bool = True) -> Path:
    """Resolve a client path to an absolute path inside ``root``.

    The containment check is lexical first: ``root`` and ``relative`` are
    joined and normalized without touching the filesystem, and anything
    that climbs out of ``root`` is rejected before any filesystem access.
    The surviving candidate is then compared in canonical (symlink-resolved)
    form so a link inside the root cannot point outside it. With
    ``follow_symlinks`` disabled, traversing any symlink is rejected.

    Args:
        root: The root boundary directory.
        relative: Client-supplied path, rooted at ``root``.
        follow_symlinks: Whether in-root symlinks may be traversed.

    Returns:
        Absolute, normalized path within ``root``.

    Raises:
        SecurityError: If the path contains a null byte or resolves
            outside the root.
    """
    if "\0" in relative:
        raise SecurityError("Path contains null byte", relative)

    abs_root = os.path.normpath(os.path.abspath(root))
    candidate = os.path.normpath(os.path.join(abs_root, relative.lstrip("/")))

    if not _is_within(candidate, abs_root):
        raise SecurityError("Path resolves outside root", relative)

    real_root = os.path.realpath(abs_root)
    real_candidate = os.path.realpath(candidate)

    if not _is_within(real_candidate, real_root):
        raise SecurityError("Path links outside root", relative)

    if not follow_symlinks:
        expected = os.path.normpath(
            os.path.join(real_root, os.path.relpath(candidate, abs_root))
        )
        if real_candidate != expected:
            raise SecurityError("Path traverses a symlink", relative)

    return Path(candidate)


def parent_of(relative: str) -> str:
    """Compute the path one level up, clamped at the root.

    Args:
        relative: Client path, already confined to the root.

    Returns:
        Parent path, or ``"."`` when ``relative`` is the root or a direct
        child of it. The result never climbs above the root.
    """
    cleaned = clean_relative(relative)
    if cleaned == ROOT_MARKER:
        return ROOT_MARKER

    parent = posixpath.dirname(cleaned)
    if parent in ("", ROOT_MARKER) or parent == ".." or parent.startswith("../"):
        return ROOT_MARKER
    return parent
