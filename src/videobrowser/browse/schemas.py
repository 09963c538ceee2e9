"""Pydantic models for browse view models and core configuration."""

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from videobrowser.browse.classify import Category
from videobrowser.config import Settings


class EntryKind(str, Enum):
    """Filesystem type of a listed entry."""

    FILE = "file"
    DIRECTORY = "dir"


class BrowseConfig(BaseModel):
    """Immutable configuration handed to the browse core."""

    model_config = ConfigDict(frozen=True)

    root: Path = Field(description="Absolute root boundary")
    max_depth: int = Field(default=4, ge=0)
    preview_max_bytes: int = Field(default=1024 * 1024, ge=0)
    follow_symlinks: bool = True

    @classmethod
    def from_settings(cls, settings: Settings) -> "BrowseConfig":
        """Build the core configuration from process settings."""
        return cls(
            root=settings.root_dir,
            max_depth=settings.max_depth,
            preview_max_bytes=settings.preview_max_bytes,
            follow_symlinks=settings.follow_symlinks,
        )


class Entry(BaseModel):
    """One immediate child of a listed directory."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str = Field(description="Path relative to the root")
    type: EntryKind

    @property
    def is_dir(self) -> bool:
        return self.type is EntryKind.DIRECTORY


class DirectoryView(BaseModel):
    """View model for a directory listing."""

    model_config = ConfigDict(frozen=True)

    current_path: str
    parent_path: str
    entries: list[Entry]


class FileView(BaseModel):
    """View model for a single classified file.

    ``resolved_path`` is only for the transport layer and is never
    rendered to the client.
    """

    model_config = ConfigDict(frozen=True)

    current_path: str
    parent_path: str
    name: str
    category: Category
    resolved_path: Path = Field(exclude=True)
    size: int
    content: str | None = Field(
        default=None, description="Decoded text for previewable files"
    )
    too_large: bool = False
    is_binary: bool = False

    @property
    def disposition(self) -> Literal["inline", "attachment"]:
        """Content-Disposition type used when streaming the file."""
        if self.category is Category.ARCHIVE:
            return "attachment"
        return "inline"

    @property
    def is_streamed(self) -> bool:
        """Whether the file bypasses templating and is sent as raw bytes."""
        return self.category is not Category.TEXT
