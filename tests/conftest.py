"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from fastapi.testclient import TestClient

from videobrowser.app import create_app
from videobrowser.browse import BrowseConfig
from videobrowser.config import Settings

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 16
ZIP_BYTES = b"PK\x05\x06" + b"\x00" * 18


@pytest.fixture
def root(tmp_path: Path) -> Path:
    """Create a small browsable tree.

    indir/
        A/inner.txt
        B/
        a.txt
        b.txt
        photo.PNG
        bundle.zip
        clip.mp4
    """
    base = tmp_path / "indir"
    (base / "A").mkdir(parents=True)
    (base / "B").mkdir()
    (base / "A" / "inner.txt").write_text("inside A")
    (base / "a.txt").write_text("first <file>")
    (base / "b.txt").write_text("second file")
    (base / "photo.PNG").write_bytes(PNG_BYTES)
    (base / "bundle.zip").write_bytes(ZIP_BYTES)
    (base / "clip.mp4").write_bytes(b"\x00\x00\x00\x18ftypmp42")
    return base


@pytest.fixture
def outside(tmp_path: Path) -> Path:
    """Directory next to the root holding a file that must stay hidden."""
    secret = tmp_path / "outside"
    secret.mkdir()
    (secret / "secret.txt").write_text("do not serve")
    return secret


@pytest.fixture
def config(root: Path) -> BrowseConfig:
    """Core configuration bound to the test tree."""
    return BrowseConfig(root=root, max_depth=4, preview_max_bytes=1024)


@pytest.fixture
def settings(root: Path) -> Settings:
    """Create test settings."""
    return Settings(
        host="127.0.0.1",
        port=8900,
        debug=True,
        root_dir=root,
        preview_max_bytes=1024,
    )


@pytest.fixture
def client(settings: Settings) -> TestClient:
    """Create test client with configured app."""
    app = create_app(settings)
    return TestClient(app)
