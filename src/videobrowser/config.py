"""Server configuration loaded from environment variables."""
from pathlib import Path

from pydantic import computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Server configuration loaded from environment variables.

    Attributes:
        host: Bind address for the HTTP server.
        port: Port number for the HTTP server.
        debug: Enable debug logging and API documentation.
        root_dir: Directory all browsing is confined to.
        max_depth: Maximum listing depth below the root.
        preview_max_bytes: Largest file rendered as a text preview.
        follow_symlinks: Allow symlinks whose targets stay inside the root.
        cors_origins_raw: Raw comma-separated CORS origins string.
        shutdown_timeout: Seconds to wait for graceful shutdown.
    """

    model_config = SettingsConfigDict(
        env_prefix="VIDEOBROWSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "localhost"
    port: int = 8900
    debug: bool = False
    root_dir: Path = Path("indir")
    max_depth: int = 4
    preview_max_bytes: int = 1024 * 1024
    follow_symlinks: bool = True
    cors_origins_raw: str = ""
    shutdown_timeout: float = 30.0

    @field_validator("root_dir")
    @classmethod
    def _absolute_root(cls, value: Path) -> Path:
        """Anchor a relative root at the working directory."""
        return value.absolute()

    @computed_field
    @property
    def cors_origins(self) -> list[str]:
        """Parse CORS origins from comma-separated string.

        Returns:
            List of allowed origin URLs.
        """
        return [
            origin.strip()
            for origin in self.cors_origins_raw.split(",")
            if origin.strip()
        ]
