"""Application settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..common.constants import (
    CREDENTIALS_FILE,
    DEFAULT_REDIRECT_URI,
    IMAGES_FOLDER_ID,
    PAGE_SIZE,
    PROGRAMS_FOLDER_ID,
    SCOPES,
    SLIDES_FOLDER_ID,
    TOKEN_FILE,
)
from ..common.exceptions import ConfigError
from ..exporter.models import ExportCategory, ExportMode

CATEGORY_NAMES = ("slides", "programs", "images")


class Settings(BaseSettings):
    """Application configuration."""

    model_config = SettingsConfigDict(
        env_prefix="GDRIVE_EXPORT_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # OAuth
    credentials_path: Path = Field(
        default=Path(CREDENTIALS_FILE),
        description="Path to OAuth client credentials",
    )
    token_path: Path = Field(
        default=Path(TOKEN_FILE),
        description="Path to the cached OAuth token",
    )
    scopes: list[str] = Field(
        default_factory=lambda: list(SCOPES),
        description="OAuth scopes requested during authorization",
    )
    redirect_uri: str = Field(
        default=DEFAULT_REDIRECT_URI,
        description="Redirect URI registered for the OAuth client",
    )

    # Output locations
    site_root: Path = Field(
        default_factory=lambda: Path.home() / "src" / "k8s-school-www",
        description="Root of the local site receiving exported files",
    )
    pdf_subdir: str = Field(
        default="content/pdf",
        description="Directory (under site_root) for exported slides",
    )
    image_subdir: str = Field(
        default="static/images",
        description="Directory (under site_root) for programs and images",
    )

    # Source folders
    slides_folder_id: str = Field(default=SLIDES_FOLDER_ID)
    programs_folder_id: str = Field(default=PROGRAMS_FOLDER_ID)
    images_folder_id: str = Field(default=IMAGES_FOLDER_ID)

    # API settings
    page_size: int = Field(
        default=PAGE_SIZE,
        description="Number of files to fetch per page",
    )

    # Index
    pdf_url_prefix: str = Field(
        default="/pdf",
        description="URL under which pdf_dir is published, for index links",
    )
    image_url_prefix: str = Field(
        default="/images",
        description="URL under which image_dir is published, for index links",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_file: Optional[Path] = Field(
        default=None,
        description="Optional log file path",
    )

    @property
    def pdf_dir(self) -> Path:
        """Target directory for slide PDFs."""
        return self.site_root / self.pdf_subdir

    @property
    def image_dir(self) -> Path:
        """Target directory for program PDFs and image SVGs."""
        return self.site_root / self.image_subdir

    def categories(self) -> dict[str, ExportCategory]:
        """Export categories keyed by name, in processing order."""
        return {
            "slides": ExportCategory(
                name="slides",
                folder_id=self.slides_folder_id,
                mode=ExportMode.PDF,
                target_dir=self.pdf_dir,
                url_prefix=self.pdf_url_prefix,
            ),
            "programs": ExportCategory(
                name="programs",
                folder_id=self.programs_folder_id,
                mode=ExportMode.PDF,
                target_dir=self.image_dir,
                url_prefix=self.image_url_prefix,
            ),
            "images": ExportCategory(
                name="images",
                folder_id=self.images_folder_id,
                mode=ExportMode.SVG,
                target_dir=self.image_dir,
                url_prefix=self.image_url_prefix,
            ),
        }

    def category(self, name: str) -> ExportCategory:
        """Look up a single export category.

        Raises:
            ConfigError: If the name is not a known category
        """
        categories = self.categories()
        if name not in categories:
            raise ConfigError(
                f"Unknown category: {name}. Valid categories: {', '.join(CATEGORY_NAMES)}"
            )
        return categories[name]


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset global settings instance."""
    global _settings
    _settings = None
