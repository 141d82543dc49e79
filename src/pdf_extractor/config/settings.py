"""Pydantic settings models for the PDF content extractor.

Two settings classes load from separate YAML config files with environment
variable override support. Source priority (highest to lowest):

    1. Explicit keyword arguments (e.g., CLI flags)
    2. Environment variables (with prefix, e.g., EXTRACTOR_DECODER_BACKEND)
    3. .env file
    4. YAML config file (e.g., config/extractor.yaml)
    5. Default values defined here

Config paths are resolved relative to PROJECT_ROOT so the tool works
regardless of the current working directory.
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

# Resolve project root: settings.py -> config/ -> pdf_extractor/ -> src/ -> repo root
PROJECT_ROOT = Path(__file__).resolve().parents[3]

_CONFIG_DIR = PROJECT_ROOT / "config"
_ENV_FILE = PROJECT_ROOT / ".env"

PDF_MIME_TYPE = "application/pdf"


class ExtractorSettings(BaseSettings):
    """Extraction behaviour: decoder backend, table heuristic, input limits."""

    decoder_backend: Literal["pymupdf", "pdfplumber"] = "pymupdf"
    max_table_rows_per_page: int = 5

    # Input constraints checked by the session before extraction
    accepted_mime_types: list[str] = [PDF_MIME_TYPE]
    max_upload_mb: int = 50

    model_config = SettingsConfigDict(
        yaml_file=str(_CONFIG_DIR / "extractor.yaml"),
        env_file=str(_ENV_FILE),
        env_prefix="EXTRACTOR_",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


class AppSettings(BaseSettings):
    """Application operations: artifact output, logging."""

    output_dir: str = "output"
    overwrite_artifacts: bool = False
    log_dir: str = "logs"
    log_max_bytes: int = 10_485_760  # 10MB
    log_backup_count: int = 5

    model_config = SettingsConfigDict(
        yaml_file=str(_CONFIG_DIR / "app.yaml"),
        env_file=str(_ENV_FILE),
        env_prefix="APP_",
        extra="ignore",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )
