"""Configuration package -- typed, validated settings from YAML + .env."""

from .settings import PDF_MIME_TYPE, AppSettings, ExtractorSettings

__all__ = [
    "PDF_MIME_TYPE",
    "AppSettings",
    "ExtractorSettings",
    "load_all_settings",
]


def load_all_settings() -> tuple[ExtractorSettings, AppSettings]:
    """Load and return all configuration objects.

    Returns a tuple of (ExtractorSettings, AppSettings), each populated from
    its own YAML file with environment variable overrides.
    """
    return ExtractorSettings(), AppSettings()
