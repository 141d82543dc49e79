"""Output package -- artifact files and plain-text previews."""

from .preview import render_error, render_preview
from .writer import should_write, tables_to_csv, write_artifacts

__all__ = [
    "render_error",
    "render_preview",
    "should_write",
    "tables_to_csv",
    "write_artifacts",
]
