"""Artifact writer for extraction results.

Handles the filesystem side of extraction: one file per exportable category
plus a Markdown summary with YAML frontmatter describing the run. Provides
idempotency via ``should_write`` -- existing non-empty artifacts are left
alone unless overwriting is requested.

Artifacts, named after the source file:
    <name>-text.txt     the text field verbatim
    <name>-tables.csv   cells joined by "," (no quoting), rows by newline
    <name>-summary.md   frontmatter metadata + preview body

Images have no artifact; only their descriptive list is reported.

Public API:
    tables_to_csv(rows) -> str
    artifact_path(output_dir, file_name, suffix) -> Path
    should_write(path, overwrite) -> bool
    write_artifacts(result, output_dir, file_name, categories, overwrite)
        -> list[Path]
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

import frontmatter

from pdf_extractor.extractor.types import Category, ExtractionResult
from pdf_extractor.output.preview import render_preview

logger = logging.getLogger(__name__)

DEFAULT_STEM = "extracted"
TEXT_SUFFIX = "-text.txt"
TABLES_SUFFIX = "-tables.csv"
SUMMARY_SUFFIX = "-summary.md"


def tables_to_csv(rows: Iterable[Sequence[str]]) -> str:
    """Join cells with commas and rows with newlines.

    Embedded commas are not quoted.
    """
    return "\n".join(",".join(row) for row in rows)


def artifact_path(output_dir: Path, file_name: str | None, suffix: str) -> Path:
    return output_dir / f"{file_name or DEFAULT_STEM}{suffix}"


def should_write(path: Path, overwrite: bool = False) -> bool:
    """Return False (skip) if *path* exists with content and overwrite is off."""
    if overwrite:
        return True
    if path.exists() and path.stat().st_size > 0:
        return False
    return True


def _write(path: Path, content: str, overwrite: bool) -> bool:
    if not should_write(path, overwrite):
        logger.info("Skipping %s: already exists", path.name)
        return False

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)

    logger.info("Wrote %s (%d chars)", path.name, len(content))
    return True


def build_summary(
    result: ExtractionResult,
    file_name: str | None,
    categories: Iterable[Category],
) -> str:
    """Render the summary Markdown document with YAML frontmatter."""
    post = frontmatter.Post(render_preview(result))
    post.metadata["source_file"] = file_name or DEFAULT_STEM
    post.metadata["page_count"] = result.page_count
    post.metadata["categories"] = sorted(c.value for c in categories)
    post.metadata["table_rows"] = len(result.tables or ())
    post.metadata["image_pages"] = len(result.images or ())
    post.metadata["extraction_date"] = (
        datetime.datetime.now(datetime.UTC).isoformat()
    )
    return frontmatter.dumps(post)


def write_artifacts(
    result: ExtractionResult,
    output_dir: Path,
    file_name: str | None,
    categories: Iterable[Category] = (),
    overwrite: bool = False,
) -> list[Path]:
    """Write every artifact the result supports.

    Args:
        result: Extraction result to export.
        output_dir: Destination directory, created if missing.
        file_name: Source file name used as the artifact prefix.
        categories: Categories that were requested (recorded in the summary).
        overwrite: Replace existing non-empty artifacts.

    Returns:
        Paths of the files actually written.
    """
    written: list[Path] = []

    if result.text is not None:
        path = artifact_path(output_dir, file_name, TEXT_SUFFIX)
        if _write(path, result.text, overwrite):
            written.append(path)

    if result.tables is not None:
        path = artifact_path(output_dir, file_name, TABLES_SUFFIX)
        if _write(path, tables_to_csv(result.tables), overwrite):
            written.append(path)

    if result.images is not None:
        logger.info(
            "Image export is not available; %d page(s) with images listed in summary",
            len(result.images),
        )

    summary_path = artifact_path(output_dir, file_name, SUMMARY_SUFFIX)
    if _write(summary_path, build_summary(result, file_name, categories), overwrite):
        written.append(summary_path)

    return written
