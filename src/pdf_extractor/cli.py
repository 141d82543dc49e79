"""Command-line front end for the PDF content extractor.

Startup sequence:
    1. Parse arguments
    2. Load application configuration (needed for log_dir, output_dir)
    3. Setup logging (must happen before any code that logs)
    4. Load extractor configuration, applying CLI overrides
    5. Select the file and categories, run extraction
    6. Print a preview (or JSON) and write artifacts
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pdf_extractor.config import AppSettings, ExtractorSettings
from pdf_extractor.extractor import Category
from pdf_extractor.logging import setup_logging
from pdf_extractor.output import render_error, render_preview, write_artifacts
from pdf_extractor.session import (
    DEFAULT_CATEGORIES,
    ExtractionSession,
    SessionError,
    SourceFile,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_EXTRACTION_FAILED = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pdf-extractor",
        description="Extract text, candidate table rows and image counts from a PDF.",
    )
    parser.add_argument("path", type=Path, help="PDF file to extract from")
    for category in Category:
        parser.add_argument(
            f"--{category.value}",
            action=argparse.BooleanOptionalAction,
            default=DEFAULT_CATEGORIES[category],
            help=f"extract {category.value} (default: %(default)s)",
        )
    parser.add_argument(
        "--backend",
        choices=["pymupdf", "pdfplumber"],
        default=None,
        help="decoder backend (default: from config)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="directory for artifacts (default: from config)",
    )
    parser.add_argument(
        "--overwrite",
        action="store_true",
        default=None,
        help="replace existing artifacts",
    )
    parser.add_argument(
        "--no-artifacts",
        dest="artifacts",
        action="store_false",
        help="only print the result, do not write files",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON instead of a text preview",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run one extraction from the command line and return an exit code."""
    args = build_parser().parse_args(argv)

    app_overrides = {}
    if args.output_dir is not None:
        app_overrides["output_dir"] = str(args.output_dir)
    if args.overwrite is not None:
        app_overrides["overwrite_artifacts"] = args.overwrite
    app = AppSettings(**app_overrides)

    setup_logging(
        log_dir=app.log_dir,
        max_bytes=app.log_max_bytes,
        backup_count=app.log_backup_count,
        log_level_console=logging.WARNING if args.json else logging.INFO,
    )

    extractor_overrides = {}
    if args.backend is not None:
        extractor_overrides["decoder_backend"] = args.backend
    extractor = ExtractorSettings(**extractor_overrides)

    logger.info(
        "Config loaded -- extractor: backend=%s, max_table_rows_per_page=%s",
        extractor.decoder_backend,
        extractor.max_table_rows_per_page,
    )

    session = ExtractionSession(settings=extractor)
    for category in Category:
        session.set_category(category, getattr(args, category.value))

    try:
        session.set_file(SourceFile.from_path(args.path))
    except (OSError, SessionError) as e:
        logger.error("Cannot use %s: %s", args.path, e)
        sys.stderr.write(render_error(str(e)))
        return EXIT_BAD_INPUT

    if not session.selected_categories:
        sys.stderr.write(render_error("select at least one category"))
        return EXIT_BAD_INPUT

    result = session.run_extraction()
    if result is None:
        sys.stderr.write(render_error(session.error or "unknown error"))
        return EXIT_EXTRACTION_FAILED

    if args.json:
        sys.stdout.write(json.dumps(result.to_dict(), indent=2) + "\n")
    else:
        sys.stdout.write(render_preview(result))

    if args.artifacts:
        written = write_artifacts(
            result,
            Path(app.output_dir),
            session.file.name,
            session.selected_categories,
            overwrite=app.overwrite_artifacts,
        )
        logger.info("Wrote %d artifact(s) to %s", len(written), app.output_dir)

    return EXIT_OK
