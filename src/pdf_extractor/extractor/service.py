"""Per-document content extraction.

Walks every page of a decoded PDF once, in order, and builds up to three
outputs depending on the requested categories:

1. **Text** -- each page's text runs joined by single spaces, pages separated
   by a blank line.
2. **Tables** -- columnar lines from each page's joined text, split into
   cells (see ``tables.detect_table_rows``).
3. **Images** -- a count of image-paint operations per page.

Error handling:
- Any failure to decode the document or read a page's text aborts the whole
  extraction with ExtractionError; no partial result is returned.
- A failure to read one page's drawing operations is logged and counted as
  zero images on that page.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from pdf_extractor.config.settings import ExtractorSettings
from pdf_extractor.decoder import DecodedDocument, DecodedPage, TextRun, load_document
from pdf_extractor.extractor.tables import detect_table_rows
from pdf_extractor.extractor.types import (
    NO_TEXT_PLACEHOLDER,
    Category,
    ExtractionError,
    ExtractionRequest,
    ExtractionResult,
)

logger = logging.getLogger(__name__)

__all__ = [
    "Category",
    "ExtractionError",
    "ExtractionRequest",
    "ExtractionResult",
    "extract_content",
    "extract_request",
]

DocumentLoader = Callable[[bytes, str], DecodedDocument]


def join_text_runs(runs: Iterable[TextRun]) -> str:
    return " ".join(run.text for run in runs)


def count_image_paints(page: DecodedPage, page_number: int) -> int:
    """Count image-paint operations on a page, treating read errors as zero."""
    try:
        return sum(1 for op in page.get_draw_ops() if op.is_image_paint)
    except Exception as e:
        logger.warning("Error extracting images from page %d: %s", page_number, e)
        return 0


def extract_content(
    source: bytes,
    categories: Iterable[Category],
    settings: ExtractorSettings | None = None,
    loader: DocumentLoader = load_document,
) -> ExtractionResult:
    """Extract the requested categories of content from a PDF.

    Args:
        source: Raw PDF bytes. Not modified.
        categories: Which outputs to produce. An empty set still decodes the
            document and reports its page count.
        settings: Extraction configuration (decoder backend, table row cap).
        loader: Opens bytes as a DecodedDocument; ``load_document`` by default.

    Returns:
        A new, immutable ExtractionResult.

    Raises:
        ExtractionError: If the document cannot be decoded.
    """
    settings = settings or ExtractorSettings()
    requested = frozenset(categories)
    wants_text = Category.TEXT in requested
    wants_tables = Category.TABLES in requested
    wants_images = Category.IMAGES in requested

    logger.info(
        "Starting PDF extraction (%d bytes, categories=%s)",
        len(source),
        sorted(c.value for c in requested),
    )

    text_parts: list[str] = []
    table_rows: list[tuple[str, ...]] = []
    image_lines: list[str] = []

    try:
        with loader(source, settings.decoder_backend) as document:
            page_count = document.page_count
            logger.info("PDF loaded, pages: %d", page_count)

            for page_number in range(1, page_count + 1):
                logger.debug("Processing page %d", page_number)
                page = document.get_page(page_number)

                page_text = ""
                if wants_text or wants_tables:
                    page_text = join_text_runs(page.get_text_runs())

                if wants_text:
                    text_parts.append(page_text + "\n\n")

                if wants_images:
                    image_count = count_image_paints(page, page_number)
                    if image_count > 0:
                        image_lines.append(
                            f"Page {page_number}: {image_count} image(s) found"
                        )

                if wants_tables:
                    table_rows.extend(
                        detect_table_rows(page_text, settings.max_table_rows_per_page)
                    )

    except Exception as e:
        logger.error("PDF extraction error: %s", e)
        raise ExtractionError() from e

    result = ExtractionResult(
        page_count=page_count,
        text=("".join(text_parts).strip() or NO_TEXT_PLACEHOLDER) if wants_text else None,
        tables=tuple(table_rows) if wants_tables and table_rows else None,
        images=tuple(image_lines) if wants_images and image_lines else None,
    )

    logger.info(
        "Extraction completed: %d pages, %d table rows, %d pages with images",
        result.page_count,
        len(result.tables or ()),
        len(result.images or ()),
    )
    return result


def extract_request(
    request: ExtractionRequest,
    settings: ExtractorSettings | None = None,
    loader: DocumentLoader = load_document,
) -> ExtractionResult:
    """Run ``extract_content`` for a prepared ExtractionRequest."""
    return extract_content(request.source, request.categories, settings, loader)
