"""PyMuPDF decoder backend.

Default backend. Text runs are the spans reported by ``page.get_text("dict")``
and drawing operations come from ``page.get_bboxlog()``, which lists every
painting operation in content-stream order together with a type tag such as
``fill-image`` or ``stroke-path``.
"""

from __future__ import annotations

import logging

import pymupdf

from pdf_extractor.decoder.types import DecodeError, DrawOp, TextRun

logger = logging.getLogger(__name__)

# Block type reported by get_text("dict") for text blocks (1 = image block)
_TEXT_BLOCK = 0


class PyMuPDFPage:
    """A single page backed by a ``pymupdf.Page``."""

    def __init__(self, page: pymupdf.Page) -> None:
        self._page = page

    def get_text_runs(self) -> list[TextRun]:
        runs: list[TextRun] = []
        content = self._page.get_text("dict", sort=False)
        for block in content.get("blocks", []):
            if block.get("type") != _TEXT_BLOCK:
                continue
            for line in block.get("lines", []):
                for span in line.get("spans", []):
                    x, y = span.get("origin", (0.0, 0.0))
                    runs.append(TextRun(text=span.get("text", ""), x=x, y=y))
        return runs

    def get_draw_ops(self) -> list[DrawOp]:
        return [
            DrawOp(tag=tag, bbox=tuple(rect))
            for tag, rect in self._page.get_bboxlog()
        ]


class PyMuPDFDocument:
    """A PDF opened from memory with PyMuPDF."""

    def __init__(self, doc: pymupdf.Document) -> None:
        self._doc = doc

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def get_page(self, number: int) -> PyMuPDFPage:
        if not 1 <= number <= self._doc.page_count:
            raise IndexError(
                f"page {number} out of range (1..{self._doc.page_count})"
            )
        return PyMuPDFPage(self._doc[number - 1])

    def close(self) -> None:
        self._doc.close()

    def __enter__(self) -> PyMuPDFDocument:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def open_pymupdf(data: bytes) -> PyMuPDFDocument:
    """Open PDF bytes with PyMuPDF.

    Raises:
        DecodeError: If the bytes are not a readable PDF or the document
            is password protected.
    """
    try:
        doc = pymupdf.open(stream=data, filetype="pdf")
    except Exception as e:
        raise DecodeError(f"cannot_open: {e}") from e

    if doc.needs_pass:
        doc.close()
        raise DecodeError("encrypted")

    logger.debug("PyMuPDF opened document with %d pages", doc.page_count)
    return PyMuPDFDocument(doc)
