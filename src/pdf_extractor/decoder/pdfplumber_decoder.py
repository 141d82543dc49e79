"""pdfplumber decoder backend.

Alternative backend built on pdfminer. Text runs are the words returned by
``extract_words`` with ``use_text_flow`` (content-stream order) and
``keep_blank_chars`` (inner spacing kept, so columnar gaps survive). Drawing
operations are rebuilt from the page's image and vector-graphics objects;
pdfplumber groups those by object type, so draw ops are ordered images first,
then rects, lines and curves.
"""

from __future__ import annotations

import io
import logging

import pdfplumber

from pdf_extractor.decoder.types import (
    FILL_IMAGE,
    FILL_PATH,
    STROKE_PATH,
    DecodeError,
    DrawOp,
    TextRun,
)

logger = logging.getLogger(__name__)


def _bbox(obj: dict) -> tuple[float, float, float, float]:
    return (
        float(obj.get("x0", 0.0)),
        float(obj.get("top", 0.0)),
        float(obj.get("x1", 0.0)),
        float(obj.get("bottom", 0.0)),
    )


def _path_tag(obj: dict) -> str:
    return FILL_PATH if obj.get("fill") else STROKE_PATH


class PdfplumberPage:
    """A single page backed by a ``pdfplumber.page.Page``."""

    def __init__(self, page) -> None:
        self._page = page

    def get_text_runs(self) -> list[TextRun]:
        words = self._page.extract_words(
            use_text_flow=True,
            keep_blank_chars=True,
        )
        return [
            TextRun(text=word["text"], x=float(word["x0"]), y=float(word["top"]))
            for word in words
        ]

    def get_draw_ops(self) -> list[DrawOp]:
        ops = [DrawOp(tag=FILL_IMAGE, bbox=_bbox(img)) for img in self._page.images]
        for kind in ("rects", "lines", "curves"):
            for obj in getattr(self._page, kind):
                ops.append(DrawOp(tag=_path_tag(obj), bbox=_bbox(obj)))
        return ops


class PdfplumberDocument:
    """A PDF opened from memory with pdfplumber."""

    def __init__(self, pdf: pdfplumber.PDF) -> None:
        self._pdf = pdf
        self._pages = pdf.pages

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def get_page(self, number: int) -> PdfplumberPage:
        if not 1 <= number <= len(self._pages):
            raise IndexError(f"page {number} out of range (1..{len(self._pages)})")
        return PdfplumberPage(self._pages[number - 1])

    def close(self) -> None:
        self._pdf.close()

    def __enter__(self) -> PdfplumberDocument:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def open_pdfplumber(data: bytes) -> PdfplumberDocument:
    """Open PDF bytes with pdfplumber.

    pdfplumber parses lazily, so the page tree is walked here to surface
    malformed documents at open time rather than mid-extraction.

    Raises:
        DecodeError: If the bytes are not a readable PDF.
    """
    if not data:
        raise DecodeError("cannot_open: empty document")

    try:
        pdf = pdfplumber.open(io.BytesIO(data))
    except Exception as e:
        raise DecodeError(f"cannot_open: {e}") from e

    try:
        document = PdfplumberDocument(pdf)
    except Exception as e:
        pdf.close()
        raise DecodeError(f"cannot_open: {e}") from e

    logger.debug("pdfplumber opened document with %d pages", document.page_count)
    return document
