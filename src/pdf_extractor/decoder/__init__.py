"""Document decoder -- turns PDF bytes into page-indexed text runs and draw ops.

Public API:
    load_document(data, backend="pymupdf") -> DecodedDocument
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from pdf_extractor.decoder.pdfplumber_decoder import open_pdfplumber
from pdf_extractor.decoder.pymupdf_decoder import open_pymupdf
from pdf_extractor.decoder.types import (
    FILL_IMAGE,
    DecodedDocument,
    DecodedPage,
    DecodeError,
    DrawOp,
    TextRun,
)

logger = logging.getLogger(__name__)

__all__ = [
    "BACKENDS",
    "FILL_IMAGE",
    "DecodedDocument",
    "DecodedPage",
    "DecodeError",
    "DrawOp",
    "TextRun",
    "load_document",
]

BACKENDS: dict[str, Callable[[bytes], DecodedDocument]] = {
    "pymupdf": open_pymupdf,
    "pdfplumber": open_pdfplumber,
}


def load_document(data: bytes, backend: str = "pymupdf") -> DecodedDocument:
    """Open *data* as a PDF using the named decoder backend.

    Args:
        data: Raw document bytes. Not modified.
        backend: Key into ``BACKENDS``.

    Returns:
        An open DecodedDocument; close it (or use it as a context manager)
        when done.

    Raises:
        DecodeError: If the backend is unknown or the bytes cannot be decoded.
    """
    try:
        opener = BACKENDS[backend]
    except KeyError:
        raise DecodeError(f"unknown decoder backend: {backend!r}") from None

    logger.debug("Decoding %d bytes with %s backend", len(data), backend)
    return opener(data)
