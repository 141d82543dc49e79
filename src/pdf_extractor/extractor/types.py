"""Shared types for content extraction.

Defines Category, ExtractionRequest, ExtractionResult and ExtractionError used
by the extraction routine, the session controller and the artifact writer.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum

NO_TEXT_PLACEHOLDER = "No text content found"
EXTRACTION_FAILED_MESSAGE = (
    "Failed to extract content from PDF. Please ensure the file is a valid PDF."
)


class Category(Enum):
    """Independently toggleable extraction target."""

    TEXT = "text"
    TABLES = "tables"
    IMAGES = "images"


class ExtractionError(Exception):
    """Raised when a document cannot be decoded. Always carries the same message."""

    def __init__(self, message: str = EXTRACTION_FAILED_MESSAGE) -> None:
        super().__init__(message)


@dataclass(frozen=True)
class ExtractionRequest:
    """One user-initiated extraction: the document bytes and what to pull out."""

    source: bytes = field(repr=False)
    categories: frozenset[Category] = frozenset()

    @classmethod
    def build(cls, source: bytes, categories: Iterable[Category]) -> ExtractionRequest:
        return cls(source=source, categories=frozenset(categories))


@dataclass(frozen=True)
class ExtractionResult:
    """Aggregate outcome of one extraction.

    Attributes:
        page_count: Number of pages reported by the decoder. Always set.
        text: Joined page text, or the placeholder when the document has none.
            None when text was not requested.
        tables: Heuristic table rows in page order. None when tables were not
            requested or no row was detected.
        images: One "Page N: K image(s) found" line per page with images.
            None when images were not requested or none were found.
    """

    page_count: int
    text: str | None = None
    tables: tuple[tuple[str, ...], ...] | None = None
    images: tuple[str, ...] | None = None

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "tables": [list(row) for row in self.tables] if self.tables else None,
            "images": list(self.images) if self.images else None,
            "pageCount": self.page_count,
        }
