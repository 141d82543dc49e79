"""Shared types for the document decoder backends.

Defines the backend-neutral page content (TextRun, DrawOp), the structural
interfaces every backend implements (DecodedDocument, DecodedPage) and the
DecodeError raised when a document cannot be opened.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

# Drawing operation tags, named after PyMuPDF's bbox log entries
FILL_IMAGE = "fill-image"
FILL_IMAGE_MASK = "fill-imgmask"
FILL_PATH = "fill-path"
STROKE_PATH = "stroke-path"


class DecodeError(Exception):
    """Raised when raw bytes cannot be opened as a PDF document."""


@dataclass(frozen=True)
class TextRun:
    """A text fragment as stored in the page content stream.

    Attributes:
        text: The fragment's characters, spacing preserved.
        x: Approximate horizontal position of the fragment origin.
        y: Approximate vertical position of the fragment origin.
    """

    text: str
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class DrawOp:
    """A painting operation on a page, reduced to its tag and bounding box."""

    tag: str
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)

    @property
    def is_image_paint(self) -> bool:
        """True when the operation places a raster image on the page."""
        return self.tag == FILL_IMAGE


class DecodedPage(Protocol):
    """One page of a decoded document."""

    def get_text_runs(self) -> list[TextRun]: ...

    def get_draw_ops(self) -> list[DrawOp]: ...


class DecodedDocument(Protocol):
    """An opened document. Pages are numbered from 1."""

    @property
    def page_count(self) -> int: ...

    def get_page(self, number: int) -> DecodedPage: ...

    def close(self) -> None: ...

    def __enter__(self) -> DecodedDocument: ...

    def __exit__(self, *exc_info) -> None: ...
