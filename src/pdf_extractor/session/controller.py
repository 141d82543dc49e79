"""Extraction session: selected file, category toggles, latest outcome.

The session owns all mutable state of one interactive run. Front ends call
``set_file``, ``toggle_category`` and ``run_extraction`` and read the state
back through properties or an immutable ``snapshot()``. The latest result and
the latest error are mutually exclusive; loading or clearing a file resets
both.
"""

from __future__ import annotations

import logging
import mimetypes
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from pdf_extractor.config.settings import PDF_MIME_TYPE, ExtractorSettings
from pdf_extractor.extractor import (
    Category,
    ExtractionError,
    ExtractionRequest,
    ExtractionResult,
    extract_request,
)

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_CATEGORIES",
    "ExtractionSession",
    "FileTooLargeError",
    "SessionError",
    "SessionState",
    "SourceFile",
    "UnsupportedFileTypeError",
]

DEFAULT_CATEGORIES = {
    Category.TEXT: True,
    Category.TABLES: False,
    Category.IMAGES: False,
}

Extractor = Callable[[ExtractionRequest, ExtractorSettings], ExtractionResult]


class SessionError(Exception):
    """Base class for rejected session input."""


class UnsupportedFileTypeError(SessionError):
    """The selected file is not of an accepted document type."""


class FileTooLargeError(SessionError):
    """The selected file exceeds the configured upload limit."""


@dataclass(frozen=True)
class SourceFile:
    """A document selected for extraction."""

    name: str
    data: bytes = field(repr=False)
    content_type: str = PDF_MIME_TYPE

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, path: Path) -> SourceFile:
        """Read a file from disk, guessing its content type from the name."""
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            data=path.read_bytes(),
            content_type=content_type or "application/octet-stream",
        )


@dataclass(frozen=True)
class SessionState:
    """Point-in-time view of an ExtractionSession."""

    file_name: str | None
    categories: frozenset[Category]
    is_processing: bool
    result: ExtractionResult | None
    error: str | None


class ExtractionSession:
    """Holds one user's file, toggles and latest extraction outcome."""

    def __init__(
        self,
        settings: ExtractorSettings | None = None,
        extractor: Extractor = extract_request,
    ) -> None:
        self._settings = settings or ExtractorSettings()
        self._extract = extractor
        self._file: SourceFile | None = None
        self._categories: dict[Category, bool] = dict(DEFAULT_CATEGORIES)
        self._processing = False
        self._result: ExtractionResult | None = None
        self._error: str | None = None

    # --- State accessors ---

    @property
    def file(self) -> SourceFile | None:
        return self._file

    @property
    def categories(self) -> dict[Category, bool]:
        return dict(self._categories)

    @property
    def selected_categories(self) -> frozenset[Category]:
        return frozenset(c for c, enabled in self._categories.items() if enabled)

    @property
    def is_processing(self) -> bool:
        return self._processing

    @property
    def result(self) -> ExtractionResult | None:
        return self._result

    @property
    def error(self) -> str | None:
        return self._error

    def snapshot(self) -> SessionState:
        return SessionState(
            file_name=self._file.name if self._file else None,
            categories=self.selected_categories,
            is_processing=self._processing,
            result=self._result,
            error=self._error,
        )

    # --- Commands ---

    def set_file(self, source: SourceFile | None) -> None:
        """Select a document, replacing any previous one.

        Raises:
            UnsupportedFileTypeError: If the content type is not accepted.
            FileTooLargeError: If the file exceeds ``max_upload_mb``.
        """
        if source is None:
            self.clear_file()
            return

        if source.content_type not in self._settings.accepted_mime_types:
            logger.warning(
                "Rejected %s: content type %s not accepted",
                source.name,
                source.content_type,
            )
            raise UnsupportedFileTypeError("Please upload a PDF file only.")

        max_bytes = self._settings.max_upload_mb * 1024 * 1024
        if source.size > max_bytes:
            logger.warning(
                "Rejected %s: %d bytes exceeds %d MB limit",
                source.name,
                source.size,
                self._settings.max_upload_mb,
            )
            raise FileTooLargeError(
                f"File exceeds the {self._settings.max_upload_mb} MB upload limit."
            )

        self._file = source
        self._result = None
        self._error = None
        logger.info("%s is ready for extraction (%d bytes)", source.name, source.size)

    def clear_file(self) -> None:
        self._file = None
        self._result = None
        self._error = None

    def toggle_category(self, which: Category) -> bool:
        """Flip one category toggle and return its new value."""
        self._categories[which] = not self._categories[which]
        return self._categories[which]

    def set_category(self, which: Category, enabled: bool) -> None:
        self._categories[which] = enabled

    def run_extraction(self) -> ExtractionResult | None:
        """Extract the selected categories from the current file.

        Does nothing when no file is loaded or no category is selected.
        On failure the error message is stored and None is returned; the
        session stays usable for another attempt.
        """
        if self._file is None:
            return None

        categories = self.selected_categories
        if not categories:
            logger.warning("No extraction category selected, nothing to do")
            return None

        logger.info("Starting extraction process for %s", self._file.name)
        self._processing = True
        self._error = None
        self._result = None

        try:
            request = ExtractionRequest.build(self._file.data, categories)
            result = self._extract(request, self._settings)
        except ExtractionError as e:
            self._error = str(e)
            logger.error("Extraction failed for %s: %s", self._file.name, e)
            return None
        finally:
            self._processing = False

        self._result = result
        logger.info(
            "Extraction completed! Successfully extracted content from %d page(s).",
            result.page_count,
        )
        return result
