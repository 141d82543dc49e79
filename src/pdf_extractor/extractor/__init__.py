"""Content extraction -- text, heuristic table rows and image occurrences.

Public API:
    extract_content(source, categories, settings=None, loader=load_document)
        -> ExtractionResult
"""

from pdf_extractor.extractor.service import extract_content, extract_request
from pdf_extractor.extractor.types import (
    EXTRACTION_FAILED_MESSAGE,
    NO_TEXT_PLACEHOLDER,
    Category,
    ExtractionError,
    ExtractionRequest,
    ExtractionResult,
)

__all__ = [
    "EXTRACTION_FAILED_MESSAGE",
    "NO_TEXT_PLACEHOLDER",
    "Category",
    "ExtractionError",
    "ExtractionRequest",
    "ExtractionResult",
    "extract_content",
    "extract_request",
]
