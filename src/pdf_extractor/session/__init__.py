"""Session controller -- file selection, category toggles, latest outcome."""

from .controller import (
    DEFAULT_CATEGORIES,
    ExtractionSession,
    FileTooLargeError,
    SessionError,
    SessionState,
    SourceFile,
    UnsupportedFileTypeError,
)

__all__ = [
    "DEFAULT_CATEGORIES",
    "ExtractionSession",
    "FileTooLargeError",
    "SessionError",
    "SessionState",
    "SourceFile",
    "UnsupportedFileTypeError",
]
