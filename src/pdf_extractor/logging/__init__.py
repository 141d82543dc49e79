"""Logging package -- JSON file + text console handlers."""

from .setup import setup_logging

__all__ = ["setup_logging"]
