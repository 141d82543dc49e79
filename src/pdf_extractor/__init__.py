"""PDF content extractor -- text, heuristic tables and image occurrences."""

__version__ = "0.1.0"
