"""PDF content extractor -- application entry point.

Usage:
    python main.py document.pdf --tables --images
"""

import sys

from pdf_extractor.cli import main

if __name__ == "__main__":
    sys.exit(main())
