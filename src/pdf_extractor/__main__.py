import sys

from pdf_extractor.cli import main

sys.exit(main())
