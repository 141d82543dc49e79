import pytest

from pdf_extractor.config import ExtractorSettings
from pdf_extractor.decoder import DecodeError
from tests.builders import build_pdf
from tests.fakes import FakeLoader


@pytest.fixture
def settings() -> ExtractorSettings:
    return ExtractorSettings(decoder_backend="pymupdf", max_table_rows_per_page=5)


@pytest.fixture
def failing_loader() -> FakeLoader:
    return FakeLoader(error=DecodeError("cannot_open: no objects found"))


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Three pages: text on pages 1 and 3, two images on page 2."""
    return build_pdf(
        [["Hello world", "Second line"], [], ["Closing remarks"]],
        images_per_page=[0, 2, 0],
    )


@pytest.fixture
def sample_pdf_path(tmp_path, sample_pdf_bytes):
    path = tmp_path / "report.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path
