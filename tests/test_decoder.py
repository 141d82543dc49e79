import pymupdf
import pytest

from pdf_extractor.decoder import BACKENDS, FILL_IMAGE, DecodeError, DrawOp, load_document

BACKEND_NAMES = sorted(BACKENDS)


class TestDrawOp:
    def test_fill_image_is_image_paint(self):
        assert DrawOp(FILL_IMAGE).is_image_paint

    @pytest.mark.parametrize("tag", ["fill-path", "stroke-path", "fill-imgmask", "fill-text"])
    def test_other_tags_are_not(self, tag):
        assert not DrawOp(tag).is_image_paint


@pytest.mark.parametrize("backend", BACKEND_NAMES)
class TestBackends:
    def test_page_count(self, backend, sample_pdf_bytes):
        with load_document(sample_pdf_bytes, backend) as document:
            assert document.page_count == 3

    def test_text_runs(self, backend, sample_pdf_bytes):
        with load_document(sample_pdf_bytes, backend) as document:
            first = " ".join(run.text for run in document.get_page(1).get_text_runs())
            empty = document.get_page(2).get_text_runs()

        assert "Hello" in first
        assert "Second" in first
        assert empty == []

    def test_image_paints(self, backend, sample_pdf_bytes):
        with load_document(sample_pdf_bytes, backend) as document:
            counts = [
                sum(op.is_image_paint for op in document.get_page(n).get_draw_ops())
                for n in range(1, 4)
            ]

        assert counts == [0, 2, 0]

    def test_page_numbers_are_one_based(self, backend, sample_pdf_bytes):
        with load_document(sample_pdf_bytes, backend) as document:
            with pytest.raises(IndexError):
                document.get_page(0)
            with pytest.raises(IndexError):
                document.get_page(4)

    def test_garbage_rejected(self, backend):
        with pytest.raises(DecodeError):
            load_document(b"this is not a pdf", backend)

    def test_empty_rejected(self, backend):
        with pytest.raises(DecodeError):
            load_document(b"", backend)

    def test_source_not_modified(self, backend, sample_pdf_bytes):
        original = bytes(sample_pdf_bytes)
        with load_document(sample_pdf_bytes, backend) as document:
            document.get_page(1).get_text_runs()

        assert sample_pdf_bytes == original


def test_unknown_backend():
    with pytest.raises(DecodeError, match="unknown decoder backend"):
        load_document(b"%PDF-1.7", "pdf.js")


def test_encrypted_document_rejected():
    doc = pymupdf.open()
    doc.new_page().insert_text((72, 72), "secret")
    data = doc.tobytes(
        encryption=pymupdf.PDF_ENCRYPT_AES_256,
        owner_pw="owner",
        user_pw="user",
    )
    doc.close()

    with pytest.raises(DecodeError, match="encrypted"):
        load_document(data, "pymupdf")
