import pytest

from pdf_extractor.extractor import (
    EXTRACTION_FAILED_MESSAGE,
    Category,
    ExtractionError,
    ExtractionRequest,
    ExtractionResult,
    extract_request,
)
from pdf_extractor.session import (
    ExtractionSession,
    FileTooLargeError,
    SourceFile,
    UnsupportedFileTypeError,
)
from tests.fakes import FakeLoader, FakePage, images


class RecordingExtractor:
    """Session extractor that records calls and can be made to fail."""

    def __init__(self, result=None, fail=False):
        self.result = result or ExtractionResult(page_count=1, text="hello")
        self.fail = fail
        self.calls = []

    def __call__(self, request, settings):
        self.calls.append(request)
        if self.fail:
            raise ExtractionError()
        return self.result


def pdf_file(name="doc.pdf", data=b"%PDF-1.7"):
    return SourceFile(name=name, data=data)


class TestDefaults:
    def test_initial_state(self):
        session = ExtractionSession()
        state = session.snapshot()

        assert state.file_name is None
        assert state.categories == frozenset({Category.TEXT})
        assert not state.is_processing
        assert state.result is None
        assert state.error is None


class TestFileSelection:
    def test_set_file(self):
        session = ExtractionSession()
        session.set_file(pdf_file())

        assert session.file.name == "doc.pdf"

    def test_rejects_other_content_types(self):
        session = ExtractionSession()
        with pytest.raises(UnsupportedFileTypeError):
            session.set_file(SourceFile("notes.txt", b"hi", "text/plain"))

        assert session.file is None

    def test_rejects_oversized_file(self, settings):
        small = settings.model_copy(update={"max_upload_mb": 1})
        session = ExtractionSession(settings=small)
        with pytest.raises(FileTooLargeError):
            session.set_file(pdf_file(data=b"0" * (1024 * 1024 + 1)))

        assert session.file is None

    def test_new_file_clears_result_and_error(self, settings):
        extractor = RecordingExtractor()
        session = ExtractionSession(settings, extractor)
        session.set_file(pdf_file())
        session.run_extraction()
        assert session.result is not None

        session.set_file(pdf_file("other.pdf"))
        assert session.result is None
        assert session.error is None

    def test_clear_file(self, settings):
        session = ExtractionSession(settings, RecordingExtractor(fail=True))
        session.set_file(pdf_file())
        session.run_extraction()
        assert session.error is not None

        session.clear_file()
        assert session.file is None
        assert session.error is None
        assert session.result is None

    def test_set_file_none_clears(self):
        session = ExtractionSession()
        session.set_file(pdf_file())
        session.set_file(None)

        assert session.file is None

    def test_from_path_guesses_content_type(self, tmp_path):
        path = tmp_path / "scan.pdf"
        path.write_bytes(b"%PDF-1.7")
        source = SourceFile.from_path(path)

        assert source.name == "scan.pdf"
        assert source.content_type == "application/pdf"
        assert source.size == 8


class TestCategories:
    def test_toggle(self):
        session = ExtractionSession()

        assert session.toggle_category(Category.TABLES) is True
        assert session.toggle_category(Category.TEXT) is False
        assert session.selected_categories == frozenset({Category.TABLES})

    def test_toggles_are_independent(self):
        session = ExtractionSession()
        session.toggle_category(Category.IMAGES)

        assert session.categories == {
            Category.TEXT: True,
            Category.TABLES: False,
            Category.IMAGES: True,
        }


class TestRunExtraction:
    def test_noop_without_file(self, settings):
        extractor = RecordingExtractor()
        session = ExtractionSession(settings, extractor)

        assert session.run_extraction() is None
        assert extractor.calls == []

    def test_noop_without_categories(self, settings):
        extractor = RecordingExtractor()
        session = ExtractionSession(settings, extractor)
        session.set_file(pdf_file())
        session.set_category(Category.TEXT, False)

        assert session.run_extraction() is None
        assert extractor.calls == []

    def test_passes_file_and_selected_categories(self, settings):
        extractor = RecordingExtractor()
        session = ExtractionSession(settings, extractor)
        session.set_file(pdf_file(data=b"%PDF-bytes"))
        session.toggle_category(Category.IMAGES)
        session.run_extraction()

        assert extractor.calls == [
            ExtractionRequest(
                source=b"%PDF-bytes",
                categories=frozenset({Category.TEXT, Category.IMAGES}),
            )
        ]

    def test_each_run_builds_a_new_request(self, settings):
        extractor = RecordingExtractor()
        session = ExtractionSession(settings, extractor)
        session.set_file(pdf_file())
        session.run_extraction()
        session.toggle_category(Category.TABLES)
        session.run_extraction()

        first, second = extractor.calls
        assert first is not second
        assert first.categories == frozenset({Category.TEXT})
        assert second.categories == frozenset({Category.TEXT, Category.TABLES})

    def test_success_stores_result(self, settings):
        extractor = RecordingExtractor()
        session = ExtractionSession(settings, extractor)
        session.set_file(pdf_file())

        result = session.run_extraction()

        assert result is extractor.result
        assert session.result is extractor.result
        assert session.error is None
        assert not session.is_processing

    def test_failure_stores_error(self, settings):
        session = ExtractionSession(settings, RecordingExtractor(fail=True))
        session.set_file(pdf_file())

        assert session.run_extraction() is None
        assert session.error == EXTRACTION_FAILED_MESSAGE
        assert session.result is None
        assert not session.is_processing

    def test_result_replaces_error_on_retry(self, settings):
        extractor = RecordingExtractor(fail=True)
        session = ExtractionSession(settings, extractor)
        session.set_file(pdf_file())
        session.run_extraction()

        extractor.fail = False
        session.run_extraction()

        assert session.error is None
        assert session.result is extractor.result

    def test_processing_flag_set_during_extraction(self, settings):
        seen = []
        session = None

        def extractor(request, settings):
            seen.append(session.is_processing)
            return ExtractionResult(page_count=0)

        session = ExtractionSession(settings, extractor)
        session.set_file(pdf_file())
        session.run_extraction()

        assert seen == [True]
        assert not session.is_processing

    def test_decoder_failure_with_real_routine(self, settings, failing_loader):
        def extractor(request, settings):
            return extract_request(request, settings, failing_loader)

        session = ExtractionSession(settings, extractor)
        session.set_file(pdf_file())

        assert session.run_extraction() is None
        assert session.error == EXTRACTION_FAILED_MESSAGE

    def test_end_to_end_with_fake_decoder(self, settings):
        loader = FakeLoader([FakePage(["A  B"]), FakePage(["C"], images(2))])

        def extractor(request, settings):
            return extract_request(request, settings, loader)

        session = ExtractionSession(settings, extractor)
        session.set_file(pdf_file())
        session.set_category(Category.TABLES, True)
        session.set_category(Category.IMAGES, True)
        result = session.run_extraction()

        assert result.page_count == 2
        assert result.text == "A  B\n\nC"
        assert result.tables == (("A", "B"),)
        assert result.images == ("Page 2: 2 image(s) found",)
