from collections.abc import Callable
from pathlib import Path
from unittest.mock import MagicMock

from conceptmap.extraction.extractor import DocumentExtractor
from conceptmap.extraction.models import ExtractionStatus, UploadedFile
from conceptmap.ocr.extractor import OcrExtractor, OcrPageResult
from conceptmap.pdf.page_extractor import PdfOcrResult, PdfPageExtractor

MakeUpload = Callable[[str, bytes], UploadedFile]


def _make_extractor() -> tuple[DocumentExtractor, MagicMock, MagicMock]:
    ocr = MagicMock(spec=OcrExtractor)
    pdf_extractor = MagicMock(spec=PdfPageExtractor)
    return DocumentExtractor(ocr=ocr, pdf_extractor=pdf_extractor), ocr, pdf_extractor


class TestTextFiles:
    def test_reads_readable_text(self, make_upload: MakeUpload) -> None:
        extractor, _ocr, _pdf = _make_extractor()
        upload = make_upload("notes.txt", b"  John Smith is director of Acme  \n")
        result = extractor.extract(upload)
        assert result.status is ExtractionStatus.OK
        assert result.text == "John Smith is director of Acme"
        assert result.file_name == "notes.txt"

    def test_binary_content_is_unreadable(self, make_upload: MakeUpload) -> None:
        extractor, _ocr, _pdf = _make_extractor()
        result = extractor.extract(make_upload("blob.txt", b"\x00\x01\x02\x03\x04\x05ab"))
        assert result.status is ExtractionStatus.UNREADABLE
        assert result.text == ""

    def test_empty_file_is_unreadable(self, make_upload: MakeUpload) -> None:
        extractor, _ocr, _pdf = _make_extractor()
        result = extractor.extract(make_upload("empty.txt", b"   \n"))
        assert result.status is ExtractionStatus.UNREADABLE

    def test_missing_temp_file_is_unreadable(self, tmp_path: Path) -> None:
        extractor, _ocr, _pdf = _make_extractor()
        upload = UploadedFile("gone.txt", tmp_path / "gone.txt", 0)
        result = extractor.extract(upload)
        assert result.status is ExtractionStatus.UNREADABLE

    def test_invalid_utf8_is_replaced_not_raised(self, make_upload: MakeUpload) -> None:
        extractor, _ocr, _pdf = _make_extractor()
        result = extractor.extract(make_upload("latin.txt", "Café society".encode("latin-1")))
        assert result.status is ExtractionStatus.OK
        assert result.text.startswith("Caf")

    def test_text_files_never_reach_ocr(self, make_upload: MakeUpload) -> None:
        extractor, ocr, pdf = _make_extractor()
        extractor.extract(make_upload("a.txt", b"hello world"))
        ocr.try_recognize.assert_not_called()
        pdf.extract.assert_not_called()


class TestUnsupportedFiles:
    def test_unknown_extension_is_unsupported(self, make_upload: MakeUpload) -> None:
        extractor, ocr, pdf = _make_extractor()
        result = extractor.extract(make_upload("contract.docx", b"PK\x03\x04"))
        assert result.status is ExtractionStatus.UNSUPPORTED
        ocr.try_recognize.assert_not_called()
        pdf.extract.assert_not_called()


class TestPdfFiles:
    def test_ocr_text_is_ok(self, make_upload: MakeUpload) -> None:
        extractor, _ocr, pdf = _make_extractor()
        pdf.extract.return_value = PdfOcrResult(text="page text", pages_processed=1, pages_failed=0)
        upload = make_upload("bizfile.pdf", b"%PDF-fake")
        result = extractor.extract(upload)
        assert result.status is ExtractionStatus.OK
        assert result.text == "page text"
        pdf.extract.assert_called_once_with(upload.temp_path)

    def test_all_pages_failing_is_ocr_failed(self, make_upload: MakeUpload) -> None:
        extractor, _ocr, pdf = _make_extractor()
        pdf.extract.return_value = PdfOcrResult(text="", pages_processed=2, pages_failed=2)
        result = extractor.extract(make_upload("scan.pdf", b"%PDF-fake"))
        assert result.status is ExtractionStatus.OCR_FAILED

    def test_no_text_is_empty(self, make_upload: MakeUpload) -> None:
        extractor, _ocr, pdf = _make_extractor()
        pdf.extract.return_value = PdfOcrResult(text="", pages_processed=0, pages_failed=0)
        result = extractor.extract(make_upload("blank.pdf", b"%PDF-fake"))
        assert result.status is ExtractionStatus.EMPTY


class TestImageFiles:
    def test_recognized_text_is_ok(self, make_upload: MakeUpload) -> None:
        extractor, ocr, _pdf = _make_extractor()
        ocr.try_recognize.return_value = OcrPageResult(text="Acme Pte Ltd")
        result = extractor.extract(make_upload("scan.png", b"\x89PNG"))
        assert result.status is ExtractionStatus.OK
        assert result.text == "Acme Pte Ltd"

    def test_engine_failure_is_ocr_failed(self, make_upload: MakeUpload) -> None:
        extractor, ocr, _pdf = _make_extractor()
        ocr.try_recognize.return_value = OcrPageResult(error="tesseract missing")
        result = extractor.extract(make_upload("scan.jpg", b"\xff\xd8"))
        assert result.status is ExtractionStatus.OCR_FAILED
        assert "tesseract missing" in result.detail

    def test_blank_image_is_empty(self, make_upload: MakeUpload) -> None:
        extractor, ocr, _pdf = _make_extractor()
        ocr.try_recognize.return_value = OcrPageResult(text="")
        result = extractor.extract(make_upload("blank.png", b"\x89PNG"))
        assert result.status is ExtractionStatus.EMPTY
