from conceptmap.extraction.models import ExtractionResult, ExtractionStatus, UploadedFile
from conceptmap.extraction.readability import is_readable_text
from conceptmap.extraction.router import FileKind, FileTypeRouter
from conceptmap.logging.logger import Log
from conceptmap.ocr.extractor import OcrExtractor
from conceptmap.pdf.page_extractor import PdfPageExtractor


class DocumentExtractor:
    """Turns one uploaded file into an ExtractionResult.

    Never raises for a single bad file: every failure becomes a non-OK
    status that the normalizer later replaces with placeholder text.
    """

    def __init__(self, ocr: OcrExtractor, pdf_extractor: PdfPageExtractor) -> None:
        self._ocr = ocr
        self._pdf_extractor = pdf_extractor

    def extract(self, file: UploadedFile) -> ExtractionResult:
        kind = FileTypeRouter.route(file.original_name)
        Log.info(f"Extracting {file.original_name} ({file.size_bytes} bytes) as {kind.value}")
        if kind is FileKind.TEXT:
            return self._extract_text(file)
        if kind is FileKind.PDF:
            return self._extract_pdf(file)
        if kind is FileKind.IMAGE:
            return self._extract_image(file)
        return self._result(file, ExtractionStatus.UNSUPPORTED, detail="unsupported extension")

    def _extract_text(self, file: UploadedFile) -> ExtractionResult:
        try:
            raw = file.temp_path.read_bytes()
        except OSError as exc:
            return self._result(file, ExtractionStatus.UNREADABLE, detail=str(exc))
        text = raw.decode("utf-8", errors="replace").strip()
        if not is_readable_text(text):
            return self._result(file, ExtractionStatus.UNREADABLE, detail="not readable text")
        return self._result(file, ExtractionStatus.OK, text=text)

    def _extract_pdf(self, file: UploadedFile) -> ExtractionResult:
        outcome = self._pdf_extractor.extract(file.temp_path)
        if outcome.text:
            return self._result(file, ExtractionStatus.OK, text=outcome.text)
        if outcome.all_pages_failed:
            return self._result(file, ExtractionStatus.OCR_FAILED, detail="OCR failed on every page")
        return self._result(file, ExtractionStatus.EMPTY, detail="no text recognized")

    def _extract_image(self, file: UploadedFile) -> ExtractionResult:
        page = self._ocr.try_recognize(file.temp_path)
        if page.failed:
            return self._result(file, ExtractionStatus.OCR_FAILED, detail=page.error or "")
        if not page.text:
            return self._result(file, ExtractionStatus.EMPTY, detail="no text recognized")
        return self._result(file, ExtractionStatus.OK, text=page.text)

    @staticmethod
    def _result(
        file: UploadedFile,
        status: ExtractionStatus,
        *,
        text: str = "",
        detail: str = "",
    ) -> ExtractionResult:
        if status is not ExtractionStatus.OK:
            Log.warning(f"{file.original_name}: {status.value} ({detail})")
        return ExtractionResult(
            file_name=file.original_name,
            status=status,
            text=text,
            detail=detail,
        )
