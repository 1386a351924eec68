"""OCR text extraction for PDFs, one rasterized page at a time."""

import tempfile
from dataclasses import dataclass
from pathlib import Path

from conceptmap.logging.logger import Log
from conceptmap.ocr.extractor import OcrExtractor
from conceptmap.pdf.base import BasePdfRasterizer

DEFAULT_MAX_PAGES = 50


@dataclass(frozen=True)
class PdfOcrResult:
    text: str
    pages_processed: int
    pages_failed: int

    @property
    def all_pages_failed(self) -> bool:
        return self.pages_processed > 0 and self.pages_failed == self.pages_processed


class PdfPageExtractor:
    """Rasterizes a PDF page by page and OCRs each page.

    Stops at the first page the rasterizer cannot produce or after
    ``max_pages`` pages. Text gathered before stopping is kept. Every page
    image is removed as soon as it has been read.
    """

    def __init__(
        self,
        rasterizer: BasePdfRasterizer,
        ocr: OcrExtractor,
        max_pages: int = DEFAULT_MAX_PAGES,
    ) -> None:
        self._rasterizer = rasterizer
        self._ocr = ocr
        self._max_pages = max_pages

    def extract_text(self, pdf_path: Path) -> str:
        return self.extract(pdf_path).text

    def extract(self, pdf_path: Path) -> PdfOcrResult:
        parts: list[str] = []
        processed = 0
        failed = 0
        with tempfile.TemporaryDirectory(prefix="conceptmap-pages-") as work_dir:
            for page_number in range(1, self._max_pages + 1):
                image_path = Path(work_dir) / f"page-{page_number}.png"
                try:
                    if not self._rasterizer.render_page(pdf_path, page_number, image_path):
                        break
                    page = self._ocr.try_recognize(image_path)
                except Exception as exc:
                    Log.warning(f"Stopped rasterizing {pdf_path.name} at page {page_number}: {exc}")
                    break
                finally:
                    image_path.unlink(missing_ok=True)
                processed += 1
                if page.failed:
                    failed += 1
                parts.append(page.text + "\n")
            else:
                Log.warning(f"{pdf_path.name}: page limit of {self._max_pages} reached")

        Log.info(f"OCR'd {processed} pages of {pdf_path.name} ({failed} failed)")
        return PdfOcrResult(
            text="".join(parts).strip(),
            pages_processed=processed,
            pages_failed=failed,
        )
