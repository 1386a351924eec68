from pathlib import Path

import pymupdf

from conceptmap.pdf.base import BasePdfRasterizer
from conceptmap.pdf.exceptions import PdfRasterizationError


class PyMuPdfAdapter(BasePdfRasterizer):
    """Renders PDF pages to PNG using PyMuPDF."""

    def render_page(self, pdf_path: Path, page_number: int, target_path: Path) -> bool:
        try:
            with pymupdf.open(pdf_path) as doc:  # type: ignore[no-untyped-call]
                if page_number < 1 or page_number > doc.page_count:
                    return False
                pixmap = doc[page_number - 1].get_pixmap(dpi=self.dpi)
                pixmap.save(str(target_path))
            return True
        except Exception as exc:
            raise PdfRasterizationError(
                f"pymupdf could not render page {page_number}: {exc}"
            ) from exc
