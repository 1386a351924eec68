from pathlib import Path

import pdfplumber

from conceptmap.pdf.base import BasePdfRasterizer
from conceptmap.pdf.exceptions import PdfRasterizationError


class PdfPlumberAdapter(BasePdfRasterizer):
    """Renders PDF pages to PNG using pdfplumber."""

    def render_page(self, pdf_path: Path, page_number: int, target_path: Path) -> bool:
        try:
            with pdfplumber.open(pdf_path) as pdf:
                if page_number < 1 or page_number > len(pdf.pages):
                    return False
                image = pdf.pages[page_number - 1].to_image(resolution=self.dpi)
                image.save(str(target_path), format="PNG")
            return True
        except Exception as exc:
            raise PdfRasterizationError(
                f"pdfplumber could not render page {page_number}: {exc}"
            ) from exc
