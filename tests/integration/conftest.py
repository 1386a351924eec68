import shutil
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from conceptmap.config.settings import Settings


def _require_tesseract() -> None:
    if shutil.which("tesseract") is None:
        pytest.skip("tesseract binary not available. Install tesseract-ocr to run OCR tests")


@pytest.fixture()
def ocr_settings() -> Settings:
    _require_tesseract()
    return Settings(generation_provider="example", pdf_raster_dpi=200)


@pytest.fixture()
def scanned_pdf_path(tmp_path: Path) -> Path:
    """A two-page PDF with large, OCR-friendly text."""
    path = tmp_path / "scanned.pdf"
    c = canvas.Canvas(str(path), pagesize=letter)
    for line in ("ACME HOLDINGS", "RAFFLES PLACE"):
        c.setFont("Helvetica-Bold", 36)
        c.drawString(72, 650, line)
        c.showPage()
    c.save()
    return path
