from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image, ImageDraw
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from conceptmap.extraction.models import UploadedFile


def _write_pdf(path: Path, pages: list[str]) -> Path:
    c = canvas.Canvas(str(path), pagesize=letter)
    for text in pages:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return path


@pytest.fixture()
def sample_pdf_path(tmp_path: Path) -> Path:
    """A single-page PDF with known text content."""
    return _write_pdf(tmp_path / "sample.pdf", ["Hello PDF World"])


@pytest.fixture()
def multi_page_pdf_path(tmp_path: Path) -> Path:
    """A two-page PDF with known text on each page."""
    return _write_pdf(tmp_path / "multi.pdf", ["Page one content", "Page two content"])


@pytest.fixture()
def sample_png_path(tmp_path: Path) -> Path:
    """A small white PNG with a line of black text."""
    path = tmp_path / "scan.png"
    image = Image.new("RGB", (200, 60), "white")
    ImageDraw.Draw(image).text((10, 20), "Acme Pte Ltd", fill="black")
    image.save(path)
    return path


@pytest.fixture()
def make_upload(tmp_path: Path) -> Callable[[str, bytes], UploadedFile]:
    """Write bytes to a temp file and describe it as an upload."""
    counter = {"n": 0}

    def _make(name: str, content: bytes) -> UploadedFile:
        counter["n"] += 1
        path = tmp_path / f"upload-{counter['n']}{Path(name).suffix}"
        path.write_bytes(content)
        return UploadedFile(original_name=name, temp_path=path, size_bytes=len(content))

    return _make
