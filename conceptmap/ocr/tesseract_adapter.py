from pathlib import Path

import pytesseract
from PIL import Image

from conceptmap.ocr.base import BaseOcrEngine
from conceptmap.ocr.exceptions import OcrError


class TesseractAdapter(BaseOcrEngine):
    """Recognizes text with the Tesseract engine through pytesseract."""

    def __init__(self, *, language: str = "eng", tesseract_cmd: str = "") -> None:
        self._language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def image_to_text(self, image_path: Path) -> str:
        try:
            with Image.open(image_path) as image:
                text = pytesseract.image_to_string(image, lang=self._language)
        except Exception as exc:
            raise OcrError(f"tesseract failed on {image_path.name}: {exc}") from exc
        return (text or "").strip()
