"""Best-effort OCR over a single image or rasterized page."""

from dataclasses import dataclass
from pathlib import Path

from conceptmap.logging.logger import Log
from conceptmap.ocr.base import BaseOcrEngine
from conceptmap.ocr.exceptions import OcrError


@dataclass(frozen=True)
class OcrPageResult:
    text: str = ""
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class OcrExtractor:
    """Runs the OCR engine and turns every failure into empty text.

    A failing page or image must never abort the batch, so nothing raised by
    the engine escapes this class.
    """

    def __init__(self, engine: BaseOcrEngine) -> None:
        self._engine = engine

    def recognize(self, image_path: Path) -> str:
        return self.try_recognize(image_path).text

    def try_recognize(self, image_path: Path) -> OcrPageResult:
        try:
            text = self._engine.image_to_text(image_path)
        except OcrError as exc:
            Log.warning(f"OCR failed for {image_path.name}: {exc}")
            return OcrPageResult(error=str(exc))
        except Exception as exc:
            Log.warning(f"Unexpected OCR error for {image_path.name}: {exc}")
            return OcrPageResult(error=str(exc))
        Log.debug(f"OCR recognized {len(text)} chars from {image_path.name}")
        return OcrPageResult(text=text)
