from abc import ABC, abstractmethod
from pathlib import Path


class BaseOcrEngine(ABC):
    """Contract for all OCR engine adapters."""

    @abstractmethod
    def image_to_text(self, image_path: Path) -> str:
        """Recognize text in a single image.

        Args:
            image_path: Path to a raster image on local disk.

        Returns:
            Recognized text, stripped. May be empty for blank images.

        Raises:
            OcrError: if recognition fails for any reason.
        """
