from abc import ABC, abstractmethod
from pathlib import Path


class BasePdfRasterizer(ABC):
    """Contract for all PDF page rasterization adapters."""

    def __init__(self, dpi: int = 200) -> None:
        self.dpi = dpi

    @abstractmethod
    def render_page(self, pdf_path: Path, page_number: int, target_path: Path) -> bool:
        """Render one PDF page to a PNG image.

        Args:
            pdf_path: Path to the PDF on local disk.
            page_number: 1-indexed page to render.
            target_path: Where the PNG image is written.

        Returns:
            True if the page was written, False if the document has no such page.

        Raises:
            PdfRasterizationError: if the document or page cannot be rendered.
        """
