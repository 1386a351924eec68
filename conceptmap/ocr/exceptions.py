class OcrError(Exception):
    """Raised when an OCR engine cannot recognize an image."""
