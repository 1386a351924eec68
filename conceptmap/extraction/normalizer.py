"""Cleans and bounds extracted text before it goes into a prompt."""

import re
from typing import ClassVar

from conceptmap.extraction.models import ExtractionResult, ExtractionStatus, NormalizedSegment

DEFAULT_MAX_CHARS = 15000

_NON_PRINTABLE_RE = re.compile(r"[^\x20-\x7E\s]")
_WHITESPACE_RE = re.compile(r"\s+")


class DocumentNormalizer:
    """Produces one NormalizedSegment per extraction result."""

    PLACEHOLDERS: ClassVar[dict[ExtractionStatus, str]] = {
        ExtractionStatus.UNSUPPORTED: (
            "[Unsupported file type. Only text, PDF and image files are accepted.]"
        ),
        ExtractionStatus.UNREADABLE: "[File does not appear to contain readable text.]",
        ExtractionStatus.OCR_FAILED: "[Text recognition failed for this file.]",
        ExtractionStatus.EMPTY: "[No text could be extracted from this file.]",
    }

    def __init__(self, max_chars: int = DEFAULT_MAX_CHARS) -> None:
        if max_chars < 1:
            raise ValueError("max_chars must be positive")
        self._max_chars = max_chars

    def normalize(self, result: ExtractionResult) -> NormalizedSegment:
        if not result.ok:
            return self._placeholder(result.file_name, result.status)

        text = self.clean(result.text)
        if not text:
            return self._placeholder(result.file_name, ExtractionStatus.EMPTY)

        if len(text) > self._max_chars:
            return NormalizedSegment(
                file_name=result.file_name,
                text=text[: self._max_chars],
                truncated=True,
            )
        return NormalizedSegment(file_name=result.file_name, text=text)

    @staticmethod
    def clean(text: str) -> str:
        """Drop non-ASCII and control characters, then collapse whitespace."""
        text = _NON_PRINTABLE_RE.sub("", text)
        return _WHITESPACE_RE.sub(" ", text).strip()

    def _placeholder(self, file_name: str, status: ExtractionStatus) -> NormalizedSegment:
        return NormalizedSegment(
            file_name=file_name,
            text=self.PLACEHOLDERS[status],
            status=status,
        )
