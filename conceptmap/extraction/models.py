from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

FILE_DELIMITER = "=== FILE: {name} ==="
TRUNCATION_MARKER = "[TRUNCATED]"


class ExtractionStatus(str, Enum):
    """Outcome of reading one uploaded file."""

    OK = "ok"
    UNSUPPORTED = "unsupported"
    UNREADABLE = "unreadable"
    OCR_FAILED = "ocr_failed"
    EMPTY = "empty"


@dataclass(frozen=True)
class UploadedFile:
    """A request-scoped upload spooled to transient storage."""

    original_name: str
    temp_path: Path
    size_bytes: int


@dataclass(frozen=True)
class ExtractionResult:
    """Text pulled out of one file, or the reason there is none."""

    file_name: str
    status: ExtractionStatus
    text: str = ""
    detail: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ExtractionStatus.OK


@dataclass(frozen=True)
class NormalizedSegment:
    """Cleaned, bounded text for one file.

    ``text`` never exceeds the configured cap; the truncation marker is only
    added by ``body`` and ``render``.
    """

    file_name: str
    text: str
    truncated: bool = False
    status: ExtractionStatus = ExtractionStatus.OK

    @property
    def body(self) -> str:
        if self.truncated:
            return f"{self.text}\n{TRUNCATION_MARKER}"
        return self.text

    def render(self) -> str:
        """Wrap the body with the file-boundary delimiter."""
        return f"{FILE_DELIMITER.format(name=self.file_name)}\n{self.body}\n"


@dataclass
class CombinedCorpus:
    """All normalized segments of a request, in upload order."""

    segments: list[NormalizedSegment] = field(default_factory=list)

    def render(self) -> str:
        return "\n".join(segment.render() for segment in self.segments)

    def __len__(self) -> int:
        return len(self.segments)
