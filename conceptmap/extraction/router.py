from enum import Enum
from pathlib import PurePath
from typing import ClassVar


class FileKind(str, Enum):
    TEXT = "text"
    PDF = "pdf"
    IMAGE = "image"
    UNSUPPORTED = "unsupported"


class FileTypeRouter:
    """Chooses an extraction strategy from the uploaded file's extension."""

    EXTENSIONS: ClassVar[dict[str, FileKind]] = {
        ".txt": FileKind.TEXT,
        ".pdf": FileKind.PDF,
        ".png": FileKind.IMAGE,
        ".jpg": FileKind.IMAGE,
        ".jpeg": FileKind.IMAGE,
        ".tif": FileKind.IMAGE,
        ".tiff": FileKind.IMAGE,
        ".bmp": FileKind.IMAGE,
        ".gif": FileKind.IMAGE,
        ".webp": FileKind.IMAGE,
    }

    @classmethod
    def route(cls, file_name: str) -> FileKind:
        suffix = PurePath(file_name or "").suffix.lower()
        return cls.EXTENSIONS.get(suffix, FileKind.UNSUPPORTED)
