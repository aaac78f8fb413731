"""File identity and kind of the document being edited."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .constants import EditorConstants


class FileType(Enum):
    RUST = "Rust"
    PYTHON = "Python"
    TEXT = "Text"

    def __str__(self) -> str:
        return self.value


_EXTENSIONS = {
    ".rs": FileType.RUST,
    ".py": FileType.PYTHON,
    ".pyw": FileType.PYTHON,
}


@dataclass
class FileInfo:
    path: Optional[str] = None
    file_type: FileType = FileType.TEXT

    @classmethod
    def from_path(cls, path: str) -> "FileInfo":
        extension = os.path.splitext(path)[1].lower()
        return cls(path=path, file_type=_EXTENSIONS.get(extension, FileType.TEXT))

    @property
    def has_path(self) -> bool:
        return self.path is not None

    def __str__(self) -> str:
        if self.path:
            name = os.path.basename(self.path)
            if name:
                return name
        return EditorConstants.UNTITLED
