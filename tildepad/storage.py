"""Reading and writing documents on disk."""

import logging
import os
import tempfile
from typing import Iterable

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """A document could not be read or written.

    Attributes:
        path: The file that was being accessed
        cause: The underlying OSError or UnicodeDecodeError
    """

    def __init__(self, path: str, cause: Exception):
        super().__init__(f"{path}: {cause}")
        self.path = path
        self.cause = cause


def split_lines(content: str) -> list[str]:
    """Split file content into lines.

    Lines end at ``\\n``; a ``\\r`` right before it is dropped. A final line
    terminator does not start another, empty line.
    """
    lines = content.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def load_lines(path: str) -> list[str]:
    """Load a UTF-8 file as a list of lines.

    Raises:
        StorageError: If the file cannot be read or decoded
    """
    try:
        with open(path, 'r', encoding='utf-8', newline='') as f:
            content = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Could not load {path}: {e}")
        raise StorageError(path, e) from e
    return split_lines(content)


def save_lines(path: str, lines: Iterable[str]) -> None:
    """Save lines to ``path`` atomically, each terminated by a newline.

    The content goes to a temporary file in the target directory first and
    is renamed over the target once it is on disk.

    Raises:
        StorageError: If the file cannot be written
    """
    dir_name = os.path.dirname(path) or '.'
    suffix = os.path.splitext(path)[1]
    temp_filename = None
    try:
        with tempfile.NamedTemporaryFile(mode='w', encoding='utf-8', newline='',
                                         dir=dir_name, suffix=suffix,
                                         delete=False) as temp_file:
            temp_filename = temp_file.name
            for line in lines:
                temp_file.write(line)
                temp_file.write('\n')
            temp_file.flush()
            os.fsync(temp_file.fileno())
        os.replace(temp_filename, path)
    except OSError as e:
        logger.warning(f"Could not save {path}: {e}")
        if temp_filename is not None and os.path.exists(temp_filename):
            try:
                os.remove(temp_filename)
            except OSError as cleanup_error:
                logger.warning(f"Could not remove temporary file {temp_filename}: {cleanup_error}")
        raise StorageError(path, e) from e
