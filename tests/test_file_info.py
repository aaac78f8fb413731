"""Tests for file identity and type detection."""

from tildepad.constants import EditorConstants
from tildepad.file_info import FileInfo, FileType


def test_detects_type_by_extension():
    assert FileInfo.from_path("src/main.rs").file_type == FileType.RUST
    assert FileInfo.from_path("LIB.RS").file_type == FileType.RUST
    assert FileInfo.from_path("tool.py").file_type == FileType.PYTHON
    assert FileInfo.from_path("gui.pyw").file_type == FileType.PYTHON
    assert FileInfo.from_path("notes.txt").file_type == FileType.TEXT
    assert FileInfo.from_path("Makefile").file_type == FileType.TEXT


def test_display_name():
    assert str(FileInfo.from_path("/tmp/dir/main.rs")) == "main.rs"
    assert str(FileInfo()) == EditorConstants.UNTITLED


def test_has_path():
    assert FileInfo.from_path("a.txt").has_path
    assert not FileInfo().has_path


def test_file_type_names():
    assert str(FileType.RUST) == "Rust"
    assert str(FileType.PYTHON) == "Python"
    assert str(FileType.TEXT) == "Text"
