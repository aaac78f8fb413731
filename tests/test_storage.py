"""Tests for atomic file storage."""

import os
from unittest.mock import patch

import pytest

from tildepad.storage import StorageError, load_lines, save_lines, split_lines


def test_split_lines():
    assert split_lines("") == []
    assert split_lines("a") == ["a"]
    assert split_lines("a\n") == ["a"]
    assert split_lines("a\n\nb") == ["a", "", "b"]
    assert split_lines("\n") == [""]
    assert split_lines("a\r\nb\r\n") == ["a", "b"]


def test_save_terminates_every_line(tmp_path):
    path = str(tmp_path / "out.txt")
    save_lines(path, ["one", "", "three"])
    with open(path, "rb") as f:
        assert f.read() == b"one\n\nthree\n"
    assert load_lines(path) == ["one", "", "three"]


def test_save_overwrites_existing_file(tmp_path):
    path = tmp_path / "out.txt"
    path.write_text("old content that is longer\n", encoding="utf-8")
    save_lines(str(path), ["new"])
    assert path.read_text(encoding="utf-8") == "new\n"


def test_failed_rename_cleans_up_temp_file(tmp_path):
    path = str(tmp_path / "out.txt")
    with patch("tildepad.storage.os.replace", side_effect=OSError("disk on fire")):
        with pytest.raises(StorageError):
            save_lines(path, ["data"])
    assert os.listdir(str(tmp_path)) == []


def test_invalid_utf8_raises_storage_error(tmp_path):
    path = tmp_path / "binary.txt"
    path.write_bytes(b"\xff\xfe\x00bad")
    with pytest.raises(StorageError) as excinfo:
        load_lines(str(path))
    assert isinstance(excinfo.value.cause, UnicodeDecodeError)


def test_unicode_round_trip(tmp_path):
    path = str(tmp_path / "unicode.txt")
    save_lines(path, ["日本語", "é"])
    assert load_lines(path) == ["日本語", "é"]
