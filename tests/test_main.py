"""Tests for the command line entry point."""

import logging
import sys
from unittest.mock import patch

from tildepad import __main__ as cli
from tildepad.config import EditorConfig
from tildepad.version import get_version_string


def test_version_flag(capsys, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["tildepad", "--version"])
    cli.main()
    assert capsys.readouterr().out.strip() == get_version_string()


def test_main_opens_file(monkeypatch):
    monkeypatch.setattr(sys, "argv", ["tildepad", "notes.txt"])
    monkeypatch.delenv("TILDEPAD_LOG", raising=False)
    with patch.object(cli, "load_config", return_value=EditorConfig()), \
            patch("tildepad.editor.Editor") as editor_cls:
        cli.main()
    editor = editor_cls.return_value
    editor.load_file.assert_called_once_with("notes.txt")
    editor.run.assert_called_once_with()


def test_setup_logging_writes_to_file(tmp_path):
    log_file = tmp_path / "tildepad.log"
    package_logger = logging.getLogger("tildepad")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    try:
        cli.setup_logging(str(log_file))
        logging.getLogger("tildepad.view").info("hello from the view")
        for handler in package_logger.handlers:
            handler.flush()
        assert "hello from the view" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in package_logger.handlers:
            if handler not in handlers:
                handler.close()
                package_logger.removeHandler(handler)
        package_logger.setLevel(level)


def test_setup_logging_without_file_is_noop():
    package_logger = logging.getLogger("tildepad")
    before = list(package_logger.handlers)
    cli.setup_logging(None)
    assert package_logger.handlers == before
