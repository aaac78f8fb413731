"""tildepad CLI entry point.

Allows running via `python -m tildepad` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from .config import load_config
from .version import get_version_string


def setup_logging(log_file: Optional[str]) -> None:
    """Send log records to ``log_file``; the terminal belongs to the editor."""
    if not log_file:
        return
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    package_logger = logging.getLogger("tildepad")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.INFO)


def main() -> None:
    args = sys.argv[1:]
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return

    config = load_config()
    setup_logging(os.environ.get("TILDEPAD_LOG") or config.log_file)

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    editor = Editor(config=config)
    if args:
        editor.load_file(args[0])
    editor.run()


if __name__ == "__main__":  # pragma: no cover
    main()
