from __future__ import annotations

import importlib.metadata

from .constants import EditorConstants


def _installed_version() -> str:
    try:
        return importlib.metadata.version(EditorConstants.NAME)
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0"


__version__ = _installed_version()


def get_version_string() -> str:
    return f"{EditorConstants.NAME} {__version__}"
