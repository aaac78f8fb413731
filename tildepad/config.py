"""User configuration.

Settings live in ``config.json`` in the user's config directory. A missing
file means defaults; anything unreadable or of the wrong type is reported
and ignored so a broken config never keeps the editor from starting.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

import platformdirs

from .constants import EditorConstants

logger = logging.getLogger(__name__)


@dataclass
class EditorConfig:
    quit_times: int = EditorConstants.QUIT_TIMES
    page_moves_update_column: bool = False
    log_file: Optional[str] = None


_EXPECTED_TYPES = {
    "quit_times": (int,),
    "page_moves_update_column": (bool,),
    "log_file": (str, type(None)),
}


def default_config_path() -> Path:
    return Path(platformdirs.user_config_dir(EditorConstants.NAME)) / "config.json"


def _valid(key: str, value) -> bool:
    if key == "quit_times":
        return isinstance(value, int) and not isinstance(value, bool) and value >= 1
    return isinstance(value, _EXPECTED_TYPES[key])


def load_config(path: Optional[Path] = None) -> EditorConfig:
    """Load the editor configuration.

    Args:
        path: Config file to read. Defaults to the platform config location.

    Returns:
        The configuration, with defaults for anything missing or invalid.
    """
    config_file = Path(path) if path is not None else default_config_path()
    config = EditorConfig()
    if not config_file.exists():
        return config

    try:
        with open(config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.warning(f"Could not load config from {config_file}: {e}")
        return config

    if not isinstance(data, dict):
        logger.warning("Config file has invalid format (not a dict), ignoring")
        return config

    known = {field.name for field in fields(EditorConfig)}
    for key, value in data.items():
        if key not in known:
            logger.warning(f"Ignoring unknown config key {key!r}")
        elif not _valid(key, value):
            logger.warning(f"Ignoring invalid value for {key}: {value!r}")
        else:
            setattr(config, key, value)
    return config
