"""Reading and writing the clipboard history file."""

from __future__ import annotations

import json
import os
from pathlib import Path

import platformdirs

from clipstack.history import History

APP_DIR_NAME = "clipboard-history"
HISTORY_FILE_NAME = "history.json"


def history_path() -> Path:
    """Location of the history file inside the user's configuration directory."""
    try:
        base = Path(platformdirs.user_config_dir(roaming=True))
    except Exception:
        base = Path(".")
    return base / APP_DIR_NAME / HISTORY_FILE_NAME


def _resolve(path: str | os.PathLike[str] | None) -> Path:
    return Path(path) if path is not None else history_path()


def load(max_size: int, path: str | os.PathLike[str] | None = None) -> History:
    """Load the history; an empty one if the file is missing or unreadable."""
    target = _resolve(path)
    try:
        text = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return History(max_size)
    try:
        return History.from_dict(json.loads(text))
    except ValueError:
        return History(max_size)


def save(history: History, path: str | os.PathLike[str] | None = None) -> Path:
    """Write the history as indented JSON, creating parent directories.

    Returns the path written. Raises OSError when the file cannot be written.
    """
    target = _resolve(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    data = json.dumps(history.to_dict(), indent=2, ensure_ascii=False)
    target.write_text(data, encoding="utf-8")
    return target