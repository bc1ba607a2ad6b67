"""Locate and read ``routectl.toml``.

The file is found the way git finds ``.git/``: walk up from the starting
directory until a match or the filesystem root. ``ROUTECTL_CONFIG``
points at a file directly and disables the walk.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

CONFIG_FILENAME = "routectl.toml"
CONFIG_ENV_VAR = "ROUTECTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the routectl.toml governing *start* (default: cwd), or None."""
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_config(path: Path | None) -> dict[str, Any]:
    """Parse *path* into raw section tables; a missing file reads as empty.

    Raises:
        tomllib.TOMLDecodeError: The file is not valid TOML.
    """
    if path is None or not path.is_file():
        return {}
    return tomllib.loads(path.read_text(encoding="utf-8"))
