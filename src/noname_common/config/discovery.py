"""Config file discovery and loading.

Walk-up finder locates noname.toml the way git finds .git/.
The NONAME_CONFIG env var and the --config CLI flag override discovery.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

from noname_common.config.models import NonameConfig

CONFIG_FILENAME = "noname.toml"
CONFIG_ENV_VAR = "NONAME_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for noname.toml.

    Returns the path to the config file, or None if not found.
    NONAME_CONFIG is checked first; if it is set but does not point at a
    file, no walk-up happens.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def load_config(path: Path | None = None, cwd: Path | None = None) -> NonameConfig:
    """Load and validate a :class:`NonameConfig` from a TOML file.

    Falls back to ``find_config(cwd)`` when *path* is None, and to the
    code defaults when no file is found.
    """
    if path is None:
        path = find_config(cwd)
    if path is None:
        return NonameConfig()

    data: dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    return NonameConfig.model_validate(data)
