"""Document loaders for value and rule files.

The parser is chosen by file suffix: ``.json``, ``.toml``, ``.yaml``/``.yml``.
Every loader returns a plain ``dict`` whose top level is a mapping of field
names; anything else is rejected with :class:`DocumentError`.
"""

from __future__ import annotations

import json
import tomllib
from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

SUPPORTED_SUFFIXES: frozenset[str] = frozenset({".json", ".toml", ".yaml", ".yml"})


class DocumentError(Exception):
    """A value/rule document is missing, unreadable, or not a mapping."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def _new_yaml() -> YAML:
    """Create a fresh safe YAML loader (plain dicts/lists, no round-trip types)."""
    return YAML(typ="safe", pure=True)


def _to_plain(data: Any) -> Any:
    """Convert parser-specific containers into plain dicts and lists."""
    if isinstance(data, dict):
        return {str(k): _to_plain(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_to_plain(v) for v in data]
    return data


def load_document(path: Path) -> dict[str, Any]:
    """Load *path* into a dict of field name to value.

    Raises:
        DocumentError: the file is missing, has an unsupported suffix, fails
            to parse, or its top level is not a mapping.
    """
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        raise DocumentError(path, f"unsupported file type '{suffix or path.name}'")
    if not path.is_file():
        raise DocumentError(path, "file not found")

    raw = path.read_text(encoding="utf-8")
    try:
        if suffix == ".json":
            data = json.loads(raw) if raw.strip() else {}
        elif suffix == ".toml":
            data = tomllib.loads(raw)
        else:
            data = _new_yaml().load(raw) or {}
    except (json.JSONDecodeError, tomllib.TOMLDecodeError, YAMLError) as exc:
        raise DocumentError(path, f"invalid {suffix.lstrip('.').upper()}: {exc}") from exc

    if not isinstance(data, dict):
        raise DocumentError(path, "top level must be a mapping of field names")
    return _to_plain(data)
