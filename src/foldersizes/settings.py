"""JSON-backed user defaults."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from foldersizes.utils import xdg_config_home

log = logging.getLogger(__name__)

_SETTINGS_DIR = "foldersizes"
_SETTINGS_FILE = "settings.json"

# Settings key -> CLI parameter name
_OPTION_KEYS = {
    "report.first": "first",
    "scan.depth": "depth",
    "scan.include_system_folders": "include_system_folders",
}


class Settings:
    """Persistent defaults backed by a JSON file.

    Uses dot-notation keys for nested access:
        settings.get("report.first")  # reads data["report"]["first"]
    """

    def __init__(self, path: Path | None = None) -> None:
        self._path = path or (xdg_config_home() / _SETTINGS_DIR / _SETTINGS_FILE)
        self._data: dict[str, Any] = {}
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key."""
        parts = key.split(".")
        node: Any = self._data
        for part in parts:
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def default_map(self) -> dict[str, Any]:
        """Return configured values keyed by CLI parameter name."""
        defaults: dict[str, Any] = {}
        for key, param in _OPTION_KEYS.items():
            value = self.get(key)
            if value is not None:
                defaults[param] = value
        return defaults

    def _load(self) -> None:
        """Load settings from disk, gracefully handling errors."""
        if not self._path.exists():
            return
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            log.warning("Could not load settings from %s: %s", self._path, e)
            return
        if not isinstance(data, dict):
            log.warning("Ignoring settings in %s: expected a JSON object", self._path)
            return
        self._data = data
