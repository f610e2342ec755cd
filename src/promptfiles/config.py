"""Settings: default values, file locations, and loading (user + workspace overrides)."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# Directory inside a workspace that holds its settings file
WORKSPACE_SETTINGS_DIR = ".vscode"
SETTINGS_FILENAME = "settings.json"
LOG_LEVEL_KEY = "promptfiles.logLevel"


# User settings location
def _user_settings_dir() -> Path:
    return Path.home() / ".promptfiles"


def user_settings_path() -> Path:
    """Path to user settings file (~/.promptfiles/settings.json)."""
    return _user_settings_dir() / SETTINGS_FILENAME


def workspace_settings_path(workspace_root: Path) -> Path:
    """Path to workspace settings (<workspace>/.vscode/settings.json)."""
    return workspace_root / WORKSPACE_SETTINGS_DIR / SETTINGS_FILENAME


def default_settings() -> dict[str, Any]:
    """Built-in defaults. The prompt files setting is absent, so the feature starts disabled."""
    return {
        LOG_LEVEL_KEY: "INFO",
    }


def _load_json(path: Path) -> dict[str, Any] | None:
    """Load a JSON object from path; return None if file missing, invalid, or not an object."""
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError) as e:
        logger.debug("Ignoring unreadable settings file %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        logger.debug("Ignoring settings file %s: top level is not an object", path)
        return None
    return data


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into base recursively. Mutates base; returns base."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def load_user_settings() -> dict[str, Any]:
    """Load user settings merged over defaults."""
    data = _load_json(user_settings_path())
    if data is None:
        return default_settings()
    return _deep_merge(default_settings(), data)


def load_settings(workspace_root: Path | None = None) -> dict[str, Any]:
    """
    Load merged settings: defaults + user (~/.promptfiles/settings.json) + workspace overrides.

    If workspace_root is None, only user settings (and defaults) are used.
    Objects merge per key, so a workspace can toggle a single prompt folder
    without repeating the user's whole `chat.promptFiles` mapping.
    """
    merged = load_user_settings()
    if workspace_root is not None:
        workspace_data = _load_json(workspace_settings_path(workspace_root.resolve()))
        if workspace_data is not None:
            _deep_merge(merged, workspace_data)
    return merged


def load_settings_file(path: Path) -> dict[str, Any]:
    """Load a single settings file for editing; {} if missing or invalid."""
    data = _load_json(path)
    return data if data is not None else {}


def save_settings(path: Path, data: dict[str, Any]) -> None:
    """Write settings as indented JSON, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    logger.debug("Wrote settings to %s", path)


def resolve_path(path: Path) -> Path:
    """Resolve path to absolute, normalized."""
    return path.resolve()


def find_workspace_root(path: Path) -> Path | None:
    """
    Walk upward from path looking for a directory that contains .vscode.
    Returns that directory if found, else None.
    """
    resolved = path.resolve()
    if resolved.is_file():
        resolved = resolved.parent
    current: Path | None = resolved
    while current is not None:
        if (current / WORKSPACE_SETTINGS_DIR).is_dir():
            return current
        parent = current.parent
        if parent == current:
            break
        current = parent
    return None


class SettingsService:
    """Read-only view over loaded settings, keyed by flat dotted names like `chat.promptFiles`."""

    def __init__(self, settings: dict[str, Any]) -> None:
        self._settings = settings

    @classmethod
    def load(cls, workspace_root: Path | None = None) -> SettingsService:
        return cls(load_settings(workspace_root))

    def get_value(self, key: str) -> Any:
        return self._settings.get(key)
