"""
Reusable prompt files setting: read `chat.promptFiles` and derive source folders.

Accepted values:
  - None / list: feature disabled
  - mapping of { "path": bool }: enabled source folders, in addition to the
    default `.github/prompts` one (which can be turned off by mapping it to False)
  - string values that clearly read as a boolean ("true", "FALSE", " TrUe ") count
    as that boolean; any other value drops the entry
  - keys that are empty after stripping are dropped
  - an empty mapping enables the feature with only the default folder

Paths are returned as declared; resolving them against workspace roots is the
caller's job.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

CONFIG_KEY = "chat.promptFiles"
DEFAULT_SOURCE_FOLDER = ".github/prompts"


class ConfigurationService(Protocol):
    """Anything that can return the current raw value of a setting."""

    def get_value(self, key: str) -> Any: ...


def as_boolean(value: Any) -> bool | None:
    """Return value as bool if it is one or a string that clearly names one; else None."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        clean = value.strip().lower()
        if clean == "true":
            return True
        if clean == "false":
            return False
    return None


def get_value(raw: Any) -> dict[str, bool] | None:
    """
    Normalize the raw setting into an ordered { path: enabled } dict.

    Returns None when the feature is disabled (None, list, or any non-mapping value).
    Never raises; malformed entries are dropped.
    """
    if raw is None or isinstance(raw, (list, tuple)):
        return None
    if not isinstance(raw, Mapping):
        return None

    paths: dict[str, bool] = {}
    for key, value in raw.items():
        if not isinstance(key, str):
            continue
        clean_path = key.strip()
        flag = as_boolean(value)
        if clean_path and flag is not None:
            paths[clean_path] = flag
    return paths


def enabled(raw: Any) -> bool:
    """True when the setting normalizes to a mapping (even an empty one)."""
    return get_value(raw) is not None


def prompt_source_folders(raw: Any) -> list[str]:
    """
    Ordered list of enabled source folders.

    The default folder comes first unless explicitly mapped to False, followed by
    the other enabled paths in the order they were declared.
    """
    value = get_value(raw)
    if value is None:
        return []

    folders: list[str] = []
    if value.get(DEFAULT_SOURCE_FOLDER) is not False:
        folders.append(DEFAULT_SOURCE_FOLDER)
    for path, is_enabled in value.items():
        if is_enabled and path != DEFAULT_SOURCE_FOLDER:
            folders.append(path)
    return folders


def read_setting(service: ConfigurationService) -> Any:
    """Raw `chat.promptFiles` value from the given configuration service."""
    return service.get_value(CONFIG_KEY)


class PromptsConfig:
    """Facade over a configuration service; every call re-reads the current value."""

    def __init__(self, service: ConfigurationService) -> None:
        self._service = service

    def get_value(self) -> dict[str, bool] | None:
        return get_value(read_setting(self._service))

    def enabled(self) -> bool:
        return enabled(read_setting(self._service))

    def prompt_source_folders(self) -> list[str]:
        return prompt_source_folders(read_setting(self._service))
