"""Show whether prompt files are enabled and which source folders apply (CLI command)."""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from promptfiles.config import SettingsService, find_workspace_root
from promptfiles.prompts_config import CONFIG_KEY, PromptsConfig, as_boolean

logger = logging.getLogger(__name__)


def dropped_entries(raw: Any) -> list[tuple[Any, str]]:
    """Entries of a mapping setting that normalization ignores, with the reason."""
    if not isinstance(raw, Mapping):
        return []
    dropped: list[tuple[Any, str]] = []
    for key, value in raw.items():
        if not isinstance(key, str) or not key.strip():
            dropped.append((key, "empty path"))
        elif as_boolean(value) is None:
            dropped.append((key, f"value {json.dumps(value, default=str)} is not a boolean"))
    return dropped


def run(args: Namespace) -> None:
    """Run the show command: report the resolved prompt files setting for a workspace."""
    path = getattr(args, "path", Path("."))
    as_json = getattr(args, "json", False)

    workspace_root = find_workspace_root(Path(path).resolve())
    if workspace_root is None:
        logger.debug("No workspace found above %s; using user settings only", path)
    service = SettingsService.load(workspace_root)
    prompts = PromptsConfig(service)

    for key, reason in dropped_entries(service.get_value(CONFIG_KEY)):
        print(f"Warning: ignoring {CONFIG_KEY} entry {json.dumps(key, default=str)}: {reason}.", file=sys.stderr)

    folders = prompts.get_value()
    source_folders = prompts.prompt_source_folders()

    if as_json:
        print(json.dumps({
            "enabled": folders is not None,
            "folders": folders,
            "source_folders": source_folders,
        }, indent=2))
        return

    source_note = "user"
    if workspace_root is not None:
        source_note += f" + workspace ({workspace_root.as_posix()})"
    print(f"# Settings: {source_note}")
    if folders is None:
        print("Prompt files: disabled")
        return
    print("Prompt files: enabled")
    print()
    print("Configured folders:")
    if not folders:
        print("  (none)")
    for folder, is_enabled in folders.items():
        print(f"  {folder:<40} {'on' if is_enabled else 'off'}")
    print()
    print("Source folders:")
    if not source_folders:
        print("  (none)")
    for folder in source_folders:
        print(f"  {folder}")
