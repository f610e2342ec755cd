"""Edit the `chat.promptFiles` setting (CLI command)."""

from __future__ import annotations

import json
import sys
from argparse import Namespace
from pathlib import Path
from typing import Any

from promptfiles.config import (
    find_workspace_root,
    load_settings_file,
    save_settings,
    user_settings_path,
    workspace_settings_path,
)
from promptfiles.prompts_config import CONFIG_KEY


def _folder_arg(value: str | None, flag: str) -> str:
    folder = (value or "").strip()
    if not folder:
        print(f"Error: empty folder path in {flag} FOLDER.", file=sys.stderr)
        sys.exit(1)
    return folder


def _current_folders(settings: dict[str, Any]) -> dict[str, Any]:
    """Existing mapping under CONFIG_KEY (copied); {} when unset or not an object."""
    current = settings.get(CONFIG_KEY)
    return dict(current) if isinstance(current, dict) else {}


def run(args: Namespace) -> None:
    """Run the config command: enable/disable/remove a prompt folder or toggle the feature."""
    enable = getattr(args, "enable", None)
    disable = getattr(args, "disable", None)
    remove = getattr(args, "remove", None)
    turn_on = getattr(args, "on", False)
    turn_off = getattr(args, "off", False)
    path = getattr(args, "path", Path("."))
    use_global = getattr(args, "global_", False)

    if not any((enable, disable, remove, turn_on, turn_off)):
        print(
            "Error: specify --enable FOLDER, --disable FOLDER, --remove FOLDER, --on, or --off.",
            file=sys.stderr,
        )
        sys.exit(1)
    if turn_on and turn_off:
        print("Error: --on and --off cannot be combined.", file=sys.stderr)
        sys.exit(1)
    if turn_off and (enable or disable or remove):
        print("Error: --off cannot be combined with folder changes.", file=sys.stderr)
        sys.exit(1)

    workspace_root = find_workspace_root(Path(path).resolve())
    if use_global or workspace_root is None:
        target_path, source_label = user_settings_path(), "user"
    else:
        target_path = workspace_settings_path(workspace_root)
        source_label = f"workspace ({workspace_root.as_posix()})"

    settings = load_settings_file(target_path)

    if turn_off:
        settings[CONFIG_KEY] = None
        save_settings(target_path, settings)
        print(f"Disabled prompt files in {source_label} settings.")
        return

    if remove and not (enable or disable or turn_on) and not isinstance(settings.get(CONFIG_KEY), dict):
        folder = _folder_arg(remove, "--remove")
        print(f"{json.dumps(folder)} is not configured in {source_label} settings.")
        return

    folders = _current_folders(settings)
    if enable:
        folder = _folder_arg(enable, "--enable")
        folders[folder] = True
        print(f"Enabled {json.dumps(folder)} in {source_label} settings.")
    if disable:
        folder = _folder_arg(disable, "--disable")
        folders[folder] = False
        print(f"Disabled {json.dumps(folder)} in {source_label} settings.")
    if remove:
        folder = _folder_arg(remove, "--remove")
        folders = {k: v for k, v in folders.items() if k.strip() != folder}
        print(f"Removed {json.dumps(folder)} from {source_label} settings.")
    if turn_on:
        print(f"Enabled prompt files in {source_label} settings.")

    settings[CONFIG_KEY] = folders
    save_settings(target_path, settings)
