"""Integration tests: promptfiles show (text and JSON output, warnings for dropped entries)."""

from __future__ import annotations

import io
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from promptfiles.commands.show import dropped_entries, run as show_run
from promptfiles.config import save_settings, user_settings_path, workspace_settings_path
from promptfiles.prompts_config import CONFIG_KEY


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    ws = tmp_path / "ws"
    (ws / ".vscode").mkdir(parents=True)
    return ws


def _show(path: Path, as_json: bool = False) -> tuple[str, str]:
    out, err = io.StringIO(), io.StringIO()
    args = type("Args", (), {"path": path, "json": as_json})()
    with patch("promptfiles.commands.show.sys.stdout", out), patch("promptfiles.commands.show.sys.stderr", err):
        show_run(args)
    return out.getvalue(), err.getvalue()


def test_show_disabled_by_default(workspace: Path) -> None:
    out, _ = _show(workspace, as_json=True)
    assert json.loads(out) == {"enabled": False, "folders": None, "source_folders": []}


def test_show_empty_object_uses_default(workspace: Path) -> None:
    save_settings(workspace_settings_path(workspace), {CONFIG_KEY: {}})
    out, err = _show(workspace, as_json=True)
    assert json.loads(out) == {"enabled": True, "folders": {}, "source_folders": [".github/prompts"]}
    assert err == ""


def test_show_warns_about_dropped_entries(workspace: Path) -> None:
    save_settings(
        workspace_settings_path(workspace),
        {CONFIG_KEY: {"/a/b": "TRUE", "/c/d": "false", "  ": True, "/e/f": "maybe"}},
    )
    out, err = _show(workspace, as_json=True)
    data = json.loads(out)
    assert data["folders"] == {"/a/b": True, "/c/d": False}
    assert data["source_folders"] == [".github/prompts", "/a/b"]
    assert '"/e/f"' in err
    assert "empty path" in err


def test_show_text_output(workspace: Path) -> None:
    save_settings(workspace_settings_path(workspace), {CONFIG_KEY: {".github/prompts": False, "/a/b": True}})
    out, _ = _show(workspace)
    assert "Prompt files: enabled" in out
    assert workspace.resolve().as_posix() in out
    source_section = out.split("Source folders:")[1]
    assert "/a/b" in source_section
    assert ".github/prompts" not in source_section


def test_show_text_disabled(tmp_path: Path) -> None:
    out, _ = _show(tmp_path)
    assert "Prompt files: disabled" in out


def test_show_uses_user_settings_outside_workspace(tmp_path: Path) -> None:
    save_settings(user_settings_path(), {CONFIG_KEY: {"~/prompts": "true"}})
    plain = tmp_path / "plain"
    plain.mkdir()
    out, _ = _show(plain, as_json=True)
    assert json.loads(out)["source_folders"] == [".github/prompts", "~/prompts"]


def test_dropped_entries() -> None:
    assert dropped_entries(None) == []
    assert dropped_entries([1]) == []
    dropped = dropped_entries({"/a": True, "": True, "/b": 1})
    assert [key for key, _ in dropped] == ["", "/b"]
