# tests/test_config.py

from __future__ import annotations

import logging
from pathlib import Path

from config import _truthy_env, load_settings


def test_defaults_live_under_xdg_config(tmp_path: Path) -> None:
    settings = load_settings({"XDG_CONFIG_HOME": str(tmp_path)})
    assert settings.home == tmp_path / "todolist"
    assert settings.store_path == tmp_path / "todolist" / "store.json"
    assert settings.log_path == tmp_path / "todolist" / "todolist.log"
    assert settings.store_key == "todos"
    assert settings.resize_terminal is True
    assert settings.color is True
    assert settings.log_level_value == logging.WARNING


def test_env_file_is_read_and_environment_wins(tmp_path: Path) -> None:
    (tmp_path / "todolist.env").write_text(
        "# comment\n"
        "TODOLIST_KEY=chores\n"
        "TODOLIST_LOG_LEVEL=debug\n"
        "TODOLIST_RESIZE=off\n"
        "UNRELATED=1\n"
        "garbage line\n",
        encoding="utf-8",
    )
    settings = load_settings({"TODOLIST_HOME": str(tmp_path), "TODOLIST_KEY": "errands"})
    assert settings.store_key == "errands"
    assert settings.log_level_value == logging.DEBUG
    assert settings.resize_terminal is False


def test_overrides_win_and_none_is_ignored(tmp_path: Path) -> None:
    settings = load_settings(
        {"TODOLIST_HOME": str(tmp_path), "TODOLIST_STORE": str(tmp_path / "a.json")},
        store_path=tmp_path / "b.json",
        log_level=None,
    )
    assert settings.store_path == tmp_path / "b.json"
    assert settings.log_level == "WARNING"


def test_no_color_disables_color(tmp_path: Path) -> None:
    settings = load_settings({"TODOLIST_HOME": str(tmp_path), "NO_COLOR": ""})
    assert settings.color is False


def test_unknown_log_level_falls_back(tmp_path: Path) -> None:
    settings = load_settings({"TODOLIST_HOME": str(tmp_path), "TODOLIST_LOG_LEVEL": "chatty"})
    assert settings.log_level_value == logging.WARNING


def test_truthy_env() -> None:
    assert _truthy_env(None) is True
    assert _truthy_env(None, default=False) is False
    for value in ["0", "false", "No", " off ", ""]:
        assert _truthy_env(value) is False
    assert _truthy_env("yes") is True
