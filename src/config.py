"""Settings resolved from the environment and an optional env file.

Priority: explicit override > real environment variable > todolist.env in
the config directory > default. Only TODOLIST_* keys listed in ENV_KEYS
are read from the file; malformed lines are skipped.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

ENV_FILE_NAME = "todolist.env"
ENV_KEYS = {
    "TODOLIST_STORE",
    "TODOLIST_KEY",
    "TODOLIST_LOG_FILE",
    "TODOLIST_LOG_LEVEL",
    "TODOLIST_RESIZE",
    "TODOLIST_COLOR",
}


def _truthy_env(value: Optional[str], default: bool = True) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def config_home(env: Mapping[str, str]) -> Path:
    if env.get("TODOLIST_HOME"):
        return Path(env["TODOLIST_HOME"]).expanduser()
    base = env.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base).expanduser() / "todolist"


def read_env_file(path: Path) -> Dict[str, str]:
    """Parse KEY=VALUE lines; comments, blanks and unknown keys are ignored."""
    values: Dict[str, str] = {}
    if not path.is_file():
        return values
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        k, v = line.split("=", 1)
        k = k.strip()
        v = v.strip().strip("\"'")
        if k in ENV_KEYS:
            values[k] = v
    return values


@dataclass
class Settings:
    home: Path
    store_path: Path
    store_key: str = "todos"
    log_path: Optional[Path] = None
    log_level: str = "WARNING"
    resize_terminal: bool = True
    color: bool = True

    @property
    def log_level_value(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def load_settings(env: Optional[Mapping[str, str]] = None, **overrides) -> Settings:
    """Build Settings from ``env`` (default: os.environ).

    Keyword overrides (store_path, log_level, resize_terminal, ...) win over
    everything else; None values are ignored.
    """
    env = dict(os.environ if env is None else env)
    home = config_home(env)
    file_values = read_env_file(home / ENV_FILE_NAME)

    def lookup(key: str) -> Optional[str]:
        return env.get(key) or file_values.get(key)

    store = lookup("TODOLIST_STORE")
    log_file = lookup("TODOLIST_LOG_FILE")
    settings = Settings(
        home=home,
        store_path=Path(store).expanduser() if store else home / "store.json",
        store_key=lookup("TODOLIST_KEY") or "todos",
        log_path=Path(log_file).expanduser() if log_file else home / "todolist.log",
        log_level=lookup("TODOLIST_LOG_LEVEL") or "WARNING",
        resize_terminal=_truthy_env(lookup("TODOLIST_RESIZE"), True),
        color=_truthy_env(lookup("TODOLIST_COLOR"), True) and env.get("NO_COLOR") is None,
    )
    for name, value in overrides.items():
        if value is not None:
            setattr(settings, name, value)
    return settings
