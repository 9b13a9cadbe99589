"""Settings resolution.

Where the two lists live, which keys do what, and when the screen drops to
a single pane. Resolved once at startup into an immutable Settings.

List paths, first match wins:
  1. TODO_LIST / TODO_DONE_LIST environment variables
  2. `lists.pending` / `lists.completed` in the config file
  3. $XDG_DATA_HOME/todopane/todo.txt and done.txt
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

import os

import yaml

from todopane.tui.keys import Keymap
from todopane.tui.layout import SINGLE_PANE_MAX_WIDTH

PENDING_ENV = "TODO_LIST"
COMPLETED_ENV = "TODO_DONE_LIST"
CONFIG_ENV = "TODOPANE_CONFIG"

PENDING_FILENAME = "todo.txt"
COMPLETED_FILENAME = "done.txt"
LOG_FILENAME = "todopane.log"


class ConfigError(RuntimeError):
    """Settings cannot be resolved; nothing can start."""


@dataclass(frozen=True)
class Settings:
    pending_path: Path
    completed_path: Path
    single_pane_max_width: int = SINGLE_PANE_MAX_WIDTH
    key_overrides: Mapping[str, list[str]] = field(default_factory=dict)

    @property
    def log_path(self) -> Path:
        return self.pending_path.parent / LOG_FILENAME

    def keymap(self) -> Keymap:
        return Keymap(self.key_overrides)


def _home() -> Path:
    try:
        return Path.home()
    except RuntimeError as e:
        raise ConfigError("Cannot determine the home directory") from e


def _xdg_dir(env_name: str, fallback: str) -> Path:
    raw = os.environ.get(env_name)
    if raw:
        return Path(raw).expanduser()
    return _home() / fallback


def default_config_path() -> Path:
    raw = os.environ.get(CONFIG_ENV)
    if raw:
        return Path(raw).expanduser()
    return _xdg_dir("XDG_CONFIG_HOME", ".config") / "todopane" / "config.yml"


def default_data_dir() -> Path:
    return _xdg_dir("XDG_DATA_HOME", ".local/share") / "todopane"


def load_config_file(path: Path) -> dict[str, Any]:
    """Parse the YAML config file. A missing file is an empty config."""
    if not path.exists():
        return {}
    try:
        cfg = yaml.safe_load(path.read_text())
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if cfg is None:
        return {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"Invalid config file {path} (expected a mapping)")
    return cfg


def _section(cfg: dict[str, Any], name: str) -> dict[str, Any]:
    value = cfg.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigError(f"Invalid config: '{name}' must be a mapping")
    return value


def _list_path(env_name: str, configured: Any, default_name: str) -> Path:
    raw = os.environ.get(env_name)
    if raw:
        return Path(raw).expanduser()
    if configured is not None:
        if not isinstance(configured, str) or not configured.strip():
            raise ConfigError(f"Invalid list path: {configured!r}")
        return Path(configured).expanduser()
    return default_data_dir() / default_name


def load_settings(config_path: Optional[Path] = None) -> Settings:
    path = config_path if config_path is not None else default_config_path()
    if config_path is not None and not path.exists():
        raise ConfigError(f"Config file not found: {path}")
    cfg = load_config_file(path)

    lists = _section(cfg, "lists")
    layout = _section(cfg, "layout")
    keys = _section(cfg, "keys")

    pending = _list_path(PENDING_ENV, lists.get("pending"), PENDING_FILENAME)
    completed = _list_path(COMPLETED_ENV, lists.get("completed"), COMPLETED_FILENAME)

    max_width = layout.get("single_pane_max_width", SINGLE_PANE_MAX_WIDTH)
    if isinstance(max_width, bool) or not isinstance(max_width, int) or max_width < 0:
        raise ConfigError("Invalid config: layout.single_pane_max_width must be a non-negative integer")

    settings = Settings(
        pending_path=pending,
        completed_path=completed,
        single_pane_max_width=max_width,
        key_overrides={str(k): v for k, v in keys.items()},
    )

    try:
        settings.keymap()
    except ValueError as e:
        raise ConfigError(f"Invalid config: {e}") from e

    return settings
