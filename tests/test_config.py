"""Tests for settings resolution."""

from pathlib import Path

import pytest

from todopane.config import ConfigError, load_settings
from todopane.tui.keys import Command, Key


@pytest.fixture
def clean_env(tmp_path, monkeypatch):
    """No list env vars; XDG dirs inside tmp_path."""
    monkeypatch.delenv("TODO_LIST", raising=False)
    monkeypatch.delenv("TODO_DONE_LIST", raising=False)
    monkeypatch.delenv("TODOPANE_CONFIG", raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    return tmp_path


def write_config(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)
    return path


def test_defaults_live_in_data_dir(clean_env):
    settings = load_settings()
    assert settings.pending_path == clean_env / "data" / "todopane" / "todo.txt"
    assert settings.completed_path == clean_env / "data" / "todopane" / "done.txt"
    assert settings.single_pane_max_width == 55
    assert settings.log_path == clean_env / "data" / "todopane" / "todopane.log"


def test_config_file_paths(clean_env, monkeypatch):
    monkeypatch.setenv("HOME", str(clean_env))
    write_config(
        clean_env / "config" / "todopane" / "config.yml",
        "lists:\n  pending: ~/mine.txt\n  completed: /tmp/elsewhere/done.txt\n",
    )
    settings = load_settings()
    assert settings.pending_path == clean_env / "mine.txt"
    assert settings.completed_path == Path("/tmp/elsewhere/done.txt")


def test_environment_wins_over_config(clean_env, monkeypatch):
    cfg = write_config(clean_env / "c.yml", "lists:\n  pending: /from/config.txt\n")
    monkeypatch.setenv("TODO_LIST", str(clean_env / "env-todo.txt"))
    monkeypatch.setenv("TODO_DONE_LIST", str(clean_env / "env-done.txt"))
    settings = load_settings(cfg)
    assert settings.pending_path == clean_env / "env-todo.txt"
    assert settings.completed_path == clean_env / "env-done.txt"


def test_config_path_from_environment(clean_env, monkeypatch):
    cfg = write_config(clean_env / "custom.yml", "layout:\n  single_pane_max_width: 70\n")
    monkeypatch.setenv("TODOPANE_CONFIG", str(cfg))
    assert load_settings().single_pane_max_width == 70


def test_key_overrides(clean_env):
    cfg = write_config(clean_env / "c.yml", "keys:\n  quit: [x]\n  sort: S\n")
    keymap = load_settings(cfg).keymap()
    assert keymap.command_for(Key("x", "x")) is Command.QUIT
    assert keymap.command_for(Key("S", "S")) is Command.SORT


def test_empty_config_file_means_defaults(clean_env):
    cfg = write_config(clean_env / "c.yml", "")
    assert load_settings(cfg).single_pane_max_width == 55


@pytest.mark.parametrize(
    "text, message",
    [
        ("lists: [unclosed", "Cannot read config"),
        ("- just\n- a list\n", "expected a mapping"),
        ("lists: nope\n", "'lists' must be a mapping"),
        ("lists:\n  pending: 12\n", "Invalid list path"),
        ("layout:\n  single_pane_max_width: wide\n", "single_pane_max_width"),
        ("keys:\n  explode: [x]\n", "Unknown command"),
        ("keys:\n  sort: [q]\n", "bound to both"),
    ],
)
def test_invalid_config_is_fatal(clean_env, text, message):
    cfg = write_config(clean_env / "c.yml", text)
    with pytest.raises(ConfigError, match=message):
        load_settings(cfg)


def test_explicit_missing_config_is_fatal(clean_env):
    with pytest.raises(ConfigError, match="not found"):
        load_settings(clean_env / "missing.yml")
