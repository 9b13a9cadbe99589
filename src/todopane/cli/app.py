"""Command line entry point for todopane.

  todopane                  interactive two-pane editor
  todopane --add "buy milk" append to the pending list and exit
  todopane --print done     print a list and exit

When stdin or stdout is not a terminal the editor never starts; the
pending list is printed instead.
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer

from todopane.config import ConfigError, Settings, load_settings
from todopane.storage import StorageError, append_item, load_list

app = typer.Typer(add_completion=False, help="Two-pane terminal todo list.")


class ListChoice(str, Enum):
    pending = "pending"
    completed = "completed"
    all = "all"


def _print_list(settings: Settings, which: ListChoice) -> None:
    if which == ListChoice.all:
        for item in load_list(settings.pending_path):
            print(f"[ ] {item}")
        for item in load_list(settings.completed_path):
            print(f"[x] {item}")
        return

    path = settings.pending_path if which == ListChoice.pending else settings.completed_path
    for item in load_list(path):
        print(item)


def _is_interactive() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def _fall_back(settings: Settings, code: int) -> None:
    """Print the untouched pending list and exit without saving."""
    print("The interactive editor failed; printing instead.", file=sys.stderr)
    _print_list(settings, ListChoice.pending)
    sys.exit(code)


def _run_tui(settings: Settings) -> None:
    from todopane.tui.app import TodoPaneApp
    from todopane.tui.persistence import load_session, save_session

    session = load_session(settings)
    tui = TodoPaneApp(session, settings)
    try:
        tui.run()
    except Exception:
        logging.exception("Terminal session failed")
        _fall_back(settings, 1)

    # Textual reports errors raised inside the app through return_code.
    if tui.return_code:
        logging.error("Terminal session ended with code %s", tui.return_code)
        _fall_back(settings, tui.return_code)

    save_session(session, settings)


@app.command()
def main(
    add: Optional[str] = typer.Option(
        None, "--add", "-a", help="Append an item to the pending list and exit."
    ),
    show: Optional[ListChoice] = typer.Option(
        None, "--print", "-p", help="Print a list instead of opening the editor."
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Config file (default: ~/.config/todopane/config.yml)."
    ),
):
    """Edit the pending and completed lists."""
    try:
        settings = load_settings(config)
    except ConfigError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    try:
        if add is not None:
            item = " ".join(add.splitlines()).strip()
            if not item:
                print("Nothing to add.", file=sys.stderr)
                sys.exit(1)
            append_item(settings.pending_path, item)
            print(f"✓ Added: {item}")
            return

        if show is not None:
            _print_list(settings, show)
            return

        if not _is_interactive():
            _print_list(settings, ListChoice.pending)
            return

        _run_tui(settings)
    except StorageError as e:
        logging.error("%s", e)
        print(str(e), file=sys.stderr)
        sys.exit(1)
