"""Loading and saving the session's lists.

Lists are read once before the TUI starts and written back once after it
exits. Storage errors propagate to the caller.
"""

from __future__ import annotations

import logging

from todopane.config import Settings
from todopane.storage import load_list, save_list
from todopane.tui.state import EditorSession


def load_session(settings: Settings) -> EditorSession:
    """Build a fresh session from the two list files."""
    return EditorSession.from_items(
        load_list(settings.pending_path),
        load_list(settings.completed_path),
        keymap=settings.keymap(),
    )


def save_session(session: EditorSession, settings: Settings) -> None:
    """Overwrite both list files with the session's items."""
    save_list(settings.pending_path, session.pending.items)
    save_list(settings.completed_path, session.completed.items)
    logging.info(
        "Saved %d pending and %d completed items",
        len(session.pending),
        len(session.completed),
    )
