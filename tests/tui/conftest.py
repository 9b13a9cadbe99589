"""Shared fixtures for TUI tests.

Everything under tests/tui exercises pure state and drawing: no terminal,
no files. Sessions are built directly from item lists.
"""

import pytest

from todopane.tui.state import EditorSession


@pytest.fixture
def make_session():
    def _make(pending=None, completed=None) -> EditorSession:
        return EditorSession.from_items(list(pending or []), list(completed or []))

    return _make
