"""
Headless runs of the Textual app.

Keys are pressed through Textual's pilot so the full path is covered:
terminal key event, board widget, session, redraw, quit.
"""

import asyncio
from pathlib import Path

from todopane.config import Settings
from todopane.tui.app import TodoPaneApp
from todopane.tui.persistence import load_session, save_session
from todopane.tui.state import EditorSession
from todopane.tui.views.board import BoardWidget


def make_settings(tmp_path: Path, width: int = 55) -> Settings:
    return Settings(
        pending_path=tmp_path / "todo.txt",
        completed_path=tmp_path / "done.txt",
        single_pane_max_width=width,
    )


def test_keys_drive_the_session_and_quit(tmp_path):
    settings = make_settings(tmp_path)
    (tmp_path / "todo.txt").write_text("buy milk\ncall mom\n")
    session = load_session(settings)

    async def run():
        app = TodoPaneApp(session, settings)
        async with app.run_test(size=(80, 24)) as pilot:
            await pilot.pause()
            assert isinstance(app.focused, BoardWidget)

            await pilot.press("enter")
            await pilot.press("n", "t", "e", "a", "enter")
            await pilot.press("q")
            await pilot.pause()
        return app

    app = asyncio.run(run())
    assert app.return_code == 0
    assert session.quit_requested
    assert session.pending.items == ["call mom", "tea"]
    assert session.completed.items == ["buy milk"]


def test_quit_key_is_text_while_inserting(tmp_path):
    settings = make_settings(tmp_path)
    session = load_session(settings)

    async def run():
        app = TodoPaneApp(session, settings)
        async with app.run_test(size=(40, 10)) as pilot:
            await pilot.press("n", "q")
            await pilot.pause()
            assert not session.quit_requested
            assert session.buffer.text == "q"
            await pilot.press("escape", "q")
            await pilot.pause()

    asyncio.run(run())
    assert session.quit_requested
    assert session.pending.items == []


def test_save_after_session(tmp_path):
    settings = make_settings(tmp_path / "nested")
    session = load_session(settings)
    assert session.pending.items == []

    session.pending.push("first")
    session.completed.push("older")
    save_session(session, settings)

    reloaded = load_session(settings)
    assert reloaded.pending.items == ["first"]
    assert reloaded.completed.items == ["older"]


def test_unwritable_log_location_is_reported(tmp_path, caplog):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    settings = make_settings(blocker)
    session = EditorSession.from_items(["a"], [])

    async def run():
        app = TodoPaneApp(session, settings)
        async with app.run_test(size=(40, 10)) as pilot:
            await pilot.pause()
            await pilot.press("q")
            await pilot.pause()
        return app

    app = asyncio.run(run())
    assert app.return_code == 0
    assert "Cannot write log file" in caplog.text
