"""todopane TUI application.

- Textual owns the terminal: raw input, key decoding, resize events
- All list state lives in EditorSession; the board widget draws it
- Keys go straight to the session; only changes trigger a redraw
- Lists are loaded before the app starts and saved after it exits
"""

from __future__ import annotations

import logging

from textual.app import App, ComposeResult
from textual.css.query import NoMatches

from todopane.config import Settings
from todopane.tui.state import EditorSession
from todopane.tui.views.board import BoardView, BoardWidget


class TodoPaneApp(App):
    # Every key is routed through the board widget.
    BINDINGS = []

    def __init__(self, session: EditorSession, settings: Settings, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.session = session
        self.settings = settings

    def compose(self) -> ComposeResult:
        yield BoardWidget(
            self.session,
            BoardView(self.settings.single_pane_max_width),
            id="board",
        )

    def on_mount(self) -> None:
        log_path = self.settings.log_path
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            logging.basicConfig(
                filename=log_path,
                level=logging.DEBUG,
                format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            )
        except OSError as e:
            logging.basicConfig(level=logging.WARNING)
            logging.warning("Cannot write log file %s: %s", log_path, e)

        logging.info(
            "Session started: %d pending, %d completed",
            len(self.session.pending),
            len(self.session.completed),
        )

        try:
            self.query_one("#board", BoardWidget).focus()
        except NoMatches:
            pass

    def on_board_widget_key_handled(self, message: BoardWidget.KeyHandled) -> None:
        if message.quit_requested:
            logging.info("Quit requested")
            self.exit(return_code=0)
