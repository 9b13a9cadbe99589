from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from todopane.tui.canvas import Canvas
from todopane.tui.keys import Command, Key
from todopane.tui.layout import SINGLE_PANE_MAX_WIDTH, pane_regions, status_row
from todopane.tui.state import EditorSession, Insert

INSERT_LABELS = {
    "new_item": "new",
    "new_item_before": "new above",
    "new_item_after": "new below",
    "edit_item": "edit",
}

HINT_COMMANDS = [
    (Command.CONFIRM, "done/undo"),
    (Command.FOCUS_TOGGLE, "switch"),
    (Command.INSERT_NEW, "new"),
    (Command.EDIT, "edit"),
    (Command.DELETE, "delete"),
    (Command.SORT, "sort"),
    (Command.QUIT, "quit"),
]


class BoardView:
    """Draws the whole screen for a session: panes plus the status row."""

    name = "board"

    def __init__(self, single_pane_max_width: int = SINGLE_PANE_MAX_WIDTH) -> None:
        self.single_pane_max_width = single_pane_max_width

    def _hints(self, session: EditorSession) -> str:
        keymap = session.keymap
        return "  ".join(f"{keymap.hint(cmd)}:{label}" for cmd, label in HINT_COMMANDS)

    def _draw_status(self, canvas: Canvas, session: EditorSession) -> None:
        y = status_row(canvas.height)
        mode = session.mode
        if not isinstance(mode, Insert):
            canvas.put(0, y, self._hints(session), "dim")
            return

        prompt = f"{INSERT_LABELS[mode.destination]}> "
        text = session.buffer.text
        caret = session.buffer.caret
        room = max(1, canvas.width - len(prompt))
        # Keep the caret on screen for long buffers.
        start = max(0, caret - room + 1)
        canvas.put(0, y, prompt, "bold")
        canvas.put(len(prompt), y, text[start : start + room])
        canvas.move_cursor(len(prompt) + caret - start, y)

    def render(self, session: EditorSession, width: int, height: int) -> Canvas:
        canvas = Canvas(width, height)
        if width <= 0 or height <= 0:
            return canvas

        regions = pane_regions(width, height, session.focus, self.single_pane_max_width)
        for kind, region in regions:
            if region.height <= 0:
                continue
            focused = kind is session.focus
            cursor = session.viewport(kind).draw(canvas, region, focused=focused)
            if focused:
                canvas.move_cursor(*cursor)

        self._draw_status(canvas, session)
        return canvas


class BoardWidget(Widget, can_focus=True):
    """Full-screen widget painting the board and forwarding keys."""

    DEFAULT_CSS = """
    BoardWidget {
        width: 1fr;
        height: 1fr;
    }
    """

    class KeyHandled(Message):
        """Posted after a key changed the session."""

        def __init__(self, quit_requested: bool) -> None:
            super().__init__()
            self.quit_requested = quit_requested

    def __init__(self, session: EditorSession, view: BoardView, **kwargs) -> None:
        super().__init__(**kwargs)
        self.session = session
        self.board_view = view

    def render(self) -> Text:
        size = self.content_region
        return self.board_view.render(self.session, size.width, size.height).to_text()

    def on_key(self, event: events.Key) -> None:
        event.prevent_default()
        event.stop()
        # Unknown keys leave the screen alone.
        if self.session.handle_key(Key(event.key, event.character)):
            self.refresh()
            self.post_message(self.KeyHandled(self.session.quit_requested))

    def on_resize(self, event: events.Resize) -> None:
        self.refresh()
