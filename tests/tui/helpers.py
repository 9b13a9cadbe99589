"""Key helpers shared by the TUI tests."""

from todopane.tui.keys import Key
from todopane.tui.state import EditorSession


def key(name: str) -> Key:
    """Key event as Textual would report it for a single keystroke."""
    if name == "space":
        return Key("space", " ")
    if len(name) == 1:
        return Key(name, name)
    return Key(name, None)


def type_text(session: EditorSession, text: str) -> None:
    for char in text:
        session.handle_key(key("space" if char == " " else char))
