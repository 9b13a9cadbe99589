"""
Editor session state and actions.

This module holds the modal state machine behind the TUI: the two list
viewports, which one has focus, the input mode and the edit buffer.

Architecture:
- Actions are frozen dataclasses representing state transitions
- reduce(session, action) applies one action and reports whether anything
  changed (unchanged sessions are not redrawn)
- action_for_key(session, key) turns a key event into an action for the
  current mode
- EditorSession.handle_key(key) is the entry point used by the app
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, Optional, Union

from todopane.tui.keys import Command, Key, Keymap
from todopane.tui.viewport import ListViewport, PaneKind


# =============================================================================
# Data Types
# =============================================================================

Destination = Literal["new_item", "new_item_before", "new_item_after", "edit_item"]


@dataclass(frozen=True)
class Normal:
    """Keys are navigation and list commands."""
    pass


@dataclass(frozen=True)
class Insert:
    """Keys edit the buffer; Enter commits it to `destination`."""
    destination: Destination


Mode = Union[Normal, Insert]


@dataclass
class EditBuffer:
    """Single-line text being typed, with a caret in [0, len(text)]."""
    text: str = ""
    caret: int = 0

    def insert(self, char: str) -> None:
        self.text = self.text[: self.caret] + char + self.text[self.caret :]
        self.caret += len(char)

    def backspace(self) -> bool:
        if self.caret == 0 or not self.text:
            return False
        self.text = self.text[: self.caret - 1] + self.text[self.caret :]
        self.caret -= 1
        return True

    def left(self) -> bool:
        if self.caret == 0:
            return False
        self.caret -= 1
        return True

    def right(self) -> bool:
        if self.caret >= len(self.text):
            return False
        self.caret += 1
        return True

    def take(self) -> str:
        """Return the text and leave the buffer empty."""
        text = self.text
        self.clear()
        return text

    def clear(self) -> None:
        self.text = ""
        self.caret = 0


# =============================================================================
# Actions
# =============================================================================

@dataclass(frozen=True)
class Quit:
    """End the session; the app saves both lists."""
    pass


@dataclass(frozen=True)
class Confirm:
    """Move the current item to the other list."""
    pass


@dataclass(frozen=True)
class DeleteCompleted:
    """Drop the current completed item for good."""
    pass


@dataclass(frozen=True)
class ToggleFocus:
    pass


@dataclass(frozen=True)
class MoveUp:
    pass


@dataclass(frozen=True)
class MoveDown:
    pass


@dataclass(frozen=True)
class MoveToTop:
    pass


@dataclass(frozen=True)
class MoveToBottom:
    pass


@dataclass(frozen=True)
class DragUp:
    pass


@dataclass(frozen=True)
class DragDown:
    pass


@dataclass(frozen=True)
class Sort:
    pass


@dataclass(frozen=True)
class StartInsert:
    """Open an empty buffer for a new item."""
    destination: Destination


@dataclass(frozen=True)
class StartEdit:
    """Open the buffer seeded with the focused list's current item."""
    pass


@dataclass(frozen=True)
class CancelInsert:
    pass


@dataclass(frozen=True)
class CommitInsert:
    pass


@dataclass(frozen=True)
class CaretLeft:
    pass


@dataclass(frozen=True)
class CaretRight:
    pass


@dataclass(frozen=True)
class DeleteBackward:
    pass


@dataclass(frozen=True)
class TypeChar:
    char: str


Action = Union[
    Quit,
    Confirm,
    DeleteCompleted,
    ToggleFocus,
    MoveUp,
    MoveDown,
    MoveToTop,
    MoveToBottom,
    DragUp,
    DragDown,
    Sort,
    StartInsert,
    StartEdit,
    CancelInsert,
    CommitInsert,
    CaretLeft,
    CaretRight,
    DeleteBackward,
    TypeChar,
]


NORMAL_ACTIONS: dict[Command, Action] = {
    Command.QUIT: Quit(),
    Command.CONFIRM: Confirm(),
    Command.DELETE: DeleteCompleted(),
    Command.FOCUS_TOGGLE: ToggleFocus(),
    Command.INSERT_NEW: StartInsert("new_item"),
    Command.INSERT_BEFORE: StartInsert("new_item_before"),
    Command.INSERT_AFTER: StartInsert("new_item_after"),
    Command.EDIT: StartEdit(),
    Command.MOVE_UP: MoveUp(),
    Command.MOVE_DOWN: MoveDown(),
    Command.MOVE_TOP: MoveToTop(),
    Command.MOVE_BOTTOM: MoveToBottom(),
    Command.DRAG_UP: DragUp(),
    Command.DRAG_DOWN: DragDown(),
    Command.SORT: Sort(),
}

INSERT_KEYS: dict[str, Action] = {
    "escape": CancelInsert(),
    "enter": CommitInsert(),
    "left": CaretLeft(),
    "right": CaretRight(),
    "backspace": DeleteBackward(),
}


# =============================================================================
# Reducer
# =============================================================================

def _commit(session: "EditorSession", destination: Destination) -> None:
    text = session.buffer.take()
    session.mode = Normal()
    if not text.strip():
        return

    pending = session.pending
    match destination:
        case "new_item":
            pending.push(text)
        case "new_item_before":
            pending.insert_before(text)
        case "new_item_after":
            pending.insert_after(text)
        case "edit_item":
            session.focused.set_current(text)


def reduce(session: "EditorSession", action: Action) -> bool:
    """
    Apply an action to mutate the session.

    Returns True when the session changed and should be redrawn. Actions
    that do not apply (empty list, wrong mode, caret at a boundary) are
    no-ops and return False.
    """
    mode = session.mode
    focused = session.focused

    if isinstance(mode, Insert):
        match action:
            case CancelInsert():
                session.buffer.clear()
                session.mode = Normal()
                return True
            case CommitInsert():
                _commit(session, mode.destination)
                return True
            case CaretLeft():
                return session.buffer.left()
            case CaretRight():
                return session.buffer.right()
            case DeleteBackward():
                return session.buffer.backspace()
            case TypeChar(char=char):
                session.buffer.insert(char)
                return True
        return False

    match action:
        case Quit():
            session.quit_requested = True
            return True

        case Confirm():
            item = focused.remove()
            if item is None:
                return False
            session.viewport(session.focus.other).push(item)
            return True

        case DeleteCompleted():
            if session.focus is not PaneKind.COMPLETED:
                return False
            return focused.remove() is not None

        case ToggleFocus():
            session.focus = session.focus.other
            return True

        case MoveUp():
            return focused.move_up()

        case MoveDown():
            return focused.move_down()

        case MoveToTop():
            return focused.move_to_top()

        case MoveToBottom():
            return focused.move_to_bottom()

        case DragUp():
            return focused.shift_up()

        case DragDown():
            return focused.shift_down()

        case Sort():
            return focused.sort()

        case StartInsert(destination=destination):
            if destination != "new_item" and session.focus is not PaneKind.PENDING:
                return False
            session.buffer.clear()
            session.mode = Insert(destination)
            return True

        case StartEdit():
            current = focused.clone_current()
            if current is None:
                return False
            session.buffer = EditBuffer(text=current, caret=len(current))
            session.mode = Insert("edit_item")
            return True

    return False


def action_for_key(session: "EditorSession", key: Key) -> Optional[Action]:
    """Translate a key into an action for the session's current mode."""
    if isinstance(session.mode, Insert):
        action = INSERT_KEYS.get(key.name)
        if action is not None:
            return action
        char = key.printable
        if char is not None:
            return TypeChar(char)
        return None

    command = session.keymap.command_for(key)
    if command is None:
        return None
    return NORMAL_ACTIONS[command]


# =============================================================================
# Editor Session
# =============================================================================

@dataclass
class EditorSession:
    """
    Central TUI state: both lists, focus, mode and edit buffer.

    State changes happen via dispatch(action) or handle_key(key), which
    go through reduce.
    """

    pending: ListViewport = field(default_factory=lambda: ListViewport(PaneKind.PENDING))
    completed: ListViewport = field(default_factory=lambda: ListViewport(PaneKind.COMPLETED))
    focus: PaneKind = PaneKind.PENDING
    mode: Mode = field(default_factory=Normal)
    buffer: EditBuffer = field(default_factory=EditBuffer)
    keymap: Keymap = field(default_factory=Keymap)
    quit_requested: bool = False

    @classmethod
    def from_items(
        cls,
        pending: list[str],
        completed: list[str],
        keymap: Optional[Keymap] = None,
    ) -> "EditorSession":
        return cls(
            pending=ListViewport(PaneKind.PENDING, pending),
            completed=ListViewport(PaneKind.COMPLETED, completed),
            keymap=keymap or Keymap(),
        )

    # -------------------------------------------------------------------------
    # Dispatch
    # -------------------------------------------------------------------------

    def dispatch(self, action: Action) -> bool:
        """Apply an action; True when a redraw is needed."""
        return reduce(self, action)

    def handle_key(self, key: Key) -> bool:
        """Route a key event; unknown keys change nothing and return False."""
        action = action_for_key(self, key)
        if action is None:
            return False
        return self.dispatch(action)

    # -------------------------------------------------------------------------
    # Computed Properties
    # -------------------------------------------------------------------------

    def viewport(self, kind: PaneKind) -> ListViewport:
        if kind is PaneKind.PENDING:
            return self.pending
        return self.completed

    @property
    def focused(self) -> ListViewport:
        return self.viewport(self.focus)

    @property
    def inserting(self) -> bool:
        return isinstance(self.mode, Insert)
