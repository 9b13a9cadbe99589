"""Abstract key events and Normal-mode key bindings.

Key names follow Textual's naming ("up", "enter", "shift+up", "G", ...).
A binding matches a key when it equals the key name or its character,
so "G" matches whether the terminal reports "G" or "shift+g".
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping, NamedTuple, Optional, Sequence


class Key(NamedTuple):
    name: str
    character: Optional[str] = None

    @property
    def printable(self) -> Optional[str]:
        """The character to insert for this key, if it is printable text."""
        char = self.character
        if char is None or len(char) != 1 or not char.isprintable():
            return None
        return char


class Command(str, Enum):
    QUIT = "quit"
    CONFIRM = "confirm"
    DELETE = "delete"
    FOCUS_TOGGLE = "focus_toggle"
    INSERT_NEW = "insert_new"
    INSERT_BEFORE = "insert_before"
    INSERT_AFTER = "insert_after"
    EDIT = "edit"
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_TOP = "move_top"
    MOVE_BOTTOM = "move_bottom"
    DRAG_UP = "drag_up"
    DRAG_DOWN = "drag_down"
    SORT = "sort"


DEFAULT_BINDINGS: dict[Command, tuple[str, ...]] = {
    Command.QUIT: ("q",),
    Command.CONFIRM: ("enter", "space"),
    Command.DELETE: ("d", "delete"),
    Command.FOCUS_TOGGLE: ("tab", "t"),
    Command.INSERT_NEW: ("n", "a"),
    Command.INSERT_BEFORE: ("O",),
    Command.INSERT_AFTER: ("o",),
    Command.EDIT: ("e", "i"),
    Command.MOVE_UP: ("up", "k"),
    Command.MOVE_DOWN: ("down", "j"),
    Command.MOVE_TOP: ("home", "g"),
    Command.MOVE_BOTTOM: ("end", "G"),
    Command.DRAG_UP: ("shift+up", "K"),
    Command.DRAG_DOWN: ("shift+down", "J"),
    Command.SORT: ("s",),
}


class Keymap:
    """Normal-mode bindings: defaults, optionally overridden per command."""

    def __init__(self, overrides: Optional[Mapping[str, Sequence[str]]] = None) -> None:
        self._bindings: dict[Command, tuple[str, ...]] = dict(DEFAULT_BINDINGS)
        for name, keys in (overrides or {}).items():
            try:
                command = Command(name)
            except ValueError:
                raise ValueError(f"Unknown command in key bindings: {name!r}") from None
            if isinstance(keys, str):
                keys = [keys]
            if not keys or not all(isinstance(k, str) and k for k in keys):
                raise ValueError(f"Bindings for {name!r} must be a non-empty list of keys")
            self._bindings[command] = tuple(keys)

        self._lookup: dict[str, Command] = {}
        for command, keys in self._bindings.items():
            for key in keys:
                owner = self._lookup.setdefault(key, command)
                if owner is not command:
                    raise ValueError(
                        f"Key {key!r} is bound to both {owner.value!r} and {command.value!r}"
                    )

    def command_for(self, key: Key) -> Optional[Command]:
        command = self._lookup.get(key.name)
        if command is None and key.character:
            command = self._lookup.get(key.character)
        return command

    def keys_for(self, command: Command) -> tuple[str, ...]:
        return self._bindings[command]

    def hint(self, command: Command) -> str:
        """Short label for the status row: the first key bound to command."""
        return self._bindings[command][0]
