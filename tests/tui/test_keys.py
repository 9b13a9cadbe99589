"""Tests for key bindings."""

import pytest

from todopane.tui.keys import DEFAULT_BINDINGS, Command, Key, Keymap


class TestDefaultKeymap:
    def test_every_command_has_a_binding(self):
        assert set(DEFAULT_BINDINGS) == set(Command)

    @pytest.mark.parametrize(
        "key, command",
        [
            (Key("q", "q"), Command.QUIT),
            (Key("enter"), Command.CONFIRM),
            (Key("tab"), Command.FOCUS_TOGGLE),
            (Key("up"), Command.MOVE_UP),
            (Key("j", "j"), Command.MOVE_DOWN),
            (Key("shift+up"), Command.DRAG_UP),
            (Key("o", "o"), Command.INSERT_AFTER),
            (Key("O", "O"), Command.INSERT_BEFORE),
        ],
    )
    def test_lookup_by_name(self, key, command):
        assert Keymap().command_for(key) is command

    def test_lookup_falls_back_to_character(self):
        """Terminals may report uppercase letters as shift+<letter>."""
        assert Keymap().command_for(Key("shift+g", "G")) is Command.MOVE_BOTTOM

    def test_unbound_key(self):
        assert Keymap().command_for(Key("f5")) is None
        assert Keymap().command_for(Key("z", "z")) is None


class TestOverrides:
    def test_override_replaces_command_keys(self):
        keymap = Keymap({"quit": ["x", "ctrl+q"]})
        assert keymap.command_for(Key("x", "x")) is Command.QUIT
        assert keymap.command_for(Key("q", "q")) is None
        assert keymap.hint(Command.QUIT) == "x"

    def test_single_string_is_accepted(self):
        keymap = Keymap({"sort": "S"})
        assert keymap.keys_for(Command.SORT) == ("S",)

    def test_unknown_command_is_rejected(self):
        with pytest.raises(ValueError, match="Unknown command"):
            Keymap({"explode": ["x"]})

    def test_key_owned_by_another_command_is_rejected(self):
        with pytest.raises(ValueError, match="bound to both 'quit' and 'sort'"):
            Keymap({"sort": ["q"]})

    def test_key_freed_by_override_can_be_reused(self):
        keymap = Keymap({"quit": ["x"], "sort": ["q"]})
        assert keymap.command_for(Key("q", "q")) is Command.SORT
        assert keymap.command_for(Key("x", "x")) is Command.QUIT

    def test_empty_binding_is_rejected(self):
        with pytest.raises(ValueError):
            Keymap({"quit": []})


class TestPrintable:
    def test_letters_and_space_are_printable(self):
        assert Key("a", "a").printable == "a"
        assert Key("space", " ").printable == " "

    def test_control_keys_are_not(self):
        assert Key("tab", "\t").printable is None
        assert Key("up").printable is None
        assert Key("enter", "\r").printable is None
