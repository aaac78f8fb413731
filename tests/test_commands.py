"""Tests for key bindings."""

from tildepad.commands import (CommandRegistry, Delete, DeleteBackward, Dismiss, Insert,
                               InsertNewline, Move, Quit, Save, Search)
from tildepad.keyboard import KeyEvent, KeyType


def command_for(key_type, value):
    return CommandRegistry().get_command(KeyEvent(key_type, value, value))


def test_default_bindings():
    assert command_for(KeyType.SPECIAL, 'left') is Move.LEFT
    assert command_for(KeyType.SPECIAL, 'page_down') is Move.PAGE_DOWN
    assert command_for(KeyType.SPECIAL, 'home') is Move.START_OF_LINE
    assert command_for(KeyType.CTRL, 'e') is Move.END_OF_LINE
    assert command_for(KeyType.SPECIAL, 'enter') == InsertNewline()
    assert command_for(KeyType.SPECIAL, 'backspace') == DeleteBackward()
    assert command_for(KeyType.CTRL, 'd') == Delete()
    assert command_for(KeyType.CTRL, 's') == Save()
    assert command_for(KeyType.CTRL, 'q') == Quit()
    assert command_for(KeyType.CTRL, 'f') == Search()
    assert command_for(KeyType.SPECIAL, 'escape') == Dismiss()
    assert command_for(KeyType.CTRL, 'g') == Dismiss()


def test_printable_keys_insert():
    assert command_for(KeyType.REGULAR, 'x') == Insert('x')
    assert command_for(KeyType.REGULAR, '\t') == Insert('\t')
    assert command_for(KeyType.REGULAR, 'ß') == Insert('ß')


def test_unbound_keys_have_no_command():
    assert command_for(KeyType.CTRL, 'z') is None
    assert command_for(KeyType.ALT, 'x') is None
    assert command_for(KeyType.REGULAR, '\x00') is None
    assert command_for(KeyType.SPECIAL, 'insert') is None


def test_register_overrides_binding():
    registry = CommandRegistry()
    registry.register((KeyType.CTRL, 'z'), Quit())
    assert registry.get_command(KeyEvent(KeyType.CTRL, 'z', '\x1a')) == Quit()
