"""Keyboard input handling using curtsies-style tokens."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """A parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key, e.g. 'a', 'left', 'backspace'
    raw: str  # The token as read from the terminal


SPECIAL_KEYS = frozenset([
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert',
])

_ALIASES = {
    'pageup': 'page_up',
    'pagedown': 'page_down',
    'esc': 'escape',
    'return': 'enter',
}


class KeyboardHandler:
    """Reads keys from the terminal and turns them into KeyEvents."""

    def __init__(self, terminal_interface):
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key name or a raw character into a KeyEvent.

        Args:
            key: A token such as '<LEFT>', '<Ctrl-q>', 'a' or '\\x11'

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_token(key_str)

        if len(key_str) == 1:
            code = ord(key_str)
            if code in (8, 127):
                return KeyEvent(KeyType.SPECIAL, 'backspace', key_str)
            if code == 9:
                return KeyEvent(KeyType.REGULAR, '\t', key_str)
            if code in (10, 13):
                return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
            if 1 <= code <= 26:
                return KeyEvent(KeyType.CTRL, chr(ord('a') + code - 1), key_str)
            if code == 27:
                return KeyEvent(KeyType.SPECIAL, 'escape', key_str)

        return KeyEvent(KeyType.REGULAR, key_str, key_str)

    def _parse_token(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1].lower().replace('+', '-')
        parts = name.split('-')
        # Keep a literal '-' as the base key, e.g. '<Ctrl-->'
        if name.endswith('-') and len(parts) > 1 and parts[-1] == '':
            parts = parts[:-2] + ['-']
        base = _ALIASES.get(parts[-1], parts[-1])
        mods = set(parts[:-1])
        if 'meta' in mods or 'esc' in mods:
            mods.add('alt')

        if not mods:
            if base in ('space', 'spacebar', 'spc'):
                return KeyEvent(KeyType.REGULAR, ' ', key_str)
            if base == 'tab':
                return KeyEvent(KeyType.REGULAR, '\t', key_str)
        if 'ctrl' in mods and len(base) == 1:
            if base in ('j', 'm'):
                return KeyEvent(KeyType.SPECIAL, 'enter', key_str)
            if base == 'h':
                return KeyEvent(KeyType.SPECIAL, 'backspace', key_str)
            return KeyEvent(KeyType.CTRL, base, key_str)
        if 'alt' in mods and (base in SPECIAL_KEYS or len(base) == 1):
            return KeyEvent(KeyType.ALT, base, key_str)
        return KeyEvent(KeyType.SPECIAL, base, key_str)
