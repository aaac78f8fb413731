"""Editor commands and the key bindings that produce them.

Commands are plain values. The editor decides what each one means in its
current prompt state, so the same Enter key inserts a newline in the text,
commits a search, or confirms a file name.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple, Union

from .keyboard import KeyEvent, KeyType
from .terminal import Size


class Move(Enum):
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    START_OF_LINE = "start_of_line"
    END_OF_LINE = "end_of_line"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


class Edit:
    """Base class for commands that change text."""


@dataclass(frozen=True)
class Insert(Edit):
    character: str


@dataclass(frozen=True)
class InsertNewline(Edit):
    pass


@dataclass(frozen=True)
class Delete(Edit):
    pass


@dataclass(frozen=True)
class DeleteBackward(Edit):
    pass


class System:
    """Base class for commands handled by the editor itself."""


@dataclass(frozen=True)
class Save(System):
    pass


@dataclass(frozen=True)
class Search(System):
    pass


@dataclass(frozen=True)
class Quit(System):
    pass


@dataclass(frozen=True)
class Dismiss(System):
    pass


@dataclass(frozen=True)
class Resize(System):
    size: Size


Command = Union[Move, Edit, System]


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], Command] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        # Movement
        self.register((KeyType.SPECIAL, 'left'), Move.LEFT)
        self.register((KeyType.SPECIAL, 'right'), Move.RIGHT)
        self.register((KeyType.SPECIAL, 'up'), Move.UP)
        self.register((KeyType.SPECIAL, 'down'), Move.DOWN)
        self.register((KeyType.SPECIAL, 'page_up'), Move.PAGE_UP)
        self.register((KeyType.SPECIAL, 'page_down'), Move.PAGE_DOWN)
        self.register((KeyType.SPECIAL, 'home'), Move.START_OF_LINE)
        self.register((KeyType.SPECIAL, 'end'), Move.END_OF_LINE)
        self.register((KeyType.CTRL, 'a'), Move.START_OF_LINE)
        self.register((KeyType.CTRL, 'e'), Move.END_OF_LINE)

        # Editing
        self.register((KeyType.SPECIAL, 'enter'), InsertNewline())
        self.register((KeyType.SPECIAL, 'backspace'), DeleteBackward())
        self.register((KeyType.SPECIAL, 'delete'), Delete())
        self.register((KeyType.CTRL, 'd'), Delete())

        # System
        self.register((KeyType.CTRL, 's'), Save())
        self.register((KeyType.CTRL, 'q'), Quit())
        self.register((KeyType.CTRL, 'f'), Search())
        self.register((KeyType.SPECIAL, 'escape'), Dismiss())
        self.register((KeyType.CTRL, 'g'), Dismiss())

    def register(self, key: Tuple[KeyType, str], command: Command):
        self._commands[key] = command

    def get_command(self, key_event: KeyEvent) -> Optional[Command]:
        """Translate a key event, or return None if it has no binding.

        Regular printable keys that are not bound become an Insert.
        """
        command = self._commands.get((key_event.key_type, key_event.value))
        if command is not None:
            return command
        if key_event.key_type == KeyType.REGULAR and len(key_event.value) == 1:
            if key_event.value == '\t' or key_event.value.isprintable():
                return Insert(key_event.value)
        return None
