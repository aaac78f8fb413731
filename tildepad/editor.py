"""Main editor controller: screen layout, prompts and the event loop."""

import logging
import os
import select
import signal
import sys
import termios
from enum import Enum
from typing import Optional

from .commands import (Command, CommandRegistry, Dismiss, Edit, InsertNewline, Move, Quit,
                       Resize, Save, Search)
from .components import CommandBar, MessageBar, StatusBar
from .config import EditorConfig
from .constants import EditorConstants
from .keyboard import KeyboardHandler
from .storage import StorageError
from .terminal import Position, Size, TerminalInterface
from .view import View

logger = logging.getLogger(__name__)


class PromptType(Enum):
    NONE = "none"
    SEARCH = "search"
    SAVE = "save"


class Editor:
    """Owns the view and the bars and routes commands between them.

    The bottom row shows the command bar while a prompt is open and the
    message bar otherwise. The status bar sits right above it and the view
    fills the rest.
    """

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 config: Optional[EditorConfig] = None):
        self.config = config or EditorConfig()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.command_registry = CommandRegistry()
        self.view = View(self.terminal, page_moves_update_column=self.config.page_moves_update_column)
        self.status_bar = StatusBar(self.terminal)
        self.message_bar = MessageBar(self.terminal)
        self.command_bar = CommandBar(self.terminal)
        self.prompt_type = PromptType.NONE
        self.terminal_size = Size()
        self.quit_times = 0
        self.should_exit = False
        self._resize_pipe_r: Optional[int] = None
        self._resize_pipe_w: Optional[int] = None

        self.handle_resize_command(self.terminal.size())
        self.update_message(EditorConstants.HELP_MESSAGE)
        self.refresh_status()

    def load_file(self, path: str) -> None:
        try:
            self.view.load_file(path)
        except StorageError:
            self.update_message(EditorConstants.OPEN_FAILED_MESSAGE.format(path))
        self.refresh_status()

    # Event loop

    def _handle_resize(self, signum, frame):
        """Handle terminal resize signal."""
        del signum, frame  # Unused
        # Write to pipe to wake up select()
        os.write(self._resize_pipe_w, EditorConstants.RESIZE_PIPE_MARKER)

    def run(self):
        """Run the main editor loop until the user quits."""
        self._resize_pipe_r, self._resize_pipe_w = os.pipe()
        self.terminal.setup()
        original_winch_handler = signal.signal(signal.SIGWINCH, self._handle_resize)

        try:
            with self.terminal.term.cbreak():
                old_settings = None
                try:
                    old_settings = termios.tcgetattr(sys.stdin)
                    new_settings = list(old_settings)
                    # Let Ctrl-S and Ctrl-Q through instead of flow control
                    new_settings[0] &= ~(termios.IXON | termios.IXOFF)
                    termios.tcsetattr(sys.stdin, termios.TCSANOW, new_settings)
                except (termios.error, OSError) as e:
                    logger.warning(f"Could not disable flow control: {e}")
                    old_settings = None

                try:
                    self._loop()
                finally:
                    if old_settings is not None:
                        termios.tcsetattr(sys.stdin, termios.TCSANOW, old_settings)
        except KeyboardInterrupt:
            pass
        finally:
            signal.signal(signal.SIGWINCH, original_winch_handler)
            os.close(self._resize_pipe_r)
            os.close(self._resize_pipe_w)
            self._resize_pipe_r = self._resize_pipe_w = None
            self.terminal.cleanup()

    def _loop(self):
        while True:
            self.refresh_screen()
            if self.should_exit:
                break

            ready, _, _ = select.select([0, self._resize_pipe_r], [], [])
            if self._resize_pipe_r in ready:
                os.read(self._resize_pipe_r, 1024)
                self.process_command(Resize(self.terminal.size()))
            elif 0 in ready:
                key_event = self.keyboard.get_key_event(timeout=0)
                if key_event is not None:
                    command = self.command_registry.get_command(key_event)
                    if command is not None:
                        self.process_command(command)
            self.refresh_status()

    # Screen

    def refresh_screen(self) -> None:
        height, width = self.terminal_size.height, self.terminal_size.width
        if height == 0 or width == 0:
            return
        bottom_bar_row = height - 1
        self.terminal.hide_caret()
        if self.in_prompt():
            self.command_bar.render(bottom_bar_row)
        else:
            self.message_bar.render(bottom_bar_row)
        if height > 1:
            self.status_bar.render(height - 2)
        if height > 2:
            self.view.render(0)

        if self.in_prompt():
            caret = Position(bottom_bar_row, self.command_bar.caret_position_col())
        else:
            caret = self.view.caret_position()
        self.terminal.move_caret_to(caret)
        self.terminal.show_caret()
        self.terminal.execute()

    def refresh_status(self) -> None:
        self.status_bar.update_status(self.view.get_status())

    def update_message(self, message: str) -> None:
        self.message_bar.update_message(message)

    def in_prompt(self) -> bool:
        return self.prompt_type is not PromptType.NONE

    def set_prompt(self, prompt_type: PromptType) -> None:
        if prompt_type is PromptType.NONE:
            self.message_bar.set_needs_redraw(True)
        elif prompt_type is PromptType.SAVE:
            self.command_bar.set_prompt(EditorConstants.SAVE_PROMPT)
        elif prompt_type is PromptType.SEARCH:
            self.command_bar.set_prompt(EditorConstants.SEARCH_PROMPT)
            self.view.enter_search()
        self.command_bar.clear_value()
        self.prompt_type = prompt_type

    # Commands

    def process_command(self, command: Command) -> None:
        if isinstance(command, Resize):
            self.handle_resize_command(command.size)
        elif self.prompt_type is PromptType.SEARCH:
            self._process_command_during_search(command)
        elif self.prompt_type is PromptType.SAVE:
            self._process_command_during_save(command)
        else:
            self._process_command_no_prompt(command)

    def _process_command_no_prompt(self, command: Command) -> None:
        if isinstance(command, Quit):
            self.handle_quit_command()
            return
        self.reset_quit_times()

        if isinstance(command, Save):
            self.handle_save_command()
        elif isinstance(command, Search):
            self.set_prompt(PromptType.SEARCH)
        elif isinstance(command, Edit):
            self.view.handle_edit_command(command)
        elif isinstance(command, Move):
            self.view.handle_move_command(command)

    def _process_command_during_save(self, command: Command) -> None:
        if isinstance(command, Dismiss):
            self.set_prompt(PromptType.NONE)
            self.update_message(EditorConstants.SAVE_ABORTED_MESSAGE)
        elif isinstance(command, InsertNewline):
            path = self.command_bar.value
            self.save_file(path)
            self.set_prompt(PromptType.NONE)
        elif isinstance(command, Edit):
            self.command_bar.handle_edit_command(command)
        elif isinstance(command, Move):
            self.command_bar.handle_move_command(command)

    def _process_command_during_search(self, command: Command) -> None:
        if isinstance(command, Dismiss):
            self.set_prompt(PromptType.NONE)
            self.view.dismiss_search()
        elif isinstance(command, InsertNewline):
            self.set_prompt(PromptType.NONE)
            self.view.exit_search()
        elif isinstance(command, Edit):
            self.command_bar.handle_edit_command(command)
            self.view.search(self.command_bar.value)
        elif command is Move.UP:
            self.view.prev_search_result()
        elif command is Move.DOWN:
            self.view.next_search_result()
        elif isinstance(command, Move):
            self.command_bar.handle_move_command(command)

    def handle_save_command(self) -> None:
        if self.view.is_file_loaded:
            self.save_file()
        else:
            self.set_prompt(PromptType.SAVE)

    def save_file(self, path: Optional[str] = None) -> None:
        try:
            if path is not None:
                self.view.save_as(path)
            else:
                self.view.save_file()
        except StorageError:
            self.update_message(EditorConstants.SAVE_FAILED_MESSAGE)
        else:
            self.update_message(EditorConstants.SAVED_MESSAGE)

    def handle_quit_command(self) -> None:
        quit_times = self.config.quit_times
        if not self.view.document.is_dirty or self.quit_times + 1 >= quit_times:
            self.should_exit = True
            return
        self.quit_times += 1
        self.update_message(EditorConstants.QUIT_WARNING_MESSAGE.format(quit_times - self.quit_times))

    def reset_quit_times(self) -> None:
        if self.quit_times > 0:
            self.quit_times = 0
            self.update_message("")

    def handle_resize_command(self, size: Size) -> None:
        self.terminal_size = size
        self.view.resize(Size(height=max(0, size.height - 2), width=size.width))
        bar_size = Size(height=1, width=size.width)
        self.message_bar.resize(bar_size)
        self.status_bar.resize(bar_size)
        self.command_bar.resize(bar_size)
