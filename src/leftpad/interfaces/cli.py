"""
Copyright (c) 2025 Jakob Bolliger

This file is part of leftpad.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

Interactive shell for the leftpad application.

This module connects a PadSession with a prompt_toolkit prompt: each line
typed is either a shell command or text that gets padded and echoed.
"""
from typing import Callable

from prompt_toolkit import PromptSession
from prompt_toolkit.shortcuts import CompleteStyle

from leftpad.config import PREVIEW_LENGTH, SHELL_PROMPT
from leftpad.core.completer import CommandCompleter
from leftpad.core.exceptions import LeftPadError
from leftpad.interfaces.command_handlers import CommandHandlerRegistry
from leftpad.ui.resources import BANNER, Emojis, format_error_message
from leftpad.utils.logging_config import get_logger


class CliInterface:
    """Interactive shell around a padding session."""

    def __init__(self, session, command_manager, output: Callable[[str], None] = print):
        """Initialize the shell.

        Args:
            session: PadSession holding width and fill character
            command_manager: Command manager used to recognise commands
            output: Callable receiving every line the shell displays
        """
        self.session = session
        self.command_manager = command_manager
        self.output = output
        self.running = True

        self.logger = get_logger(__name__)
        self.command_registry = CommandHandlerRegistry()

    def emit(self, text: str):
        """Display a line of output."""
        self.output(text)

    def handle_input(self, text: str) -> bool:
        """Handle one line of shell input.

        Args:
            text: The raw line entered by the user

        Returns:
            False once the shell should stop, True otherwise
        """
        command = self.command_manager.parse_input(text)
        if command:
            self._process_command(command)
            return self.running

        literal = self.command_manager.unescape(text)
        try:
            padded = self.session.pad(literal)
        except LeftPadError as e:
            self.logger.error(f"Padding failed: {e}")
            self.emit(format_error_message(str(e)))
            return self.running

        preview = literal[:PREVIEW_LENGTH] + ('...' if len(literal) > PREVIEW_LENGTH else '')
        self.logger.debug(f"Padded '{preview}' to {len(padded)} characters")
        self.emit(padded)
        return self.running

    def _process_command(self, command):
        """Run a parsed command and show its error, if any."""
        result = self.command_registry.dispatch(command, self)
        if not result.success:
            self.emit(format_error_message(result.message))

    def interactive_session(self):
        """Run an interactive shell until the user exits."""
        prompt_session = PromptSession(
            completer=CommandCompleter(),
            complete_style=CompleteStyle.MULTI_COLUMN
        )

        self.running = True
        self.logger.info("Interactive session started")
        self.emit(BANNER)

        while self.running:
            try:
                text = prompt_session.prompt(SHELL_PROMPT)
            except (EOFError, KeyboardInterrupt):
                self.emit(f"\n{Emojis.BYE} Goodbye!")
                self.running = False
                break
            self.handle_input(text)

        self.logger.info(f"Interactive session ended after {self.session.padded_count} padded lines")
