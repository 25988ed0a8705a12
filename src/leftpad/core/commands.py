"""
Command management and processing for the leftpad shell.

This module handles command recognition and parsing independent of the
user interface. Input that is not a command is text to be padded.
"""
import re
from typing import Callable, Dict, List, Optional

from leftpad.config import COMMAND_ESCAPE_PREFIX, SPACE_ALIAS


class Command:
    """Base class for all commands."""

    def __init__(self, text: str, args: List[str]):
        self.text = text
        self.args = args

    def __str__(self) -> str:
        return f"{self.__class__.__name__}({self.args})"


class SetWidthCommand(Command):
    """Command to set the target width."""

    def __init__(self, text: str, args: List[str]):
        super().__init__(text, args)

        self.width = None

        if len(args) >= 2:
            try:
                self.width = int(args[1])
            except ValueError:
                pass


class SetCharCommand(Command):
    """Command to set the fill character."""

    def __init__(self, text: str, args: List[str]):
        super().__init__(text, args)

        self.pad_char = None

        # Take the argument from the original text to keep its case
        parts = text.strip().split(None, 1)
        if len(parts) == 2:
            value = parts[1].strip()
            self.pad_char = " " if value.lower() == SPACE_ALIAS else value


class ShowCommand(Command):
    """Command to display the current settings."""
    pass


class HelpCommand(Command):
    """Command to show help information."""
    pass


class ExitCommand(Command):
    """Command to exit the shell."""
    pass


class CommandManager:
    """Handles command parsing and recognition."""

    def __init__(self):
        """Initialize the command manager."""
        self.command_patterns: Dict[str, Callable[[str, List[str]], Command]] = {
            r'^(w|width)\s+\S+$': SetWidthCommand,
            r'^(c|char)\s+\S+$': SetCharCommand,
            r'^(show|settings)$': ShowCommand,
            r'^(help|h|\?)$': HelpCommand,
            r'^(exit|quit|q)$': ExitCommand,
        }

    def parse_input(self, text: str) -> Optional[Command]:
        """Parse input to determine if it's a command.

        Args:
            text: Input text

        Returns:
            Command object if input is a command, None otherwise
        """
        if not text or text.startswith(COMMAND_ESCAPE_PREFIX):
            return None

        text_lower = text.lower().strip()

        for pattern, command_class in self.command_patterns.items():
            if re.match(pattern, text_lower):
                return command_class(text, text_lower.split())

        return None

    @staticmethod
    def unescape(text: str) -> str:
        """Remove the escape prefix that marks a line as literal text."""
        if text.startswith(COMMAND_ESCAPE_PREFIX):
            return text[len(COMMAND_ESCAPE_PREFIX):]
        return text
