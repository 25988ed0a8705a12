"""
Configuration command handlers for width and fill character settings.
"""

from leftpad.core.commands import (Command, SetCharCommand, SetWidthCommand,
                                   ShowCommand)
from leftpad.interfaces.command_handlers import CommandHandler, CommandResult
from leftpad.ui.resources import Emojis


class ConfigurationHandler(CommandHandler):
    """Handles configuration commands (width and fill character)."""

    command_types = (SetWidthCommand, SetCharCommand, ShowCommand)

    def handle(self, command: Command, shell) -> CommandResult:
        if isinstance(command, SetWidthCommand):
            if command.width is None:
                return CommandResult.failed(f"Width must be a whole number: '{command.text.strip()}'")
            return self._apply(shell.session.set_width(command.width), "Width", shell)
        if isinstance(command, SetCharCommand):
            return self._apply(shell.session.set_pad_char(command.pad_char), "Fill character", shell)
        return self._show(shell)

    def _apply(self, result, label: str, shell) -> CommandResult:
        """Report the outcome of a session setting update."""
        if not result['success']:
            return CommandResult.failed(result['error'])

        previous = result['previous_value']
        current = result['current_value']
        shell.emit(f"{Emojis.CHECK} {label} changed from {previous!r} to {current!r}.")
        return CommandResult.ok(result['message'], current_value=current)

    def _show(self, shell) -> CommandResult:
        settings = shell.session.settings()
        shell.emit(f"{Emojis.SETTINGS} Width: {settings['width']}")
        shell.emit(f"{Emojis.SETTINGS} Fill character: {settings['pad_char']!r}")
        shell.emit(f"{Emojis.SETTINGS} Lines padded: {settings['padded_count']}")
        return CommandResult.ok("Displayed settings", **settings)
