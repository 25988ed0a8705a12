"""
Session command handlers for help and exit.
"""

from leftpad.core.commands import Command, ExitCommand, HelpCommand
from leftpad.interfaces.command_handlers import CommandHandler, CommandResult
from leftpad.ui.resources import HELP_TEXT, Emojis


class SessionHandler(CommandHandler):
    """Handles commands that control the shell itself."""

    command_types = (HelpCommand, ExitCommand)

    def handle(self, command: Command, shell) -> CommandResult:
        if isinstance(command, ExitCommand):
            shell.running = False
            shell.emit(f"{Emojis.BYE} Goodbye!")
            return CommandResult.ok("Session ended")

        shell.emit(HELP_TEXT)
        return CommandResult.ok("Displayed help")
