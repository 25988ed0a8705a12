"""
Command completion for the leftpad shell.
"""
from prompt_toolkit.completion import Completer, Completion


class CommandCompleter(Completer):
    """Completer for shell commands with descriptions."""

    def __init__(self):
        """Initialize the command completer with available commands."""
        self.command_list = [
            ("width", "Set the target width"),
            ("w", "Set the target width (shortcut)"),
            ("char", "Set the fill character ('space' for a blank)"),
            ("c", "Set the fill character (shortcut)"),
            ("show", "Show the current settings"),
            ("settings", "Show the current settings"),
            ("help", "Show help information"),
            ("h", "Show help information"),
            ("exit", "Exit the shell"),
            ("quit", "Exit the shell"),
            ("q", "Exit the shell"),
        ]

    def get_completions(self, document, complete_event):
        """Get command completions based on the user's input.

        Args:
            document: The Document instance for the current input
            complete_event: The CompleteEvent that triggered this completion

        Yields:
            Completion instances for matching commands with descriptions
        """
        text = document.text_before_cursor.lstrip()

        # Only complete the command word, not its arguments
        if not text or ' ' in text:
            return

        for command, description in self.command_list:
            if command.startswith(text.lower()):
                yield Completion(
                    command,
                    start_position=-len(text),
                    display_meta=description
                )
