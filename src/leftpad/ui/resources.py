"""
Copyright (c) 2025 Jakob Bolliger

This file is part of leftpad.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the
LICENSE file in the root directory of this source tree.

UI resources for the leftpad application.

This module contains centralized UI elements like banners, help text and
message formatters used by the command-line front end and the shell.
"""

# Emoji constants
class Emojis:
    """Class containing emoji constants to ensure consistent usage throughout the code."""
    CHECK = "✓"
    ERROR = "❌"
    BYE = "👋"
    SETTINGS = "🔧"


BANNER = "leftpad shell - type text to pad it, 'help' for commands"

# Help text for the shell
HELP_TEXT = """
KEYBINDINGS:
    Tab: Complete a command name
    Enter: Pad the line or execute the command
    Ctrl+D, Ctrl+C: Exit the shell

COMMANDS:
    width N, w N: Set the target width
    char C, c C: Set the fill character (use 'space' for a blank)
    show, settings: Show the current width and fill character
    help, h, ?: View this help message
    exit, quit, q: Exit the shell

Any other line is padded with the current settings.
Start a line with a backslash to pad text that looks like a command,
e.g. '\\width 3' pads the literal text 'width 3'.
"""


# Standardized Message Formatting Functions
def format_error_message(message: str) -> str:
    """Format an error message with consistent emoji and structure.

    Args:
        message: The error message content

    Returns:
        Formatted error message string
    """
    return f"\n{Emojis.ERROR} {message}"

