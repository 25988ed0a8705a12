"""
UI package for the leftpad application.

This package contains text resources and message formatters used by
the command-line front end and the shell.
"""
from leftpad.ui.resources import HELP_TEXT, Emojis, format_error_message

__all__ = [
    'Emojis',
    'HELP_TEXT',
    'format_error_message',
]
