"""
Core functionality for the leftpad package.

This package contains the padding functions, the shell session state,
command parsing and exception handling.
"""
from leftpad.core.commands import Command, CommandManager
from leftpad.core.completer import CommandCompleter
from leftpad.core.exceptions import (ConfigurationError, InvalidPadCharError,
                                     InvalidWidthError, LeftPadError)
from leftpad.core.padding import leftpad, leftpad_with, pad_lines
from leftpad.core.session import PadSession

__all__ = [
    'leftpad',
    'leftpad_with',
    'pad_lines',
    'PadSession',
    'CommandManager',
    'Command',
    'CommandCompleter',
    'LeftPadError',
    'InvalidWidthError',
    'InvalidPadCharError',
    'ConfigurationError'
]
