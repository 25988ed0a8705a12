"""
Interfaces package for the leftpad application.

This package contains the interactive shell and the command handlers
that drive it.
"""
from leftpad.interfaces.cli import CliInterface
from leftpad.interfaces.command_handlers import (CommandHandler,
                                                 CommandHandlerRegistry,
                                                 CommandResult)

__all__ = [
    'CliInterface',
    'CommandHandler',
    'CommandResult',
    'CommandHandlerRegistry'
]
