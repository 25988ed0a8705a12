"""
Command handlers for the leftpad shell.

Each handler declares the command classes it executes; the registry maps
a parsed command to its handler by class and reports the outcome back to
the shell as a CommandResult.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple, Type

from leftpad.core.commands import Command
from leftpad.utils.logging_config import get_logger


class CommandResult:
    """Outcome of a shell command."""

    def __init__(self, success: bool, message: str = "", data: Dict[str, Any] = None):
        self.success = success
        self.message = message
        self.data = data or {}

    @classmethod
    def ok(cls, message: str, **data) -> "CommandResult":
        return cls(True, message, data)

    @classmethod
    def failed(cls, message: str) -> "CommandResult":
        return cls(False, message)


class CommandHandler(ABC):
    """Executes one or more command classes against a shell."""

    command_types: Tuple[Type[Command], ...] = ()

    @abstractmethod
    def handle(self, command: Command, shell) -> CommandResult:
        """Run the command and report how it went."""


class CommandHandlerRegistry:
    """Maps command classes to the handler that executes them."""

    def __init__(self, handlers: Optional[List[CommandHandler]] = None):
        self._handlers: Dict[Type[Command], CommandHandler] = {}
        self.logger = get_logger(__name__)

        if handlers is None:
            # Imported here because the handlers import this module
            from leftpad.interfaces.handlers import (ConfigurationHandler,
                                                     SessionHandler)
            handlers = [ConfigurationHandler(), SessionHandler()]

        for handler in handlers:
            self.register(handler)

    def register(self, handler: CommandHandler):
        for command_type in handler.command_types:
            self._handlers[command_type] = handler
            self.logger.debug(f"Registered {handler.__class__.__name__} for {command_type.__name__}")

    @property
    def registered_types(self) -> List[Type[Command]]:
        return list(self._handlers)

    def get_handler(self, command: Command) -> Optional[CommandHandler]:
        return self._handlers.get(type(command))

    def dispatch(self, command: Command, shell) -> CommandResult:
        """Execute a parsed command with its registered handler."""
        handler = self.get_handler(command)
        if handler is None:
            self.logger.warning(f"No handler for {command}")
            return CommandResult.failed(f"No handler available for command: {command.__class__.__name__}")

        result = handler.handle(command, shell)
        if result.success:
            self.logger.debug(f"{command} succeeded: {result.message}")
        else:
            self.logger.warning(f"{command} failed: {result.message}")
        return result
