"""
Command handlers package for the leftpad shell.

This package contains individual command handlers that implement
the Command Handler pattern for better separation of concerns.
"""

from leftpad.interfaces.handlers.configuration import ConfigurationHandler
from leftpad.interfaces.handlers.session import SessionHandler

__all__ = [
    'ConfigurationHandler',
    'SessionHandler',
]
