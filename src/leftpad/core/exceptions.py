"""
Custom exceptions for the leftpad package.

This module defines specific exception types for arguments that fall
outside the domain accepted by the padding functions.
"""


class LeftPadError(Exception):
    """Base exception class for all leftpad-specific errors."""
    pass


class InvalidWidthError(LeftPadError, ValueError):
    """Exception raised when a target width is negative, too large or not an integer."""

    def __init__(self, message: str, width=None):
        super().__init__(message)
        self.width = width

    def __str__(self):
        base_msg = super().__str__()
        if self.width is not None:
            base_msg += f" (Width: {self.width})"
        return base_msg


class InvalidPadCharError(LeftPadError, ValueError):
    """Exception raised when the fill character is not exactly one character."""

    def __init__(self, message: str, pad_char=None):
        super().__init__(message)
        self.pad_char = pad_char

    def __str__(self):
        base_msg = super().__str__()
        if self.pad_char is not None:
            base_msg += f" (Fill character: {self.pad_char!r})"
        return base_msg


class ConfigurationError(LeftPadError):
    """Exception raised when command-line or session configuration is invalid."""
    pass
