"""
leftpad - left-pad strings to a fixed width.

    >>> from leftpad import leftpad, leftpad_with
    >>> leftpad("1", 5)
    '    1'
    >>> leftpad_with("1", 5, "0")
    '00001'
"""
import logging

from leftpad.core.exceptions import (ConfigurationError, InvalidPadCharError,
                                     InvalidWidthError, LeftPadError)
from leftpad.core.padding import leftpad, leftpad_with, pad_lines
from leftpad.core.session import PadSession

__version__ = "1.0.0"

# Library use stays silent; the command-line front end attaches file handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'leftpad',
    'leftpad_with',
    'pad_lines',
    'PadSession',
    'LeftPadError',
    'InvalidWidthError',
    'InvalidPadCharError',
    'ConfigurationError',
]
