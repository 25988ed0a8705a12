"""
Padding session state for the interactive shell.

The padding functions are stateless; a session remembers the width and
fill character chosen by the user between lines.
"""
import logging
from typing import Any, Dict

from leftpad.config import DEFAULT_PAD_CHAR, DEFAULT_WIDTH
from leftpad.core.exceptions import LeftPadError
from leftpad.core.padding import leftpad_with, validate_pad_char, validate_width

logger = logging.getLogger(__name__)


class PadSession:
    """Holds the current padding settings and pads text with them."""

    def __init__(self, width: int = DEFAULT_WIDTH, pad_char: str = DEFAULT_PAD_CHAR):
        """Initialize the session.

        Args:
            width: Initial target width
            pad_char: Initial fill character

        Raises:
            InvalidWidthError: If width is invalid
            InvalidPadCharError: If pad_char is invalid
        """
        self.width = validate_width(width)
        self.pad_char = validate_pad_char(pad_char)
        self.padded_count = 0
        logger.debug(f"Session created with width={width}, pad_char={pad_char!r}")

    def pad(self, text: str) -> str:
        """Left-pad text with the current settings."""
        padded = leftpad_with(text, self.width, self.pad_char)
        self.padded_count += 1
        return padded

    def set_width(self, width: int) -> Dict[str, Any]:
        """Set the target width.

        Args:
            width: New target width

        Returns:
            Dictionary with operation results
        """
        return self._update('width', width, validate_width)

    def set_pad_char(self, pad_char: str) -> Dict[str, Any]:
        """Set the fill character.

        Args:
            pad_char: New fill character

        Returns:
            Dictionary with operation results
        """
        return self._update('pad_char', pad_char, validate_pad_char)

    def settings(self) -> Dict[str, Any]:
        return {
            'width': self.width,
            'pad_char': self.pad_char,
            'padded_count': self.padded_count,
        }

    def _update(self, name: str, value, validator) -> Dict[str, Any]:
        previous_value = getattr(self, name)
        try:
            validator(value)
        except LeftPadError as e:
            logger.warning(f"Rejected {name} update: {e}")
            return {
                'success': False,
                'error': str(e),
                'previous_value': previous_value,
                'current_value': previous_value
            }

        setattr(self, name, value)
        logger.info(f"Session {name} changed from {previous_value!r} to {value!r}")
        return {
            'success': True,
            'previous_value': previous_value,
            'current_value': value,
            'message': f"{name} set to {value!r}"
        }
