"""
Left-padding for strings.

Widths are measured in characters (code points), not bytes or display
columns. When no padding is needed the input string object itself is
returned.

    >>> leftpad("blubb", 7)
    '  blubb'
    >>> leftpad_with("blubb", 7, '.')
    '..blubb'
    >>> leftpad("blubb", 3)
    'blubb'
"""
from typing import Iterable, Iterator

from leftpad.config import DEFAULT_PAD_CHAR, MAX_PAD_WIDTH
from leftpad.core.exceptions import InvalidPadCharError, InvalidWidthError


def validate_width(width) -> int:
    """Check that width is a non-negative int.

    Args:
        width: The requested target width

    Returns:
        The width, unchanged

    Raises:
        InvalidWidthError: If width is not an int or is negative
    """
    # bool is an int subclass but never a meaningful width
    if isinstance(width, bool) or not isinstance(width, int):
        raise InvalidWidthError(f"Width must be an integer, got {type(width).__name__}", width)
    if width < 0:
        raise InvalidWidthError("Width must not be negative", width)
    return width


def validate_pad_char(pad_char) -> str:
    """Check that pad_char is a string of exactly one character.

    Raises:
        InvalidPadCharError: If pad_char is not a single character
    """
    if not isinstance(pad_char, str) or len(pad_char) != 1:
        raise InvalidPadCharError("Fill character must be exactly one character", pad_char)
    return pad_char


def leftpad_with(s: str, width: int, pad_char: str) -> str:
    """Pad a string to the given width by inserting pad_char from the left.

    If the string is already at least width characters long it is returned
    as-is.

    Args:
        s: The string to pad
        width: The desired length of the result, in characters
        pad_char: The single character used as fill

    Returns:
        The padded string, or s itself if no padding is needed

    Raises:
        TypeError: If s is not a string
        InvalidWidthError: If width is negative, or above MAX_PAD_WIDTH when
            padding is needed
        InvalidPadCharError: If pad_char is not a single character
    """
    if not isinstance(s, str):
        raise TypeError(f"leftpad expects a str, got {type(s).__name__}")
    validate_width(width)
    validate_pad_char(pad_char)

    to_pad = width - len(s)
    if to_pad <= 0:
        return s
    if width > MAX_PAD_WIDTH:
        raise InvalidWidthError(f"Width must not exceed {MAX_PAD_WIDTH}", width)
    return pad_char * to_pad + s


def leftpad(s: str, width: int) -> str:
    """Pad a string to the given width by inserting spaces from the left.

    Equal to calling ``leftpad_with(s, width, ' ')``.
    """
    return leftpad_with(s, width, DEFAULT_PAD_CHAR)


def strip_terminator(line: str) -> str:
    """Remove one trailing CRLF or LF terminator from a line."""
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def pad_lines(lines: Iterable[str], width: int, pad_char: str = DEFAULT_PAD_CHAR) -> Iterator[str]:
    """Left-pad every line of an iterable.

    One trailing line terminator is removed before padding so it never
    counts toward the width; any other carriage return is data.

    Args:
        lines: Lines to pad, e.g. an open text file
        width: The desired length of each line
        pad_char: The single character used as fill

    Returns:
        Iterator over the padded lines, without line terminators

    Raises:
        InvalidWidthError: If width is invalid, before any line is read
        InvalidPadCharError: If pad_char is invalid, before any line is read
    """
    validate_width(width)
    validate_pad_char(pad_char)

    return (leftpad_with(strip_terminator(line), width, pad_char) for line in lines)
