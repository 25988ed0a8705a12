"""
Copyright (c) 2025 Jakob Bolliger

This file is part of leftpad.

This program is licensed under the GNU Affero General Public License v3.0 (AGPL-3.0)
The full text of the license can be found in the LICENSE file in the
root directory of this source tree.

leftpad - Main entry point for the command-line padding tool.
"""
import argparse
import os
import sys

from leftpad.config import DEFAULT_PAD_CHAR, DEFAULT_WIDTH, SPACE_ALIAS
from leftpad.core.commands import CommandManager
from leftpad.core.exceptions import (ConfigurationError, InvalidPadCharError,
                                     InvalidWidthError, LeftPadError)
from leftpad.core.padding import pad_lines
from leftpad.core.session import PadSession
from leftpad.interfaces import CliInterface
from leftpad.ui.resources import Emojis, format_error_message
from leftpad.utils.logging_config import get_logger, setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the leftpad command."""
    parser = argparse.ArgumentParser(prog="leftpad", description="Left-pad text to a fixed width")
    parser.add_argument("text", nargs='*',
                        help="Text to pad, one result line per argument (default: read standard input)")
    parser.add_argument("-w", "--width", default=str(DEFAULT_WIDTH),
                        help=f"Target width in characters (default: {DEFAULT_WIDTH})")
    parser.add_argument("-c", "--char", default=DEFAULT_PAD_CHAR,
                        help=f"Fill character, '{SPACE_ALIAS}' for a blank (default: space)")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="Start an interactive padding shell")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose logging for debugging")
    return parser


def parse_width(value: str) -> int:
    """Convert the --width argument to an int.

    Raises:
        ConfigurationError: If the value is not an integer
    """
    try:
        return int(value)
    except ValueError as e:
        raise ConfigurationError(f"Width must be a whole number, got '{value}'") from e


def main(argv=None):
    """Main entry point for the application."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose)
    logger = get_logger(__name__)

    pad_char = " " if args.char.lower() == SPACE_ALIAS else args.char

    try:
        width = parse_width(args.width)
        session = PadSession(width, pad_char)

        if args.interactive:
            cli = CliInterface(session, CommandManager())
            cli.interactive_session()
        elif args.text:
            for text in args.text:
                print(session.pad(text))
        else:
            logger.debug("Padding standard input")
            for count, line in enumerate(pad_lines(sys.stdin, width, pad_char), start=1):
                print(line)
                session.padded_count = count

        logger.info(f"Padded {session.padded_count} line(s) to width {width}")
    except InvalidWidthError as e:
        print(format_error_message(f"Invalid width: {e}"), file=sys.stderr)
        sys.exit(1)
    except InvalidPadCharError as e:
        print(format_error_message(f"Invalid fill character: {e}"), file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError as e:
        logger.error(f"Undecodable standard input: {e}")
        print(format_error_message(f"Standard input is not valid {e.encoding} text: {e.reason}"), file=sys.stderr)
        sys.exit(1)
    except BrokenPipeError:
        # The reader closed early; send the pending flush at exit to devnull
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(0)
    except ConfigurationError as e:
        print(format_error_message(str(e)), file=sys.stderr)
        sys.exit(1)
    except LeftPadError as e:
        logger.error(f"Unexpected leftpad error: {e}", exc_info=True)
        print(format_error_message(str(e)), file=sys.stderr)
        sys.exit(1)
    except KeyboardInterrupt:
        print(f"\n\n{Emojis.BYE} Interrupted by user. Goodbye!")
        sys.exit(0)


if __name__ == "__main__":
    main()
